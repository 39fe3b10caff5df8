"""Tests for CompoundSelector chaining and rendering."""

import pytest

from selectra import CompoundSelector, FragmentKind, css_selector_builder


class TestRender:
    """Verify render output for each fragment kind and combinations."""

    def test_element(self) -> None:
        assert css_selector_builder.element("div").render() == "div"

    def test_id(self) -> None:
        assert css_selector_builder.id("main").render() == "#main"

    def test_class(self) -> None:
        assert css_selector_builder.class_("container").render() == ".container"

    def test_attribute(self) -> None:
        assert css_selector_builder.attr("disabled").render() == "[disabled]"

    def test_pseudo_class(self) -> None:
        assert css_selector_builder.pseudo_class("hover").render() == ":hover"

    def test_pseudo_element(self) -> None:
        assert css_selector_builder.pseudo_element("before").render() == "::before"

    def test_id_with_classes(self) -> None:
        sel = css_selector_builder.id("main").class_("container").class_("editable")
        assert sel.render() == "#main.container.editable"

    def test_element_attr_pseudo_class(self) -> None:
        sel = css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.render() == 'a[href$=".png"]:focus'

    def test_all_kinds(self) -> None:
        sel = (
            css_selector_builder.element("input")
            .id("email")
            .class_("field")
            .class_("wide")
            .attr('type="email"')
            .attr("required")
            .pseudo_class("focus")
            .pseudo_class("invalid")
            .pseudo_element("placeholder")
        )
        assert sel.render() == (
            'input#email.field.wide[type="email"][required]:focus:invalid::placeholder'
        )

    def test_repeated_classes_keep_call_order(self) -> None:
        sel = css_selector_builder.class_("b").class_("a").class_("b")
        assert sel.render() == ".b.a.b"

    def test_skipped_kinds_are_omitted(self) -> None:
        sel = css_selector_builder.element("p").pseudo_element("first-line")
        assert sel.render() == "p::first-line"

    def test_empty_selector_renders_empty(self) -> None:
        assert CompoundSelector().render() == ""

    def test_empty_id_renders_nothing(self) -> None:
        assert css_selector_builder.id("").class_("x").render() == ".x"

    def test_empty_element_and_pseudo_element_render_nothing(self) -> None:
        sel = css_selector_builder.element("").class_("x").pseudo_element("")
        assert sel.render() == ".x"

    def test_attribute_text_is_not_validated(self) -> None:
        sel = css_selector_builder.attr("not ] really = valid")
        assert sel.render() == "[not ] really = valid]"


class TestChaining:
    """Verify chain calls return the same instance and render is pure."""

    def test_chain_returns_self(self) -> None:
        sel = CompoundSelector()
        assert sel.element("div") is sel
        assert sel.id("x") is sel
        assert sel.class_("c") is sel
        assert sel.attr("a") is sel
        assert sel.pseudo_class("hover") is sel
        assert sel.pseudo_element("after") is sel

    def test_render_is_idempotent(self) -> None:
        sel = css_selector_builder.element("div").id("main").class_("x")
        assert sel.render() == sel.render()

    def test_render_reflects_later_mutation(self) -> None:
        sel = css_selector_builder.element("div")
        assert sel.render() == "div"
        sel.class_("x")
        assert sel.render() == "div.x"

    def test_stringify_and_str(self) -> None:
        sel = css_selector_builder.element("li").class_("item")
        assert sel.stringify() == "li.item"
        assert str(sel) == "li.item"

    def test_facade_returns_fresh_selectors(self) -> None:
        a = css_selector_builder.element("div")
        b = css_selector_builder.element("div")
        assert a is not b
        a.class_("x")
        assert b.render() == "div"

    def test_add_by_kind(self) -> None:
        sel = CompoundSelector().add(FragmentKind.ELEMENT, "a").add(FragmentKind.CLASS, "b")
        assert sel.render() == "a.b"


class TestInspection:
    """Tests for fragments(), copy() and equality."""

    def test_fragments_in_render_order(self) -> None:
        sel = css_selector_builder.element("a").class_("x").class_("y").pseudo_class("hover")
        assert list(sel.fragments()) == [
            (FragmentKind.ELEMENT, "a"),
            (FragmentKind.CLASS, "x"),
            (FragmentKind.CLASS, "y"),
            (FragmentKind.PSEUDO_CLASS, "hover"),
        ]

    def test_is_empty(self) -> None:
        assert CompoundSelector().is_empty()
        assert not css_selector_builder.class_("x").is_empty()

    def test_copy_is_independent(self) -> None:
        sel = css_selector_builder.element("div").class_("a")
        clone = sel.copy()
        clone.class_("b")
        assert sel.render() == "div.a"
        assert clone.render() == "div.a.b"

    def test_copy_keeps_ordering_state(self) -> None:
        from selectra import OutOfOrderError

        clone = css_selector_builder.pseudo_class("hover").copy()
        with pytest.raises(OutOfOrderError):
            clone.class_("x")

    def test_equality(self) -> None:
        a = css_selector_builder.element("div").class_("x")
        b = css_selector_builder.element("div").class_("x")
        c = css_selector_builder.element("div").class_("y")
        assert a == b
        assert a != c

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(css_selector_builder.element("div"))

    def test_repr(self) -> None:
        assert repr(css_selector_builder.id("main")) == "CompoundSelector('#main')"
