"""Tests for the high-level Selectra API."""


class TestFacade:
    """Tests for css_selector_builder entry points."""

    def test_each_entry_point_seeds_one_fragment(self) -> None:
        from selectra import CompoundSelector, css_selector_builder as css

        for sel, expected in [
            (css.element("div"), "div"),
            (css.id("main"), "#main"),
            (css.class_("x"), ".x"),
            (css.attr("disabled"), "[disabled]"),
            (css.pseudo_class("hover"), ":hover"),
            (css.pseudo_element("after"), "::after"),
        ]:
            assert isinstance(sel, CompoundSelector)
            assert sel.render() == expected

    def test_facade_combine(self) -> None:
        from selectra import CombinedSelector, css_selector_builder as css

        sel = css.combine(css.element("ul"), ">", css.element("li"))
        assert isinstance(sel, CombinedSelector)
        assert sel.render() == "ul > li"


class TestModuleFunctions:
    """Tests for the module-level shortcuts."""

    def test_shortcuts(self) -> None:
        from selectra import attr, class_, element, id_, pseudo_class, pseudo_element

        assert element("a").render() == "a"
        assert id_("main").render() == "#main"
        assert class_("x").render() == ".x"
        assert attr("href").render() == "[href]"
        assert pseudo_class("focus").render() == ":focus"
        assert pseudo_element("before").render() == "::before"

    def test_shortcut_chain(self) -> None:
        from selectra import combine, element

        sel = combine(element("nav").class_("main"), " ", element("a").pseudo_class("hover"))
        assert sel.render() == "nav.main   a:hover"

    def test_renderable_protocol(self) -> None:
        from selectra import Renderable, combine, element

        assert isinstance(element("a"), Renderable)
        assert isinstance(combine(element("a"), ">", element("b")), Renderable)
