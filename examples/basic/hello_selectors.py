"""Build CSS selectors by chaining — zero config, zero deps."""

from selectra import css_selector_builder as css

print(css.id("main").class_("container").class_("editable").render())
print(css.element("a").attr('href$=".png"').pseudo_class("focus").render())
print(css.combine(css.element("ul").class_("menu"), ">", css.element("li")).render())
