"""Round-trip a selector tree through JSON."""

from selectra import combine, element, id_
from selectra.serialization import from_json, to_json

sel = combine(element("table").id("data"), "~", combine(element("tr"), " ", element("td")))
payload = to_json(sel, indent=2)
print(payload)

restored = from_json(payload)
assert restored.render() == sel.render()
print(restored.render())

print(to_json(id_("main")))
