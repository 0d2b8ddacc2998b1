"""Register custom elements and get Builder methods for them."""

from htmlwriter import create_registry_with_defaults, install_tag_methods, new_fragment

builder = create_registry_with_defaults()
builder.register("my-card")
builder.register("my-divider", void=True)
install_tag_methods(builder.build())

doc = (
    new_fragment()
    .my_card(lambda h: h.h3("Title").p("Body"), {"elevation": 2})
    .my_divider()
    .element("x-adhoc", "no registry needed for one-offs")
)
print(doc.build())
