"""Thread a counter through nested closures with the companion value."""

from htmlwriter import new_fragment

sections = {"Fruit": ["apple", "pear"], "Veg": ["leek", "kale", "okra"]}


def numbered_item(item, h):
    n = h.companion + 1
    return h.with_companion(n).li(f"{n}. {item}")


def section(entry, h):
    title, items = entry
    return h.h2(title).ul(lambda h: h.roll_in(items, numbered_item))


doc = new_fragment(companion=0).roll_in(sections.items(), section)
print(doc.build())
print("items numbered:", doc.companion)
