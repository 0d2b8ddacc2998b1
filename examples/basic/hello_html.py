"""Write a page in a handful of chained calls, zero config and zero deps."""

from htmlwriter import escape, new_html

page = new_html().html(
    lambda h: h.head(lambda h: h.meta(charset="utf-8").title("Hello"))
    .body(
        lambda h: h.h1("Hello", {"class": ["title", "big"]})
        .p(escape("Fish & chips < 5 dollars"))
        .img(src="logo.png", alt=None)
    )
)

print(page.build())
