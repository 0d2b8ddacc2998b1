"""Build 1000 fragments in parallel; builders share no mutable state."""

from concurrent.futures import ThreadPoolExecutor

from htmlwriter import render


def card(n: int) -> str:
    return render(lambda h: h.article(lambda h: h.h2(f"Card {n}").p(f"Body of card {n}")))


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(card, range(1000)))

print(f"Rendered {len(results)} fragments in parallel")
print(results[0])
