"""Benchmark htmlwriter.escape against the standard library.

Measures the no-op fast path (nothing to escape) separately from
markup-heavy input, since the former returns the input object unchanged.

Run with:
    python benchmarks/benchmark_escape.py
"""

import html
import statistics
import timeit
from collections.abc import Callable

from htmlwriter import escape

CORPUS: dict[str, str] = {
    "plain": "The quick brown fox jumps over the lazy dog. " * 200,
    "sparse": ("Plain prose with an occasional <b>tag</b> & entity. " * 100),
    "dense": "<>&\"'" * 1000,
}


def _stdlib_escape(s: str) -> str:
    # html.escape emits &#x27; for ', otherwise the same substitutions
    return html.escape(s, quote=True)


def bench(fn: Callable[[str], str], text: str, number: int = 200, repeat: int = 5) -> float:
    """Return median microseconds per call."""
    timings = timeit.repeat(lambda: fn(text), number=number, repeat=repeat)
    return statistics.median(timings) / number * 1_000_000


def main() -> None:
    print(f"{'corpus':<10} {'htmlwriter':>12} {'html.escape':>12}")
    for name, text in CORPUS.items():
        ours = bench(escape, text)
        stdlib = bench(_stdlib_escape, text)
        print(f"{name:<10} {ours:>10.1f}us {stdlib:>10.1f}us")

    text = CORPUS["plain"]
    assert escape(text) is text, "fast path must return the input unchanged"


if __name__ == "__main__":
    main()
