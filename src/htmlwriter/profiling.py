"""Build profiling: count what export() hands back.

Only export() records. build() and render() go through it, so one finished
document counts as one export. Building without exporting records nothing,
and nested element content is counted once, as the flattened chunks it
contributes to the outermost export.

While no profiled_build() block is active, export() finds no accumulator
and skips recording.

Example:
    >>> with profiled_build() as metrics:
    ...     html = new_fragment().p("hello").build()
    >>> metrics.char_count == len(html)
    True
    >>> metrics.chunk_count
    3
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class BuildAccumulator:
    """Running totals over the exports made inside one profiled_build().

    Attributes:
        start_time: perf_counter() value when profiling began
        exports: Number of export() calls, including those made by build()
        chunk_count: Flattened chunks handed back, summed over exports
            (an element's opening tag, its text, and its closing tag are
            three chunks; a nested block adds its own chunks, not one)
        char_count: Sum of ``len("".join(chunks))`` over exports, i.e. the
            total length of the strings build() would return
    """

    start_time: float = field(default_factory=perf_counter)
    exports: int = 0
    chunk_count: int = 0
    char_count: int = 0

    def record_export(self, chunk_count: int, char_count: int) -> None:
        """Add one exported document to the totals."""
        self.exports += 1
        self.chunk_count += chunk_count
        self.char_count += char_count

    @property
    def total_duration_ms(self) -> float:
        """Wall time since profiling began, in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Totals as a plain dict, with the duration rounded to 0.01 ms."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "exports": self.exports,
            "chunk_count": self.chunk_count,
            "char_count": self.char_count,
        }


_accumulator: ContextVar[BuildAccumulator | None] = ContextVar(
    "build_accumulator",
    default=None,
)


def get_build_accumulator() -> BuildAccumulator | None:
    """Accumulator export() should record into, or None."""
    return _accumulator.get()


@contextmanager
def profiled_build() -> Iterator[BuildAccumulator]:
    """Record every export made in this context into a fresh accumulator.

    Profiled blocks nest: the inner block gets its own accumulator and the
    outer one resumes when it exits.
    """
    acc = BuildAccumulator()
    token: Token[BuildAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
