"""Builder state: an append-only chunk accumulator carried through a build.

Chunks are kept in a persistent linked stack, most recent chunk first.
Appending is O(1) and shares structure with the previous state, so a
Builder behaves as a value: appending to one state never changes another,
and two branches grown from the same state stay independent. The stack is
reversed once, at export time. Nested element content is spliced in as a
single entry and flattened in that same pass.

Thread Safety:
Builder and Fragments are immutable. Any number of documents can be built
in parallel without coordination.

Example:
    >>> b = new().text("<p>").text("hi").text("</p>\\n")
    >>> b.export()
    ['<p>', 'hi', '</p>\\n']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

from htmlwriter.errors import ContentError
from htmlwriter.profiling import get_build_accumulator

C = TypeVar("C")
T = TypeVar("T")

# Sentinel for "no companion given"; None is a legitimate companion value.
MISSING: Any = object()


class Fragments:
    """Immutable stack of output chunks, most recently pushed first.

    An entry is either a chunk or a finished inner Fragments spliced in by
    push_block(), so nesting an element costs O(1) regardless of how much
    content it holds. Iteration flattens blocks and yields chunks
    newest-first; emission_order() returns them in document order.
    """

    __slots__ = ("_link", "_size")

    def __init__(self, link: tuple[Any, Any] | None = None, size: int = 0) -> None:
        self._link = link
        self._size = size

    @classmethod
    def from_emission_order(cls, chunks: Iterable[str]) -> Fragments:
        """Build a stack from chunks given in document order."""
        return EMPTY_FRAGMENTS.push_all(chunks)

    def push(self, chunk: str) -> Fragments:
        return Fragments((chunk, self._link), self._size + 1)

    def push_all(self, chunks: Iterable[str]) -> Fragments:
        """Push chunks given in document order."""
        link, size = self._link, self._size
        for chunk in chunks:
            link = (chunk, link)
            size += 1
        return Fragments(link, size)

    def push_block(self, block: Fragments) -> Fragments:
        """Splice a whole stack in as one entry, keeping its chunk order."""
        if not block:
            return self
        return Fragments((block, self._link), self._size + block._size)

    def emission_order(self) -> list[str]:
        chunks = list(self)
        chunks.reverse()
        return chunks

    def __iter__(self) -> Iterator[str]:
        # Nested blocks are flattened with an explicit stack, not recursion
        pending: list[tuple[Any, Any] | None] = [self._link]
        while pending:
            link = pending.pop()
            while link is not None:
                entry, link = link
                if isinstance(entry, Fragments):
                    pending.append(link)
                    link = entry._link
                else:
                    yield entry

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._link is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fragments):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Fragments({list(self)!r})"


EMPTY_FRAGMENTS = Fragments()


@dataclass(frozen=True, slots=True)
class Builder(Generic[C]):
    """Immutable builder state: output chunks plus a caller companion.

    The companion is never inspected by the library. It is threaded through
    every operation and into nested builder closures so callers can carry
    build-time context (counters, flags) without a side channel.

    Every method returns a new Builder. Tag methods such as ``div`` or
    ``img`` are installed on this class by htmlwriter.tags.

    Attributes:
        fragments: Output chunks, most recent first
        companion: Caller-defined value, passed along untouched

    """

    fragments: Fragments = EMPTY_FRAGMENTS
    companion: C = None  # type: ignore[assignment]

    def text(self, text: str) -> Builder[C]:
        """Append text verbatim. Nothing is escaped."""
        if not isinstance(text, str):
            raise ContentError(None, f"text must be a string, got {type(text).__name__}")
        return Builder(self.fragments.push(text), self.companion)

    def tag(self, tag: str, attrs: Any = (), /, **kw_attrs: Any) -> Builder[C]:
        """Build a void element. See htmlwriter.writer.tag."""
        from htmlwriter.writer import tag as build_tag

        return build_tag(self, tag, attrs, **kw_attrs)

    def element(
        self, tag: str, content: Any = None, attrs: Any = (), /, **kw_attrs: Any
    ) -> Builder[C]:
        """Build a content-bearing element. See htmlwriter.writer.element."""
        from htmlwriter.writer import element as build_element

        return build_element(self, tag, content, attrs, **kw_attrs)

    def with_companion(self, companion: C) -> Builder[C]:
        """Return the same chunks with a different companion."""
        return Builder(self.fragments, companion)

    def roll_in(
        self, items: Iterable[T], fn: Callable[[T, Builder[C]], Builder[C]]
    ) -> Builder[C]:
        """Fold ``fn(item, builder)`` over items, starting from this builder.

        Example:
            >>> new().ul(lambda h: h.roll_in(["x", "y"], lambda i, h: h.li(i)))
        """
        return reduce(lambda acc, item: fn(item, acc), items, self)

    def invoke(self, fn: Callable[[Builder[C]], Builder[C]]) -> Builder[C]:
        """Call ``fn`` with this builder, keeping a method chain flowing."""
        return fn(self)

    def when(self, condition: Any, fn: Callable[[Builder[C]], Builder[C]]) -> Builder[C]:
        """Apply ``fn`` only if condition is truthy; otherwise return self."""
        return fn(self) if condition else self

    def export(self) -> list[str]:
        """Return the chunks in document order."""
        return export(self)

    def build(self) -> str:
        """Return the document as a single string."""
        return "".join(export(self))


def new(initial: str | None = None, companion: Any = MISSING) -> Builder[Any]:
    """Start a build.

    Args:
        initial: Optional header chunk to seed the build with
        companion: Initial companion; the active WriterConfig's
            default_companion when omitted

    Returns:
        Fresh Builder
    """
    if companion is MISSING:
        from htmlwriter.config import get_writer_config

        companion = get_writer_config().default_companion
    fragments = EMPTY_FRAGMENTS if initial is None else EMPTY_FRAGMENTS.push(initial)
    return Builder(fragments, companion)


def text(state: Builder[C], text: str) -> Builder[C]:
    """Functional form of Builder.text."""
    return state.text(text)


def export(state: Builder[Any]) -> list[str]:
    """Flatten a build into document order.

    Conceptually terminal: callers should not keep building on an exported
    state, though nothing prevents it.

    Args:
        state: Final builder state

    Returns:
        Chunks in emission order; joining them yields the document
    """
    chunks = state.fragments.emission_order()
    acc = get_build_accumulator()
    if acc is not None:
        acc.record_export(chunk_count=len(chunks), char_count=sum(map(len, chunks)))
    return chunks
