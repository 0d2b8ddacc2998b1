"""Build entry points.

new_fragment() and new_html() start a build; fragment() and render() run a
builder function against a fresh state and flatten the result.

Example:
    >>> fragment(lambda h: h.p("hi"))
    ['<p>', 'hi', '</p>\\n']
    >>> render(lambda h: h.br(), header="<!-- x -->\\n")
    '<!-- x -->\\n<br>\\n'
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from htmlwriter.config import get_writer_config
from htmlwriter.errors import ContentError
from htmlwriter.state import EMPTY_FRAGMENTS, MISSING, Builder, Fragments, export, new

BuilderFn = Callable[[Builder[Any]], Builder[Any]]


def new_fragment(companion: Any = MISSING) -> Builder[Any]:
    """Start with no boilerplate."""
    return new(companion=companion)


def new_html(companion: Any = MISSING) -> Builder[Any]:
    """Start with minimum boilerplate: the configured doctype header."""
    return new(get_writer_config().doctype, companion=companion)


def _seed(header: str | Sequence[str] | None) -> Fragments:
    if header is None:
        return EMPTY_FRAGMENTS
    if isinstance(header, str):
        return EMPTY_FRAGMENTS.push(header)
    # Header sequences arrive in document order
    return Fragments.from_emission_order(header)


def fragment(
    builder_fn: BuilderFn,
    *,
    header: str | Sequence[str] | None = None,
    companion: Any = MISSING,
) -> list[str]:
    """Build an html fragment with a builder function.

    Args:
        builder_fn: Callable ``Builder -> Builder``
        header: Predefined header, either a string or a sequence of chunks
            in document order
        companion: Initial companion (config default when omitted)

    Returns:
        Chunks in document order

    Raises:
        ContentError: If builder_fn does not return a Builder
    """
    if companion is MISSING:
        companion = get_writer_config().default_companion
    result = builder_fn(Builder(_seed(header), companion))
    if not isinstance(result, Builder):
        raise ContentError(None, f"builder function must return a Builder, got {type(result).__name__}")
    return export(result)


def render(
    builder_fn: BuilderFn,
    *,
    header: str | Sequence[str] | None = None,
    companion: Any = MISSING,
) -> str:
    """Like fragment(), joined into a single string."""
    return "".join(fragment(builder_fn, header=header, companion=companion))
