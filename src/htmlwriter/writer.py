"""Element construction.

The two generic constructors every tag wrapper is built on:

- tag(): void elements, rendered as a single ``<tag attrs>\\n`` chunk.
- element(): content-bearing elements. Content may be None or "" (empty
  form), a string (inserted verbatim), or a builder closure that receives a
  fresh Builder carrying the outer companion and returns a Builder.

A closure that emits nothing collapses to the empty form
``<tag attrs></tag>\\n``. Either way the outer build continues with the
companion the closure returned.

Argument order is ``(state, tag, content, attrs)``. Nothing is escaped.

Example:
    >>> b = element(new(), "div", "hi", {"class": ["a", "b"]})
    >>> b.build()
    '<div class="a b">hi</div>\\n'
"""

from __future__ import annotations

from typing import Any, TypeVar

from htmlwriter.attributes import serialize_attributes
from htmlwriter.errors import ContentError
from htmlwriter.state import EMPTY_FRAGMENTS, Builder
from htmlwriter.utils.logger import get_logger

logger = get_logger(__name__)

C = TypeVar("C")


def tag(state: Builder[C], tag: str, attrs: Any = (), /, **kw_attrs: Any) -> Builder[C]:
    """Build a void element, which never has content.

    Use the tag-specific methods (``img``, ``br``...) unless you are making a
    custom element.

    Args:
        state: Current builder state
        tag: Tag name
        attrs: Mapping or sequence of ``(key, value)`` / ``(key,)`` entries
        **kw_attrs: Extra attributes (``class_`` renders as ``class``)

    Returns:
        New builder state
    """
    return state.text(f"<{tag}{serialize_attributes(attrs, **kw_attrs)}>\n")


def element(
    state: Builder[C],
    tag: str,
    content: Any = None,
    attrs: Any = (),
    /,
    **kw_attrs: Any,
) -> Builder[C]:
    """Build a non-void element, which may have content.

    Use the tag-specific methods (``div``, ``p``...) unless you are making a
    custom element.

    Args:
        state: Current builder state
        tag: Tag name
        content: None, a string, or a callable ``Builder -> Builder``
        attrs: Mapping or sequence of ``(key, value)`` / ``(key,)`` entries
        **kw_attrs: Extra attributes (``class_`` renders as ``class``)

    Returns:
        New builder state

    Raises:
        ContentError: If content is of another kind, or the closure does
            not return a Builder
        AttributeValueError: On malformed attributes
    """
    if content is not None and not isinstance(content, str) and not callable(content):
        raise ContentError(
            tag,
            f"content must be None, a string, or a builder closure, got {type(content).__name__}",
        )

    attr_string = serialize_attributes(attrs, **kw_attrs)

    if content is None:
        return state.text(f"<{tag}{attr_string}></{tag}>\n")

    if isinstance(content, str):
        if not content:
            return state.text(f"<{tag}{attr_string}></{tag}>\n")
        fragments = (
            state.fragments.push(f"<{tag}{attr_string}>").push(content).push(f"</{tag}>\n")
        )
        return Builder(fragments, state.companion)

    inner = content(Builder(EMPTY_FRAGMENTS, state.companion))
    if not isinstance(inner, Builder):
        raise ContentError(tag, f"builder closure must return a Builder, got {type(inner).__name__}")
    if not inner.fragments:
        logger.debug("Closure for <%s> emitted nothing; using empty form", tag)
        return Builder(state.fragments.push(f"<{tag}{attr_string}></{tag}>\n"), inner.companion)

    fragments = (
        state.fragments.push(f"<{tag}{attr_string}>\n")
        .push_block(inner.fragments)
        .push(f"</{tag}>\n")
    )
    return Builder(fragments, inner.companion)
