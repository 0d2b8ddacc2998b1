"""Attribute serialization.

Turns an ordered collection of attributes into markup attribute syntax.
Each rendered attribute carries its own leading space, so the result can be
placed straight after the tag name.

Rendering rules:
    None or True        -> ` key`
    False               -> dropped
    list/tuple of tokens -> ` key="tok1 tok2"`
    str, int, float     -> ` key="value"`
    (key,) entry        -> ` key`

Values are NOT escaped. Callers must pass attribute values through
htmlwriter.escape when they may contain quote characters.

Example:
    >>> serialize_attributes({"src": "a.png", "alt": None})
    ' src="a.png" alt'
    >>> serialize_attributes([("class", ["a", "b"]), ("hidden",)])
    ' class="a b" hidden'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from htmlwriter.errors import AttributeValueError

_SCALAR_TYPES = (str, int, float)


def render_attribute(key: str, value: Any = None) -> str:
    """Render a single attribute.

    Args:
        key: Attribute name
        value: Attribute value (see module docstring for the accepted kinds)

    Returns:
        Rendered attribute with a leading space, or "" for False

    Raises:
        AttributeValueError: If the key is not a non-empty string or the
            value is of an unsupported type
    """
    if not isinstance(key, str) or not key:
        raise AttributeValueError(key, "key must be a non-empty string")

    if value is None or value is True:
        return f" {key}"
    if value is False:
        return ""
    # bool is handled above, so this only sees real numbers and strings
    if isinstance(value, _SCALAR_TYPES):
        return f' {key}="{value}"'
    if isinstance(value, (list, tuple)):
        for token in value:
            if isinstance(token, bool) or not isinstance(token, _SCALAR_TYPES):
                raise AttributeValueError(
                    key, f"list tokens must be strings or numbers, got {type(token).__name__}"
                )
        return f' {key}="{" ".join(map(str, value))}"'

    raise AttributeValueError(key, f"unsupported value type {type(value).__name__}")


def _keyword_name(name: str) -> str:
    # class_ -> class, for_ -> for
    if len(name) > 1 and name.endswith("_"):
        return name[:-1]
    return name


def iter_attributes(
    attrs: Mapping[str, Any] | Iterable[tuple[Any, ...]] = (),
    kw_attrs: Mapping[str, Any] | None = None,
) -> Iterator[tuple[str, Any]]:
    """Normalize attribute input into ``(key, value)`` pairs, in order.

    Key-only ``(key,)`` entries come out as ``(key, None)``. Keyword
    attributes follow the explicit ones, with one trailing underscore
    stripped from each name.
    """
    if isinstance(attrs, Mapping):
        yield from attrs.items()
    elif isinstance(attrs, (str, bytes)) or not isinstance(attrs, Iterable):
        raise AttributeValueError(attrs, "attributes must be a mapping or a sequence of pairs")
    else:
        for entry in attrs:
            if not isinstance(entry, tuple) or len(entry) not in (1, 2):
                raise AttributeValueError(entry, "entry must be a (key, value) or (key,) tuple")
            if len(entry) == 1:
                yield entry[0], None
            else:
                yield entry[0], entry[1]

    if kw_attrs:
        for name, value in kw_attrs.items():
            yield _keyword_name(name), value


def serialize_attributes(
    attrs: Mapping[str, Any] | Iterable[tuple[Any, ...]] = (),
    /,
    **kw_attrs: Any,
) -> str:
    """Serialize attributes in the order supplied.

    Keys are not deduplicated; a repeated key is rendered twice.

    Args:
        attrs: Mapping or sequence of ``(key, value)`` / ``(key,)`` entries
        **kw_attrs: Extra attributes, rendered after ``attrs``

    Returns:
        Concatenated attribute string ("" when there are none)

    Raises:
        AttributeValueError: On a malformed entry, key, or value
    """
    if not kw_attrs and isinstance(attrs, (Mapping, list, tuple)) and not attrs:
        return ""
    return "".join(render_attribute(key, value) for key, value in iter_attributes(attrs, kw_attrs))
