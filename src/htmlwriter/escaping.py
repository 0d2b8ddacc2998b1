"""HTML escaping.

Substitutions, applied left to right without overlap:

    <  ->  &lt;
    >  ->  &gt;
    &  ->  &amp;
    "  ->  &quot;
    '  ->  &#39;

Single pass over the input. Unescaped runs between special characters are
collected as slices of the original string; when the input contains no
special character at all, the original object is returned without a copy.

Escaping is never applied implicitly by the builder. Call escape() on any
text that may contain markup-significant characters before inserting it.
Escaping is not idempotent: escaping "&amp;" again yields "&amp;amp;".

Example:
    >>> escape("<a&b>")
    '&lt;a&amp;b&gt;'
    >>> s = "plain"
    >>> escape(s) is s
    True
"""

from __future__ import annotations

import re

ESCAPES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#39;",
}

_SPECIAL = re.compile("[<>&\"']")


def escape_chunks(text: str) -> list[str]:
    """Escape text into a list of chunks.

    Returns ``[text]`` (the original object) when nothing needs escaping.
    Chunks can be pushed into a build as-is, avoiding the final join.

    Raises:
        TypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"escape() expects a string, got {type(text).__name__}")

    chunks: list[str] = []
    start = 0
    for match in _SPECIAL.finditer(text):
        pos = match.start()
        if pos > start:
            chunks.append(text[start:pos])
        chunks.append(ESCAPES[text[pos]])
        start = pos + 1

    if not chunks:
        return [text]
    if start < len(text):
        chunks.append(text[start:])
    return chunks


def escape(text: str) -> str:
    """Escape the string to be HTML safe.

    Args:
        text: Raw text

    Returns:
        Escaped text; the same object when no character needed escaping

    Raises:
        TypeError: If text is not a string
    """
    chunks = escape_chunks(text)
    if chunks[0] is text:
        return text
    return "".join(chunks)
