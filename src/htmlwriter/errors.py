"""Exception classes for htmlwriter.

Every error the library raises derives from HtmlWriterError. Contract
violations also derive from the matching builtin (TypeError, ValueError)
so ordinary ``except TypeError`` handlers keep working.
"""

from __future__ import annotations


class HtmlWriterError(Exception):
    """Base exception for all htmlwriter errors.

    Subclass this for specific error categories.
    """

    pass


class ContentError(HtmlWriterError, TypeError):
    """Element content of an unsupported kind.

    Raised when content is neither None, a string, nor a builder closure,
    or when a builder closure returns something other than a Builder.
    """

    def __init__(self, tag: str | None, message: str) -> None:
        """Initialize content error.

        Args:
            tag: Name of the element being built (None outside an element)
            message: Description of the contract violation
        """
        self.tag = tag
        prefix = f"<{tag}>: " if tag else ""
        super().__init__(f"{prefix}{message}")


class AttributeValueError(HtmlWriterError, TypeError):
    """Malformed attribute entry, key, or value type.

    Keys must be non-empty strings. Beyond that they are emitted as given and
    are not checked against markup name syntax.
    """

    def __init__(self, key: object, message: str) -> None:
        self.key = key
        super().__init__(f"Attribute {key!r}: {message}")


class TagRegistryError(HtmlWriterError, ValueError):
    """Error in tag registration or lookup.

    Raised for duplicate registrations, names that would shadow an existing
    Builder attribute, and lookups of unregistered tags.
    """

    def __init__(self, tag: str, message: str) -> None:
        self.tag = tag
        super().__init__(f"Tag '{tag}': {message}")
