"""Tag registry and per-tag constructors.

The set of supported tags is data: a table of tag names, each marked void
or non-void. Every entry gets a wrapper that partially applies the tag name
to one of the two generic constructors in htmlwriter.writer, and the
wrappers are installed as Builder methods.

Thread Safety:
TagRegistry is immutable after creation. Safe to share.
Use TagRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.register("my-card")
    >>> registry = builder.build()
    >>> install_tag_methods(registry)
    >>> new_fragment().my_card("hello").build()
    '<my-card>hello</my-card>\\n'
"""

from __future__ import annotations

import keyword
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from htmlwriter.errors import TagRegistryError
from htmlwriter.state import Builder
from htmlwriter.utils.logger import get_logger
from htmlwriter.writer import element, tag

logger = get_logger(__name__)

VOID_ELEMENTS: tuple[str, ...] = ("meta", "link", "hr", "br", "img", "input")

ELEMENTS: tuple[str, ...] = (
    "html",
    "head",
    "body",
    "section",
    "article",
    "title",
    "style",
    "script",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "p",
    "a",
    "nav",
    "div",
    "span",
    "em",
    "b",
    "i",
    "u",
    "blockquote",
    "del",
    "code",
    "strong",
    "ul",
    "ol",
    "li",
    "table",
    "tbody",
    "thead",
    "tr",
    "th",
    "td",
    "form",
    "select",
    "option",
    "label",
    "textarea",
    "pre",
    "button",
    "template",
    "slot",
)

_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9]*(?:-[A-Za-z0-9]+)*")

# Marks Builder attributes installed by install_tag_methods
_TAG_MARKER = "__htmlwriter_tag__"

Constructor = Callable[..., Builder[Any]]


def method_name_for(name: str) -> str:
    """Python identifier for a tag: ``my-card`` -> ``my_card``, ``del`` -> ``del_``."""
    ident = name.replace("-", "_")
    if keyword.iskeyword(ident):
        ident += "_"
    return ident


@dataclass(frozen=True, slots=True)
class TagSpec:
    """One registry entry.

    Attributes:
        name: Tag name as written in markup
        void: True if the element never carries content
        method_name: Builder method the wrapper is installed under

    """

    name: str
    void: bool
    method_name: str


def make_constructor(spec: TagSpec) -> Constructor:
    """Create the wrapper for a tag by binding its name to tag() or element()."""
    name = spec.name

    if spec.void:

        def constructor(state: Builder[Any], attrs: Any = (), /, **kw_attrs: Any) -> Builder[Any]:
            return tag(state, name, attrs, **kw_attrs)

        constructor.__doc__ = f"Build void element <{name}>."
    else:

        def constructor(
            state: Builder[Any], content: Any = None, attrs: Any = (), /, **kw_attrs: Any
        ) -> Builder[Any]:
            return element(state, name, content, attrs, **kw_attrs)

        constructor.__doc__ = f"Build non-void element <{name}>."

    constructor.__name__ = spec.method_name
    constructor.__qualname__ = f"Builder.{spec.method_name}"
    setattr(constructor, _TAG_MARKER, name)
    return constructor


class TagRegistry:
    """Immutable registry of tag specs.

    Maps tag names to their void/non-void kind and their constructors.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_specs", "_by_name", "_constructors")

    def __init__(self, specs: tuple[TagSpec, ...]) -> None:
        """Initialize registry from specs.

        Use TagRegistryBuilder to create instances.
        """
        self._specs = specs
        self._by_name = {spec.name: spec for spec in specs}
        self._constructors = {spec.name: make_constructor(spec) for spec in specs}

    def get(self, name: str) -> TagSpec | None:
        """Get the spec for a tag name, or None if unregistered."""
        return self._by_name.get(name)

    def is_void(self, name: str) -> bool:
        """Check if a tag is registered as void.

        Raises:
            TagRegistryError: If the tag is not registered
        """
        spec = self._by_name.get(name)
        if spec is None:
            raise TagRegistryError(name, "not registered")
        return spec.void

    def constructor(self, name: str) -> Constructor:
        """Get the wrapper for a tag.

        The wrapper takes the builder state first:
        ``registry.constructor("div")(state, "hi", {"id": "x"})``.

        Raises:
            TagRegistryError: If the tag is not registered
        """
        try:
            return self._constructors[name]
        except KeyError:
            raise TagRegistryError(name, "not registered") from None

    @property
    def names(self) -> frozenset[str]:
        """Get all registered tag names."""
        return frozenset(self._by_name)

    @property
    def specs(self) -> tuple[TagSpec, ...]:
        """Get all specs in registration order."""
        return self._specs

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[TagSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)


class TagRegistryBuilder:
    """Mutable builder for TagRegistry.

    Example:
        >>> builder = TagRegistryBuilder()
        >>> builder.register("div").register("br", void=True)
        >>> registry = builder.build()
    """

    __slots__ = ("_specs", "_names")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._specs: list[TagSpec] = []
        self._names: set[str] = set()

    def register(self, name: str, *, void: bool = False) -> TagRegistryBuilder:
        """Register a tag.

        Args:
            name: Tag name (letters and digits, optionally hyphen-separated)
            void: True for elements that never carry content

        Returns:
            Self for chaining

        Raises:
            TagRegistryError: If the name is invalid or already registered
        """
        if not isinstance(name, str) or not _TAG_NAME.fullmatch(name):
            raise TagRegistryError(str(name), "invalid tag name")
        if name in self._names:
            raise TagRegistryError(name, "already registered")

        self._names.add(name)
        self._specs.append(TagSpec(name=name, void=void, method_name=method_name_for(name)))
        return self

    def register_all(self, names: Iterable[str], *, void: bool = False) -> TagRegistryBuilder:
        """Register multiple tags of the same kind."""
        for name in names:
            self.register(name, void=void)
        return self

    def build(self) -> TagRegistry:
        """Build immutable registry from registered tags."""
        registry = TagRegistry(tuple(self._specs))
        logger.debug("Built tag registry with %d tags", len(registry))
        return registry

    def __len__(self) -> int:
        return len(self._specs)


def create_registry_with_defaults() -> TagRegistryBuilder:
    """Create a builder pre-populated with the default tag table.

    Use this to extend the defaults with custom elements:

        >>> builder = create_registry_with_defaults()
        >>> builder.register("my-widget")
        >>> registry = builder.build()
    """
    builder = TagRegistryBuilder()
    builder.register_all(VOID_ELEMENTS, void=True)
    builder.register_all(ELEMENTS)
    return builder


# Cached singleton; TagRegistry is immutable
_DEFAULT_REGISTRY: TagRegistry | None = None


def create_default_registry() -> TagRegistry:
    """Get the default tag registry (cached singleton)."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def install_tag_methods(registry: TagRegistry | None = None) -> None:
    """Install one Builder method per registered tag.

    Re-installing a tag method is allowed (the wrapper is replaced); a
    name that would shadow any other Builder attribute is rejected before
    anything is installed.

    Args:
        registry: Registry to install (the default registry if None)

    Raises:
        TagRegistryError: If a method name collides with a Builder attribute
    """
    if registry is None:
        registry = create_default_registry()

    for spec in registry:
        existing = getattr(Builder, spec.method_name, None)
        if existing is not None and not hasattr(existing, _TAG_MARKER):
            raise TagRegistryError(
                spec.name, f"method name '{spec.method_name}' would shadow Builder.{spec.method_name}"
            )

    for spec in registry:
        setattr(Builder, spec.method_name, registry.constructor(spec.name))
    logger.debug("Installed %d tag methods on Builder", len(registry))


install_tag_methods()
