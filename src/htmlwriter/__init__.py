"""
htmlwriter — write well-formed HTML with plain function composition.

An alternative to string templates: documents are built by chaining
builder calls, and nested content is written as closures. Every element is
opened and closed by the same call, so the output is correctly nested by
construction. Zero runtime dependencies.

Quick Start:
    >>> from htmlwriter import new_html, escape
    >>> page = (
    ...     new_html()
    ...     .html(lambda h: h
    ...         .head(lambda h: h.title("Hello"))
    ...         .body(lambda h: h
    ...             .h1("Hello", {"class": ["title", "big"]})
    ...             .p(escape("1 < 2 & 3 > 2"))
    ...             .img(src="a.png", alt=None)))
    ... )
    >>> print(page.build())

Lists with roll_in:
    >>> from htmlwriter import fragment
    >>> fragment(lambda h: h.ul(lambda h: h.roll_in(["x", "y"], lambda i, h: h.li(i))))
    ['<ul>\\n', '<li>', 'x', '</li>\\n', '<li>', 'y', '</li>\\n', '</ul>\\n']

Nothing is escaped automatically; call escape() on untrusted text.
"""

from htmlwriter.attributes import render_attribute, serialize_attributes
from htmlwriter.config import (
    WriterConfig,
    get_writer_config,
    reset_writer_config,
    set_writer_config,
    writer_config_context,
)
from htmlwriter.document import fragment, new_fragment, new_html, render
from htmlwriter.errors import (
    AttributeValueError,
    ContentError,
    HtmlWriterError,
    TagRegistryError,
)
from htmlwriter.escaping import escape, escape_chunks
from htmlwriter.profiling import BuildAccumulator, get_build_accumulator, profiled_build
from htmlwriter.state import Builder, Fragments, export, new, text
from htmlwriter.tags import (
    TagRegistry,
    TagRegistryBuilder,
    TagSpec,
    create_default_registry,
    create_registry_with_defaults,
    install_tag_methods,
)
from htmlwriter.writer import element, tag

__version__ = "0.1.2"

__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Entry points
    "new",
    "new_fragment",
    "new_html",
    "fragment",
    "render",
    "export",
    # Builder state
    "Builder",
    "Fragments",
    # Construction
    "text",
    "tag",
    "element",
    "serialize_attributes",
    "render_attribute",
    # Escaping
    "escape",
    "escape_chunks",
    # Tag registry
    "TagRegistry",
    "TagRegistryBuilder",
    "TagSpec",
    "create_default_registry",
    "create_registry_with_defaults",
    "install_tag_methods",
    # Configuration (ContextVar-based)
    "WriterConfig",
    "get_writer_config",
    "set_writer_config",
    "reset_writer_config",
    "writer_config_context",
    # Profiling
    "BuildAccumulator",
    "get_build_accumulator",
    "profiled_build",
    # Errors
    "HtmlWriterError",
    "ContentError",
    "AttributeValueError",
    "TagRegistryError",
]
