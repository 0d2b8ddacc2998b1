"""ContextVar-based writer configuration for htmlwriter.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by the entry points that start a build (new_fragment,
new_html, fragment); the element constructors never consult it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and parallel builds cannot see each other's config.

Usage:
    from htmlwriter.config import WriterConfig, writer_config_context

    with writer_config_context(WriterConfig(default_companion=0)):
        page = new_html().p("counted")  # companion starts at 0

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_DOCTYPE = "<!DOCTYPE html>\n"


@dataclass(frozen=True, slots=True)
class WriterConfig:
    """Immutable writer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        doctype: Header chunk seeded by new_html()
        default_companion: Companion value used when a build entry point is
            called without one. Shared as-is between builds, so prefer
            immutable values.

    """

    doctype: str = DEFAULT_DOCTYPE
    default_companion: Any = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "WriterConfig":
        """Create WriterConfig from dictionary.

        Only includes keys that are valid WriterConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                WriterConfig attribute names.

        Returns:
            New WriterConfig instance with values from dict.

        Example:
            >>> config = WriterConfig.from_dict({"doctype": "", "unknown": 1})
            >>> config.doctype
            ''

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: WriterConfig = WriterConfig()

_writer_config: ContextVar[WriterConfig] = ContextVar(
    "writer_config",
    default=_DEFAULT_CONFIG,
)


def get_writer_config() -> WriterConfig:
    """Get current writer configuration (thread-local)."""
    return _writer_config.get()


def set_writer_config(config: WriterConfig) -> None:
    """Set writer configuration for current context.

    Args:
        config: WriterConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _writer_config.set(config)


def reset_writer_config() -> None:
    """Reset to the module-level default configuration."""
    _writer_config.set(_DEFAULT_CONFIG)


@contextmanager
def writer_config_context(config: WriterConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: WriterConfig to use within the context.

    Yields:
        None

    Example:
        >>> with writer_config_context(WriterConfig(doctype="<!doctype html>\\n")):
        ...     chunks = new_html().export()
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _writer_config.get()
    _writer_config.set(config)
    try:
        yield
    finally:
        _writer_config.set(previous)


__all__ = [
    "DEFAULT_DOCTYPE",
    "WriterConfig",
    "get_writer_config",
    "set_writer_config",
    "reset_writer_config",
    "writer_config_context",
]
