"""Tests for ContextVar-based writer configuration.

Validates defaults, context manager behavior, and thread isolation.
"""

from threading import Thread

import pytest

from htmlwriter import (
    WriterConfig,
    fragment,
    get_writer_config,
    new,
    new_fragment,
    new_html,
    reset_writer_config,
    set_writer_config,
    writer_config_context,
)
from htmlwriter.config import DEFAULT_DOCTYPE


class TestWriterConfigDataclass:
    """Test WriterConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = WriterConfig()
        assert config.doctype == DEFAULT_DOCTYPE == "<!DOCTYPE html>\n"
        assert config.default_companion is None

    def test_immutability(self) -> None:
        config = WriterConfig()
        with pytest.raises(AttributeError):
            config.doctype = ""  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = WriterConfig.from_dict({"doctype": "", "unknown_key": "ignored"})
        assert config.doctype == ""
        assert config.default_companion is None

    def test_from_empty_dict(self) -> None:
        assert WriterConfig.from_dict({}) == WriterConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        reset_writer_config()
        assert get_writer_config() == WriterConfig()

    def test_set_and_reset(self) -> None:
        try:
            set_writer_config(WriterConfig(default_companion=5))
            assert get_writer_config().default_companion == 5
        finally:
            reset_writer_config()
        assert get_writer_config().default_companion is None


class TestWriterConfigContext:
    """Test the context manager."""

    def test_doctype_used_by_new_html(self) -> None:
        with writer_config_context(WriterConfig(doctype="<!doctype html>\n")):
            assert new_html().export() == ["<!doctype html>\n"]
        assert new_html().export() == ["<!DOCTYPE html>\n"]

    def test_default_companion(self) -> None:
        with writer_config_context(WriterConfig(default_companion=0)):
            assert new().companion == 0
            assert new_fragment().companion == 0
            assert new_html().companion == 0
            seen: list[object] = []
            fragment(lambda h: seen.append(h.companion) or h)
            assert seen == [0]

    def test_explicit_companion_wins(self) -> None:
        with writer_config_context(WriterConfig(default_companion=0)):
            assert new_fragment(companion=None).companion is None

    def test_restores_after_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with writer_config_context(WriterConfig(doctype="")):
                raise RuntimeError("boom")
        assert get_writer_config().doctype == DEFAULT_DOCTYPE

    def test_nested_contexts(self) -> None:
        with writer_config_context(WriterConfig(default_companion="outer")):
            with writer_config_context(WriterConfig(default_companion="inner")):
                assert new().companion == "inner"
            assert new().companion == "outer"


class TestThreadIsolation:
    """Config set in one thread does not leak into another."""

    def test_thread_config_is_isolated(self) -> None:
        seen: dict[str, object] = {}

        def worker() -> None:
            set_writer_config(WriterConfig(default_companion="thread"))
            seen["thread"] = new().companion

        t = Thread(target=worker)
        t.start()
        t.join()

        assert seen["thread"] == "thread"
        assert new().companion is None
