"""Tests for the builder state: Fragments, Builder, new, text, export."""

import pytest

from htmlwriter import Builder, ContentError, Fragments, export, new, new_fragment, text
from htmlwriter.state import EMPTY_FRAGMENTS


class TestFragments:
    """Persistent reversed chunk stack."""

    def test_empty(self) -> None:
        assert len(EMPTY_FRAGMENTS) == 0
        assert not EMPTY_FRAGMENTS
        assert list(EMPTY_FRAGMENTS) == []

    def test_push_is_newest_first(self) -> None:
        f = EMPTY_FRAGMENTS.push("a").push("b").push("c")
        assert list(f) == ["c", "b", "a"]
        assert f.emission_order() == ["a", "b", "c"]
        assert len(f) == 3

    def test_push_does_not_modify_parent(self) -> None:
        parent = EMPTY_FRAGMENTS.push("a")
        parent.push("b")
        assert list(parent) == ["a"]

    def test_push_all_takes_document_order(self) -> None:
        f = EMPTY_FRAGMENTS.push("a").push_all(["b", "c"])
        assert f.emission_order() == ["a", "b", "c"]
        assert len(f) == 3

    def test_from_emission_order(self) -> None:
        f = Fragments.from_emission_order(["x", "y"])
        assert list(f) == ["y", "x"]

    def test_equality_by_content(self) -> None:
        a = EMPTY_FRAGMENTS.push("x").push("y")
        b = Fragments.from_emission_order(["x", "y"])
        assert a == b
        assert hash(a) == hash(b)
        assert a != EMPTY_FRAGMENTS.push("x")

    def test_push_block_keeps_block_order(self) -> None:
        block = EMPTY_FRAGMENTS.push("b").push("c")
        f = EMPTY_FRAGMENTS.push("a").push_block(block).push("d")
        assert f.emission_order() == ["a", "b", "c", "d"]
        assert list(f) == ["d", "c", "b", "a"]
        assert len(f) == 4

    def test_push_block_equals_flat_stack(self) -> None:
        block = Fragments.from_emission_order(["b", "c"])
        nested = EMPTY_FRAGMENTS.push("a").push_block(block)
        flat = Fragments.from_emission_order(["a", "b", "c"])
        assert nested == flat
        assert hash(nested) == hash(flat)

    def test_push_empty_block_is_noop(self) -> None:
        f = EMPTY_FRAGMENTS.push("a")
        assert f.push_block(EMPTY_FRAGMENTS) is f

    def test_push_block_shares_block(self) -> None:
        block = EMPTY_FRAGMENTS.push("x")
        first = EMPTY_FRAGMENTS.push_block(block)
        second = EMPTY_FRAGMENTS.push("y").push_block(block)
        assert first.emission_order() == ["x"]
        assert second.emission_order() == ["y", "x"]
        assert list(block) == ["x"]

    def test_deeply_nested_blocks_flatten(self) -> None:
        f = EMPTY_FRAGMENTS.push("leaf")
        for _ in range(5000):
            f = EMPTY_FRAGMENTS.push("<").push_block(f).push(">")
        chunks = f.emission_order()
        assert len(chunks) == len(f) == 10001
        assert chunks[:2] == ["<", "<"]
        assert chunks[5000] == "leaf"
        assert chunks[-1] == ">"


class TestBuilder:
    """Builder value semantics."""

    def test_default_state(self) -> None:
        b = Builder()
        assert not b.fragments
        assert b.companion is None

    def test_frozen(self) -> None:
        b = Builder()
        with pytest.raises(AttributeError):
            b.companion = 1  # type: ignore[misc]

    def test_text_appends_verbatim(self) -> None:
        b = new().text("<raw>").text("&")
        assert b.export() == ["<raw>", "&"]

    def test_text_keeps_companion(self) -> None:
        b = new(companion={"n": 1}).text("x")
        assert b.companion == {"n": 1}

    def test_text_rejects_non_string(self) -> None:
        with pytest.raises(ContentError):
            new().text(42)  # type: ignore[arg-type]

    def test_branches_are_independent(self) -> None:
        base = new_fragment().p("a")
        left = base.p("b")
        right = base.p("c")
        assert base.build() == "<p>a</p>\n"
        assert left.build() == "<p>a</p>\n<p>b</p>\n"
        assert right.build() == "<p>a</p>\n<p>c</p>\n"

    def test_with_companion(self) -> None:
        b = new().text("x")
        c = b.with_companion("ctx")
        assert c.companion == "ctx"
        assert c.fragments is b.fragments
        assert b.companion is None

    def test_build_joins_export(self) -> None:
        b = new("<!-- h -->\n").text("body")
        assert b.build() == "".join(b.export())


class TestNewAndExport:
    """Entry point and terminal operation."""

    def test_new_empty(self) -> None:
        assert export(new()) == []

    def test_new_with_header_round_trip(self) -> None:
        assert export(new("header")) == ["header"]

    def test_new_explicit_none_companion(self) -> None:
        assert new(companion=None).companion is None

    def test_functional_text(self) -> None:
        assert export(text(new(), "a")) == ["a"]

    def test_export_can_be_repeated(self) -> None:
        b = new().text("a")
        assert b.export() == b.export()


class TestFlowHelpers:
    """roll_in, invoke, when."""

    def test_roll_in_folds_in_order(self) -> None:
        b = new().roll_in(["x", "y", "z"], lambda item, h: h.text(item))
        assert b.export() == ["x", "y", "z"]

    def test_roll_in_empty(self) -> None:
        b = new().text("a")
        assert b.roll_in([], lambda item, h: h.text(item)) is b

    def test_roll_in_threads_companion(self) -> None:
        b = new(companion=0).roll_in(range(4), lambda i, h: h.with_companion(h.companion + i))
        assert b.companion == 6

    def test_invoke(self) -> None:
        b = new().invoke(lambda h: h.text("x"))
        assert b.export() == ["x"]

    def test_when_true(self) -> None:
        assert new().when(True, lambda h: h.text("x")).export() == ["x"]

    def test_when_false_returns_same(self) -> None:
        b = new().text("a")
        assert b.when(None, lambda h: h.text("x")) is b
