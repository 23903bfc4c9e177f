import pytest

from cdl_fixer.contracts.errors import ValidationError
from cdl_fixer.domain.cdl import LineStore


def test_from_text_drops_empty_lines():
    store = LineStore.from_text("a\n\nb\r\n\n  \nc")
    assert store.lines() == ["a", "b", "  ", "c"]


def test_to_text_adds_trailing_newline():
    assert LineStore(["a", "b"]).to_text() == "a\nb\n"
    assert LineStore().to_text() == ""


def test_prepend_replace_and_insert_after():
    store = LineStore(["b", "d"])
    store.prepend("a")
    store.insert_after(1, "c")
    store.insert_after(3, "e")
    store.replace(0, "A")
    assert store.lines() == ["A", "b", "c", "d", "e"]
    assert len(store) == 5
    assert store[-1] == "e"


def test_prepend_block_keeps_order():
    store = LineStore(["z"])
    store.prepend_block(["x", "", "y"])
    assert store.lines() == ["x", "", "y", "z"]


def test_insert_after_out_of_range():
    store = LineStore(["a"])
    with pytest.raises(IndexError):
        store.insert_after(1, "b")


def test_rejects_embedded_newline():
    store = LineStore(["a"])
    with pytest.raises(ValidationError, match="newline"):
        store.prepend("x\ny")
    with pytest.raises(ValidationError, match="newline"):
        LineStore(["ok", "bad\n"])


def test_iteration_is_safe_while_mutating():
    store = LineStore(["a", "b"])
    for idx, line in enumerate(store):
        store.insert_after(idx, line.upper())
    assert len(store) == 4


def test_from_text_splits_on_newline_only():
    store = LineStore.from_text("* a\x0cb\nR1 a b 1k\x85\r\n\u2028\n")
    assert store.lines() == ["* a\x0cb", "R1 a b 1k\x85", "\u2028"]


def test_carriage_return_inside_line_is_kept():
    store = LineStore.from_text("a\rb\r\n\r\n")
    assert store.lines() == ["a\rb"]
    assert store.to_text() == "a\rb\n"
