from __future__ import annotations

import pytest

from operand_align.buffer import (
    Buffer,
    BufferValidationError,
    Position,
    UndoHistory,
    UndoStep,
    display_width,
    whitespace_between,
)


def test_from_text_places_cursor_at_end() -> None:
    buffer = Buffer.from_text("ab\ncd")

    assert buffer.cursor == Position(1, 2)
    assert buffer.line_count == 2


def test_insert_before_cursor_rebases_cursor() -> None:
    buffer = Buffer.from_text("ab\ncd", cursor=Position(0, 2))

    buffer.insert_text("XY", position=Position(0, 1))

    assert buffer.text() == "aXYb\ncd"
    assert buffer.cursor == Position(0, 4)


def test_insert_after_cursor_keeps_cursor() -> None:
    buffer = Buffer.from_text("ab\ncd", cursor=Position(0, 1))

    buffer.insert_text("!", position=Position(1, 0))

    assert buffer.text() == "ab\n!cd"
    assert buffer.cursor == Position(0, 1)


def test_insert_at_cursor_moves_cursor_past_text() -> None:
    buffer = Buffer.from_text("ab")

    buffer.insert_text("\nc")

    assert buffer.text() == "ab\nc"
    assert buffer.cursor == Position(1, 1)


def test_display_column_expands_tabs() -> None:
    buffer = Buffer.from_text("\tx", tab_width=4)

    assert buffer.display_column(Position(0, 1)) == 4
    assert buffer.indentation_column(0) == 4
    assert display_width("a\tb", 8) == 9


def test_char_at_reports_line_and_buffer_ends() -> None:
    buffer = Buffer.from_text("ab\ncd")

    assert buffer.char_at(Position(0, 1)) == "b"
    assert buffer.char_at(Position(0, 2)) == "\n"
    assert buffer.char_at(Position(1, 2)) is None


def test_out_of_range_position_raises() -> None:
    buffer = Buffer.from_text("ab")

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.char_at(Position(3, 0))

    assert excinfo.value.position == Position(3, 0)
    with pytest.raises(BufferValidationError):
        buffer.insert_text("x", position=Position(0, 5))


def test_get_text_range_spans_lines() -> None:
    buffer = Buffer.from_text("ab\ncd")

    assert buffer.get_text_range(Position(0, 1), Position(1, 1)) == "b\nc"
    assert buffer.get_text_range(Position(1, 1), Position(0, 1)) == "b\nc"


def test_set_indentation_reports_changes() -> None:
    buffer = Buffer.from_text("\tx")

    assert buffer.set_indentation(0, "  ") is True
    assert buffer.text() == "  x"
    assert buffer.set_indentation(0, "  ") is False
    with pytest.raises(ValueError):
        buffer.set_indentation(0, "ab")


def test_first_nonblank() -> None:
    buffer = Buffer.from_text("   x\n   ")

    assert buffer.first_nonblank(0) == Position(0, 3)
    assert buffer.first_nonblank(1) is None


def test_transaction_groups_edits_into_one_undo_step() -> None:
    buffer = Buffer.from_text("")

    with buffer.transaction("typing"):
        buffer.insert_text("a")
        buffer.insert_text("b")

    assert buffer.history.labels() == ["typing"]
    assert buffer.undo() is True
    assert buffer.text() == ""
    assert buffer.cursor == Position(0, 0)
    assert buffer.redo() is True
    assert buffer.text() == "ab"
    assert buffer.cursor == Position(0, 2)


def test_unchanged_transaction_records_nothing() -> None:
    buffer = Buffer.from_text("x")

    with buffer.transaction("noop"):
        buffer.set_indentation(0, "")

    assert buffer.history.labels() == []
    assert buffer.undo() is False


def test_new_edit_discards_redo_history() -> None:
    buffer = Buffer.from_text("")
    buffer.insert_text("a")
    buffer.insert_text("b")
    buffer.undo()

    buffer.insert_text("c")

    assert buffer.text() == "ac"
    assert buffer.redo() is False


def test_whitespace_between() -> None:
    assert whitespace_between(2, 5, 8) == "   "
    assert whitespace_between(5, 2, 8) == ""
    assert whitespace_between(0, 10, 4, use_tabs=True) == "\t\t  "
    assert whitespace_between(3, 8, 4, use_tabs=True) == "\t\t"
    assert whitespace_between(12, 13, 8, use_tabs=True) == " "


def make_step(label: str, before: str, after: str) -> UndoStep:
    return UndoStep(
        label=label,
        before_text=before,
        after_text=after,
        cursor_before=Position(0, len(before)),
        cursor_after=Position(0, len(after)),
    )


def test_history_skips_unchanged_steps_and_tracks_labels() -> None:
    history = UndoHistory()

    assert history.record(make_step("noop", "a", "a")) is False
    assert history.record(make_step("first", "", "a")) is True
    assert history.record(make_step("second", "a", "ab")) is True
    assert history.labels() == ["first", "second"]

    undone = history.undo()

    assert undone is not None and undone.label == "second"
    assert history.labels() == ["first"]
    assert history.redo_labels() == ["second"]


def test_history_drops_oldest_steps_past_limit() -> None:
    history = UndoHistory(limit=2)
    for index, label in enumerate(["one", "two", "three"]):
        history.record(make_step(label, "x" * index, "x" * (index + 1)))

    assert history.labels() == ["two", "three"]
    with pytest.raises(ValueError):
        UndoHistory(limit=0)


def test_undo_restores_cursor_from_before_the_transaction() -> None:
    buffer = Buffer.from_text("if (a\n&")

    with buffer.transaction("electric_align"):
        buffer.set_indentation(1, "    ")
        buffer.insert_text(" ", position=Position(0, 4))

    assert buffer.history.labels() == ["electric_align"]
    assert buffer.cursor == Position(1, 5)
    buffer.undo()
    assert buffer.cursor == Position(1, 1)
    buffer.redo()
    assert buffer.cursor == Position(1, 5)
