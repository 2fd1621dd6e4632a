# topmark:header:start
#
#   project      : SFDoc
#   file         : test_cursor.py
#   file_relpath : tests/session/test_cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for cursor preservation across header edits."""

from __future__ import annotations

from sfdoc.core.document import Position, Selection
from sfdoc.session.cursor import (
    CorrectionTable,
    CursorCorrection,
    TextEditorView,
    TrackerState,
    restore_cursors,
)
from tests.conftest import make_document, parametrize

URI_A: str = "file:///p/classes/A.cls"
URI_B: str = "file:///p/classes/B.cls"


@parametrize(
    ("position", "inserted", "expected"),
    [
        (Position(5, 3), True, Position(18, 3)),
        (Position(5, 3), False, Position(5, 3)),
        (Position(0, 0), True, Position(13, 0)),
        (None, True, Position(0, 0)),
        (None, False, Position(13, 0)),
    ],
)
def test_restored_position(position: Position | None, inserted: bool, expected: Position) -> None:
    """Inserted headers shift the caret down; updates keep it; fallbacks are fixed."""
    correction = CursorCorrection(URI_A, position, header_inserted=inserted)
    assert correction.restored_position() == expected


def test_table_state_transitions() -> None:
    """Recording moves the table to AWAITING_CORRECTION; clearing returns to IDLE."""
    table = CorrectionTable()
    assert table.state is TrackerState.IDLE

    table.record(URI_A, Position(1, 1), header_inserted=True)
    assert table.state is TrackerState.AWAITING_CORRECTION
    assert URI_A in table
    assert len(table) == 1

    table.record(URI_A, Position(2, 2), header_inserted=False)
    assert len(table) == 1
    entry = table.get(URI_A)
    assert entry is not None
    assert entry.position == Position(2, 2)

    table.clear()
    assert table.state is TrackerState.IDLE
    assert table.get(URI_A) is None


def test_restore_moves_every_view_of_corrected_documents() -> None:
    """All views of a corrected document are moved; other views are untouched."""
    doc_a = make_document("x", uri=URI_A)
    doc_b = make_document("y", uri=URI_B)
    left = TextEditorView(doc_a)
    right = TextEditorView(doc_a, Selection.collapsed(Position(40, 1)))
    other = TextEditorView(doc_b, Selection.collapsed(Position(7, 7)))

    table = CorrectionTable()
    table.record(URI_A, Position(5, 3), header_inserted=True)

    restored = restore_cursors([left, right, other], table)

    assert [pos for _view, pos in restored] == [Position(18, 3), Position(18, 3)]
    assert left.selection == Selection.collapsed(Position(18, 3))
    assert right.selection == Selection.collapsed(Position(18, 3))
    assert other.selection == Selection.collapsed(Position(7, 7))
    assert table.state is TrackerState.IDLE


def test_restore_is_noop_when_idle() -> None:
    """Without pending corrections nothing moves."""
    view = TextEditorView(make_document("x", uri=URI_A), Selection.collapsed(Position(3, 3)))
    assert restore_cursors([view], CorrectionTable()) == []
    assert view.selection.active == Position(3, 3)


def test_interleaved_documents_keep_their_own_mode() -> None:
    """Two documents saved in one cycle each get their own correction."""
    table = CorrectionTable()
    table.record(URI_A, Position(2, 0), header_inserted=True)
    table.record(URI_B, Position(2, 0), header_inserted=False)

    view_a = TextEditorView(make_document("x", uri=URI_A))
    view_b = TextEditorView(make_document("y", uri=URI_B))
    restore_cursors([view_a, view_b], table)

    assert view_a.selection.active == Position(15, 0)
    assert view_b.selection.active == Position(2, 0)
    assert len(table) == 0
