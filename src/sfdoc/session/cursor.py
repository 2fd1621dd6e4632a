# topmark:header:start
#
#   project      : SFDoc
#   file         : cursor.py
#   file_relpath : src/sfdoc/session/cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cursor preservation across save-triggered header edits.

Editors move the caret to the start or end of a document after a programmatic
whole-document edit. To undo that, the will-save step records the caret of each
saved document in a `CorrectionTable`, together with whether the save inserts a
header. Once the save completes, `restore_cursors` moves the caret of every
visible view of those documents to the corrected position and clears the table.

The table is created by the host for a save cycle and passed explicitly to both
steps. Entries are keyed by document URI, so saves of different documents can
interleave without sharing state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from sfdoc.config.logging import get_logger
from sfdoc.constants import HEADER_LENGTH_LINES
from sfdoc.core.document import Position, Selection

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from sfdoc.config.logging import SfdocLogger
    from sfdoc.core.document import Document

logger: SfdocLogger = get_logger(__name__)


class TrackerState(Enum):
    """State of a `CorrectionTable`.

    Attributes:
        IDLE: No correction pending.
        AWAITING_CORRECTION: At least one document waits for its cursor to be restored.
    """

    IDLE = "idle"
    AWAITING_CORRECTION = "awaiting_correction"


@dataclass(frozen=True)
class CursorCorrection:
    """Cursor recorded for one document before its save-triggered edit.

    Attributes:
        uri (str): Document identity.
        position (Position | None): Caret before the save; None when no view of the
            document was active.
        header_inserted (bool): True if the save inserted a header, False if it
            updated an existing one.
    """

    uri: str
    position: Position | None
    header_inserted: bool

    def restored_position(self, header_length: int = HEADER_LENGTH_LINES) -> Position:
        """Return where the caret belongs after the edit.

        An inserted header shifts content down by ``header_length`` lines; an update
        keeps line numbers. The column is never changed. Without a recorded caret
        the fallback is ``(0, 0)`` after an insertion and the line just past the
        header after an update.

        Args:
            header_length (int): Number of lines of an inserted header.

        Returns:
            Position: The corrected caret position.
        """
        if self.position is None:
            return Position(0 if self.header_inserted else header_length, 0)
        shift: int = header_length if self.header_inserted else 0
        return self.position.translate(line_delta=shift)


@dataclass
class CorrectionTable:
    """Short-lived table of pending cursor corrections, at most one per URI."""

    _entries: dict[str, CursorCorrection] = field(default_factory=dict)

    @property
    def state(self) -> TrackerState:
        """Current tracker state."""
        return TrackerState.AWAITING_CORRECTION if self._entries else TrackerState.IDLE

    def record(
        self,
        uri: str,
        position: Position | None,
        *,
        header_inserted: bool,
    ) -> CursorCorrection:
        """Record (or replace) the correction for ``uri``."""
        correction = CursorCorrection(uri=uri, position=position, header_inserted=header_inserted)
        if uri in self._entries:
            logger.debug("Replacing pending cursor correction for %s", uri)
        self._entries[uri] = correction
        logger.trace("Recorded %s", correction)
        return correction

    def get(self, uri: str) -> CursorCorrection | None:
        """Return the pending correction for ``uri``, if any."""
        return self._entries.get(uri)

    def clear(self) -> None:
        """Drop every pending correction (state becomes IDLE)."""
        self._entries.clear()

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __iter__(self) -> Iterator[CursorCorrection]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)


class EditorView(Protocol):
    """A visible editor pane showing a document, as exposed by the host."""

    @property
    def document(self) -> Document:
        """The document shown in this view."""
        ...

    selection: Selection


@dataclass
class TextEditorView:
    """Plain `EditorView` implementation for file-based hosts and tests."""

    document: Document
    selection: Selection = field(default_factory=lambda: Selection.collapsed(Position(0, 0)))


def restore_cursors(
    views: Iterable[EditorView],
    table: CorrectionTable,
    *,
    header_length: int = HEADER_LENGTH_LINES,
) -> list[tuple[EditorView, Position]]:
    """Move the caret of every visible view of a corrected document, then clear ``table``.

    Views showing documents without a pending correction are left alone.

    Args:
        views (Iterable[EditorView]): Currently visible views.
        table (CorrectionTable): Corrections recorded by the will-save step.
        header_length (int): Number of lines of an inserted header.

    Returns:
        list[tuple[EditorView, Position]]: The views that were moved and their new caret.
    """
    if table.state is TrackerState.IDLE:
        return []

    restored: list[tuple[EditorView, Position]] = []
    for view in views:
        correction: CursorCorrection | None = table.get(view.document.uri)
        if correction is None:
            continue
        position: Position = correction.restored_position(header_length)
        view.selection = Selection.collapsed(position)
        logger.debug("Restored cursor of %s to %s", correction.uri, position)
        restored.append((view, position))

    table.clear()
    return restored
