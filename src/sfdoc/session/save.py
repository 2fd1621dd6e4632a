# topmark:header:start
#
#   project      : SFDoc
#   file         : save.py
#   file_relpath : src/sfdoc/session/save.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Automatic header management at save time.

`HeaderSaveParticipant` is what a host adapter wires into its save events:

1. ``will_save``: called when a save is requested, before the write. Returns the
   edits the host must apply as part of the same save, and records the cursor
   in the cycle's `CorrectionTable`.
2. ``did_save``: called once the write completed. Restores the cursor of every
   visible view of the saved documents.

Configuration is fetched from the provider on every ``will_save``. Any error while
computing the edit is logged and results in an empty outcome: the save goes
through without a header edit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from sfdoc.config.logging import get_logger
from sfdoc.constants import HEADER_LENGTH_LINES
from sfdoc.filetypes.classifier import is_enabled_for_auto_header
from sfdoc.header.edits import plan_header_edit
from sfdoc.session.cursor import restore_cursors

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger
    from sfdoc.core.document import Document, Position, Selection, TextEdit
    from sfdoc.header.edits import HeaderAction, HeaderEdit
    from sfdoc.session.cursor import CorrectionTable, CursorCorrection, EditorView

logger: SfdocLogger = get_logger(__name__)


@dataclass(frozen=True)
class SaveIntent:
    """A save request as seen by the host.

    Attributes:
        document (Document): The document about to be written.
        active_selection (Selection | None): Selection of the active view when that
            view shows ``document``; None otherwise (e.g. a scripted save).
    """

    document: Document
    active_selection: Selection | None = None


@dataclass(frozen=True)
class SaveOutcome:
    """Result of the will-save step.

    Attributes:
        action (HeaderAction | None): Mode of the header edit; None when skipped.
        edits (tuple[TextEdit, ...]): Edits to apply inside the save transaction.
        correction (CursorCorrection | None): Cursor correction recorded for the document.
    """

    action: HeaderAction | None = None
    edits: tuple[TextEdit, ...] = ()
    correction: CursorCorrection | None = None

    @property
    def skipped(self) -> bool:
        """Whether no header edit is applied."""
        return self.action is None


class HeaderSaveParticipant:
    """Inserts or updates headers when eligible documents are saved.

    Args:
        config_provider (Callable[[], Config]): Returns the current configuration;
            called on every save.
        clock (Callable[[], datetime]): Returns the time stamped into headers.
        header_length (int): Number of lines of an inserted header.
    """

    def __init__(
        self,
        config_provider: Callable[[], Config],
        *,
        clock: Callable[[], datetime] = datetime.now,
        header_length: int = HEADER_LENGTH_LINES,
    ) -> None:
        self.config_provider = config_provider
        self.clock = clock
        self.header_length = header_length

    def will_save(self, intent: SaveIntent, corrections: CorrectionTable) -> SaveOutcome:
        """Compute the header edit for a save request.

        Clean documents and ineligible documents are skipped silently.

        Args:
            intent (SaveIntent): The save request.
            corrections (CorrectionTable): Table of the current save cycle.

        Returns:
            SaveOutcome: The edits to apply and the recorded cursor correction.
        """
        document: Document = intent.document
        if not document.is_dirty:
            logger.trace("Skipping clean document %s", document.uri)
            return SaveOutcome()

        try:
            config: Config = self.config_provider()
            if not is_enabled_for_auto_header(document, config):
                return SaveOutcome()
            header_edit: HeaderEdit = plan_header_edit(document, config, self.clock())
        except Exception:
            logger.exception("Cannot compute header edit for %s; saving without it", document.uri)
            return SaveOutcome()

        caret: Position | None = (
            intent.active_selection.active if intent.active_selection is not None else None
        )
        correction: CursorCorrection = corrections.record(
            document.uri,
            caret,
            header_inserted=header_edit.header_inserted,
        )
        logger.info("Header %s for %s", header_edit.action.value, document.file_name)
        return SaveOutcome(
            action=header_edit.action,
            edits=header_edit.edits,
            correction=correction,
        )

    def did_save(
        self,
        views: Iterable[EditorView],
        corrections: CorrectionTable,
    ) -> list[tuple[EditorView, Position]]:
        """Restore cursors after the write and clear ``corrections``.

        Args:
            views (Iterable[EditorView]): Currently visible views.
            corrections (CorrectionTable): Table filled by `will_save`.

        Returns:
            list[tuple[EditorView, Position]]: Moved views and their new caret.
        """
        return restore_cursors(views, corrections, header_length=self.header_length)
