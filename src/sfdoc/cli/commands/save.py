# topmark:header:start
#
#   project      : SFDoc
#   file         : save.py
#   file_relpath : src/sfdoc/cli/commands/save.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc `save` command.

Runs one complete save cycle on a file, the way an editor host would:

1. will-save: compute the header edit and record the caret,
2. apply the edit to the document text,
3. write the file (only with ``--apply``),
4. did-save: restore the caret and report where it ended up.

Positions given with ``--line``/``--column`` and reported back are zero-based.
Without ``--apply``, a save that would change the file exits with
`ExitCode.WOULD_CHANGE`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from sfdoc.cli.exit_codes import ExitCode
from sfdoc.cli.io import load_config, read_document, write_text
from sfdoc.cli.options import (
    apply_option,
    build_config_overrides,
    enable_options,
    header_value_options,
    language_option,
)
from sfdoc.config.logging import get_logger
from sfdoc.core.document import Document, Position, Selection, apply_edits
from sfdoc.session.cursor import CorrectionTable, TextEditorView
from sfdoc.session.save import HeaderSaveParticipant, SaveIntent

if TYPE_CHECKING:
    from sfdoc.cli.console import ConsoleLike
    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger
    from sfdoc.header.edits import HeaderAction
    from sfdoc.session.cursor import EditorView
    from sfdoc.session.save import SaveOutcome

logger: SfdocLogger = get_logger(__name__)


@click.command(
    name="save",
    help="Run a save cycle on FILE: insert or refresh its header automatically.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@language_option
@header_value_options
@enable_options
@click.option(
    "--line",
    type=click.IntRange(min=0),
    default=None,
    help="Zero-based caret line before the save (default: no active caret).",
)
@click.option(
    "--column",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Zero-based caret column before the save.",
)
@apply_option
def save_command(
    *,
    file: Path,
    language_id: str | None,
    username: str | None,
    datetime_format: str | None,
    enable: tuple[str, ...],
    disable: tuple[str, ...],
    line: int | None,
    column: int,
    apply_changes: bool,
) -> None:
    """Save ``file`` through the automatic header participant.

    Args:
        file (Path): The file to save.
        language_id (str | None): Explicit language identifier.
        username (str | None): Author override.
        datetime_format (str | None): Timestamp format override.
        enable (tuple[str, ...]): Language classes to enable.
        disable (tuple[str, ...]): Language classes to disable.
        line (int | None): Caret line before the save; None when no view is active.
        column (int): Caret column before the save.
        apply_changes (bool): Write the result instead of previewing it.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    quiet: bool = ctx.obj.get("verbosity_level", 0) < 0

    overrides: dict[str, Any] = build_config_overrides(
        username=username,
        datetime_format=datetime_format,
        enable=enable,
        disable=disable,
    )

    def config_provider() -> Config:
        return load_config(ctx, anchor=file, overrides=overrides)

    document: Document = read_document(file, language_id, is_dirty=True)
    selection: Selection | None = (
        Selection.collapsed(Position(line, column)) if line is not None else None
    )

    participant = HeaderSaveParticipant(config_provider)
    corrections = CorrectionTable()
    outcome: SaveOutcome = participant.will_save(SaveIntent(document, selection), corrections)

    action: HeaderAction | None = outcome.action
    if action is None:
        if not quiet:
            console.print(f"{file}: no header change")
        return

    new_text: str = apply_edits(document, outcome.edits)
    if apply_changes:
        write_text(file, new_text)

    saved = Document(new_text, document.language_id, document.uri, is_dirty=False)
    views: list[EditorView] = [TextEditorView(saved)]
    restored: list[tuple[EditorView, Position]] = participant.did_save(views, corrections)

    if not quiet:
        verb: str = "Header" if apply_changes else "Would apply header"
        console.print(f"{file}: {verb} {action.value}")
        for _view, position in restored:
            console.print(f"{file}: cursor at {position.line}:{position.character}")

    if not apply_changes:
        ctx.exit(ExitCode.WOULD_CHANGE)
