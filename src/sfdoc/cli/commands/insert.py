# topmark:header:start
#
#   project      : SFDoc
#   file         : insert.py
#   file_relpath : src/sfdoc/cli/commands/insert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc `insert` command.

Runs the manual "insert header" command on one file. Without ``--apply`` the
header that would be inserted is printed and the command exits with
`ExitCode.WOULD_CHANGE`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sfdoc.cli.errors import (
    SfdocHeaderPresentError,
    SfdocUnsupportedFileTypeError,
    SfdocUsageError,
)
from sfdoc.cli.exit_codes import ExitCode
from sfdoc.cli.io import load_config, read_document, write_text
from sfdoc.cli.options import (
    apply_option,
    build_config_overrides,
    header_value_options,
    language_option,
)
from sfdoc.commands.insert_header import insert_header_command
from sfdoc.config.logging import get_logger
from sfdoc.core.document import apply_edits
from sfdoc.core.errors import HeaderAlreadyPresentError, UnsupportedFileTypeError

if TYPE_CHECKING:
    from sfdoc.cli.console import ConsoleLike
    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger
    from sfdoc.core.document import Document, TextEdit

logger: SfdocLogger = get_logger(__name__)


@click.command(
    name="insert",
    help="Insert an SFDoc header at the top of FILE.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@language_option
@header_value_options
@apply_option
def insert_command(
    *,
    file: Path,
    language_id: str | None,
    username: str | None,
    datetime_format: str | None,
    apply_changes: bool,
) -> None:
    """Insert a header into ``file``.

    The manual command ignores the ``[enable]`` switches: any structurally
    supported language qualifies.

    Args:
        file (Path): The file to modify.
        language_id (str | None): Explicit language identifier.
        username (str | None): Author override.
        datetime_format (str | None): Timestamp format override.
        apply_changes (bool): Write the result instead of previewing it.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    document: Document = read_document(file, language_id)
    config: Config = load_config(
        ctx,
        anchor=file,
        overrides=build_config_overrides(
            username=username,
            datetime_format=datetime_format,
        ),
    )

    try:
        edit: TextEdit = insert_header_command(document, config)
    except UnsupportedFileTypeError as exc:
        raise SfdocUnsupportedFileTypeError(f"{exc.message} ({file})") from exc
    except HeaderAlreadyPresentError as exc:
        raise SfdocHeaderPresentError(f"{exc.message} ({file})") from exc
    except ValueError as exc:
        raise SfdocUsageError(f"Invalid datetime format {config.datetime_format!r}: {exc}") from exc

    if not apply_changes:
        console.print(edit.new_text, nl=False)
        if ctx.obj.get("verbosity_level", 0) >= 0:
            console.warn(f"Would insert header into {file} (use --apply to write)")
        ctx.exit(ExitCode.WOULD_CHANGE)

    write_text(file, apply_edits(document, [edit]))
    logger.info("Inserted header into %s", file)
    if ctx.obj.get("verbosity_level", 0) >= 0:
        console.print(f"Inserted header into {file}")
