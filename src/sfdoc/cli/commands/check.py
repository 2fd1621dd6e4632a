# topmark:header:start
#
#   project      : SFDoc
#   file         : check.py
#   file_relpath : src/sfdoc/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc `check` command.

Reports, per file, how SFDoc classifies it and what a save would do. Nothing is
written.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sfdoc.cli.io import load_config, read_document
from sfdoc.cli.options import (
    build_config_overrides,
    enable_options,
    language_option,
)
from sfdoc.filetypes.classifier import (
    is_enabled_for_auto_header,
    is_structurally_supported,
)
from sfdoc.filetypes.instances import get_language_type_registry
from sfdoc.header.detector import has_header

if TYPE_CHECKING:
    from sfdoc.cli.console import ConsoleLike
    from sfdoc.config import Config
    from sfdoc.core.document import Document
    from sfdoc.filetypes.base import LanguageType


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@click.command(
    name="check",
    help="Report language, eligibility and header status of FILES.",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@language_option
@enable_options
def check_command(
    *,
    files: tuple[Path, ...],
    language_id: str | None,
    enable: tuple[str, ...],
    disable: tuple[str, ...],
) -> None:
    """Print one report line per file.

    The planned action is ``insert`` or ``update`` for files eligible for
    automatic headers, and ``skip`` otherwise.

    Args:
        files (tuple[Path, ...]): Files to inspect.
        language_id (str | None): Language identifier applied to every file.
        enable (tuple[str, ...]): Language classes to enable.
        disable (tuple[str, ...]): Language classes to disable.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    overrides = build_config_overrides(
        username=None,
        datetime_format=None,
        enable=enable,
        disable=disable,
    )

    for path in files:
        document: Document = read_document(path, language_id)
        config: Config = load_config(ctx, anchor=path, overrides=overrides)

        language_type: LanguageType | None = get_language_type_registry().get(
            document.language_id
        )
        supported: bool = is_structurally_supported(document.language_id)
        enabled: bool = is_enabled_for_auto_header(document, config)
        present: bool = has_header(document)
        action: str = "skip"
        if enabled:
            action = "update" if present else "insert"

        label: str = console.styled(action, fg="green" if action == "skip" else "yellow")
        console.print(
            f"{path}: language={document.language_id} supported={_yes_no(supported)} "
            f"auto={_yes_no(enabled)} header={_yes_no(present)} action={label}"
        )
        if ctx.obj.get("verbosity_level", 0) > 0 and language_type is not None:
            console.print(f"  {language_type.description}")
