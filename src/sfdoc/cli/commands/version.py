# topmark:header:start
#
#   project      : SFDoc
#   file         : version.py
#   file_relpath : src/sfdoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc `version` command.

Prints the SFDoc version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sfdoc.constants import SFDOC_VERSION

if TYPE_CHECKING:
    from sfdoc.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SFDoc.",
)
def version_command() -> None:
    """Show the current version of SFDoc."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(f"SFDoc version {SFDOC_VERSION}")
    else:
        console.print(SFDOC_VERSION)
