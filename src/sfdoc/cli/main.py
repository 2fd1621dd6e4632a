# topmark:header:start
#
#   project      : SFDoc
#   file         : main.py
#   file_relpath : src/sfdoc/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc command-line interface.

The CLI is a file-system host for the header maintainer: files stand in for
editor documents and each command runs one editor action.

Group-level options are resolved once and placed into ``ctx.obj``:

* ``console``: the `ClickConsole` used for program output,
* ``verbosity_level``: ``-1`` (quiet) to ``2``,
* ``config_files`` / ``no_config``: consumed by `sfdoc.cli.io.load_config`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sfdoc.cli.commands.check import check_command
from sfdoc.cli.commands.config import config_group
from sfdoc.cli.commands.insert import insert_command
from sfdoc.cli.commands.save import save_command
from sfdoc.cli.commands.version import version_command
from sfdoc.cli.console import ClickConsole
from sfdoc.cli.options import common_config_options, common_verbose_options, resolve_verbosity
from sfdoc.config.logging import get_logger, resolve_env_log_level, setup_logging
from sfdoc.templates import register_all_templates

if TYPE_CHECKING:
    from sfdoc.cli.console import ConsoleLike
    from sfdoc.config.logging import SfdocLogger

logger: SfdocLogger = get_logger(__name__)

register_all_templates()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
        config_files (tuple[str, ...]): Explicit ``--config`` files.
        no_config (bool): Whether config discovery is disabled.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    ctx.obj["config_files"] = tuple(config_files)
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SFDoc: maintain documentation headers in Salesforce source files.",
)
@common_verbose_options
@common_config_options
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    config_files: tuple[str, ...],
    no_config: bool,
    no_color: bool,
) -> None:
    """Entry point for the SFDoc CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'sfdoc check FILE...' to see what a save would do.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(insert_command)

cli.add_command(save_command)

cli.add_command(config_group)

if __name__ == "__main__":
    cli()
