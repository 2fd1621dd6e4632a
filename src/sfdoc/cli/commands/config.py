# topmark:header:start
#
#   project      : SFDoc
#   file         : config.py
#   file_relpath : src/sfdoc/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc `config` command group.

* ``sfdoc config dump``: the effective configuration for a location, after
  defaults, user and project files, ``--config`` files and overrides.
* ``sfdoc config defaults``: the built-in defaults.

Output is TOML wrapped between ``# === BEGIN ===`` and ``# === END ===``
markers so that scripts can extract it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sfdoc.cli.io import load_config
from sfdoc.cli.options import build_config_overrides, enable_options, header_value_options
from sfdoc.config.io import load_defaults_dict, to_toml

if TYPE_CHECKING:
    from sfdoc.cli.console import ConsoleLike
    from sfdoc.config import Config


def _print_toml(console: ConsoleLike, text: str) -> None:
    console.print("# === BEGIN ===")
    console.print(text.rstrip("\n"))
    console.print("# === END ===")


pyproject_option = click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.sfdoc] for pasting into pyproject.toml.",
)


@click.group(name="config", help="Inspect SFDoc configuration.")
def config_group() -> None:
    """Group of configuration subcommands."""


@config_group.command(
    name="dump",
    help="Print the effective configuration for PATH (default: current directory).",
)
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, path_type=Path),
)
@header_value_options
@enable_options
@pyproject_option
def dump_command(
    *,
    path: Path | None,
    username: str | None,
    datetime_format: str | None,
    enable: tuple[str, ...],
    disable: tuple[str, ...],
    for_pyproject: bool,
) -> None:
    """Print the merged configuration as TOML."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = load_config(
        ctx,
        anchor=path,
        overrides=build_config_overrides(
            username=username,
            datetime_format=datetime_format,
            enable=enable,
            disable=disable,
        ),
    )
    if ctx.obj.get("verbosity_level", 0) > 0:
        for source in config.config_files:
            console.print(f"# config file: {source}")
    _print_toml(console, to_toml(config.to_toml_dict(), for_pyproject=for_pyproject))


@config_group.command(name="defaults", help="Print the built-in default configuration.")
@pyproject_option
def defaults_command(*, for_pyproject: bool) -> None:
    """Print the built-in defaults as TOML."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    _print_toml(console, to_toml(load_defaults_dict(), for_pyproject=for_pyproject))
