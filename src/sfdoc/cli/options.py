# topmark:header:start
#
#   project      : SFDoc
#   file         : options.py
#   file_relpath : src/sfdoc/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolution helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, ParamSpec, TypeVar

import click

from sfdoc.cli.errors import SfdocUsageError
from sfdoc.config.keys import ArgKey, Toml

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity levels
VERBOSITY_QUIET: Final[int] = -1
VERBOSITY_DEFAULT: Final[int] = 0

# `--enable`/`--disable` choices mapped to their override keys
ENABLE_CHOICES: Final[dict[str, str]] = {
    Toml.KEY_ENABLE_APEX: ArgKey.ENABLE_APEX,
    Toml.KEY_ENABLE_VISUALFORCE: ArgKey.ENABLE_VISUALFORCE,
    Toml.KEY_ENABLE_LIGHTNING_MARKUP: ArgKey.ENABLE_LIGHTNING_MARKUP,
    Toml.KEY_ENABLE_LIGHTNING_JAVASCRIPT: ArgKey.ENABLE_LIGHTNING_JAVASCRIPT,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count.

    Raises:
        SfdocUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SfdocUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return VERBOSITY_QUIET
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-error output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        help="Extra config file merged after discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore user and project config files.",
    )(f)
    return f


def header_value_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--username`` and ``--datetime-format`` overriding header values."""
    f = click.option(
        "--username",
        default=None,
        help="Author name written into headers.",
    )(f)
    f = click.option(
        "--datetime-format",
        "datetime_format",
        default=None,
        help="strftime format of header timestamps.",
    )(f)
    return f


def enable_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add repeatable ``--enable``/``--disable`` overriding ``[enable]`` switches."""
    f = click.option(
        "--enable",
        "enable",
        multiple=True,
        type=click.Choice(sorted(ENABLE_CHOICES)),
        help="Enable automatic headers for a language class (repeatable).",
    )(f)
    f = click.option(
        "--disable",
        "disable",
        multiple=True,
        type=click.Choice(sorted(ENABLE_CHOICES)),
        help="Disable automatic headers for a language class (repeatable).",
    )(f)
    return f


def language_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--language`` overriding extension-based language inference."""
    return click.option(
        "--language",
        "language_id",
        default=None,
        help="Language identifier (apex, visualforce, html, javascript, ...).",
    )(f)


def apply_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--apply``; without it, mutating commands only preview."""
    return click.option(
        "--apply",
        "apply_changes",
        is_flag=True,
        default=False,
        help="Write changes to disk (default: preview only).",
    )(f)


def build_config_overrides(
    *,
    username: str | None,
    datetime_format: str | None,
    enable: Iterable[str] = (),
    disable: Iterable[str] = (),
) -> dict[str, Any]:
    """Translate header override options into `MutableConfig.apply_args` keys.

    Raises:
        SfdocUsageError: If a language class is both enabled and disabled.
    """
    enabled: set[str] = set(enable)
    disabled: set[str] = set(disable)
    both: set[str] = enabled & disabled
    if both:
        raise SfdocUsageError(
            f"Cannot both enable and disable: {', '.join(sorted(both))}",
        )
    overrides: dict[str, Any] = {
        ArgKey.USERNAME: username,
        ArgKey.DATETIME_FORMAT: datetime_format,
    }
    for name in enabled:
        overrides[ENABLE_CHOICES[name]] = True
    for name in disabled:
        overrides[ENABLE_CHOICES[name]] = False
    return overrides
