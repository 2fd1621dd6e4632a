# topmark:header:start
#
#   project      : SFDoc
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SFDoc in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so that relative paths and config discovery are
resolved against the temporary project.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from sfdoc.cli.exit_codes import ExitCode
from sfdoc.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(cwd: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory to run the command from.
        argv (Sequence[str]): CLI argument vector, e.g. ``["insert", "Foo.cls"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(previous)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, list(argv))


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_exit_code(result: Result, expected: ExitCode) -> None:
    """Assert that the command exited with ``expected``."""
    assert result.exit_code == expected, result.output
