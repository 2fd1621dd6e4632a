# topmark:header:start
#
#   project      : SFDoc
#   file         : errors.py
#   file_relpath : src/sfdoc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SFDoc CLI.

Each exception carries an `ExitCode`. When a project console is present in the
Click context, errors are printed through it; otherwise Click's default display
is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from sfdoc.cli.exit_codes import ExitCode


class SfdocError(click.ClickException):
    """Base class for all SFDoc CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class SfdocUsageError(SfdocError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class SfdocFileNotFoundError(SfdocError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SfdocPermissionDeniedError(SfdocError):
    """Insufficient permissions to read or write a file."""

    exit_code = ExitCode.PERMISSION_DENIED


class SfdocIOError(SfdocError):
    """I/O error reading or writing a file."""

    exit_code = ExitCode.IO_ERROR


class SfdocEncodingError(SfdocError):
    """File content is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class SfdocUnsupportedFileTypeError(SfdocError):
    """The file's language cannot carry a header."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE


class SfdocHeaderPresentError(SfdocError):
    """The file already starts with a header."""

    exit_code = ExitCode.HEADER_PRESENT


class SfdocConfigError(SfdocError):
    """An explicitly requested config file cannot be read or parsed."""

    exit_code = ExitCode.CONFIG_ERROR
