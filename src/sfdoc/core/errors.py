# topmark:header:start
#
#   project      : SFDoc
#   file         : errors.py
#   file_relpath : src/sfdoc/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SFDoc core.

These are framework-agnostic. The CLI translates them into Click exceptions with
exit codes (see `sfdoc.cli.errors`); other hosts display `message` directly.
"""

from __future__ import annotations

from sfdoc.constants import MSG_HEADER_ALREADY_PRESENT, MSG_UNSUPPORTED_FILE_TYPE


class SfdocCoreError(Exception):
    """Base class for all SFDoc core errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedLanguageError(SfdocCoreError, LookupError):
    """No header template is registered for a language identifier."""

    def __init__(self, language_id: str) -> None:
        super().__init__(f"No header template registered for language '{language_id}'")
        self.language_id = language_id


class HeaderCommandError(SfdocCoreError):
    """The manual insert command refused to run; ``message`` is user-facing."""


class UnsupportedFileTypeError(HeaderCommandError):
    """The document's language is not eligible for headers."""

    def __init__(self, language_id: str) -> None:
        super().__init__(MSG_UNSUPPORTED_FILE_TYPE)
        self.language_id = language_id


class HeaderAlreadyPresentError(HeaderCommandError):
    """The document already starts with a header-shaped comment."""

    def __init__(self) -> None:
        super().__init__(MSG_HEADER_ALREADY_PRESENT)
