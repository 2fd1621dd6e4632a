# topmark:header:start
#
#   project      : SFDoc
#   file         : exit_codes.py
#   file_relpath : src/sfdoc/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SFDoc CLI.

Values follow the BSD ``sysexits`` convention where practical. ``WOULD_CHANGE = 2``
signals a preview run in which files would have been modified; tests must check
``result.exception is None`` to tell it apart from Click's own usage errors.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SFDoc CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        WOULD_CHANGE: Preview: changes would be made if ``--apply`` were set.
        USAGE_ERROR: Invalid flags/arguments (``EX_USAGE``).
        ENCODING_ERROR: File is not valid UTF-8 (``EX_DATAERR``).
        FILE_NOT_FOUND: Input path does not exist (``EX_NOINPUT``).
        UNSUPPORTED_FILE_TYPE: Language cannot carry a header (``EX_UNAVAILABLE``).
        HEADER_PRESENT: The file already starts with a header (``EX_CANTCREAT``).
        IO_ERROR: Error reading/writing a file (``EX_IOERR``).
        PERMISSION_DENIED: Insufficient permissions (``EX_NOPERM``).
        CONFIG_ERROR: Invalid configuration (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    HEADER_PRESENT = 73  # EX_CANTCREAT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
