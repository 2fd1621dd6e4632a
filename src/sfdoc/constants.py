# topmark:header:start
#
#   project      : SFDoc
#   file         : constants.py
#   file_relpath : src/sfdoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

SFDOC_VERSION: str = get_version("sfdoc")

# Config file names looked up during discovery:
SFDOC_TOML_NAME: Final[str] = "sfdoc.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "sfdoc"

# Number of lines occupied by a freshly inserted header (including its closing line).
HEADER_LENGTH_LINES: Final[int] = 13

DEFAULT_DATETIME_FORMAT: Final[str] = "%m-%d-%Y, %I:%M:%S %p"

# Environment fallbacks
ENV_USERNAME: Final[str] = "SFDOC_USERNAME"
ENV_LOG_LEVEL: Final[str] = "SFDOC_LOG_LEVEL"

# User-facing messages for the manual insert command
MSG_UNSUPPORTED_FILE_TYPE: Final[str] = "SFDoc: Unsupported file type and/or language"
MSG_HEADER_ALREADY_PRESENT: Final[str] = "SFDoc: Header already present on file's first line"
