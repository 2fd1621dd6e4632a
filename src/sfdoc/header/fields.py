# topmark:header:start
#
#   project      : SFDoc
#   file         : fields.py
#   file_relpath : src/sfdoc/header/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Values written into header fields: author name and formatted timestamp."""

from __future__ import annotations

import getpass
import os
from typing import TYPE_CHECKING

from sfdoc.config.logging import get_logger
from sfdoc.constants import ENV_USERNAME

if TYPE_CHECKING:
    from datetime import datetime

    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger

logger: SfdocLogger = get_logger(__name__)


def get_configured_username(config: Config) -> str:
    """Return the author name for headers.

    Resolution order: ``[header] username``, ``$SFDOC_USERNAME``, the OS login name.

    Args:
        config (Config): Current configuration snapshot.

    Returns:
        str: The author name, stripped; empty if nothing could be determined.
    """
    if config.username and config.username.strip():
        return config.username.strip()
    env_value: str = os.environ.get(ENV_USERNAME, "").strip()
    if env_value:
        return env_value
    try:
        return getpass.getuser().strip()
    except (OSError, KeyError) as exc:
        logger.warning("Cannot determine the OS login name: %s", exc)
        return ""


def get_header_formatted_datetime(config: Config, now: datetime) -> str:
    """Format ``now`` with the configured ``[header] datetime_format``."""
    return now.strftime(config.datetime_format).strip()
