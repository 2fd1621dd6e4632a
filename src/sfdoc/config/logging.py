# topmark:header:start
#
#   project      : SFDoc
#   file         : logging.py
#   file_relpath : src/sfdoc/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc logging with an extra TRACE level.

Registers a ``TRACE`` level below ``DEBUG``, installs `SfdocLogger` as the
logger class and provides a chalk-colored formatter for terminal output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from sfdoc.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class SfdocLogger(logging.Logger):
    """Logger class adding `trace()` for messages below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity ``TRACE``.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(SfdocLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Ordered from most to least severe; the first threshold reached wins.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors the rendered record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and wrap it in the color of its severity.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim.red(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the logging level named by ``SFDOC_LOG_LEVEL``, or None if unset.

    Accepts level names (``"TRACE"``, ``"debug"``, ...) and numeric values (``"10"``).
    """
    raw: str | None = os.environ.get(ENV_LOG_LEVEL)
    if not raw:
        return None
    value: str = raw.strip().upper()
    if value.isdigit():
        return int(value)
    return _LEVEL_NAMES.get(value)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a colored stdout handler.

    If ``level`` is None, ``SFDOC_LOG_LEVEL`` is consulted; the fallback is CRITICAL
    so that library use stays silent unless asked otherwise.

    Args:
        level (int | None): Explicit logging level.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> SfdocLogger:
    """Return the `SfdocLogger` registered under ``name``.

    Args:
        name (str): Logger name, usually ``__name__``.

    Returns:
        SfdocLogger: The logger instance.
    """
    return cast("SfdocLogger", logging.getLogger(name))
