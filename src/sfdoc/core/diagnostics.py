# topmark:header:start
#
#   project      : SFDoc
#   file         : diagnostics.py
#   file_relpath : src/sfdoc/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity of a diagnostic, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this level (human output only)."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single message with a severity level."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``"[level] message"``, optionally colored."""
        text: str = f"[{self.level.value}] {self.message}"
        return self.level.color(text) if color else text


@dataclass
class DiagnosticLog:
    """Append-only list of diagnostics."""

    items: list[Diagnostic] = field(default_factory=list)

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Append a diagnostic."""
        self.items.append(Diagnostic(level, message))

    def add_warning(self, message: str) -> None:
        """Append a WARNING diagnostic."""
        self.add(DiagnosticLevel.WARNING, message)

    def extend(self, other: DiagnosticLog | tuple[Diagnostic, ...]) -> None:
        """Append all diagnostics from another log or a frozen tuple."""
        self.items.extend(other.items if isinstance(other, DiagnosticLog) else other)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
