# topmark:header:start
#
#   project      : SFDoc
#   file         : document.py
#   file_relpath : src/sfdoc/core/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editor-neutral document model.

The SFDoc core never mutates a document. It reads a `Document` snapshot and
proposes `TextEdit`s that the host applies (inside the save transaction for
editors, or through `apply_edits` for file-based hosts such as the CLI).

Positions are zero-based ``(line, character)`` pairs. Lines are separated by
``\\r\\n``, ``\\r`` or ``\\n``; a text ending with a line break has a final empty
line, so ``"a\\n"`` has two lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Final
from urllib.parse import unquote, urlsplit

from sfdoc.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sfdoc.config.logging import SfdocLogger

logger: SfdocLogger = get_logger(__name__)

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines without their terminators (editor semantics).

    Args:
        text (str): The text to split.

    Returns:
        list[str]: The lines; always at least one (possibly empty) element.
    """
    return _LINE_BREAK_RE.split(text)


def detect_newline(text: str) -> str:
    r"""Return the first newline sequence found in ``text``.

    Args:
        text (str): The text to inspect.

    Returns:
        str: ``"\r\n"``, ``"\n"`` or ``"\r"``; ``"\n"`` when ``text`` has no line break.
    """
    match: re.Match[str] | None = _LINE_BREAK_RE.search(text)
    return match.group(0) if match else "\n"


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based location in a document."""

    line: int
    character: int

    def translate(self, line_delta: int = 0, character_delta: int = 0) -> Position:
        """Return a new position shifted by the given deltas."""
        return Position(self.line + line_delta, self.character + character_delta)


@dataclass(frozen=True)
class Range:
    """Span between two positions (``start`` inclusive, ``end`` exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True)
class Selection:
    """Editor selection; ``active`` is the end carrying the caret."""

    anchor: Position
    active: Position

    @classmethod
    def collapsed(cls, position: Position) -> Selection:
        """Return an empty selection (a bare caret) at ``position``."""
        return cls(anchor=position, active=position)


@dataclass(frozen=True)
class TextEdit:
    """Replacement of ``range`` by ``new_text``."""

    range: Range
    new_text: str

    @classmethod
    def insert(cls, position: Position, text: str) -> TextEdit:
        """Return an edit inserting ``text`` at ``position``."""
        return cls(Range(position, position), text)

    @classmethod
    def replace(cls, range: Range, text: str) -> TextEdit:  # noqa: A002
        """Return an edit replacing ``range`` with ``text``."""
        return cls(range, text)


def _uri_to_posix_path(uri: str) -> PurePosixPath:
    parts = urlsplit(uri)
    # One-letter "schemes" are Windows drive letters in plain paths (C:\...).
    if parts.scheme and len(parts.scheme) > 1:
        raw: str = unquote(parts.path)
    else:
        raw = uri
    return PurePosixPath(raw.replace("\\", "/"))


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of a host document.

    Attributes:
        text (str): Full document text.
        language_id (str): Host language identifier (e.g. ``"apex"``, ``"javascript"``).
        uri (str): Document identity; ``file://`` URIs and plain paths are accepted.
        is_dirty (bool): Whether the document has unsaved modifications.
    """

    text: str
    language_id: str
    uri: str
    is_dirty: bool = False

    @classmethod
    def from_path(
        cls,
        path: Path,
        language_id: str,
        *,
        text: str | None = None,
        is_dirty: bool = True,
    ) -> Document:
        """Build a document for a file on disk.

        Args:
            path (Path): File path; made absolute to derive a ``file://`` URI.
            language_id (str): Language identifier of the file.
            text (str | None): Document text; read from ``path`` as UTF-8 (newlines
                preserved) when None.
            is_dirty (bool): Dirty flag to report.

        Returns:
            Document: The snapshot.
        """
        abs_path: Path = path.absolute()
        if text is None:
            with abs_path.open(encoding="utf-8", newline="") as fh:
                text = fh.read()
        return cls(text=text, language_id=language_id, uri=abs_path.as_uri(), is_dirty=is_dirty)

    @cached_property
    def path(self) -> PurePosixPath:
        """The document path with forward slashes, derived from ``uri``."""
        return _uri_to_posix_path(self.uri)

    @property
    def file_name(self) -> str:
        """Base name of the document (e.g. ``"AccountService.cls"``)."""
        return self.path.name

    @cached_property
    def lines(self) -> list[str]:
        """Document lines without terminators."""
        return split_lines(self.text)

    @property
    def line_count(self) -> int:
        """Number of lines (at least 1)."""
        return len(self.lines)

    @cached_property
    def newline(self) -> str:
        """Dominant newline sequence (first one found)."""
        return detect_newline(self.text)

    def line_at(self, index: int) -> str:
        """Return the text of line ``index`` (without terminator)."""
        return self.lines[index]

    @cached_property
    def _line_offsets(self) -> list[int]:
        return [0] + [m.end() for m in _LINE_BREAK_RE.finditer(self.text)]

    def offset_at(self, position: Position) -> int:
        """Convert ``position`` to a character offset, clamping out-of-range values.

        Args:
            position (Position): The position to convert.

        Returns:
            int: Offset into ``text``.
        """
        if position.line < 0:
            return 0
        if position.line >= self.line_count:
            return len(self.text)
        character: int = max(0, min(position.character, len(self.lines[position.line])))
        return self._line_offsets[position.line] + character

    def full_range(self) -> Range:
        """Range from the document start to the end of its last line."""
        last: int = self.line_count - 1
        return Range(Position(0, 0), Position(last, len(self.lines[last])))


def apply_edits(document: Document, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping edits to ``document`` and return the new text.

    Edits are interpreted against the original text, as editors do for a batch
    returned from a will-save participant.

    Args:
        document (Document): The document the edits were computed for.
        edits (Iterable[TextEdit]): Edits to apply.

    Returns:
        str: The edited text.

    Raises:
        ValueError: If two edits overlap.
    """
    spans: list[tuple[int, int, str]] = sorted(
        (document.offset_at(e.range.start), document.offset_at(e.range.end), e.new_text)
        for e in edits
    )
    out: list[str] = []
    cursor: int = 0
    for start, end, new_text in spans:
        if start < cursor:
            raise ValueError(f"Overlapping edits at offset {start}")
        out.append(document.text[cursor:start])
        out.append(new_text)
        cursor = end
    out.append(document.text[cursor:])
    logger.trace("Applied %d edit(s) to %s", len(spans), document.uri)
    return "".join(out)
