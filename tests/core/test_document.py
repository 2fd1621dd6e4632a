# topmark:header:start
#
#   project      : SFDoc
#   file         : test_document.py
#   file_relpath : tests/core/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the document model and edit application."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sfdoc.core.document import (
    Document,
    Position,
    Range,
    Selection,
    TextEdit,
    apply_edits,
    detect_newline,
    split_lines,
)
from tests.conftest import make_document, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    ("text", "expected"),
    [
        ("", [""]),
        ("a", ["a"]),
        ("a\n", ["a", ""]),
        ("a\r\nb", ["a", "b"]),
        ("a\rb\nc", ["a", "b", "c"]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    """Lines are split on every terminator kind; a trailing break adds an empty line."""
    assert split_lines(text) == expected


@parametrize(
    ("text", "expected"),
    [
        ("no break", "\n"),
        ("a\nb\r\n", "\n"),
        ("a\r\nb\n", "\r\n"),
        ("a\rb", "\r"),
    ],
)
def test_detect_newline_uses_first_terminator(text: str, expected: str) -> None:
    """The first terminator found wins; LF is the default."""
    assert detect_newline(text) == expected


def test_position_translate_and_ordering() -> None:
    """Positions translate by deltas and compare line first."""
    pos = Position(5, 3)
    assert pos.translate(line_delta=13) == Position(18, 3)
    assert Position(1, 9) < Position(2, 0)


def test_selection_collapsed() -> None:
    """A collapsed selection has anchor == active."""
    sel = Selection.collapsed(Position(2, 4))
    assert sel.anchor == sel.active == Position(2, 4)


def test_document_path_and_file_name() -> None:
    """The path is derived from the URI, percent-decoded."""
    doc = make_document("", uri="file:///work/lwc/my%20cmp/myCmp.js")
    assert doc.file_name == "myCmp.js"
    assert doc.path.parts[-2] == "my cmp"


def test_document_plain_windows_path() -> None:
    """Backslash paths with a drive letter are accepted as URIs."""
    doc = make_document("", uri="C:\\work\\aura\\foo\\foo.cmp")
    assert doc.file_name == "foo.cmp"
    assert doc.path.parts[-3:] == ("aura", "foo", "foo.cmp")


def test_offset_at_and_full_range() -> None:
    """Offsets account for each terminator; the full range ends at the last line."""
    doc = make_document("ab\r\ncd\nef")
    assert doc.offset_at(Position(1, 1)) == 5
    assert doc.offset_at(Position(99, 0)) == len(doc.text)
    full = doc.full_range()
    assert full.start == Position(0, 0)
    assert full.end == Position(2, 2)
    assert doc.offset_at(full.end) == len(doc.text)


def test_apply_edits_insert_and_replace() -> None:
    """Inserts and replacements are applied against the original offsets."""
    doc = make_document("hello\nworld\n")
    text = apply_edits(
        doc,
        [
            TextEdit.replace(Range(Position(1, 0), Position(1, 5)), "there"),
            TextEdit.insert(Position(0, 0), "// top\n"),
        ],
    )
    assert text == "// top\nhello\nthere\n"


def test_apply_edits_rejects_overlap() -> None:
    """Overlapping edits are a programming error."""
    doc = make_document("abcdef")
    with pytest.raises(ValueError):
        apply_edits(
            doc,
            [
                TextEdit.replace(Range(Position(0, 0), Position(0, 4)), "x"),
                TextEdit.replace(Range(Position(0, 2), Position(0, 6)), "y"),
            ],
        )


def test_from_path_preserves_newlines(tmp_path: Path) -> None:
    """Reading a file keeps CRLF terminators and builds a file URI."""
    target: Path = tmp_path / "Foo.cls"
    target.write_bytes(b"public class Foo {}\r\n")
    doc: Document = Document.from_path(target, "apex")
    assert doc.text == "public class Foo {}\r\n"
    assert doc.newline == "\r\n"
    assert doc.uri.startswith("file://")
    assert doc.is_dirty is True
