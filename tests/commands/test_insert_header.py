# topmark:header:start
#
#   project      : SFDoc
#   file         : test_insert_header.py
#   file_relpath : tests/commands/test_insert_header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the manual "insert header" command."""

from __future__ import annotations

import pytest

from sfdoc.commands.insert_header import insert_header_command
from sfdoc.constants import MSG_HEADER_ALREADY_PRESENT, MSG_UNSUPPORTED_FILE_TYPE
from sfdoc.core.document import Position, apply_edits
from sfdoc.core.errors import (
    HeaderAlreadyPresentError,
    HeaderCommandError,
    UnsupportedFileTypeError,
)
from tests.conftest import FIXED_NOW, make_config, make_document, parametrize


@parametrize(
    ("language_id", "uri"),
    [
        ("apex", "file:///anywhere/Foo.cls"),
        ("visualforce", "file:///anywhere/Page.page"),
        ("html", "file:///not/a/bundle.html"),
        ("javascript", "file:///scripts/app.js"),
    ],
)
def test_insert_ignores_enable_switches_and_layout(language_id: str, uri: str) -> None:
    """Any supported language qualifies, whatever the configuration says."""
    doc = make_document("content\n", language_id=language_id, uri=uri)
    edit = insert_header_command(doc, make_config(), FIXED_NOW)
    assert edit.range.start == Position(0, 0)
    assert apply_edits(doc, [edit]).endswith("\ncontent\n")


def test_unsupported_language_is_rejected() -> None:
    """Plain text cannot carry a header."""
    doc = make_document("notes\n", language_id="plaintext", uri="file:///p/notes.txt")
    with pytest.raises(UnsupportedFileTypeError) as excinfo:
        insert_header_command(doc, make_config(), FIXED_NOW)
    assert excinfo.value.message == MSG_UNSUPPORTED_FILE_TYPE
    assert excinfo.value.language_id == "plaintext"


def test_existing_header_is_rejected() -> None:
    """A second header is never stacked on top of the first."""
    doc = make_document("/*\n * x\n */\nclass A {}\n")
    with pytest.raises(HeaderAlreadyPresentError) as excinfo:
        insert_header_command(doc, make_config(), FIXED_NOW)
    assert excinfo.value.message == MSG_HEADER_ALREADY_PRESENT
    assert isinstance(excinfo.value, HeaderCommandError)


def test_support_is_checked_before_header_presence() -> None:
    """An unsupported document reports unsupported even if it starts with a comment."""
    doc = make_document("/* hi */\n", language_id="plaintext")
    with pytest.raises(UnsupportedFileTypeError):
        insert_header_command(doc, make_config(), FIXED_NOW)
