# topmark:header:start
#
#   project      : SFDoc
#   file         : test_detector.py
#   file_relpath : tests/header/test_detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for first-line header detection."""

from __future__ import annotations

from sfdoc.header.detector import has_header, is_header_line
from tests.conftest import make_document, parametrize


@parametrize(
    "line",
    [
        "/**",
        "/*",
        "   /* indented",
        "\t/** tab",
        "<!--",
        "  <!-- comment -->",
        "\ufeff/**",
    ],
)
def test_header_lines(line: str) -> None:
    """Block and XML comment openers are recognized, after optional whitespace."""
    assert is_header_line(line)


@parametrize(
    "line",
    [
        "",
        "// line comment",
        "public class Foo {",
        "<aura:component>",
        "x /* late comment */",
        "*/",
        "<!-",
    ],
)
def test_non_header_lines(line: str) -> None:
    """Anything else is not a header opener."""
    assert not is_header_line(line)


def test_only_first_line_is_inspected() -> None:
    """A header further down does not count."""
    doc = make_document("public class Foo {}\n/**\n * doc\n */\n")
    assert not has_header(doc)


def test_empty_document_has_no_header() -> None:
    """An empty document has a single empty line."""
    assert not has_header(make_document(""))


def test_first_line_with_crlf() -> None:
    """Terminators are not part of the inspected line."""
    assert has_header(make_document("/**\r\n * x\r\n**/\r\n"))
