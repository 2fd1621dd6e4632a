# topmark:header:start
#
#   project      : SFDoc
#   file         : detector.py
#   file_relpath : src/sfdoc/header/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""First-line header detection.

A document "has a header" when its first line opens a block comment (``/*``) or
an XML comment (``<!--``), optionally after whitespace. The fields inside are not
validated: an unrelated comment on line one is indistinguishable from a header.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from sfdoc.core.document import Document

BLOCK_COMMENT_OPEN_RE: Final[re.Pattern[str]] = re.compile(r"^\s*/\*")
XML_COMMENT_OPEN_RE: Final[re.Pattern[str]] = re.compile(r"^\s*<!--")

BOM: Final[str] = "\ufeff"


def is_block_comment_line(line: str) -> bool:
    """Return True if ``line`` opens a C-style block comment."""
    return BLOCK_COMMENT_OPEN_RE.match(line) is not None


def is_xml_comment_line(line: str) -> bool:
    """Return True if ``line`` opens an XML comment."""
    return XML_COMMENT_OPEN_RE.match(line) is not None


def is_header_line(line: str) -> bool:
    """Return True if ``line`` looks like the first line of a header."""
    line = line.removeprefix(BOM)
    return is_block_comment_line(line) or is_xml_comment_line(line)


def has_header(document: Document) -> bool:
    """Return True if the document's first line opens a header-shaped comment."""
    return is_header_line(document.line_at(0))
