# topmark:header:start
#
#   project      : SFDoc
#   file         : edits.py
#   file_relpath : src/sfdoc/header/edits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Header edit engine.

Computes the edit applied to a document, in one of two modes:

* **insert**: the rendered header is inserted at ``(0, 0)`` (after a leading byte
  order mark, if any); existing content is shifted down untouched.
* **update**: the whole document range is replaced by the same text in which
  the values of the ``@Last Modified By:`` and ``@Last Modified On:`` lines
  are rewritten. Line count and every other line (terminators included) are
  preserved.

Field markers are matched per line, where ``\r\n``, ``\r`` or ``\n`` ends a line.
Leading whitespace and asterisks are allowed, and so is whitespace inside the
marker. A header whose fields are spelled differently is left unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from sfdoc.config.logging import get_logger
from sfdoc.core.document import Position, TextEdit
from sfdoc.header.detector import BOM, has_header
from sfdoc.header.fields import get_configured_username, get_header_formatted_datetime
from sfdoc.templates.registry import generate

if TYPE_CHECKING:
    from datetime import datetime

    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger
    from sfdoc.core.document import Document

logger: SfdocLogger = get_logger(__name__)

LAST_MODIFIED_BY_RE: Final[re.Pattern[str]] = re.compile(
    r"(?:^|(?<=\r))([ \t*]*@Last[ \t]*Modified[ \t]*By[ \t]*:)[^\r\n]*",
    re.MULTILINE,
)
LAST_MODIFIED_ON_RE: Final[re.Pattern[str]] = re.compile(
    r"(?:^|(?<=\r))([ \t*]*@Last[ \t]*Modified[ \t]*On[ \t]*:)[^\r\n]*",
    re.MULTILINE,
)


class HeaderAction(Enum):
    """Which kind of header edit a save performs."""

    INSERT = "insert"
    UPDATE = "update"


@dataclass(frozen=True)
class HeaderEdit:
    """Edits computed for one document, with the mode that produced them."""

    action: HeaderAction
    edits: tuple[TextEdit, ...]

    @property
    def header_inserted(self) -> bool:
        """Whether the edit inserts a new header (content shifts down)."""
        return self.action is HeaderAction.INSERT


def _rewrite_field(pattern: re.Pattern[str], text: str, value: str) -> str:
    # Callable replacement: values are literal, never regex templates.
    return pattern.sub(lambda m: f"{m.group(1)} {value}" if value else m.group(1), text)


def update_header_fields(text: str, author: str, timestamp: str) -> str:
    """Rewrite the "Last Modified" field values in ``text``.

    Args:
        text (str): Document text.
        author (str): New ``@Last Modified By`` value.
        timestamp (str): New ``@Last Modified On`` value.

    Returns:
        str: The updated text; identical to ``text`` when no marker matches.
    """
    updated: str = _rewrite_field(LAST_MODIFIED_BY_RE, text, author)
    return _rewrite_field(LAST_MODIFIED_ON_RE, updated, timestamp)


def get_file_header(document: Document, config: Config, now: datetime) -> str:
    """Render the header for ``document`` using its newline style.

    Raises:
        UnsupportedLanguageError: If the document's language has no template.
    """
    return generate(
        document.language_id,
        document.file_name,
        get_configured_username(config),
        get_header_formatted_datetime(config, now),
        document.newline,
    )


def build_insert_edit(document: Document, config: Config, now: datetime) -> TextEdit:
    """Return the edit inserting a fresh header at the top of ``document``.

    A leading byte order mark stays first: the header goes right after it.
    """
    start: Position = Position(0, len(BOM) if document.text.startswith(BOM) else 0)
    return TextEdit.insert(start, get_file_header(document, config, now))


def build_update_edit(document: Document, config: Config, now: datetime) -> TextEdit:
    """Return the whole-document edit refreshing the "Last Modified" fields."""
    updated: str = update_header_fields(
        document.text,
        get_configured_username(config),
        get_header_formatted_datetime(config, now),
    )
    if updated == document.text:
        logger.debug("No 'Last Modified' field rewritten in %s", document.uri)
    return TextEdit.replace(document.full_range(), updated)


def plan_header_edit(document: Document, config: Config, now: datetime) -> HeaderEdit:
    """Pick insert or update mode for ``document`` and compute its edit.

    Args:
        document (Document): Document about to be saved.
        config (Config): Current configuration snapshot.
        now (datetime): Time stamped into the header.

    Returns:
        HeaderEdit: Exactly one edit, in update mode when the first line already
            opens a header and in insert mode otherwise.
    """
    if has_header(document):
        logger.debug("Updating header of %s", document.uri)
        return HeaderEdit(HeaderAction.UPDATE, (build_update_edit(document, config, now),))
    logger.debug("Inserting header into %s", document.uri)
    return HeaderEdit(HeaderAction.INSERT, (build_insert_edit(document, config, now),))
