# topmark:header:start
#
#   project      : SFDoc
#   file         : base.py
#   file_relpath : src/sfdoc/templates/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for header templates.

A template renders the fixed-shape SFDoc header for one comment syntax. Every
header has the same fields in the same order and occupies exactly
`HEADER_LENGTH_LINES` lines:

    <block prefix>
    <p>@File Name          : AccountService.cls
    <p>@Description        :
    <p>@Author             : jdoe
    <p>@Group              :
    <p>@Last Modified By   : jdoe
    <p>@Last Modified On   : 01-31-2025, 09:15:00 AM
    <p>@Modification Log   :
    <rule>
    <p>Ver    Date                     Author                Modification
    <rule>
    <p>1.0    01-31-2025, 09:15:00 AM  jdoe                  Initial Version
    <block suffix>

The two "Last Modified" lines are written as ``<marker>: <value>`` with no
trailing whitespace, so rewriting them with the same values is a no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final

from sfdoc.config.logging import get_logger

if TYPE_CHECKING:
    from sfdoc.config.logging import SfdocLogger
    from sfdoc.filetypes.base import CommentStyle, LanguageType

logger: SfdocLogger = get_logger(__name__)

LABEL_WIDTH: Final[int] = 19
RULE_WIDTH: Final[int] = 78

FIELD_FILE_NAME: Final[str] = "@File Name"
FIELD_DESCRIPTION: Final[str] = "@Description"
FIELD_AUTHOR: Final[str] = "@Author"
FIELD_GROUP: Final[str] = "@Group"
FIELD_LAST_MODIFIED_BY: Final[str] = "@Last Modified By"
FIELD_LAST_MODIFIED_ON: Final[str] = "@Last Modified On"
FIELD_MODIFICATION_LOG: Final[str] = "@Modification Log"


class HeaderTemplate:
    """Renders the SFDoc header for one comment syntax.

    Attributes:
        block_prefix (str): Opening line of the comment block.
        block_suffix (str): Closing line of the comment block.
        line_prefix (str): Prefix of every inner line.
        rule_prefix (str): Prefix of the ``====`` separator lines.
        comment_style (CommentStyle): Comment syntax; must match the language types
            the template is registered for.
        language_type (LanguageType | None): Set at registration time.
    """

    comment_style: ClassVar[CommentStyle]
    language_type: LanguageType | None

    def __init__(
        self,
        *,
        block_prefix: str,
        block_suffix: str,
        line_prefix: str,
        rule_prefix: str,
    ) -> None:
        self.block_prefix = block_prefix
        self.block_suffix = block_suffix
        self.line_prefix = line_prefix
        self.rule_prefix = rule_prefix
        self.language_type = None

    def render_field(self, label: str, value: str = "") -> str:
        """Render one ``@Label : value`` line."""
        line: str = f"{self.line_prefix}{label:<{LABEL_WIDTH}}:"
        return f"{line} {value}" if value else line

    def render_rule(self) -> str:
        """Render a separator line of the modification log."""
        return f"{self.rule_prefix}{'=' * RULE_WIDTH}"

    def render_log_row(self, version: str, date: str, author: str, modification: str) -> str:
        """Render one modification-log row with fixed columns."""
        return f"{self.line_prefix}{version:<6} {date:<24} {author:<21} {modification}".rstrip()

    def render_lines(self, file_name: str, author: str, timestamp: str) -> list[str]:
        """Return the header lines without terminators.

        Args:
            file_name (str): Base name of the file.
            author (str): Author name.
            timestamp (str): Formatted timestamp.

        Returns:
            list[str]: Exactly `HEADER_LENGTH_LINES` lines.
        """
        lines: list[str] = [
            self.block_prefix,
            self.render_field(FIELD_FILE_NAME, file_name),
            self.render_field(FIELD_DESCRIPTION),
            self.render_field(FIELD_AUTHOR, author),
            self.render_field(FIELD_GROUP),
            self.render_field(FIELD_LAST_MODIFIED_BY, author),
            self.render_field(FIELD_LAST_MODIFIED_ON, timestamp),
            self.render_field(FIELD_MODIFICATION_LOG),
            self.render_rule(),
            self.render_log_row("Ver", "Date", "Author", "Modification"),
            self.render_rule(),
            self.render_log_row("1.0", timestamp, author, "Initial Version"),
            self.block_suffix,
        ]
        return lines

    def render(self, file_name: str, author: str, timestamp: str, newline: str = "\n") -> str:
        """Return the header text, terminated by ``newline``.

        Args:
            file_name (str): Base name of the file.
            author (str): Author name.
            timestamp (str): Formatted timestamp.
            newline (str): Line terminator to use.

        Returns:
            str: The header, ready to be inserted at the top of the document.
        """
        lines: list[str] = self.render_lines(file_name, author.strip(), timestamp.strip())
        logger.trace("Rendered %s header for %s", type(self).__name__, file_name)
        return newline.join(lines) + newline
