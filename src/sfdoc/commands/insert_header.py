# topmark:header:start
#
#   project      : SFDoc
#   file         : insert_header.py
#   file_relpath : src/sfdoc/commands/insert_header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The "insert header" command.

Unlike automatic headers, the command ignores the ``[enable]`` switches and the
component naming convention: any structurally supported document qualifies, as
long as it does not already start with a header.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sfdoc.config.logging import get_logger
from sfdoc.core.errors import HeaderAlreadyPresentError, UnsupportedFileTypeError
from sfdoc.filetypes.classifier import is_structurally_supported
from sfdoc.header.detector import has_header
from sfdoc.header.edits import build_insert_edit

if TYPE_CHECKING:
    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger
    from sfdoc.core.document import Document, TextEdit

logger: SfdocLogger = get_logger(__name__)


def insert_header_command(
    document: Document,
    config: Config,
    now: datetime | None = None,
) -> TextEdit:
    """Return the edit inserting a header at the top of ``document``.

    Args:
        document (Document): The document of the active editor.
        config (Config): Current configuration snapshot.
        now (datetime | None): Time stamped into the header; current time when None.

    Returns:
        TextEdit: The insertion at ``(0, 0)``.

    Raises:
        UnsupportedFileTypeError: If the document's language cannot carry a header.
        HeaderAlreadyPresentError: If the first line already opens a header.
    """
    if not is_structurally_supported(document.language_id):
        logger.debug("Refusing to insert header: unsupported language '%s'", document.language_id)
        raise UnsupportedFileTypeError(document.language_id)

    if has_header(document):
        logger.debug("Refusing to insert header: %s already has one", document.uri)
        raise HeaderAlreadyPresentError()

    return build_insert_edit(document, config, now or datetime.now())
