# topmark:header:start
#
#   project      : SFDoc
#   file         : classifier.py
#   file_relpath : src/sfdoc/filetypes/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Eligibility decisions for header management.

Two tiers:

* `is_structurally_supported`: the language has a header template at all. This
  gates the manual insert command.
* `is_enabled_for_auto_header`: the language's ``[enable]`` switch is on and, for
  Lightning markup and script, the file is a member of a component bundle
  (`is_component_file`). This gates automatic headers on save.

Neither function raises; ineligible input yields False.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sfdoc.config.logging import get_logger
from sfdoc.filetypes.instances import get_language_type_registry

if TYPE_CHECKING:
    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger
    from sfdoc.core.document import Document
    from sfdoc.filetypes.base import LanguageType

logger: SfdocLogger = get_logger(__name__)


def is_structurally_supported(language_id: str) -> bool:
    """Return True if SFDoc can put a header on documents of ``language_id``."""
    return language_id in get_language_type_registry()


def is_component_file(document: Document) -> bool:
    """Return True if ``document`` follows the Lightning component bundle convention.

    Script files have a trailing ``Controller`` or ``Helper`` removed from their
    base name before it is compared with the folder name, so
    ``aura/foo/fooController.js`` is a member of bundle ``foo``. Languages without
    a bundle layout (Apex, Visualforce, unknown) never match.

    Args:
        document (Document): The document to inspect.

    Returns:
        bool: Whether the document path matches its language's bundle layout.
    """
    language_type: LanguageType | None = get_language_type_registry().get(document.language_id)
    if language_type is None or language_type.component_layout is None:
        return False
    return language_type.component_layout.matches(document.path)


def is_enabled_for_auto_header(document: Document, config: Config) -> bool:
    """Return True if ``document`` should get a header automatically on save.

    Args:
        document (Document): The document being saved.
        config (Config): Current configuration snapshot.

    Returns:
        bool: Whether automatic header management applies.
    """
    language_type: LanguageType | None = get_language_type_registry().get(document.language_id)
    if language_type is None:
        logger.trace("Language '%s' is not supported", document.language_id)
        return False

    if not config.is_enabled(language_type.enable_key):
        logger.debug(
            "Automatic headers disabled for '%s' (enable.%s)",
            language_type.language_id,
            language_type.enable_key,
        )
        return False

    if language_type.component_layout is not None and not is_component_file(document):
        logger.debug("%s is not a Lightning component file", document.path)
        return False

    logger.debug("Automatic headers enabled for %s", document.path)
    return True
