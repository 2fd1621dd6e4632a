# topmark:header:start
#
#   project      : SFDoc
#   file         : instances.py
#   file_relpath : src/sfdoc/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in language types and their registry.

The registry is the allow-list of structurally supported language identifiers.
It is built on first access and cached; callers must treat it as read-only.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Final

from sfdoc.config.keys import Toml
from sfdoc.config.logging import get_logger
from sfdoc.filetypes.base import CommentStyle, ComponentLayout, LanguageType

if TYPE_CHECKING:
    from pathlib import PurePath

    from sfdoc.config.logging import SfdocLogger

logger: SfdocLogger = get_logger(__name__)

LIGHTNING_MARKUP_LAYOUT: Final[ComponentLayout] = ComponentLayout()
LIGHTNING_SCRIPT_LAYOUT: Final[ComponentLayout] = ComponentLayout(
    strip_suffixes=("Controller", "Helper"),
)

LANGUAGE_TYPES: Final[tuple[LanguageType, ...]] = (
    LanguageType(
        language_id="apex",
        description="Apex classes and triggers",
        comment_style=CommentStyle.BLOCK,
        enable_key=Toml.KEY_ENABLE_APEX,
        extensions=(".cls", ".trigger"),
    ),
    LanguageType(
        language_id="visualforce",
        description="Visualforce pages and components",
        comment_style=CommentStyle.XML,
        enable_key=Toml.KEY_ENABLE_VISUALFORCE,
        extensions=(".page", ".component"),
    ),
    LanguageType(
        language_id="html",
        description="Lightning component markup",
        comment_style=CommentStyle.XML,
        enable_key=Toml.KEY_ENABLE_LIGHTNING_MARKUP,
        extensions=(".html", ".htm", ".cmp"),
        component_layout=LIGHTNING_MARKUP_LAYOUT,
    ),
    LanguageType(
        language_id="javascript",
        description="Lightning component JavaScript",
        comment_style=CommentStyle.BLOCK,
        enable_key=Toml.KEY_ENABLE_LIGHTNING_JAVASCRIPT,
        extensions=(".js",),
        component_layout=LIGHTNING_SCRIPT_LAYOUT,
    ),
)


@lru_cache(maxsize=1)
def get_language_type_registry() -> dict[str, LanguageType]:
    """Return the mapping of language identifier to `LanguageType`."""
    registry: dict[str, LanguageType] = {lt.language_id: lt for lt in LANGUAGE_TYPES}
    logger.debug("Registered %d language types: %s", len(registry), ", ".join(sorted(registry)))
    return registry


def guess_language_id(path: PurePath) -> str | None:
    """Infer a language identifier from a file extension.

    Editors provide the identifier themselves; this is for file-based hosts.

    Args:
        path (PurePath): File path.

    Returns:
        str | None: The identifier, or None for unknown extensions.
    """
    suffix: str = path.suffix.lower()
    for language_type in LANGUAGE_TYPES:
        if suffix in language_type.extensions:
            return language_type.language_id
    logger.debug("No language type for extension '%s' (%s)", suffix, path)
    return None
