# topmark:header:start
#
#   project      : SFDoc
#   file         : keys.py
#   file_relpath : src/sfdoc/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SFDoc configuration.

These strings are the external configuration schema as it appears in
``sfdoc.toml`` and in ``[tool.sfdoc]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SFDoc configuration."""

    # Discovery: stop walking upward after the directory holding this config.
    KEY_ROOT: Final[str] = "root"

    # [enable]: per-language-class switches for automatic headers
    SECTION_ENABLE: Final[str] = "enable"

    KEY_ENABLE_APEX: Final[str] = "apex"
    KEY_ENABLE_VISUALFORCE: Final[str] = "visualforce"
    KEY_ENABLE_LIGHTNING_MARKUP: Final[str] = "lightning_markup"
    KEY_ENABLE_LIGHTNING_JAVASCRIPT: Final[str] = "lightning_javascript"

    # [header]: values rendered into headers
    SECTION_HEADER: Final[str] = "header"

    KEY_USERNAME: Final[str] = "username"
    KEY_DATETIME_FORMAT: Final[str] = "datetime_format"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_ROOT, SECTION_ENABLE, SECTION_HEADER}
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_ENABLE: frozenset(
            {
                KEY_ENABLE_APEX,
                KEY_ENABLE_VISUALFORCE,
                KEY_ENABLE_LIGHTNING_MARKUP,
                KEY_ENABLE_LIGHTNING_JAVASCRIPT,
            }
        ),
        SECTION_HEADER: frozenset({KEY_USERNAME, KEY_DATETIME_FORMAT}),
    }


class ArgKey:
    """Keys accepted by `MutableConfig.apply_args` (CLI and API overrides)."""

    USERNAME: Final[str] = "username"
    DATETIME_FORMAT: Final[str] = "datetime_format"
    ENABLE_APEX: Final[str] = "enable_apex"
    ENABLE_VISUALFORCE: Final[str] = "enable_visualforce"
    ENABLE_LIGHTNING_MARKUP: Final[str] = "enable_lightning_markup"
    ENABLE_LIGHTNING_JAVASCRIPT: Final[str] = "enable_lightning_javascript"
