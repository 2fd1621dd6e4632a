# topmark:header:start
#
#   project      : SFDoc
#   file         : io.py
#   file_relpath : src/sfdoc/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for SFDoc configuration.

Parsing and rendering use `tomlkit`; parsed documents are unwrapped into plain
``dict`` structures (`TomlTable`). The checked getters record a warning in a
`DiagnosticLog` when a value has the wrong type, and return None so that the
caller keeps its inherited value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from sfdoc.config.keys import Toml
from sfdoc.config.logging import get_logger
from sfdoc.constants import DEFAULT_DATETIME_FORMAT, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from sfdoc.config.logging import SfdocLogger
    from sfdoc.core.diagnostics import DiagnosticLog

TomlTable = dict[str, Any]

logger: SfdocLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return SFDoc's runtime defaults as a new dict.

    ``apex`` and ``visualforce`` are deliberately absent: they stay unset (and
    therefore disabled) until a config enables them.
    """
    return {
        Toml.SECTION_ENABLE: {
            Toml.KEY_ENABLE_LIGHTNING_MARKUP: True,
            Toml.KEY_ENABLE_LIGHTNING_JAVASCRIPT: False,
        },
        Toml.SECTION_HEADER: {
            Toml.KEY_DATETIME_FORMAT: DEFAULT_DATETIME_FORMAT,
        },
    }


def read_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file, propagating failures.

    Args:
        path (Path): Path to ``sfdoc.toml`` or ``pyproject.toml``.

    Returns:
        TomlTable: The parsed content.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        TomlkitParseError: If the file is not valid TOML.
    """
    data_any: Any = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to ``sfdoc.toml`` or ``pyproject.toml``.

    Returns:
        TomlTable: The parsed content; empty on any read or parse failure (logged).
    """
    try:
        return read_toml_dict(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except (TomlkitParseError, UnicodeDecodeError) as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_pyproject_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.sfdoc]`` table of a parsed ``pyproject.toml``, if any."""
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def get_table_value(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> TomlTable:
    """Return the sub-table ``key``; an empty dict when missing or not a table."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    diagnostics.add_warning(f"Expected [{key}] to be a table, got {type(value).__name__}")
    logger.warning("Expected [%s] to be a table, got %r", key, value)
    return {}


def get_bool_value_or_none(
    table: TomlTable,
    key: str,
    diagnostics: DiagnosticLog,
    *,
    where: str,
) -> bool | None:
    """Return a boolean, or None when absent or not a boolean (warning recorded)."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    diagnostics.add_warning(f"Ignoring {where}.{key}: expected a boolean, got {value!r}")
    logger.warning("Ignoring %s.%s: expected bool, got %r", where, key, value)
    return None


def get_string_value_or_none(
    table: TomlTable,
    key: str,
    diagnostics: DiagnosticLog,
    *,
    where: str,
) -> str | None:
    """Return a string, or None when absent or not a string (warning recorded)."""
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    diagnostics.add_warning(f"Ignoring {where}.{key}: expected a string, got {value!r}")
    logger.warning("Ignoring %s.%s: expected str, got %r", where, key, value)
    return None


def check_unknown_keys(table: TomlTable, diagnostics: DiagnosticLog) -> None:
    """Record a warning for every unknown top-level or section key."""
    for key, value in table.items():
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            diagnostics.add_warning(f"Unknown configuration key: {key}")
            continue
        allowed: frozenset[str] | None = Toml.ALLOWED_SECTION_KEYS.get(key)
        if allowed is None or not isinstance(value, dict):
            continue
        for sub_key in cast("TomlTable", value):
            if sub_key not in allowed:
                diagnostics.add_warning(f"Unknown configuration key: {key}.{sub_key}")


def _strip_none(value: object) -> object:
    # TOML has no null; omit None entries.
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none(v) for k, v in m.items() if v is not None}
    return value


def to_toml(data: TomlTable, *, for_pyproject: bool = False) -> str:
    """Render ``data`` as TOML text.

    Args:
        data (TomlTable): Table to render; None values are omitted.
        for_pyproject (bool): Nest the output under ``[tool.sfdoc]``.

    Returns:
        str: The TOML document.
    """
    payload: object = _strip_none(data)
    if for_pyproject:
        payload = {"tool": {PYPROJECT_TOOL_SECTION: payload}}
    return cast("str", cast("Any", tomlkit).dumps(payload))
