# topmark:header:start
#
#   project      : SFDoc
#   file         : io.py
#   file_relpath : src/sfdoc/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-system access for the CLI host.

Files are read and written as UTF-8 with newlines preserved byte for byte.
OS-level failures are translated into `SfdocError` subclasses.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from sfdoc.cli.errors import (
    SfdocConfigError,
    SfdocEncodingError,
    SfdocFileNotFoundError,
    SfdocIOError,
    SfdocPermissionDeniedError,
)
from sfdoc.config import MutableConfig
from sfdoc.config.io import read_toml_dict
from sfdoc.config.logging import get_logger
from sfdoc.core.document import Document
from sfdoc.filetypes.instances import guess_language_id

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from sfdoc.cli.console import ConsoleLike
    from sfdoc.config import Config
    from sfdoc.config.logging import SfdocLogger

logger: SfdocLogger = get_logger(__name__)

# Language identifier reported for files with an unknown extension.
PLAINTEXT: str = "plaintext"


def resolve_language_id(path: Path, language_id: str | None) -> str:
    """Return ``language_id`` or the identifier inferred from ``path``."""
    if language_id:
        return language_id
    return guess_language_id(path) or PLAINTEXT


def read_document(path: Path, language_id: str | None, *, is_dirty: bool = True) -> Document:
    """Read ``path`` into a `Document`.

    Args:
        path (Path): File to read.
        language_id (str | None): Explicit language; inferred from the extension when None.
        is_dirty (bool): Dirty flag of the document (a CLI save always writes).

    Returns:
        Document: The snapshot.

    Raises:
        SfdocFileNotFoundError: If ``path`` does not exist.
        SfdocPermissionDeniedError: If ``path`` cannot be read.
        SfdocEncodingError: If ``path`` is not valid UTF-8.
        SfdocIOError: On other read errors.
    """
    resolved_language: str = resolve_language_id(path, language_id)
    try:
        return Document.from_path(path, resolved_language, is_dirty=is_dirty)
    except FileNotFoundError as exc:
        raise SfdocFileNotFoundError(f"File not found: {path}") from exc
    except PermissionError as exc:
        raise SfdocPermissionDeniedError(f"Permission denied: {path}") from exc
    except UnicodeDecodeError as exc:
        raise SfdocEncodingError(f"Cannot decode {path} as UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise SfdocIOError(f"Cannot read {path}: {exc}") from exc


def write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` in place, without newline translation.

    Raises:
        SfdocPermissionDeniedError: If ``path`` cannot be written.
        SfdocIOError: On other write errors.
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except PermissionError as exc:
        raise SfdocPermissionDeniedError(f"Permission denied: {path}") from exc
    except OSError as exc:
        raise SfdocIOError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(text), path)


def check_config_files(config_files: Iterable[Path]) -> None:
    """Make sure every explicit ``--config`` file is readable TOML.

    Discovered files that fail to parse are logged and skipped; a file named on
    the command line is an error instead.

    Raises:
        SfdocConfigError: If a file cannot be read or parsed.
    """
    for config_file in config_files:
        try:
            read_toml_dict(config_file)
        except (OSError, UnicodeDecodeError) as exc:
            raise SfdocConfigError(f"Cannot read config file {config_file}: {exc}") from exc
        except TomlkitParseError as exc:
            raise SfdocConfigError(f"Invalid TOML in {config_file}: {exc}") from exc


def load_config(
    ctx: click.Context,
    *,
    anchor: Path | None,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Load a fresh configuration snapshot for a command.

    Layers follow `MutableConfig.load_merged`, using ``--config``/``--no-config``
    from the group options, then ``overrides``. Config diagnostics are printed as
    warnings unless output is quiet.

    Args:
        ctx (click.Context): Current Click context.
        anchor (Path | None): Discovery anchor (usually the file being processed).
        overrides (Mapping[str, Any] | None): `ArgKey` overrides.

    Returns:
        Config: The frozen configuration.

    Raises:
        SfdocConfigError: If an explicit ``--config`` file is not readable TOML.
    """
    obj: dict[str, Any] = ctx.ensure_object(dict)
    config_files: list[Path] = [Path(p) for p in obj.get("config_files", ())]
    check_config_files(config_files)
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=config_files,
        no_config=bool(obj.get("no_config", False)),
    )
    if overrides:
        draft.apply_args(overrides)
    config: Config = draft.freeze()

    console: ConsoleLike | None = obj.get("console")
    if console is not None and obj.get("verbosity_level", 0) >= 0:
        for diag in config.diagnostics:
            console.warn(diag.render(color=bool(obj.get("color_enabled", False))))
    return config
