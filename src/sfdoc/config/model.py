# topmark:header:start
#
#   project      : SFDoc
#   file         : model.py
#   file_relpath : src/sfdoc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc configuration model: immutable `Config` and mutable `MutableConfig`.

`Config` is the read-only configuration bundle handed to the classifier and the
edit engine. It is produced by `MutableConfig.freeze` after layering:

1. built-in defaults (`load_defaults_dict`),
2. user config (``$XDG_CONFIG_HOME/sfdoc/sfdoc.toml`` or ``~/.sfdoc.toml``),
3. project configs discovered upward from an anchor (root-most first),
4. explicit ``--config`` files,
5. CLI/API overrides (`MutableConfig.apply_args`).

Hosts must ask for a fresh snapshot on every save; nothing here is cached.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sfdoc.config.io import (
    check_unknown_keys,
    extract_pyproject_section,
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from sfdoc.config.keys import ArgKey, Toml
from sfdoc.config.logging import get_logger
from sfdoc.constants import DEFAULT_DATETIME_FORMAT, PYPROJECT_TOML_NAME, SFDOC_TOML_NAME
from sfdoc.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sfdoc.config.io import TomlTable
    from sfdoc.config.logging import SfdocLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: SfdocLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration bundle.

    Attributes:
        enable_apex (bool | None): Automatic headers for Apex; None means unset (disabled).
        enable_visualforce (bool | None): Automatic headers for Visualforce; None means
            unset (disabled).
        enable_lightning_markup (bool): Automatic headers for Lightning component markup.
        enable_lightning_javascript (bool): Automatic headers for Lightning component
            JavaScript.
        username (str | None): Author name written into headers; None defers to the
            environment (see `sfdoc.header.fields.get_configured_username`).
        datetime_format (str): ``strftime`` format for header timestamps.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    enable_apex: bool | None = None
    enable_visualforce: bool | None = None
    enable_lightning_markup: bool = True
    enable_lightning_javascript: bool = False
    username: str | None = None
    datetime_format: str = DEFAULT_DATETIME_FORMAT
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def is_enabled(self, enable_key: str) -> bool:
        """Return the effective value of an ``[enable]`` switch.

        Args:
            enable_key (str): One of the ``Toml.KEY_ENABLE_*`` keys.

        Returns:
            bool: True when the switch is set to true; unset counts as false.

        Raises:
            KeyError: If ``enable_key`` is not a known switch.
        """
        values: dict[str, bool | None] = {
            Toml.KEY_ENABLE_APEX: self.enable_apex,
            Toml.KEY_ENABLE_VISUALFORCE: self.enable_visualforce,
            Toml.KEY_ENABLE_LIGHTNING_MARKUP: self.enable_lightning_markup,
            Toml.KEY_ENABLE_LIGHTNING_JAVASCRIPT: self.enable_lightning_javascript,
        }
        return bool(values[enable_key])

    def to_toml_dict(self) -> TomlTable:
        """Return this snapshot as a TOML-compatible dict (unset values are None)."""
        return {
            Toml.SECTION_ENABLE: {
                Toml.KEY_ENABLE_APEX: self.enable_apex,
                Toml.KEY_ENABLE_VISUALFORCE: self.enable_visualforce,
                Toml.KEY_ENABLE_LIGHTNING_MARKUP: self.enable_lightning_markup,
                Toml.KEY_ENABLE_LIGHTNING_JAVASCRIPT: self.enable_lightning_javascript,
            },
            Toml.SECTION_HEADER: {
                Toml.KEY_USERNAME: self.username,
                Toml.KEY_DATETIME_FORMAT: self.datetime_format,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot (thaw, edit, freeze again)."""
        return MutableConfig(
            enable_apex=self.enable_apex,
            enable_visualforce=self.enable_visualforce,
            enable_lightning_markup=self.enable_lightning_markup,
            enable_lightning_javascript=self.enable_lightning_javascript,
            username=self.username,
            datetime_format=self.datetime_format,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------

# Fields merged with "last non-None wins" semantics.
_LAYERED_FIELDS: tuple[str, ...] = (
    "enable_apex",
    "enable_visualforce",
    "enable_lightning_markup",
    "enable_lightning_javascript",
    "username",
    "datetime_format",
)


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Every layered value is tri-state: None means "inherit from the layer below".
    """

    enable_apex: bool | None = None
    enable_visualforce: bool | None = None
    enable_lightning_markup: bool | None = None
    enable_lightning_javascript: bool | None = None
    username: str | None = None
    datetime_format: str | None = None

    # Discovery only: stop upward traversal after this config's directory.
    root: bool = False

    config_files: list[Path | str] = field(default_factory=list)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset defaults."""
        defaults: Config = Config()
        return Config(
            enable_apex=self.enable_apex,
            enable_visualforce=self.enable_visualforce,
            enable_lightning_markup=(
                defaults.enable_lightning_markup
                if self.enable_lightning_markup is None
                else self.enable_lightning_markup
            ),
            enable_lightning_javascript=(
                defaults.enable_lightning_javascript
                if self.enable_lightning_javascript is None
                else self.enable_lightning_javascript
            ),
            username=self.username or None,
            datetime_format=self.datetime_format or defaults.datetime_format,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed SFDoc TOML table.

        Wrongly typed values and unknown keys are recorded as warnings and ignored.

        Args:
            data (TomlTable): Top-level SFDoc table (``sfdoc.toml`` or ``[tool.sfdoc]``).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The resulting builder.
        """
        draft: MutableConfig = cls()
        diags: DiagnosticLog = draft.diagnostics
        if config_file is not None:
            draft.config_files = [config_file]

        check_unknown_keys(data, diags)

        enable_tbl: TomlTable = get_table_value(data, Toml.SECTION_ENABLE, diags)
        logger.trace("TOML [enable]: %s", enable_tbl)
        header_tbl: TomlTable = get_table_value(data, Toml.SECTION_HEADER, diags)
        logger.trace("TOML [header]: %s", header_tbl)

        where: str = Toml.SECTION_ENABLE
        draft.enable_apex = get_bool_value_or_none(
            enable_tbl, Toml.KEY_ENABLE_APEX, diags, where=where
        )
        draft.enable_visualforce = get_bool_value_or_none(
            enable_tbl, Toml.KEY_ENABLE_VISUALFORCE, diags, where=where
        )
        draft.enable_lightning_markup = get_bool_value_or_none(
            enable_tbl, Toml.KEY_ENABLE_LIGHTNING_MARKUP, diags, where=where
        )
        draft.enable_lightning_javascript = get_bool_value_or_none(
            enable_tbl, Toml.KEY_ENABLE_LIGHTNING_JAVASCRIPT, diags, where=where
        )

        where = Toml.SECTION_HEADER
        draft.username = get_string_value_or_none(header_tbl, Toml.KEY_USERNAME, diags, where=where)
        draft.datetime_format = get_string_value_or_none(
            header_tbl, Toml.KEY_DATETIME_FORMAT, diags, where=where
        )

        draft.root = bool(
            get_bool_value_or_none(data, Toml.KEY_ROOT, diags, where="<top-level>") or False
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a builder from ``sfdoc.toml`` or the ``[tool.sfdoc]`` table of ``pyproject.toml``.

        Args:
            path (Path): The TOML file.

        Returns:
            MutableConfig | None: The builder, or None if ``pyproject.toml`` has no
                ``[tool.sfdoc]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            section: TomlTable | None = extract_pyproject_section(data)
            if section is None:
                logger.debug("No [tool.sfdoc] section in %s", path)
                return None
            data = section
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first so that a later merge lets the nearest
        directory win. Within one directory ``pyproject.toml`` precedes
        ``sfdoc.toml``. A config with ``root = true`` stops the walk after its
        directory.

        Args:
            start (Path): Anchor file or directory.

        Returns:
            list[Path]: Discovered files in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            stop_here: bool = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, SFDOC_TOML_NAME):
                candidate: Path = cur / name
                if not candidate.is_file():
                    continue
                draft: MutableConfig | None = cls.from_toml_file(candidate)
                if draft is None:
                    continue
                logger.debug("Discovered config file: %s", candidate)
                dir_entries.append(candidate)
                stop_here = stop_here or draft.root
            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            if parent == cur:
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return the user-scoped config file, if one exists."""
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        for candidate in (base / "sfdoc" / SFDOC_TOML_NAME, Path.home() / f".{SFDOC_TOML_NAME}"):
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Layer defaults, user, project and explicit config files.

        Args:
            anchor (Path | None): Discovery start (file or directory); CWD when None.
            extra_config_files (Iterable[Path] | None): Explicit files merged last, in order.
            no_config (bool): Skip user and project discovery.

        Returns:
            MutableConfig: The merged builder.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                user_cfg: MutableConfig | None = cls.from_toml_file(user_cfg_path)
                if user_cfg is not None:
                    draft = draft.merge_with(user_cfg)

            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                project_cfg: MutableConfig | None = cls.from_toml_file(cfg_path)
                if project_cfg is not None:
                    draft = draft.merge_with(project_cfg)

        for extra in extra_config_files or ():
            extra_cfg: MutableConfig | None = cls.from_toml_file(Path(extra))
            if extra_cfg is None:
                draft.diagnostics.add_warning(f"No [tool.sfdoc] section in {extra}")
                continue
            draft = draft.merge_with(extra_cfg)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where non-None values of ``other`` win.

        Args:
            other (MutableConfig): The overriding layer.

        Returns:
            MutableConfig: The merged builder.
        """
        overrides: dict[str, Any] = {
            name: getattr(other, name)
            for name in _LAYERED_FIELDS
            if getattr(other, name) is not None
        }
        diagnostics = DiagnosticLog(items=list(self.diagnostics))
        diagnostics.extend(other.diagnostics)
        return replace(
            self,
            **overrides,
            root=other.root,
            config_files=[*self.config_files, *other.config_files],
            diagnostics=diagnostics,
        )

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI/API overrides in place; None values are ignored.

        Args:
            args (ArgsLike): Mapping using `ArgKey` names.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        known: set[str] = {f.name for f in fields(self)}
        for key in (
            ArgKey.ENABLE_APEX,
            ArgKey.ENABLE_VISUALFORCE,
            ArgKey.ENABLE_LIGHTNING_MARKUP,
            ArgKey.ENABLE_LIGHTNING_JAVASCRIPT,
            ArgKey.USERNAME,
            ArgKey.DATETIME_FORMAT,
        ):
            value: Any = args.get(key)
            if value is not None and key in known:
                logger.debug("Override from args: %s=%r", key, value)
                setattr(self, key, value)
        return self
