# topmark:header:start
#
#   project      : SFDoc
#   file         : base.py
#   file_relpath : src/sfdoc/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language type definitions.

A `LanguageType` describes one host language identifier SFDoc can put a header
on: which comment syntax the header uses, which ``[enable]`` switch governs
automatic headers, and, for Lightning markup and script, the component-bundle
naming convention (`ComponentLayout`) a file must follow to be eligible.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from sfdoc.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import PurePosixPath

    from sfdoc.config.logging import SfdocLogger

logger: SfdocLogger = get_logger(__name__)


class CommentStyle(Enum):
    """Comment syntax used by a language's header.

    Attributes:
        BLOCK: C-style block comment (``/** ... **/``).
        XML: XML/HTML comment (``<!-- ... -->``).
    """

    BLOCK = "block"
    XML = "xml"


@dataclass(frozen=True)
class ComponentLayout:
    """Naming convention of a Lightning component bundle.

    A file belongs to a bundle when it lives in ``<root>/<name>/`` with ``<root>``
    one of `root_folders`, its base name (text before the first dot, minus one
    of `strip_suffixes`) equals ``<name>`` exactly, and its extension (text after
    the first dot) is one of `extensions`.

    Attributes:
        extensions (frozenset[str]): Allowed extensions, without the dot.
        root_folders (frozenset[str]): Allowed names for the bundle's parent folder.
        strip_suffixes (tuple[str, ...]): Suffixes removed (case-insensitively) from the
            base name before comparing it with the folder name.
    """

    extensions: frozenset[str] = frozenset({"htm", "html", "cmp", "js"})
    root_folders: frozenset[str] = frozenset({"aura", "lwc"})
    strip_suffixes: tuple[str, ...] = ()
    _suffix_re: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.strip_suffixes:
            alternation: str = "|".join(re.escape(s) for s in self.strip_suffixes)
            # frozen: bypass __setattr__ for the derived regex
            object.__setattr__(self, "_suffix_re", re.compile(f"(?:{alternation})$", re.IGNORECASE))

    def base_name(self, file_name: str) -> str:
        """Return the name compared with the folder (suffixes stripped)."""
        stem: str = file_name.partition(".")[0]
        if self._suffix_re is None:
            return stem
        return self._suffix_re.sub("", stem, count=1)

    def matches(self, path: PurePosixPath) -> bool:
        """Return True if ``path`` follows this bundle layout.

        Args:
            path (PurePosixPath): Document path.

        Returns:
            bool: Whether the path is a bundle member; False when the path has no
                grandparent folder.
        """
        parts: list[str] = [p for p in path.parts if p != path.anchor]
        if len(parts) < 3:
            logger.trace("No grandparent folder for %s", path)
            return False
        root_folder, folder, file_name = parts[-3], parts[-2], parts[-1]

        rest: str = file_name.partition(".")[2]
        extension: str = rest.partition(".")[0]

        if self.base_name(file_name) != folder:
            logger.trace("Base name of %s does not match folder '%s'", file_name, folder)
            return False
        if extension not in self.extensions:
            logger.trace("Extension '%s' of %s is not a bundle extension", extension, file_name)
            return False
        if root_folder not in self.root_folders:
            logger.trace("Folder '%s' is not a component root", root_folder)
            return False
        return True


@dataclass(frozen=True)
class LanguageType:
    """A host language identifier SFDoc manages headers for.

    Attributes:
        language_id (str): Host language identifier (e.g. ``"apex"``).
        description (str): Human-readable description.
        comment_style (CommentStyle): Comment syntax of the header.
        enable_key (str): ``[enable]`` key gating automatic headers.
        extensions (tuple[str, ...]): File extensions (with dot) used to infer the
            language of files on disk.
        component_layout (ComponentLayout | None): When set, automatic headers also
            require the file to be a member of a Lightning component bundle.
    """

    language_id: str
    description: str
    comment_style: CommentStyle
    enable_key: str
    extensions: tuple[str, ...] = ()
    component_layout: ComponentLayout | None = None
