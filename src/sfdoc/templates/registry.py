# topmark:header:start
#
#   project      : SFDoc
#   file         : registry.py
#   file_relpath : src/sfdoc/templates/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of header templates keyed by language identifier.

Template classes register themselves with `register_template`. Each registered
language gets its own template instance bound to its `LanguageType`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sfdoc.config.logging import get_logger
from sfdoc.core.errors import UnsupportedLanguageError
from sfdoc.filetypes.instances import get_language_type_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from sfdoc.config.logging import SfdocLogger
    from sfdoc.templates.base import HeaderTemplate

logger: SfdocLogger = get_logger(__name__)


_registry: dict[str, HeaderTemplate] = {}


def register_template(
    language_id: str,
) -> Callable[[type[HeaderTemplate]], type[HeaderTemplate]]:
    """Class decorator registering a `HeaderTemplate` for ``language_id``.

    Args:
        language_id (str): A language identifier from the language type registry.

    Returns:
        Callable[[type[HeaderTemplate]], type[HeaderTemplate]]: The decorator.

    Raises:
        ValueError: If the language is unknown, or (when decorating) already has a template
            or uses a different comment style than the template.
    """
    language_types = get_language_type_registry()
    if language_id not in language_types:
        raise ValueError(f"Unknown language: {language_id}")
    language_type = language_types[language_id]

    def decorator(cls: type[HeaderTemplate]) -> type[HeaderTemplate]:
        logger.debug("Registering template %s for language: %s", cls.__name__, language_id)
        if language_id in _registry:
            raise ValueError(f"Language '{language_id}' already has a registered template.")
        if cls.comment_style is not language_type.comment_style:
            raise ValueError(
                f"{cls.__name__} renders {cls.comment_style.value} comments, "
                f"but '{language_id}' uses {language_type.comment_style.value} comments."
            )
        instance: HeaderTemplate = cls()
        instance.language_type = language_type
        _registry[language_id] = instance
        return cls

    return decorator


def get_template_registry() -> dict[str, HeaderTemplate]:
    """Return the language identifier to template mapping (templates loaded on demand)."""
    from sfdoc.templates import register_all_templates

    register_all_templates()
    return _registry


def get_template(language_id: str) -> HeaderTemplate:
    """Return the template for ``language_id``.

    Raises:
        UnsupportedLanguageError: If no template is registered for the language.
    """
    template: HeaderTemplate | None = get_template_registry().get(language_id)
    if template is None:
        raise UnsupportedLanguageError(language_id)
    return template


def generate(
    language_id: str,
    file_name: str,
    author: str,
    timestamp: str,
    newline: str = "\n",
) -> str:
    """Render the header for a document of ``language_id``.

    Callers are expected to have checked structural support first.

    Args:
        language_id (str): Language identifier of the document.
        file_name (str): Base name of the file.
        author (str): Author name.
        timestamp (str): Formatted timestamp.
        newline (str): Line terminator of the document.

    Returns:
        str: The header text.

    Raises:
        UnsupportedLanguageError: If no template is registered for the language.
    """
    return get_template(language_id).render(file_name, author, timestamp, newline)
