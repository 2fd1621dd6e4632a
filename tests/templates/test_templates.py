# topmark:header:start
#
#   project      : SFDoc
#   file         : test_templates.py
#   file_relpath : tests/templates/test_templates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the header template registry and rendering."""

from __future__ import annotations

import pytest

from sfdoc.constants import HEADER_LENGTH_LINES
from sfdoc.core.errors import UnsupportedLanguageError
from sfdoc.templates import registry
from sfdoc.templates.base import HeaderTemplate
from sfdoc.templates.registry import (
    generate,
    get_template,
    get_template_registry,
    register_template,
)
from sfdoc.templates.xml import XmlCommentTemplate
from tests.conftest import FIXED_STAMP, parametrize


def test_registry_covers_all_languages() -> None:
    """Every supported language has a template bound to its language type."""
    registry = get_template_registry()
    assert set(registry) == {"apex", "visualforce", "html", "javascript"}
    for language_id, template in registry.items():
        assert template.language_type is not None
        assert template.language_type.language_id == language_id


@parametrize("language_id", ["apex", "visualforce", "html", "javascript"])
def test_header_has_fixed_line_count(language_id: str) -> None:
    """A rendered header is exactly 13 lines plus a trailing terminator."""
    text = generate(language_id, "Foo.cls", "jdoe", FIXED_STAMP)
    assert text.endswith("\n")
    assert len(text.splitlines()) == HEADER_LENGTH_LINES


def test_block_comment_header_content() -> None:
    """Apex headers use C-style block comments and carry all fields."""
    lines = generate("apex", "Foo.cls", "jdoe", FIXED_STAMP).splitlines()
    assert lines[0] == "/**"
    assert lines[-1] == "**/"
    assert lines[1] == " * @File Name         : Foo.cls"
    assert lines[2] == " * @Description       :"
    assert lines[3] == " * @Author            : jdoe"
    assert lines[5] == " * @Last Modified By  : jdoe"
    assert lines[6] == f" * @Last Modified On  : {FIXED_STAMP}"
    assert lines[8] == " *" + "=" * 78
    assert lines[11].startswith(" * 1.0    " + FIXED_STAMP)
    assert lines[11].endswith("Initial Version")


def test_xml_comment_header_content() -> None:
    """Markup headers use XML comments."""
    lines = generate("html", "foo.cmp", "jdoe", FIXED_STAMP).splitlines()
    assert lines[0] == "<!--"
    assert lines[-1] == "-->"
    assert lines[1] == "  @File Name         : foo.cmp"
    assert all(not line.rstrip().startswith(" *") for line in lines)


def test_generate_uses_requested_newline_and_strips_values() -> None:
    """Lines are joined with the given terminator; values are trimmed."""
    text = generate("javascript", "foo.js", "  jdoe ", f" {FIXED_STAMP} ", "\r\n")
    assert text.count("\r\n") == HEADER_LENGTH_LINES
    assert "\n" not in text.replace("\r\n", "")
    assert " * @Author            : jdoe\r\n" in text


def test_no_trailing_whitespace_with_empty_author() -> None:
    """Empty values leave no trailing blanks."""
    lines = generate("apex", "Foo.cls", "", FIXED_STAMP).splitlines()
    assert all(line == line.rstrip() for line in lines)
    assert lines[5] == " * @Last Modified By  :"


def test_unsupported_language_raises() -> None:
    """Lookup failures are reported with the offending identifier."""
    with pytest.raises(UnsupportedLanguageError) as excinfo:
        get_template("plaintext")
    assert excinfo.value.language_id == "plaintext"
    with pytest.raises(LookupError):
        generate("markdown", "README.md", "jdoe", FIXED_STAMP)


def test_register_template_rejects_unknown_and_duplicate_languages() -> None:
    """Registration is limited to known languages, one template each."""
    get_template_registry()
    with pytest.raises(ValueError):
        register_template("cobol")

    class Duplicate(HeaderTemplate):
        def __init__(self) -> None:
            super().__init__(block_prefix="/*", block_suffix="*/", line_prefix="", rule_prefix="")

    with pytest.raises(ValueError):
        register_template("apex")(Duplicate)


def test_register_template_rejects_mismatched_comment_style(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """An XML template cannot serve a block-comment language."""
    get_template_registry()
    monkeypatch.delitem(registry._registry, "apex")
    with pytest.raises(ValueError, match="comments"):
        register_template("apex")(XmlCommentTemplate)
