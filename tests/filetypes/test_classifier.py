# topmark:header:start
#
#   project      : SFDoc
#   file         : test_classifier.py
#   file_relpath : tests/filetypes/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for language types and header eligibility."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING

import pytest

from sfdoc.config.keys import ArgKey
from sfdoc.filetypes import classifier
from sfdoc.filetypes.classifier import (
    is_component_file,
    is_enabled_for_auto_header,
    is_structurally_supported,
)
from sfdoc.filetypes.instances import (
    LIGHTNING_SCRIPT_LAYOUT,
    get_language_type_registry,
    guess_language_id,
)
from tests.conftest import make_config, make_document, parametrize

if TYPE_CHECKING:
    from sfdoc.core.document import Document


def _doc(path: str, language_id: str) -> Document:
    return make_document("", language_id=language_id, uri=f"file://{path}")


@parametrize(
    "language_id",
    ["apex", "visualforce", "html", "javascript"],
)
def test_structurally_supported(language_id: str) -> None:
    """The four header-capable languages are supported."""
    assert is_structurally_supported(language_id)


@parametrize("language_id", ["plaintext", "xml", "typescript", ""])
def test_structurally_unsupported(language_id: str) -> None:
    """Anything else is not."""
    assert not is_structurally_supported(language_id)


@parametrize(
    ("name", "expected"),
    [
        ("Foo.cls", "apex"),
        ("FooTrigger.trigger", "apex"),
        ("Page.page", "visualforce"),
        ("Widget.component", "visualforce"),
        ("foo.cmp", "html"),
        ("foo.HTML", "html"),
        ("foo.htm", "html"),
        ("fooController.js", "javascript"),
        ("notes.txt", None),
    ],
)
def test_guess_language_id(name: str, expected: str | None) -> None:
    """Extensions map to language identifiers, case-insensitively."""
    assert guess_language_id(PurePosixPath("/x") / name) == expected


@parametrize(
    ("path", "language_id", "expected"),
    [
        ("/p/aura/foo/foo.cmp", "html", True),
        ("/p/lwc/foo/foo.html", "html", True),
        ("/p/lwc/foo/foo.js", "javascript", True),
        ("/p/aura/foo/fooController.js", "javascript", True),
        ("/p/aura/foo/fooHelper.js", "javascript", True),
        ("/p/aura/foo/foohelper.js", "javascript", True),
        ("/p/aura/foo/foo.js-meta.xml", "javascript", False),
        ("/p/aura/foo/bar.cmp", "html", False),
        ("/p/aura/Foo/foo.cmp", "html", False),
        ("/p/bar/foo/fooController.js", "javascript", False),
        ("/p/aura/foo/foo.css", "html", False),
        ("/foo/foo.cmp", "html", False),
        ("/p/aura/fooController/fooController.js", "javascript", False),
        ("/p/aura/foo/foo.cmp", "apex", False),
        ("/p/aura/foo/foo.cmp", "plaintext", False),
    ],
)
def test_is_component_file(path: str, language_id: str, expected: bool) -> None:
    """Bundle membership depends on folder names, base name and extension."""
    assert is_component_file(_doc(path, language_id)) is expected


def test_script_layout_strips_suffix_once_at_end() -> None:
    """Only a trailing Controller/Helper is removed."""
    assert LIGHTNING_SCRIPT_LAYOUT.base_name("fooController.js") == "foo"
    assert LIGHTNING_SCRIPT_LAYOUT.base_name("ControllerFoo.js") == "ControllerFoo"
    assert LIGHTNING_SCRIPT_LAYOUT.base_name("fooHelperController.js") == "fooHelper"


def test_apex_and_visualforce_disabled_by_default() -> None:
    """Unset switches count as disabled."""
    cfg = make_config()
    assert not is_enabled_for_auto_header(_doc("/p/classes/Foo.cls", "apex"), cfg)
    assert not is_enabled_for_auto_header(_doc("/p/pages/Page.page", "visualforce"), cfg)


def test_apex_enabled_ignores_location() -> None:
    """Apex does not follow the bundle convention."""
    cfg = make_config(**{ArgKey.ENABLE_APEX: True})
    assert is_enabled_for_auto_header(_doc("/Foo.cls", "apex"), cfg)


def test_markup_enabled_by_default_inside_bundle() -> None:
    """Lightning markup is on by default, but only inside a bundle."""
    cfg = make_config()
    assert is_enabled_for_auto_header(_doc("/p/aura/foo/foo.cmp", "html"), cfg)
    assert not is_enabled_for_auto_header(_doc("/p/site/index.html", "html"), cfg)


def test_javascript_requires_switch_and_bundle() -> None:
    """Component JavaScript needs its switch and the naming convention."""
    controller = _doc("/p/lwc/foo/fooController.js", "javascript")
    stray = _doc("/p/bar/fooController.js", "javascript")

    assert not is_enabled_for_auto_header(controller, make_config())

    cfg = make_config(**{ArgKey.ENABLE_LIGHTNING_JAVASCRIPT: True})
    assert is_enabled_for_auto_header(controller, cfg)
    assert not is_enabled_for_auto_header(stray, cfg)


def test_unknown_language_never_enabled() -> None:
    """Unsupported languages are rejected before any switch is read."""
    cfg = make_config(**{ArgKey.ENABLE_APEX: True})
    assert not is_enabled_for_auto_header(_doc("/p/aura/foo/foo.cmp", "plaintext"), cfg)


def test_registry_enable_keys_are_distinct() -> None:
    """Each language type is gated by its own switch."""
    keys = [lt.enable_key for lt in get_language_type_registry().values()]
    assert len(keys) == len(set(keys))


def test_bundle_check_goes_through_is_component_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Bundle languages defer to the component heuristic; Apex never consults it."""
    calls: list[str] = []

    def fake_is_component_file(document: Document) -> bool:
        calls.append(document.language_id)
        return True

    monkeypatch.setattr(classifier, "is_component_file", fake_is_component_file)
    cfg = make_config(**{ArgKey.ENABLE_APEX: True})
    assert is_enabled_for_auto_header(_doc("/p/site/index.html", "html"), cfg)
    assert is_enabled_for_auto_header(_doc("/Foo.cls", "apex"), cfg)
    assert calls == ["html"]
