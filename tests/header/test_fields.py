# topmark:header:start
#
#   project      : SFDoc
#   file         : test_fields.py
#   file_relpath : tests/header/test_fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for author and timestamp resolution."""

from __future__ import annotations

import getpass

import pytest

from sfdoc.constants import ENV_USERNAME
from sfdoc.header.fields import get_configured_username, get_header_formatted_datetime
from tests.conftest import FIXED_NOW, FIXED_STAMP, make_config


def test_configured_username_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    """The ``[header] username`` value beats the environment."""
    monkeypatch.setenv(ENV_USERNAME, "env-user")
    assert get_configured_username(make_config(username="  cfg-user ")) == "cfg-user"


def test_env_username_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    """``SFDOC_USERNAME`` is used when the config has no author."""
    monkeypatch.setenv(ENV_USERNAME, "env-user")
    assert get_configured_username(make_config(username=None)) == "env-user"


def test_os_login_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    """The OS login name is the last resort."""
    monkeypatch.setattr(getpass, "getuser", lambda: "os-user")
    assert get_configured_username(make_config(username=None)) == "os-user"


def test_os_login_failure_yields_empty_author(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failing login lookup is logged, not raised."""

    def _fail() -> str:
        raise OSError("no login name")

    monkeypatch.setattr(getpass, "getuser", _fail)
    assert get_configured_username(make_config(username=None)) == ""


def test_default_datetime_format() -> None:
    """The default format is month-day-year with a 12-hour clock."""
    assert get_header_formatted_datetime(make_config(), FIXED_NOW) == FIXED_STAMP


def test_custom_datetime_format() -> None:
    """A configured format is honored."""
    cfg = make_config(datetime_format="%Y-%m-%d %H:%M")
    assert get_header_formatted_datetime(cfg, FIXED_NOW) == "2025-01-31 09:15"
