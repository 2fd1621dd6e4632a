# topmark:header:start
#
#   project      : SFDoc
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SFDoc test suite.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `sfdoc.config.MutableConfig` (mutable), then
      `freeze()` into a `sfdoc.config.Config`.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from sfdoc.config import MutableConfig, logging
from sfdoc.constants import ENV_LOG_LEVEL, ENV_USERNAME
from sfdoc.core.document import Document

if TYPE_CHECKING:
    from sfdoc.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

# Fixed clock used wherever a header timestamp is compared.
FIXED_NOW: datetime = datetime(2025, 1, 31, 9, 15, 0)
FIXED_STAMP: str = "01-31-2025, 09:15:00 AM"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_sfdoc_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot force a log level or author during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear environment variables.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_USERNAME, raising=False)


@pytest.fixture(autouse=True)
def isolated_user_config(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point user-config discovery at an empty directory.

    Returns:
        Path: The directory used as ``$HOME`` and ``$XDG_CONFIG_HOME``.
    """
    home: Path = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    return home


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so that every log call is exercised."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory holding a root ``sfdoc.toml``.

    Returns:
        Path: The project directory (also the working directory).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "sfdoc.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``ArgKey`` overrides.

    The author defaults to ``"jdoe"`` so that headers are deterministic.
    """
    overrides.setdefault("username", "jdoe")
    return MutableConfig.from_defaults().apply_args(overrides).freeze()


def make_document(
    text: str,
    language_id: str = "apex",
    uri: str = "file:///project/force-app/main/default/classes/Foo.cls",
    *,
    is_dirty: bool = True,
) -> Document:
    """Return an in-memory document (dirty by default, like a document being saved)."""
    return Document(text=text, language_id=language_id, uri=uri, is_dirty=is_dirty)
