# topmark:header:start
#
#   project      : Boostlook
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Pytest configuration for the Boostlook test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Preview tests never spawn real tools: they pass fake invokers, sync
    callables and browser openers to `PreviewSessionController`.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from boostlook.config import PreviewConfig, PreviewMode
from boostlook.config import logging as boostlook_logging
from boostlook.constants import HIGHLIGHT_CSS_NAME, HIGHLIGHT_JS_NAME, LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.parametrize(...)`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_boostlook_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Boostlook's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    boostlook_logging.setup_logging(level=boostlook_logging.TRACE_LEVEL, color=False)


def write_text(path: Path, content: str) -> Path:
    """Write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


@pytest.fixture
def vendor_dir(tmp_path: Path) -> Path:
    """A directory with tiny stand-ins for the highlight.js assets."""
    d: Path = tmp_path / "vendor"
    d.mkdir()
    (d / HIGHLIGHT_CSS_NAME).write_text(".hljs{display:block}", encoding="utf-8")
    (d / HIGHLIGHT_JS_NAME).write_text("var hljs={highlightAll:function(){}};", encoding="utf-8")
    return d


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root with the watched sources and both tools' config files.

    Returns:
        Path: The project root. No build output exists yet.
    """
    root: Path = tmp_path / "proj"
    write_text(root / "boostlook.css", "body { color: black; }\n")
    write_text(root / "boostlook.rb", "# extension\n")
    write_text(
        root / "doc" / "antora_specimen" / "playbook.yml",
        """
        site:
          title: Specimen
        ui:
          bundle:
            url: ./ui-bundle.zip
        """,
    )
    write_text(root / "doc" / "Jamfile", "html index : index.adoc ;\n")
    return root


@pytest.fixture
def preview_config(project: Path) -> PreviewConfig:
    """Default configuration rooted at the `project` fixture."""
    return PreviewConfig.from_toml_dict({}, root=project)


def populate_build(config: PreviewConfig, mode: PreviewMode) -> Path:
    """Create the build output a successful external build would leave behind.

    Returns:
        Path: The entry point page.
    """
    profile = config.profile(mode)
    profile.stylesheet_target.parent.mkdir(parents=True, exist_ok=True)
    entry: Path = profile.build_dir / profile.entry_point
    entry.write_text("<html><body>index</body></html>\n", encoding="utf-8")
    return entry
