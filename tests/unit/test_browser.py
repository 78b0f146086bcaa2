# topmark:header:start
#
#   project      : Boostlook
#   file         : test_browser.py
#   file_relpath : tests/unit/test_browser.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Unit tests for platform browser opener selection."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

import pytest

from boostlook.browser import CommandBrowserOpener, select_browser_opener
from tests.conftest import parametrize


@parametrize(
    "platform, command",
    [
        ("darwin", ("open",)),
        ("linux", ("xdg-open",)),
        ("win32", ("cmd", "/c", "start", "")),
        ("cygwin", ("cmd", "/c", "start", "")),
    ],
)
def test_select_opener_by_platform(platform: str, command: tuple[str, ...]) -> None:
    opener = select_browser_opener(platform)
    assert isinstance(opener, CommandBrowserOpener)
    assert opener.command == command


def test_unsupported_platform_has_no_opener() -> None:
    assert select_browser_opener("sunos5") is None


def test_open_appends_target(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_popen(args: list[str], **kwargs: Any) -> None:
        calls.append(args)

    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    CommandBrowserOpener("Linux", ("xdg-open",)).open(Path("/tmp/site/index.html"))
    assert calls == [["xdg-open", str(Path("/tmp/site/index.html"))]]
