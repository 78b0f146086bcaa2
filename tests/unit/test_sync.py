# topmark:header:start
#
#   project      : Boostlook
#   file         : test_sync.py
#   file_relpath : tests/unit/test_sync.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Unit tests for `boostlook.sync.sync_artifact`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from boostlook.sync import sync_artifact

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def test_sync_overwrites_destination(tmp_path: Path) -> None:
    src: Path = tmp_path / "boostlook.css"
    src.write_text("new", encoding="utf-8")
    dest_dir: Path = tmp_path / "site" / "_" / "css"
    dest_dir.mkdir(parents=True)
    dest: Path = dest_dir / "boostlook.css"
    dest.write_text("old", encoding="utf-8")

    assert sync_artifact(src, dest) is True
    assert dest.read_text(encoding="utf-8") == "new"


def test_sync_creates_missing_destination_file(tmp_path: Path) -> None:
    src: Path = tmp_path / "boostlook.css"
    src.write_text("css", encoding="utf-8")
    dest: Path = tmp_path / "out.css"

    assert sync_artifact(src, dest) is True
    assert dest.read_text(encoding="utf-8") == "css"


def test_sync_skips_when_parent_missing(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    src: Path = tmp_path / "boostlook.css"
    src.write_text("css", encoding="utf-8")
    dest: Path = tmp_path / "nowhere" / "boostlook.css"

    with caplog.at_level(logging.WARNING):
        assert sync_artifact(src, dest) is False
    assert not dest.parent.exists()
    assert "Target directory not found" in caplog.text


def test_sync_failure_is_not_fatal(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    dest: Path = tmp_path / "out.css"
    with caplog.at_level(logging.WARNING):
        assert sync_artifact(tmp_path / "missing.css", dest) is False
    assert "Cannot copy" in caplog.text
