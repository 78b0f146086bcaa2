# topmark:header:start
#
#   project      : Boostlook
#   file         : test_playbook.py
#   file_relpath : tests/unit/test_playbook.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Unit tests for the Antora playbook UI bundle scan."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from boostlook.playbook import find_ui_bundle_url, requires_fetch
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _yaml(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


def test_finds_nested_bundle_url() -> None:
    text = _yaml(
        """
        site:
          url: https://example.org
        ui:
          bundle:
            url: https://example.org/ui-bundle.zip
            snapshot: true
        """
    )
    assert find_ui_bundle_url(text) == "https://example.org/ui-bundle.zip"


def test_ignores_url_outside_ui_bundle() -> None:
    text = _yaml(
        """
        site:
          url: https://example.org
        ui:
          supplemental_files: ./supplemental
        """
    )
    assert find_ui_bundle_url(text) is None


def test_strips_quotes_and_comments() -> None:
    text = _yaml(
        """
        ui:
          # the default UI
          bundle:
            url: "./build/ui-bundle.zip"  # local
        """
    )
    assert find_ui_bundle_url(text) == "./build/ui-bundle.zip"


@parametrize(
    "url, expected",
    [
        ("https://gitlab.com/antora/ui.zip", True),
        ("http://localhost/ui.zip", True),
        ("./ui-bundle.zip", False),
    ],
)
def test_requires_fetch(tmp_path: Path, url: str, expected: bool) -> None:
    playbook: Path = tmp_path / "playbook.yml"
    playbook.write_text(f"ui:\n  bundle:\n    url: {url}\n", encoding="utf-8")
    assert requires_fetch(playbook) is expected


def test_requires_fetch_false_for_unreadable_playbook(tmp_path: Path) -> None:
    assert requires_fetch(tmp_path / "missing.yml") is False


@parametrize(
    "text",
    [
        "ui:\n  bundle: {url: 'https://example.org/ui-bundle.zip'}\n",
        "ui: {bundle: {url: https://example.org/ui-bundle.zip}}\n",
        "ui:\n  bundle:\n    url: >-\n      https://example.org/ui-bundle.zip\n",
    ],
    ids=["flow-bundle", "flow-ui", "folded-scalar"],
)
def test_finds_url_in_any_yaml_style(tmp_path: Path, text: str) -> None:
    assert find_ui_bundle_url(text) == "https://example.org/ui-bundle.zip"
    playbook: Path = tmp_path / "playbook.yml"
    playbook.write_text(text, encoding="utf-8")
    assert requires_fetch(playbook) is True


def test_non_mapping_bundle_has_no_url() -> None:
    assert find_ui_bundle_url("ui:\n  bundle: ./ui-bundle.zip\n") is None
    assert find_ui_bundle_url("- just\n- a list\n") is None


def test_requires_fetch_false_for_invalid_yaml(tmp_path: Path) -> None:
    playbook: Path = tmp_path / "playbook.yml"
    playbook.write_text("ui: {bundle: [unclosed\n", encoding="utf-8")
    assert requires_fetch(playbook) is False
