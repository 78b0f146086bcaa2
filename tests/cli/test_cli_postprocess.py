# topmark:header:start
#
#   project      : Boostlook
#   file         : test_cli_postprocess.py
#   file_relpath : tests/cli/test_cli_postprocess.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""CLI tests: `postprocess` in-place and STDIN modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import write_text

if TYPE_CHECKING:
    from pathlib import Path

PAGE = "<html><head></head><body><div id=\"toc\"></div><p>x</p></body></html>\n"


def test_rewrites_files_in_place(tmp_path: Path, vendor_dir: Path) -> None:
    page: Path = write_text(tmp_path / "site" / "index.html", PAGE)
    result = run_cli(["--no-color", "postprocess", "--vendor-dir", str(vendor_dir), str(page)])
    assert_SUCCESS(result)

    html: str = page.read_text(encoding="utf-8")
    assert '<div class="boostlook">' in html
    assert 'id="toggle-toc"' in html
    assert "Post-processed" in result.output


def test_uses_configured_vendor_dir(tmp_path: Path, vendor_dir: Path) -> None:
    # The `vendor_dir` fixture lives at <tmp_path>/vendor, the default [paths] vendor-dir
    page: Path = write_text(tmp_path / "index.html", PAGE)
    result = run_cli_in(tmp_path, ["--no-color", "postprocess", "index.html"])
    assert_SUCCESS(result)
    assert "hljs.highlightAll();" in page.read_text(encoding="utf-8")


def test_stdin_to_stdout(vendor_dir: Path) -> None:
    result = run_cli(
        ["--no-color", "postprocess", "--vendor-dir", str(vendor_dir), "-"],
        input_text=PAGE,
    )
    assert_SUCCESS(result)
    assert result.stdout.startswith("<html><head>")
    assert '<div class="boostlook">' in result.stdout


def test_partial_page_is_left_alone(tmp_path: Path, vendor_dir: Path) -> None:
    page: Path = write_text(tmp_path / "partial.html", "<body><p>unfinished")
    result = run_cli(["--no-color", "postprocess", "--vendor-dir", str(vendor_dir), str(page)])
    assert_SUCCESS(result)
    assert page.read_text(encoding="utf-8") == "<body><p>unfinished"
    assert "left unchanged" in result.output


def test_stdin_cannot_be_mixed_with_files(tmp_path: Path, vendor_dir: Path) -> None:
    result = run_cli(
        ["postprocess", "--vendor-dir", str(vendor_dir), "-", str(tmp_path / "a.html")],
    )
    assert_USAGE_ERROR(result)


def test_missing_vendor_assets_fail(tmp_path: Path) -> None:
    page: Path = write_text(tmp_path / "index.html", PAGE)
    result = run_cli(["postprocess", "--vendor-dir", str(tmp_path / "none"), str(page)])
    assert_FAILURE(result)
    assert "Highlight.js asset not found" in result.output


def test_missing_page_fails(tmp_path: Path, vendor_dir: Path) -> None:
    result = run_cli(
        ["postprocess", "--vendor-dir", str(vendor_dir), str(tmp_path / "missing.html")],
    )
    assert_FAILURE(result)


def test_non_utf8_page_fails_with_its_name(tmp_path: Path, vendor_dir: Path) -> None:
    page: Path = tmp_path / "latin1.html"
    page.write_bytes(b"<html><body>caf\xe9</body></html>")
    result = run_cli(["--no-color", "postprocess", "--vendor-dir", str(vendor_dir), str(page)])
    assert_FAILURE(result)
    assert "latin1.html is not valid UTF-8" in result.output
    assert page.read_bytes() == b"<html><body>caf\xe9</body></html>"


def test_non_utf8_stdin_fails(vendor_dir: Path) -> None:
    result = run_cli(
        ["--no-color", "postprocess", "--vendor-dir", str(vendor_dir), "-"],
        input_text=b"<html><body>caf\xe9</body></html>",
    )
    assert_FAILURE(result)
    assert "STDIN is not valid UTF-8" in result.output
