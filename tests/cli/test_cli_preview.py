# topmark:header:start
#
#   project      : Boostlook
#   file         : test_cli_preview.py
#   file_relpath : tests/cli/test_cli_preview.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""CLI tests: `preview` exit codes.

`subprocess.run` is replaced so no external tool is ever started. Startup
failures map to exit code 1; a session stopped by SIGINT exits with 0.
"""

from __future__ import annotations

import signal
import subprocess
from typing import TYPE_CHECKING, Any

import pytest

from boostlook.controller import PreviewSessionController
from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli_in
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def fake_run(*, version_ok: bool, build_ok: bool) -> Any:
    calls: list[list[str]] = []

    def _run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append(list(args))
        if kwargs.get("capture_output"):
            if not version_ok:
                raise FileNotFoundError(args[0])
            return subprocess.CompletedProcess(args, 0, stdout="3.1.7\n", stderr="")
        return subprocess.CompletedProcess(args, 0 if build_ok else 1)

    _run.calls = calls  # type: ignore[attr-defined]
    return _run


@parametrize(
    "tool, build_cmd",
    [
        ("antora", ["npx", "antora", "playbook.yml"]),
        ("b2", ["b2", "doc"]),
    ],
)
def test_build_failure_exits_with_failure(
    project: Path, monkeypatch: pytest.MonkeyPatch, tool: str, build_cmd: list[str]
) -> None:
    run = fake_run(version_ok=True, build_ok=False)
    monkeypatch.setattr(subprocess, "run", run)

    result = run_cli_in(project, ["--no-color", "preview", tool, "--quiet-build"])

    assert_FAILURE(result)
    assert "Build failed" in result.output
    assert run.calls[-1] == build_cmd


def test_missing_tool_exits_with_failure(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "run", fake_run(version_ok=False, build_ok=True))

    result = run_cli_in(project, ["--no-color", "preview", "antora"])

    assert_FAILURE(result)
    assert "please install Antora" in result.output


def test_missing_stylesheet_exits_with_failure(
    project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(subprocess, "run", fake_run(version_ok=True, build_ok=True))
    (project / "boostlook.css").unlink()

    result = run_cli_in(project, ["--no-color", "preview", "b2"])

    assert_FAILURE(result)
    assert "Source stylesheet not found" in result.output


def test_rebuild_flag_clears_stale_output(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    stale: Path = project / "doc" / "html" / "stale.html"
    stale.parent.mkdir(parents=True)
    stale.write_text("old", encoding="utf-8")
    monkeypatch.setattr(subprocess, "run", fake_run(version_ok=True, build_ok=False))

    result = run_cli_in(project, ["--no-color", "preview", "b2", "--rebuild"])

    assert_FAILURE(result)
    assert not stale.exists()


def test_sigint_shuts_down_with_success(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    run = fake_run(version_ok=True, build_ok=True)
    monkeypatch.setattr(subprocess, "run", run)
    handlers: dict[int, Any] = {}
    monkeypatch.setattr(signal, "signal", handlers.__setitem__)

    def deliver_sigint(seconds: float) -> None:
        handlers[signal.SIGINT](signal.SIGINT, None)

    # The polling loop sleeps once; the installed handler then requests the shutdown
    monkeypatch.setitem(PreviewSessionController.__init__.__kwdefaults__, "sleep", deliver_sigint)

    result = run_cli_in(project, ["--no-color", "preview", "b2", "--quiet-build"])

    assert_SUCCESS(result)
    assert run.calls[-1] == ["b2", "doc"]
    assert set(handlers) == {signal.SIGINT, signal.SIGTERM}
    assert "Shutting down" in result.output
