# topmark:header:start
#
#   project      : Boostlook
#   file         : preview.py
#   file_relpath : src/boostlook/cli/commands/preview.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook `preview` commands.

`boostlook preview antora` and `boostlook preview b2` build the documentation
with the matching external tool, open it in the browser and keep it current
while the stylesheet or the generator extension changes. Press Ctrl+C to stop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from boostlook.cli.options import config_file_option
from boostlook.config import PreviewMode, load_config
from boostlook.controller import PreviewSessionController
from boostlook.invoker import ExternalBuildInvoker

if TYPE_CHECKING:
    from pathlib import Path

P = ParamSpec("P")
R = TypeVar("R")


def preview_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the options shared by every preview subcommand."""
    f = click.option(
        "--rebuild",
        is_flag=True,
        default=False,
        help="Delete the previous build output and build from scratch.",
    )(f)
    f = click.option(
        "--quiet-build",
        is_flag=True,
        default=False,
        help="Hide the output of the external build tool.",
    )(f)
    f = config_file_option(f)
    return f


def run_preview(
    mode: PreviewMode,
    *,
    rebuild: bool,
    quiet_build: bool,
    config_file: Path | None,
) -> None:
    """Load the configuration and run a preview session until shutdown.

    Args:
        mode (PreviewMode): Which external tool builds the site.
        rebuild (bool): Force a clean build first.
        quiet_build (bool): Suppress the external tool's output.
        config_file (Path | None): Explicit configuration file.

    Raises:
        BoostlookError: Any startup or build failure; Click maps it to exit code 1.
    """
    config = load_config(config_file=config_file)
    controller = PreviewSessionController(
        config,
        mode,
        invoker=ExternalBuildInvoker(quiet=quiet_build),
    )
    controller.run(rebuild=rebuild)


@click.group(
    name="preview",
    help="Build, open and live-update the documentation preview.",
)
def preview_group() -> None:
    """Group for the preview subcommands."""


@preview_group.command(
    name="antora",
    help="Preview the Antora specimen site (runs 'npx antora').",
)
@preview_options
def antora_command(*, rebuild: bool, quiet_build: bool, config_file: Path | None) -> None:
    """Run an Antora preview session."""
    run_preview(
        PreviewMode.ANTORA,
        rebuild=rebuild,
        quiet_build=quiet_build,
        config_file=config_file,
    )


@preview_group.command(
    name="b2",
    help="Preview the AsciiDoc documentation built with 'b2'.",
)
@preview_options
def b2_command(*, rebuild: bool, quiet_build: bool, config_file: Path | None) -> None:
    """Run a b2 preview session."""
    run_preview(
        PreviewMode.B2,
        rebuild=rebuild,
        quiet_build=quiet_build,
        config_file=config_file,
    )
