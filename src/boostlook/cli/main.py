# topmark:header:start
#
#   project      : Boostlook
#   file         : main.py
#   file_relpath : src/boostlook/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook command-line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Subcommands pull the console from ``ctx.obj`` for program output and use
  `logging` for progress and diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boostlook.cli.commands.config import config_command
from boostlook.cli.commands.postprocess import postprocess_command
from boostlook.cli.commands.preview import preview_group
from boostlook.cli.commands.version import version_command
from boostlook.cli.console import ClickConsole

# --- We use a module import here instead of relative import
from boostlook.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from boostlook.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from boostlook.cli.console_api import ConsoleLike
    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags (0..2).
        quiet (int): Count of ``-q`` flags (0..2).
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    # The environment wins over -v/-q so CI can pin a level
    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    level = level_env if level_env is not None else level_cli
    setup_logging(level=level, color=enable_color)

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Boostlook documentation styling tools.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Boostlook CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'boostlook preview antora' to start a live preview.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(postprocess_command)

cli.add_command(preview_group)

if __name__ == "__main__":
    cli()
