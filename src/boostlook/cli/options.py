# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/boostlook/cli/options.py
#   project      : Boostlook
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Common CLI option utilities for the Boostlook CLI.

This module centralizes reusable options (verbosity, color, config file) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from boostlook.config.logging import TRACE_LEVEL
from boostlook.errors import BoostlookUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the log level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        BoostlookUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Log lines are the progress report of a preview session, so the default
        is INFO. ``-v`` selects DEBUG, ``-vv`` TRACE; ``-q`` selects WARNING,
        ``-qq`` ERROR.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BoostlookUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 2:  # -vv
        return TRACE_LEVEL
    if verbose_count == 1:  # -v
        return logging.DEBUG

    if quiet_count >= 2:  # -qq
        return logging.ERROR
    if quiet_count == 1:  # -q
        return logging.WARNING

    return logging.INFO


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for trace output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify twice for errors only.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def config_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a --config option pointing at ``boostlook.toml`` or ``pyproject.toml``.

    Without it, the configuration is discovered in the current working directory.
    """
    return click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (boostlook.toml or pyproject.toml). "
        "Defaults to discovery in the current directory.",
    )(f)
