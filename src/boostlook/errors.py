# topmark:header:start
#
#   project      : Boostlook
#   file         : errors.py
#   file_relpath : src/boostlook/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Exceptions for Boostlook.

Usage:
    Raise these exceptions from the preview and post-processing layers to end
    the process with a standardized message and exit code. They are Click
    exceptions, so the CLI reports them without a traceback.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from boostlook.cli.exit_codes import ExitCode


class BoostlookError(click.ClickException):
    """Base class for all Boostlook errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class BoostlookUsageError(BoostlookError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ConfigError(BoostlookError):
    """Error for configuration errors (malformed TOML, invalid values)."""


class ToolNotFoundError(BoostlookError):
    """The external generator or build tool cannot be invoked."""


class MissingInputError(BoostlookError):
    """A required input file (stylesheet, extension, playbook, asset) is missing."""


class BuildError(BoostlookError):
    """The external generator or build system reported a failure."""
