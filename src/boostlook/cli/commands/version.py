# topmark:header:start
#
#   project      : Boostlook
#   file         : version.py
#   file_relpath : src/boostlook/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook `version` command.

Prints the current Boostlook version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from boostlook.constants import BOOSTLOOK_VERSION

if TYPE_CHECKING:
    from boostlook.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Boostlook.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of Boostlook.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": BOOSTLOOK_VERSION}))
    else:
        console.print(console.styled(BOOSTLOOK_VERSION, bold=True))
