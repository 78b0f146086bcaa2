# topmark:header:start
#
#   project      : Boostlook
#   file         : config.py
#   file_relpath : src/boostlook/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook `config` command.

Emits the effective configuration as TOML after applying the built-in defaults
and the discovered (or given) configuration file. The output is wrapped between
`# === BEGIN ===` and `# === END ===` markers for easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boostlook.cli.options import config_file_option
from boostlook.config import load_config
from boostlook.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from boostlook.cli.console_api import ConsoleLike
    from boostlook.config import PreviewConfig


@click.command(
    name="config",
    help="Print the effective Boostlook configuration as TOML.",
)
@config_file_option
def config_command(*, config_file: Path | None = None) -> None:
    """Print the merged configuration."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: PreviewConfig = load_config(config_file=config_file)

    console.print("# === BEGIN ===")
    if config.config_file is not None:
        console.print(f"# source: {config.config_file}")
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))
    console.print("# === END ===")
