# topmark:header:start
#
#   project      : Boostlook
#   file         : invoker.py
#   file_relpath : src/boostlook/invoker.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Run the external documentation generator or build system.

A failed build is unrecoverable for a preview session: serving the previous
output after a failed rebuild would show a styling state that no longer
matches the sources. `ExternalBuildInvoker.invoke` therefore raises
`BuildError`, which ends the process with exit code 1.
"""

from __future__ import annotations

import shlex
import subprocess
from typing import TYPE_CHECKING

from boostlook.config.logging import get_logger
from boostlook.errors import BuildError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)


class ExternalBuildInvoker:
    """Spawn external tools with the current environment.

    Args:
        quiet (bool): Suppress the tool's stdout instead of streaming it to the terminal.
            Stderr is always streamed so failures stay diagnosable.
    """

    def __init__(self, *, quiet: bool = False) -> None:
        self.quiet = quiet

    def query_version(self, command: Sequence[str]) -> str | None:
        """Run a version query and return its trimmed stdout.

        Args:
            command (Sequence[str]): Tool command including the version flag.

        Returns:
            str | None: The version text, or None if the tool is missing or failed.
        """
        logger.debug("Querying tool version: %s", shlex.join(command))
        try:
            completed = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("Cannot run %s: %s", command[0], exc)
            return None
        if completed.returncode != 0:
            logger.debug(
                "%s exited with %d: %s",
                shlex.join(command),
                completed.returncode,
                completed.stderr.strip(),
            )
            return None
        return completed.stdout.strip()

    def invoke(self, command: Sequence[str], working_directory: Path) -> bool:
        """Run a build command and wait for it.

        Args:
            command (Sequence[str]): Argument vector of the build.
            working_directory (Path): Directory the command runs in.

        Returns:
            bool: True when the command succeeded.

        Raises:
            BuildError: If the command cannot be started or exits non-zero.
        """
        cmdline: str = shlex.join(command)
        logger.info("Running %s in %s", cmdline, working_directory)
        try:
            completed = subprocess.run(
                list(command),
                cwd=working_directory,
                stdout=subprocess.DEVNULL if self.quiet else None,
                check=False,
            )
        except OSError as exc:
            logger.error("Cannot run %s: %s", cmdline, exc)
            raise BuildError(f"Build command could not be started: {cmdline} ({exc})") from exc

        if completed.returncode != 0:
            logger.error("Build failed: %s exited with %d", cmdline, completed.returncode)
            raise BuildError(f"Build failed: {cmdline} exited with {completed.returncode}")

        logger.trace("Build finished: %s", cmdline)
        return True
