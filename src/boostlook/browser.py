# topmark:header:start
#
#   project      : Boostlook
#   file         : browser.py
#   file_relpath : src/boostlook/browser.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Open a file in the platform's default browser."""

from __future__ import annotations

import re
import subprocess
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from boostlook.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)


class BrowserOpener(Protocol):
    """Capability to show a local file in a browser."""

    name: str

    def open(self, target: Path) -> None:
        """Open ``target``; raises OSError if the launcher cannot be started."""
        ...


@dataclass(frozen=True)
class CommandBrowserOpener:
    """Launch a platform command with the target path as last argument.

    Attributes:
        name (str): Human-readable platform name.
        command (tuple[str, ...]): Launcher argv prefix (e.g. ``("xdg-open",)``).
    """

    name: str
    command: tuple[str, ...]

    def open(self, target: Path) -> None:
        """Start the launcher without waiting for the browser to exit."""
        subprocess.Popen(
            [*self.command, str(target)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )


# Matched against sys.platform, first match wins
PLATFORM_OPENERS: tuple[tuple[re.Pattern[str], CommandBrowserOpener], ...] = (
    (re.compile(r"darwin"), CommandBrowserOpener("macOS", ("open",))),
    (re.compile(r"linux"), CommandBrowserOpener("Linux", ("xdg-open",))),
    # The empty argument is the window title expected by `start`
    (
        re.compile(r"win32|cygwin|mingw|mswin"),
        CommandBrowserOpener("Windows", ("cmd", "/c", "start", "")),
    ),
)


def select_browser_opener(platform: str | None = None) -> BrowserOpener | None:
    """Return the opener for ``platform`` (defaults to ``sys.platform``).

    Args:
        platform (str | None): Platform identifier to match.

    Returns:
        BrowserOpener | None: The matching opener, or None on unsupported platforms.
    """
    platform = sys.platform if platform is None else platform
    for pattern, opener in PLATFORM_OPENERS:
        if pattern.search(platform):
            logger.trace("Selected %s browser opener for %s", opener.name, platform)
            return opener
    return None
