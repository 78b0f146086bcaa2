# topmark:header:start
#
#   project      : Boostlook
#   file         : session.py
#   file_relpath : src/boostlook/session.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Process-wide state of a preview session.

`SessionState` is created once per process and handed explicitly to the
controller and the watcher. The watcher runs on the observer thread, the
controller on the main thread; the only coordination between them is:

- the re-entrancy guard, a non-blocking lock held while a rebuild or sync is
  in flight;
- the shutdown flag, set by signal handlers or by the watcher after a fatal
  build error, and polled by the controller.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boostlook.errors import BoostlookError


@dataclass
class SessionState:
    """Mutable flags shared by the controller and the watcher.

    Attributes:
        browser_opened (bool): The entry point has been opened in a browser.
        shutdown_requested (bool): The controller should stop the watcher and exit.
        tool_version (str | None): Version string reported by the external tool.
        fatal_error (BoostlookError | None): Error that ended the session from the
            watcher thread; re-raised by the controller on shutdown.
    """

    browser_opened: bool = False
    shutdown_requested: bool = False
    tool_version: str | None = None
    fatal_error: BoostlookError | None = None
    _guard: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def processing(self) -> bool:
        """Whether a rebuild or sync is currently in flight."""
        return self._guard.locked()

    def try_begin_processing(self) -> bool:
        """Enter the Processing state if idle.

        Returns:
            bool: True if the caller now owns the guard and must call `end_processing`.
        """
        return self._guard.acquire(blocking=False)

    def end_processing(self) -> None:
        """Return to the Idle state."""
        self._guard.release()

    def request_shutdown(self, error: BoostlookError | None = None) -> None:
        """Ask the controller to stop; safe to call from a signal handler.

        Args:
            error (BoostlookError | None): Fatal error to report on exit, if any.
                The first recorded error wins.
        """
        if error is not None and self.fatal_error is None:
            self.fatal_error = error
        self.shutdown_requested = True
