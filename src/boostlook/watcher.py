# topmark:header:start
#
#   project      : Boostlook
#   file         : watcher.py
#   file_relpath : src/boostlook/watcher.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Watch the preview sources and react to genuine content changes.

`ChangeWatcher` is a two-state machine (Idle, Processing) driven by batches of
changed paths:

- a batch with no watched path is ignored;
- a batch arriving while a previous one is still being processed is dropped
  (only the final on-disk content matters, and the next stable check will see
  it);
- otherwise every changed watched file is re-hashed, unchanged files are
  no-ops, and the changed ones trigger their `RebuildStrategy`.

Notifications come from a ``watchdog`` observer running on its own thread. A
`BuildError` raised there cannot end the process directly, so it is recorded
in the `SessionState` together with a shutdown request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    PatternMatchingEventHandler,
)
from watchdog.observers import Observer

from boostlook.config.logging import get_logger
from boostlook.config.types import RebuildStrategy
from boostlook.errors import BuildError
from boostlook.hashing import file_digest

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from watchdog.observers.api import BaseObserver

    from boostlook.config.logging import BoostlookLogger
    from boostlook.session import SessionState

logger: BoostlookLogger = get_logger(__name__)

_HANDLED_EVENTS: frozenset[str] = frozenset(
    {EVENT_TYPE_MODIFIED, EVENT_TYPE_CREATED, EVENT_TYPE_MOVED},
)


@dataclass
class WatchTarget:
    """A watched source file.

    Attributes:
        path (Path): The file.
        strategy (RebuildStrategy): What to do when its content changes.
        digest (str | None): Last known content digest; None before the first hash.
    """

    path: Path
    strategy: RebuildStrategy
    digest: str | None = None

    @property
    def key(self) -> Path:
        """Resolved path used to match notifications."""
        return self.path.resolve()


class ChangeWatcher:
    """Dispatch content changes of watched files to sync or rebuild actions.

    Args:
        targets (Sequence[WatchTarget]): Files to watch.
        session (SessionState): Shared session; provides the re-entrancy guard.
        sync (Callable[[], bool]): Fast path: copy the stylesheet into the build output.
        rebuild (Callable[[], object]): Full path: rebuild the site, then sync. May raise
            `BuildError`.
        patterns (Sequence[str] | None): File-name patterns for the observer; derived from
            the targets' suffixes when omitted.
        latency (float): Observer polling timeout in seconds.
        hasher (Callable[[Path], str]): Content fingerprint function.
    """

    def __init__(
        self,
        targets: Sequence[WatchTarget],
        session: SessionState,
        *,
        sync: Callable[[], bool],
        rebuild: Callable[[], object],
        patterns: Sequence[str] | None = None,
        latency: float = 0.5,
        hasher: Callable[[Path], str] = file_digest,
    ) -> None:
        self.targets: list[WatchTarget] = list(targets)
        self.session = session
        self._sync = sync
        self._rebuild = rebuild
        self.patterns: list[str] = list(patterns) if patterns else self._default_patterns()
        self.latency = latency
        self._hasher = hasher
        self._observer: BaseObserver | None = None

    def _default_patterns(self) -> list[str]:
        return sorted(
            {f"*{t.path.suffix}" if t.path.suffix else t.path.name for t in self.targets},
        )

    def record_hashes(self) -> None:
        """Hash every target and store the digests.

        Raises:
            OSError: If a target cannot be read. At startup this is fatal.
        """
        for target in self.targets:
            target.digest = self._hasher(target.path)
            logger.trace("Initial digest of %s: %s", target.path, target.digest)

    def _refresh_hashes(self) -> None:
        for target in self.targets:
            try:
                target.digest = self._hasher(target.path)
            except OSError as exc:
                logger.warning("Cannot hash %s after rebuild: %s", target.path, exc)

    def _match(self, paths: Iterable[str | os.PathLike[str]]) -> list[WatchTarget]:
        keys: set[Path] = set()
        for p in paths:
            try:
                keys.add(Path(os.fsdecode(p)).resolve())
            except (OSError, ValueError):
                continue
        return [t for t in self.targets if t.key in keys]

    def _changed(self, candidates: list[WatchTarget]) -> list[tuple[WatchTarget, str]]:
        changed: list[tuple[WatchTarget, str]] = []
        for target in candidates:
            try:
                digest: str = self._hasher(target.path)
            except OSError as exc:
                logger.warning("Cannot read %s, skipping this change: %s", target.path, exc)
                continue
            if digest == target.digest:
                logger.debug("%s touched but content unchanged", target.path.name)
                continue
            changed.append((target, digest))
        return changed

    def handle_paths(self, paths: Iterable[str | os.PathLike[str]]) -> bool:
        """Process one notification batch.

        Args:
            paths (Iterable[str | os.PathLike[str]]): Paths reported by the batch.

        Returns:
            bool: True if a sync or rebuild ran.

        Raises:
            BuildError: If a full rebuild fails.
        """
        candidates: list[WatchTarget] = self._match(paths)
        if not candidates:
            return False

        if not self.session.try_begin_processing():
            logger.debug("Change already being processed; dropping notification")
            return False
        try:
            changed: list[tuple[WatchTarget, str]] = self._changed(candidates)
            if not changed:
                return False

            if any(t.strategy is RebuildStrategy.FULL_REBUILD for t, _ in changed):
                names: str = ", ".join(t.path.name for t, _ in changed)
                logger.info("%s changed, rebuilding site...", names)
                self._rebuild()
                # A full rebuild regenerates every output, so all digests are current now
                self._refresh_hashes()
                return True

            for target, digest in changed:
                logger.info("%s changed, syncing...", target.path.name)
                self._sync()
                target.digest = digest
            return True
        finally:
            self.session.end_processing()

    def on_notification(self, paths: Sequence[str | os.PathLike[str]]) -> None:
        """Observer-thread entry point; records fatal build errors in the session."""
        try:
            self.handle_paths(paths)
        except BuildError as exc:
            logger.error("Rebuild failed; stopping the preview")
            self.session.request_shutdown(exc)

    def start(self) -> None:
        """Schedule an observer on every directory holding a target and start it."""
        handler = _WatchdogBridge(self)
        observer = Observer(timeout=self.latency)
        for directory in sorted({t.key.parent for t in self.targets}):
            logger.debug("Watching %s for %s", directory, ", ".join(self.patterns))
            observer.schedule(handler, str(directory), recursive=False)
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        """Stop the observer thread, if running."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None


class _WatchdogBridge(PatternMatchingEventHandler):
    """Forward pattern-matching watchdog events to a `ChangeWatcher`."""

    def __init__(self, watcher: ChangeWatcher) -> None:
        super().__init__(patterns=watcher.patterns, ignore_directories=True)
        self._watcher = watcher

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type not in _HANDLED_EVENTS:
            return
        paths: list[str] = [os.fsdecode(event.src_path)]
        dest = getattr(event, "dest_path", "")
        if dest:
            paths.append(os.fsdecode(dest))
        self._watcher.on_notification(paths)
