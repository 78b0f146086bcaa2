# topmark:header:start
#
#   project      : Boostlook
#   file         : controller.py
#   file_relpath : src/boostlook/controller.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Preview session orchestration.

`PreviewSessionController` drives one preview session from start to
shutdown:

1. validate the external tool and the required input files (fatal);
2. build the site if the build output is missing or empty, then sync the
   stylesheet into it;
3. record initial digests of the watched files;
4. open the entry point in the browser, once;
5. install signal handlers, start the watcher and poll the shutdown flag.

The controller never interrupts an in-flight build: signals only set the
shutdown flag, which is checked between polls.
"""

from __future__ import annotations

import shutil
import signal
import time
from typing import TYPE_CHECKING

from boostlook.browser import select_browser_opener
from boostlook.config.logging import get_logger
from boostlook.config.types import PreviewMode, RebuildStrategy
from boostlook.errors import BoostlookError, MissingInputError, ToolNotFoundError
from boostlook.invoker import ExternalBuildInvoker
from boostlook.playbook import requires_fetch
from boostlook.session import SessionState
from boostlook.sync import sync_artifact
from boostlook.watcher import ChangeWatcher, WatchTarget

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path
    from types import FrameType

    from boostlook.browser import BrowserOpener
    from boostlook.config.logging import BoostlookLogger
    from boostlook.config.model import GeneratorProfile, PreviewConfig

logger: BoostlookLogger = get_logger(__name__)

TOOL_LABELS: dict[PreviewMode, str] = {
    PreviewMode.ANTORA: "Antora",
    PreviewMode.B2: "b2",
}


class PreviewSessionController:
    """Run a change-driven preview session for one generator profile.

    Args:
        config (PreviewConfig): Effective configuration.
        mode (PreviewMode): Which generator profile to use.
        session (SessionState | None): Shared state; a fresh one by default.
        invoker (ExternalBuildInvoker | None): Runs the external tool.
        sync (Callable[[Path, Path], bool]): Copies the stylesheet into the build output.
        opener_factory (Callable[[], BrowserOpener | None]): Selects the browser launcher.
        sleep (Callable[[float], None]): Used by the shutdown polling loop.
    """

    def __init__(
        self,
        config: PreviewConfig,
        mode: PreviewMode,
        *,
        session: SessionState | None = None,
        invoker: ExternalBuildInvoker | None = None,
        sync: Callable[[Path, Path], bool] = sync_artifact,
        opener_factory: Callable[[], BrowserOpener | None] = select_browser_opener,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.mode = mode
        self.profile: GeneratorProfile = config.profile(mode)
        self.session = session or SessionState()
        self.invoker = invoker or ExternalBuildInvoker()
        self._sync = sync
        self._opener_factory = opener_factory
        self._sleep = sleep
        self.watcher: ChangeWatcher = ChangeWatcher(
            self.watch_targets(),
            self.session,
            sync=self.sync_stylesheet,
            rebuild=self.rebuild_site,
            patterns=config.watch_patterns or None,
            latency=config.latency,
        )

    @property
    def tool_label(self) -> str:
        """Display name of the external tool."""
        return TOOL_LABELS[self.mode]

    @property
    def entry_point(self) -> Path:
        """The page opened in the browser."""
        return self.profile.build_dir / self.profile.entry_point

    def watch_targets(self) -> list[WatchTarget]:
        """Return the watched files with their rebuild strategies."""
        return [
            WatchTarget(self.config.stylesheet, self.profile.stylesheet_strategy),
            WatchTarget(self.config.extension, RebuildStrategy.FULL_REBUILD),
        ]

    # ---------- startup ----------

    def clean_build(self) -> None:
        """Delete the profile's clean directory (forced clean rebuild)."""
        clean_dir: Path = self.profile.clean_dir
        if clean_dir.exists():
            shutil.rmtree(clean_dir)
            logger.info("Build directory %s cleared. Starting fresh build...", clean_dir)

    def check_dependencies(self) -> None:
        """Verify the external tool and the required input files.

        Raises:
            ToolNotFoundError: If the tool cannot report its version.
            MissingInputError: If the stylesheet, extension or config file is missing.
        """
        version: str | None = self.invoker.query_version(self.profile.version_command())
        if version is None:
            cmd: str = " ".join(self.profile.command)
            logger.error("'%s' command failed. Is %s installed?", cmd, self.tool_label)
            raise ToolNotFoundError(f"'{cmd}' is not available; please install {self.tool_label}")
        self.session.tool_version = version
        logger.info("Using %s version: %s", self.tool_label, version)

        required: tuple[tuple[str, Path], ...] = (
            ("Source stylesheet", self.config.stylesheet),
            ("Source extension", self.config.extension),
            (f"{self.tool_label} configuration", self.profile.config_file),
        )
        for label, path in required:
            if not path.is_file():
                logger.error("%s not found: %s", label, path)
                raise MissingInputError(f"{label} not found: {path}")

    def build_site(self) -> None:
        """Run the external build, then sync the stylesheet.

        Raises:
            BuildError: If the build fails; no sync is attempted.
        """
        fetch: bool = self.mode is PreviewMode.ANTORA and requires_fetch(self.profile.config_file)
        if fetch:
            logger.info("Fetching remote content and building site...")
        else:
            logger.info("Building site with %s...", self.tool_label)
        self.invoker.invoke(self.profile.build_command(fetch=fetch), self.profile.working_dir)
        logger.info("Site built successfully with boostlook styling applied")
        self.sync_stylesheet()

    def rebuild_site(self) -> None:
        """Delete the build output and build again."""
        logger.info("Rebuilding entire site...")
        if self.profile.build_dir.exists():
            shutil.rmtree(self.profile.build_dir)
        self.build_site()

    def sync_stylesheet(self) -> bool:
        """Copy the working stylesheet over the one in the build output."""
        return self._sync(self.config.stylesheet, self.profile.stylesheet_target)

    def ensure_site_built(self) -> None:
        """Build when the build output is missing or empty, otherwise reuse it."""
        build_dir: Path = self.profile.build_dir
        if build_dir.is_dir() and any(build_dir.iterdir()):
            logger.info("Using existing build. Run with --rebuild to force a fresh build.")
            self.sync_stylesheet()
            return
        logger.info("Build directory not found or empty. Building site...")
        self.build_site()

    def record_hashes(self) -> None:
        """Store initial digests of the watched files.

        Raises:
            BoostlookError: If a watched file cannot be read.
        """
        try:
            self.watcher.record_hashes()
        except OSError as exc:
            raise BoostlookError(f"Cannot read watched file: {exc}") from exc

    def open_in_browser(self) -> None:
        """Open the entry point in the default browser, at most once per session."""
        if self.session.browser_opened:
            return

        entry: Path = self.entry_point
        if not entry.is_file():
            logger.error("Site index not found: %s", entry)
            return

        opener: BrowserOpener | None = self._opener_factory()
        if opener is None:
            logger.warning("Unsupported OS. Please open %s manually", entry)
            return
        try:
            opener.open(entry)
        except OSError as exc:
            logger.warning("Cannot open browser (%s). Please open %s manually", exc, entry)
            return
        self.session.browser_opened = True
        logger.info("Opened site in browser: %s", entry)

    def prepare(self, *, rebuild: bool = False) -> None:
        """Run the startup sequence up to and including the browser-open step.

        Args:
            rebuild (bool): Delete the build output first (forced clean rebuild).
        """
        if rebuild:
            self.clean_build()
        self.check_dependencies()
        self.ensure_site_built()
        self.record_hashes()
        self.open_in_browser()

    # ---------- watch loop ----------

    def _on_signal(self, signum: int, frame: FrameType | None) -> None:
        self.session.request_shutdown()

    def install_signal_handlers(self) -> None:
        """Make SIGINT/SIGTERM request a graceful shutdown."""
        signal.signal(signal.SIGINT, self._on_signal)
        signal.signal(signal.SIGTERM, self._on_signal)

    def print_instructions(self) -> None:
        """Log what is watched and where the preview lives."""
        lines: list[str] = [
            "",
            f"=== Boostlook {self.tool_label} Preview ===",
            f"Watching {self.config.stylesheet.name} and {self.config.extension.name} for changes",
            "",
            "Changes detected will trigger:",
        ]
        for target in self.watcher.targets:
            action: str = (
                "Full rebuild"
                if target.strategy is RebuildStrategy.FULL_REBUILD
                else "Copy into the built site"
            )
            lines.append(f"  • {target.path.name} → {action}")
        lines += [
            "",
            "To view the styled site, open this URL in your browser:",
            f"  {self.entry_point.resolve().as_uri()}",
            "",
            "Press Ctrl+C to stop the preview",
            "=" * 40,
            "",
        ]
        for line in lines:
            logger.info(line)

    def wait_for_shutdown(self) -> None:
        """Block until the shutdown flag is set."""
        while not self.session.shutdown_requested:
            self._sleep(self.config.poll_interval)

    def serve(self) -> None:
        """Watch for changes until a shutdown is requested.

        Raises:
            BoostlookError: The fatal error recorded by the watcher, if any.
        """
        self.install_signal_handlers()
        self.watcher.start()
        try:
            self.print_instructions()
            self.wait_for_shutdown()
        finally:
            logger.info("Shutting down...")
            self.watcher.stop()
        if self.session.fatal_error is not None:
            raise self.session.fatal_error

    def run(self, *, rebuild: bool = False) -> None:
        """Run a full preview session."""
        self.prepare(rebuild=rebuild)
        self.serve()
