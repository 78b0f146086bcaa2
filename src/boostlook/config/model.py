# topmark:header:start
#
#   project      : Boostlook
#   file         : model.py
#   file_relpath : src/boostlook/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Configuration model for preview sessions.

This module defines:
    - `GeneratorProfile`: the immutable settings of one external tool
      (Antora or b2): how to query its version, how to build, and where the
      build output lands.
    - `PreviewConfig`: the immutable runtime snapshot used by a preview
      session, holding the source paths, watcher tuning and every profile.

Path semantics:
    - Relative paths in a config file are resolved against the project root
      (the directory holding the config file, or the invocation CWD when
      running on defaults).

Discovery order in the project root:
    1. ``boostlook.toml``
    2. ``[tool.boostlook]`` in ``pyproject.toml``
    3. built-in defaults (`load_defaults_dict`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from boostlook.config.io import (
    get_float_value,
    get_string_list_value,
    get_string_value,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    merge_tables,
)
from boostlook.config.keys import Toml
from boostlook.config.logging import get_logger
from boostlook.config.types import PreviewMode, RebuildStrategy
from boostlook.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from boostlook.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from boostlook.config.io import TomlTable
    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratorProfile:
    """Settings for one external documentation tool.

    Attributes:
        mode (PreviewMode): Which tool this profile drives.
        command (tuple[str, ...]): Executable and leading arguments (e.g. ``npx antora``).
        version_flag (str): Flag that makes the tool print its version.
        working_dir (Path): Directory the tool runs in.
        config_file (Path): Playbook/Jamfile that must exist before building.
        build_args (tuple[str, ...]): Arguments appended for a build (playbook or target).
        fetch_flag (str): Flag requesting remote content; empty when the tool has none.
        build_dir (Path): Build output directory (the BuildOutputLocation).
        clean_dir (Path): Directory removed by a forced clean rebuild.
        stylesheet_target (Path): Where the stylesheet is copied inside the build output.
        entry_point (Path): Page opened in the browser.
        stylesheet_strategy (RebuildStrategy): Reaction to stylesheet changes.
    """

    mode: PreviewMode
    command: tuple[str, ...]
    version_flag: str
    working_dir: Path
    config_file: Path
    build_args: tuple[str, ...]
    fetch_flag: str
    build_dir: Path
    clean_dir: Path
    stylesheet_target: Path
    entry_point: Path
    stylesheet_strategy: RebuildStrategy

    def version_command(self) -> list[str]:
        """Return the command line that queries the tool version."""
        return [*self.command, self.version_flag]

    def build_command(self, *, fetch: bool = False) -> list[str]:
        """Return the command line for a build.

        Args:
            fetch (bool): Insert the profile's fetch flag (ignored when it has none).

        Returns:
            list[str]: The argument vector.
        """
        argv: list[str] = list(self.command)
        if fetch and self.fetch_flag:
            argv.append(self.fetch_flag)
        argv.extend(self.build_args)
        return argv

    def to_toml_dict(self, root: Path) -> TomlTable:
        """Render this profile back to its TOML table shape, paths relative to ``root``."""
        return {
            Toml.KEY_COMMAND: list(self.command),
            Toml.KEY_VERSION_FLAG: self.version_flag,
            Toml.KEY_WORKING_DIR: _relative(self.working_dir, root),
            Toml.KEY_CONFIG_FILE: _relative(self.config_file, root),
            Toml.KEY_BUILD_ARGS: list(self.build_args),
            Toml.KEY_FETCH_FLAG: self.fetch_flag,
            Toml.KEY_BUILD_DIR: _relative(self.build_dir, root),
            Toml.KEY_CLEAN_DIR: _relative(self.clean_dir, root),
            Toml.KEY_STYLESHEET_TARGET: _relative(self.stylesheet_target, root),
            Toml.KEY_ENTRY_POINT: self.entry_point.as_posix(),
            Toml.KEY_STYLESHEET_STRATEGY: self.stylesheet_strategy.value,
        }


@dataclass(frozen=True, slots=True)
class PreviewConfig:
    """Immutable runtime configuration for Boostlook.

    Attributes:
        root (Path): Project root; relative config paths resolve against it.
        stylesheet (Path): Source stylesheet being previewed.
        extension (Path): Generator extension/hook script; changes force a full rebuild.
        vendor_dir (Path): Directory holding the highlight.js assets.
        watch_patterns (tuple[str, ...]): File-name patterns the watcher subscribes to.
        latency (float): Observer polling latency in seconds.
        poll_interval (float): Shutdown-flag polling interval in seconds.
        profiles (Mapping[PreviewMode, GeneratorProfile]): Settings per external tool.
        config_file (Path | None): The file the values were read from, if any.
    """

    root: Path
    stylesheet: Path
    extension: Path
    vendor_dir: Path
    watch_patterns: tuple[str, ...]
    latency: float
    poll_interval: float
    profiles: Mapping[PreviewMode, GeneratorProfile] = field(default_factory=dict)
    config_file: Path | None = None

    def profile(self, mode: PreviewMode) -> GeneratorProfile:
        """Return the generator profile for ``mode``."""
        return self.profiles[mode]

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        root: Path,
        config_file: Path | None = None,
    ) -> PreviewConfig:
        """Build a config from a TOML table merged over the runtime defaults.

        Args:
            data (TomlTable): User table (already unwrapped from ``[tool.boostlook]``).
            root (Path): Project root for relative paths.
            config_file (Path | None): Source file, for diagnostics.

        Returns:
            PreviewConfig: The frozen runtime configuration.

        Raises:
            ConfigError: If a value is invalid (e.g. an unknown rebuild strategy).
        """
        merged: TomlTable = merge_tables(load_defaults_dict(), data)
        paths_tbl: TomlTable = get_table_value(merged, Toml.SECTION_PATHS)
        watch_tbl: TomlTable = get_table_value(merged, Toml.SECTION_WATCH)

        profiles: dict[PreviewMode, GeneratorProfile] = {
            mode: _profile_from_table(mode, get_table_value(merged, mode.value), root)
            for mode in PreviewMode
        }

        latency: float = get_float_value(watch_tbl, Toml.KEY_LATENCY, 0.5)
        poll_interval: float = get_float_value(watch_tbl, Toml.KEY_POLL_INTERVAL, 1.0)
        if latency <= 0 or poll_interval <= 0:
            raise ConfigError(
                f"[{Toml.SECTION_WATCH}] {Toml.KEY_LATENCY} and {Toml.KEY_POLL_INTERVAL} "
                "must be positive"
            )

        return cls(
            root=root,
            stylesheet=root / get_string_value(paths_tbl, Toml.KEY_STYLESHEET, "boostlook.css"),
            extension=root / get_string_value(paths_tbl, Toml.KEY_EXTENSION, "boostlook.rb"),
            vendor_dir=root / get_string_value(paths_tbl, Toml.KEY_VENDOR_DIR, "vendor"),
            watch_patterns=tuple(get_string_list_value(watch_tbl, Toml.KEY_PATTERNS)),
            latency=latency,
            poll_interval=poll_interval,
            profiles=profiles,
            config_file=config_file,
        )

    def to_toml_dict(self) -> TomlTable:
        """Render the effective configuration as a TOML table."""
        out: TomlTable = {
            Toml.SECTION_PATHS: {
                Toml.KEY_STYLESHEET: _relative(self.stylesheet, self.root),
                Toml.KEY_EXTENSION: _relative(self.extension, self.root),
                Toml.KEY_VENDOR_DIR: _relative(self.vendor_dir, self.root),
            },
            Toml.SECTION_WATCH: {
                Toml.KEY_PATTERNS: list(self.watch_patterns),
                Toml.KEY_LATENCY: self.latency,
                Toml.KEY_POLL_INTERVAL: self.poll_interval,
            },
        }
        for mode, profile in self.profiles.items():
            out[mode.value] = profile.to_toml_dict(self.root)
        return out


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _parse_strategy(value: str, section: str) -> RebuildStrategy:
    try:
        return RebuildStrategy(value)
    except ValueError:
        allowed: str = ", ".join(s.value for s in RebuildStrategy)
        raise ConfigError(
            f"[{section}] {Toml.KEY_STYLESHEET_STRATEGY} must be one of {allowed}, got {value!r}"
        ) from None


def _profile_from_table(mode: PreviewMode, tbl: TomlTable, root: Path) -> GeneratorProfile:
    command: list[str] = get_string_list_value(tbl, Toml.KEY_COMMAND)
    if not command:
        raise ConfigError(f"[{mode.value}] {Toml.KEY_COMMAND} must not be empty")
    build_dir: Path = root / get_string_value(tbl, Toml.KEY_BUILD_DIR)
    clean_dir_value: str = get_string_value(tbl, Toml.KEY_CLEAN_DIR)
    return GeneratorProfile(
        mode=mode,
        command=tuple(command),
        version_flag=get_string_value(tbl, Toml.KEY_VERSION_FLAG, "--version"),
        working_dir=root / get_string_value(tbl, Toml.KEY_WORKING_DIR, "."),
        config_file=root / get_string_value(tbl, Toml.KEY_CONFIG_FILE),
        build_args=tuple(get_string_list_value(tbl, Toml.KEY_BUILD_ARGS)),
        fetch_flag=get_string_value(tbl, Toml.KEY_FETCH_FLAG),
        build_dir=build_dir,
        clean_dir=root / clean_dir_value if clean_dir_value else build_dir,
        stylesheet_target=root / get_string_value(tbl, Toml.KEY_STYLESHEET_TARGET),
        entry_point=Path(get_string_value(tbl, Toml.KEY_ENTRY_POINT, "index.html")),
        stylesheet_strategy=_parse_strategy(
            get_string_value(tbl, Toml.KEY_STYLESHEET_STRATEGY, RebuildStrategy.FAST_SYNC.value),
            mode.value,
        ),
    )


def discover_config_file(root: Path) -> tuple[Path | None, TomlTable]:
    """Find the project configuration in ``root``.

    Args:
        root (Path): Directory to search.

    Returns:
        tuple[Path | None, TomlTable]: The file used (or None) and its Boostlook table.
    """
    candidate: Path = root / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate, load_toml_dict(candidate)

    pyproject: Path = root / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        tool_tbl: TomlTable = get_table_value(load_toml_dict(pyproject), "tool")
        if "boostlook" in tool_tbl:
            return pyproject, get_table_value(tool_tbl, "boostlook")

    return None, {}


def load_config(root: Path | None = None, config_file: Path | None = None) -> PreviewConfig:
    """Load the effective preview configuration.

    Args:
        root (Path | None): Project root; defaults to the current working directory.
        config_file (Path | None): Explicit config file; its directory becomes the root.
            A ``pyproject.toml`` is read from its ``[tool.boostlook]`` table.

    Returns:
        PreviewConfig: The runtime configuration.
    """
    data: TomlTable
    if config_file is not None:
        config_file = config_file.resolve()
        root = config_file.parent
        data = load_toml_dict(config_file)
        if config_file.name == PYPROJECT_FILE_NAME:
            data = get_table_value(get_table_value(data, "tool"), "boostlook")
    else:
        root = (root or Path.cwd()).resolve()
        config_file, data = discover_config_file(root)

    if config_file is None:
        logger.debug("No Boostlook configuration found in %s; using defaults", root)
    else:
        logger.debug("Using configuration from %s", config_file)

    extra: set[str] = set(data) - {Toml.SECTION_PATHS, Toml.SECTION_WATCH, *Toml.PROFILE_SECTIONS}
    if extra:
        logger.warning("Ignoring unknown configuration sections: %s", ", ".join(sorted(extra)))

    return PreviewConfig.from_toml_dict(data, root=root, config_file=config_file)
