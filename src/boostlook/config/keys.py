# topmark:header:start
#
#   project      : Boostlook
#   file         : keys.py
#   file_relpath : src/boostlook/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Canonical TOML section and key names for Boostlook configuration.

These constants are the external configuration schema as it appears in
``boostlook.toml`` and in ``[tool.boostlook]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Boostlook configuration."""

    # [paths]
    SECTION_PATHS: Final[str] = "paths"

    KEY_STYLESHEET: Final[str] = "stylesheet"
    KEY_EXTENSION: Final[str] = "extension"
    KEY_VENDOR_DIR: Final[str] = "vendor-dir"

    # [watch]
    SECTION_WATCH: Final[str] = "watch"

    KEY_PATTERNS: Final[str] = "patterns"
    KEY_LATENCY: Final[str] = "latency"
    KEY_POLL_INTERVAL: Final[str] = "poll-interval"

    # [antora] / [b2]
    SECTION_ANTORA: Final[str] = "antora"
    SECTION_B2: Final[str] = "b2"

    KEY_COMMAND: Final[str] = "command"
    KEY_VERSION_FLAG: Final[str] = "version-flag"
    KEY_WORKING_DIR: Final[str] = "working-dir"
    KEY_CONFIG_FILE: Final[str] = "config-file"
    KEY_BUILD_ARGS: Final[str] = "build-args"
    KEY_FETCH_FLAG: Final[str] = "fetch-flag"
    KEY_BUILD_DIR: Final[str] = "build-dir"
    KEY_CLEAN_DIR: Final[str] = "clean-dir"
    KEY_STYLESHEET_TARGET: Final[str] = "stylesheet-target"
    KEY_ENTRY_POINT: Final[str] = "entry-point"
    KEY_STYLESHEET_STRATEGY: Final[str] = "stylesheet-strategy"

    PROFILE_SECTIONS: Final[tuple[str, ...]] = (SECTION_ANTORA, SECTION_B2)
