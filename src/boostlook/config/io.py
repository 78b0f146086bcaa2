# topmark:header:start
#
#   project      : Boostlook
#   file         : io.py
#   file_relpath : src/boostlook/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Load, query and render TOML configuration sources.

This module provides I/O helpers for reading Boostlook configuration from
on-disk TOML files (``boostlook.toml`` / ``pyproject.toml``), the built-in
runtime defaults, and small getters for extracting typed values from parsed
tables.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from boostlook.config.keys import Toml
from boostlook.config.logging import get_logger
from boostlook.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from boostlook.config.logging import BoostlookLogger

TomlTable = dict[str, Any]

logger: BoostlookLogger = get_logger(__name__)


_DEFAULTS: TomlTable = {
    Toml.SECTION_PATHS: {
        Toml.KEY_STYLESHEET: "boostlook.css",
        Toml.KEY_EXTENSION: "boostlook.rb",
        Toml.KEY_VENDOR_DIR: "vendor",
    },
    Toml.SECTION_WATCH: {
        # Empty: derived from the watched files' suffixes
        Toml.KEY_PATTERNS: [],
        Toml.KEY_LATENCY: 0.5,
        Toml.KEY_POLL_INTERVAL: 1.0,
    },
    Toml.SECTION_ANTORA: {
        Toml.KEY_COMMAND: ["npx", "antora"],
        Toml.KEY_VERSION_FLAG: "--version",
        Toml.KEY_WORKING_DIR: "doc/antora_specimen",
        Toml.KEY_CONFIG_FILE: "doc/antora_specimen/playbook.yml",
        Toml.KEY_BUILD_ARGS: ["playbook.yml"],
        Toml.KEY_FETCH_FLAG: "--fetch",
        Toml.KEY_BUILD_DIR: "doc/antora_specimen/build/site",
        Toml.KEY_CLEAN_DIR: "doc/antora_specimen/build",
        Toml.KEY_STYLESHEET_TARGET: "doc/antora_specimen/build/site/_/css/boostlook.css",
        Toml.KEY_ENTRY_POINT: "index.html",
        Toml.KEY_STYLESHEET_STRATEGY: "fast-sync",
    },
    Toml.SECTION_B2: {
        Toml.KEY_COMMAND: ["b2"],
        Toml.KEY_VERSION_FLAG: "--version",
        Toml.KEY_WORKING_DIR: ".",
        Toml.KEY_CONFIG_FILE: "doc/Jamfile",
        Toml.KEY_BUILD_ARGS: ["doc"],
        Toml.KEY_FETCH_FLAG: "",
        Toml.KEY_BUILD_DIR: "doc/html",
        Toml.KEY_CLEAN_DIR: "doc/html",
        Toml.KEY_STYLESHEET_TARGET: "doc/html/boostlook.css",
        Toml.KEY_ENTRY_POINT: "index.html",
        Toml.KEY_STYLESHEET_STRATEGY: "fast-sync",
    },
}


def load_defaults_dict() -> TomlTable:
    """Return Boostlook's runtime defaults as a Python dict.

    This function performs no I/O. The returned value is a deep copy so callers
    can mutate it safely.

    Returns:
        TomlTable: A TOML-table-compatible dict containing the runtime defaults.
    """
    return copy.deepcopy(_DEFAULTS)


def load_toml_dict(path: Path) -> TomlTable:
    """Parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file to read.

    Returns:
        TomlTable: The parsed document, unwrapped from tomlkit containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded TOML from %s", path)
    return doc.unwrap()


def to_toml(table: TomlTable) -> str:
    """Render a plain dict as TOML text."""
    return tomlkit.dumps(table)


def merge_tables(base: TomlTable, overlay: TomlTable) -> TomlTable:
    """Recursively merge ``overlay`` onto ``base`` and return a new dict.

    Nested tables are merged key by key; every other value in ``overlay``
    replaces the one in ``base``.

    Args:
        base (TomlTable): Lower-precedence table.
        overlay (TomlTable): Higher-precedence table.

    Returns:
        TomlTable: The merged table.
    """
    merged: TomlTable = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_tables(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: The sub-table, or an empty dict when absent or not a table.
    """
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return value
    if value is not None:
        logger.warning("Expected a table for %r, got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value(table: TomlTable, key: str, default: str = "") -> str:
    """Extract a string value from a TOML table.

    Scalars (``int``, ``float``, ``bool``) are coerced via ``str(...)``. When the
    key is missing or the value is not coercible, ``default`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (str): Default value if the key is not found or not coercible.

    Returns:
        str: The extracted or coerced string value, or ``default``.
    """
    value: Any | None = table.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug("Cannot coerce %r to string, returning default (%s)", value, default)
    return default


def get_float_value(table: TomlTable, key: str, default: float) -> float:
    """Extract a number from a TOML table, falling back to ``default``."""
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        logger.debug("Refusing bool %r for %r, returning default (%s)", value, key, default)
        return default
    if isinstance(value, (int, float)):
        return float(value)
    logger.debug("Cannot coerce %r to float, returning default (%s)", value, default)
    return default


def get_string_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings from a TOML table.

    A single string is accepted as a one-element list. Non-string items are
    dropped with a warning.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str]: The string items (empty if absent).
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected a list of strings for %r, got %s", key, type(value).__name__)
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string item %r in %r", item, key)
    return out
