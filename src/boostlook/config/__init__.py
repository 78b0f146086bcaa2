# topmark:header:start
#
#   project      : Boostlook
#   file         : __init__.py
#   file_relpath : src/boostlook/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook configuration: TOML discovery, defaults and the runtime model."""

from __future__ import annotations

from boostlook.config.model import (
    GeneratorProfile,
    PreviewConfig,
    discover_config_file,
    load_config,
)
from boostlook.config.types import PreviewMode, RebuildStrategy

__all__ = [
    "GeneratorProfile",
    "PreviewConfig",
    "PreviewMode",
    "RebuildStrategy",
    "discover_config_file",
    "load_config",
]
