# topmark:header:start
#
#   project      : Boostlook
#   file         : types.py
#   file_relpath : src/boostlook/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Enumerations shared by the configuration layer and the preview loop."""

from __future__ import annotations

from enum import Enum


class RebuildStrategy(str, Enum):
    """How a preview session reacts when a watched file changes.

    Attributes:
        FAST_SYNC: Copy the file into the existing build output only.
        FULL_REBUILD: Delete the build output, run the external generator,
            then sync.
    """

    FAST_SYNC = "fast-sync"
    FULL_REBUILD = "full-rebuild"


class PreviewMode(str, Enum):
    """Which external tool produces the previewed documentation."""

    ANTORA = "antora"
    B2 = "b2"
