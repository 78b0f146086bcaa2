# topmark:header:start
#
#   project      : Boostlook
#   file         : sync.py
#   file_relpath : src/boostlook/sync.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Copy the stylesheet into the build output.

The external toolchain places its own (possibly stale) copy of the stylesheet
in the build output; syncing overwrites it with the working copy. The
destination directory belongs to the generator, so a missing parent is only a
warning: the first build may simply not have produced it yet.
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from boostlook.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)


def sync_artifact(source: Path, destination: Path) -> bool:
    """Overwrite ``destination`` with the bytes of ``source``.

    Args:
        source (Path): File to copy.
        destination (Path): Target path inside the build output.

    Returns:
        bool: True if the copy succeeded, False if it was skipped or failed.
    """
    if not destination.parent.is_dir():
        logger.warning("Target directory not found: %s", destination.parent)
        return False

    logger.info("Copying %s to %s", source.name, destination)
    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        logger.warning("Cannot copy %s to %s: %s", source, destination, exc)
        return False

    logger.info("Updated built site with current %s", source.name)
    return True
