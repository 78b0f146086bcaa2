# topmark:header:start
#
#   project      : Boostlook
#   file         : hashing.py
#   file_relpath : src/boostlook/hashing.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Content fingerprints for change detection.

Filesystem notifications are noisy (editors write temp files, touch mtimes,
save twice). A preview session only reacts when a file's bytes actually
changed, which is decided by comparing digests.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

_CHUNK_SIZE = 64 * 1024


def file_digest(path: Path) -> str:
    """Return the MD5 hex digest of a file's bytes.

    MD5 is used purely to detect changes, never for security.

    Args:
        path (Path): File to fingerprint.

    Returns:
        str: Lowercase hexadecimal digest.

    Raises:
        OSError: If the file cannot be read.
    """
    h = hashlib.md5(usedforsecurity=False)
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
            h.update(chunk)
    return h.hexdigest()
