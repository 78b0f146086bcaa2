# topmark:header:start
#
#   project      : Boostlook
#   file         : playbook.py
#   file_relpath : src/boostlook/playbook.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Inspect an Antora playbook for remote content.

Only one value matters here: the UI bundle URL. A remote (``http(s)``) bundle
means the build must run with ``--fetch``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from boostlook.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)


def find_ui_bundle_url(text: str) -> str | None:
    """Return the ``ui.bundle.url`` value of a playbook, if present.

    Args:
        text (str): Playbook YAML text.

    Returns:
        str | None: The URL, or None when the key is absent or not a string.

    Raises:
        yaml.YAMLError: If ``text`` is not valid YAML.
    """
    data: Any = yaml.safe_load(text)
    if not isinstance(data, dict):
        return None
    ui: Any = data.get("ui")
    bundle: Any = ui.get("bundle") if isinstance(ui, dict) else None
    url: Any = bundle.get("url") if isinstance(bundle, dict) else None
    if not isinstance(url, str):
        return None
    return url.strip() or None


def requires_fetch(playbook: Path) -> bool:
    """Tell whether building ``playbook`` needs remote content to be fetched.

    Args:
        playbook (Path): Antora playbook file.

    Returns:
        bool: True if the UI bundle URL is an ``http(s)`` URL.
    """
    try:
        url: str | None = find_ui_bundle_url(playbook.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Cannot read playbook %s: %s", playbook, exc)
        return False
    remote: bool = url is not None and url.startswith(("http://", "https://"))
    logger.debug("UI bundle URL: %s (remote: %s)", url, remote)
    return remote
