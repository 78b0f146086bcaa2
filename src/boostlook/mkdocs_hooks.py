# topmark:header:start
#
#   project      : Boostlook
#   file         : mkdocs_hooks.py
#   file_relpath : src/boostlook/mkdocs_hooks.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""MkDocs hooks applying the Boostlook HTML post-processing.

Register in ``mkdocs.yml``::

    hooks:
      - boostlook/mkdocs_hooks.py   # or a path to the installed module

    extra:
      boostlook_vendor_dir: vendor  # relative to mkdocs.yml

The highlight.js assets are read once in `on_config`; `on_post_page` then
transforms every rendered page.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from boostlook.config.logging import get_logger
from boostlook.postprocess import HtmlPostprocessor

logger = get_logger(__name__)

VENDOR_DIR_KEY: str = "boostlook_vendor_dir"

# Built in on_config, read by on_post_page.
postprocessor: HtmlPostprocessor | None = None


def on_config(config: Any, **kwargs: Any) -> Any:
    """Load the highlight.js assets once before any page is built.

    Args:
        config (Any): The MkDocs config (mapping-like); ``extra.boostlook_vendor_dir``
            and ``config_file_path`` are read.
        **kwargs (Any): Additional keyword arguments passed by MkDocs. Unused.

    Returns:
        Any: The unchanged config, as required by the hook API.
    """
    global postprocessor  # MUST declare global intent to WRITE

    extra: dict[str, Any] = dict(config.get("extra") or {})
    config_path: str | None = config.get("config_file_path")
    base: Path = Path(config_path).parent if config_path else Path.cwd()
    vendor_dir: Path = base / str(extra.get(VENDOR_DIR_KEY, "vendor"))

    postprocessor = HtmlPostprocessor.from_vendor_dir(vendor_dir)
    logger.info("Boostlook post-processing enabled (assets from %s)", vendor_dir)
    return config


def on_post_page(output: str, page: Any, config: Any, **kwargs: Any) -> str:
    """Transform a rendered page.

    Args:
        output (str): Full HTML of the page.
        page (Any): MkDocs page object. Unused.
        config (Any): MkDocs config. Unused.
        **kwargs (Any): Additional keyword arguments passed by MkDocs. Unused.

    Returns:
        str: The post-processed HTML, or ``output`` unchanged if `on_config` did not run.
    """
    if postprocessor is None:
        logger.warning("Boostlook assets not loaded; page left unchanged")
        return output
    return postprocessor.transform(output)
