# topmark:header:start
#
#   project      : Boostlook
#   file         : __init__.py
#   file_relpath : src/boostlook/postprocess/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""HTML post-processing of generated documentation pages."""

from __future__ import annotations

from boostlook.postprocess.assets import VendorAssets, load_vendor_assets
from boostlook.postprocess.html import HtmlPostprocessor

__all__ = [
    "HtmlPostprocessor",
    "VendorAssets",
    "load_vendor_assets",
]
