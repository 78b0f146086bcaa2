# topmark:header:start
#
#   project      : Boostlook
#   file         : assets.py
#   file_relpath : src/boostlook/postprocess/assets.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Markup and script fragments injected into generated HTML.

The highlight.js blobs are vendored files read at construction time
(`load_vendor_assets`); everything else is fixed markup kept here so the
post-processor stays a sequence of plain string operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from boostlook.constants import HIGHLIGHT_CSS_NAME, HIGHLIGHT_JS_NAME
from boostlook.errors import MissingInputError

if TYPE_CHECKING:
    from pathlib import Path

WRAPPER_OPEN: Final[str] = '<div class="boostlook">'
WRAPPER_CLOSE: Final[str] = "</div>"

TOC_STORAGE_KEY: Final[str] = "tocPinned"

TOC_TOGGLE_BUTTON: Final[str] = (
    '<button id="toggle-toc" title="Show Table of Contents" '
    'aria-expanded="false" aria-controls="toc">☰</button>'
)

FOOTER_SEPARATOR: Final[str] = '<hr class="boostlook-footer-separator">'

# Pinned state persists in localStorage; unpinned TOC shows on hover only.
TOC_SCRIPT: Final[str] = """<script>
(function() {
  const html = document.documentElement;
  const isPinned = localStorage.getItem('%(key)s') === 'true';

  html.classList.add('toc-hidden');
  if (isPinned) {
    html.classList.add('toc-pinned');
    html.classList.add('toc-visible');
    html.classList.remove('toc-hidden');
  }

  document.addEventListener("DOMContentLoaded", () => {
    const tocButton = document.getElementById("toggle-toc");
    const toc = document.getElementById("toc");

    if (!tocButton || !toc) return;

    let isPinned = localStorage.getItem('%(key)s') === 'true';

    function updateTocVisibility(visible) {
      html.classList.toggle("toc-visible", visible);
      html.classList.toggle("toc-hidden", !visible);
      tocButton.setAttribute("aria-expanded", visible);
      tocButton.textContent = visible ? "×" : "☰";
      tocButton.setAttribute(
        "title", visible ? "Hide Table of Contents" : "Show Table of Contents"
      );
    }

    tocButton.addEventListener("click", () => {
      isPinned = !isPinned;
      localStorage.setItem('%(key)s', isPinned);
      html.classList.toggle('toc-pinned', isPinned);
      updateTocVisibility(isPinned);
    });

    tocButton.addEventListener("mouseenter", () => {
      if (!isPinned) {
        updateTocVisibility(true);
      }
    });

    toc.addEventListener("mouseleave", () => {
      if (!isPinned) {
        updateTocVisibility(false);
      }
    });

    updateTocVisibility(isPinned);
  });
})();
</script>
""" % {"key": TOC_STORAGE_KEY}


class VendorAssets(NamedTuple):
    """The highlight.js stylesheet and script, as text."""

    highlight_css: str
    highlight_js: str


def load_vendor_assets(vendor_dir: Path) -> VendorAssets:
    """Read the vendored highlight.js files.

    Args:
        vendor_dir (Path): Directory containing ``highlight.min.css`` and ``highlight.min.js``.

    Returns:
        VendorAssets: The file contents.

    Raises:
        MissingInputError: If either file is missing or unreadable.
    """
    blobs: list[str] = []
    for name in (HIGHLIGHT_CSS_NAME, HIGHLIGHT_JS_NAME):
        path: Path = vendor_dir / name
        try:
            blobs.append(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise MissingInputError(f"Highlight.js asset not found: {path} ({exc})") from exc
    return VendorAssets(highlight_css=blobs[0], highlight_js=blobs[1])
