# topmark:header:start
#
#   project      : Boostlook
#   file         : html.py
#   file_relpath : src/boostlook/postprocess/html.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Best-effort cosmetic post-pass over generated HTML.

The generator owns the document; this pass only splices fixed fragments at
known anchors. It works on the raw string with literal and regex matches
rather than an HTML parser, so the generator's output is preserved byte for
byte outside of the insertion points.

Steps, applied in order (later steps rely on earlier insertions):

1. Force the code-highlighting mode on the opening ``<body>`` tag.
2. Wrap the body content in the ``boostlook`` container.
3. Insert the TOC toggle button into the ``toc`` container, if present.
4. Insert a separator before the ``footer`` container, if present.
5. Inline the highlight.js stylesheet before ``</head>``.
6. Inline the highlight.js script and the TOC behaviour script before ``</body>``.

A missing anchor skips its step. A document without ``</body>`` is treated as
partial output and returned unchanged.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from boostlook.config.logging import get_logger
from boostlook.constants import SOURCE_HIGHLIGHTER_ATTRIBUTE, SOURCE_HIGHLIGHTER_VALUE
from boostlook.postprocess.assets import (
    FOOTER_SEPARATOR,
    TOC_SCRIPT,
    TOC_TOGGLE_BUTTON,
    WRAPPER_CLOSE,
    WRAPPER_OPEN,
    load_vendor_assets,
)

if TYPE_CHECKING:
    from collections.abc import MutableMapping
    from pathlib import Path

    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)

HEAD_CLOSE: Final[str] = "</head>"
BODY_CLOSE: Final[str] = "</body>"

# Quoted attribute values may contain ">"
BODY_OPEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""<body\b(?:[^>"']|"[^"]*"|'[^']*')*>""",
    re.IGNORECASE,
)
HIGHLIGHTER_ATTR: Final[str] = f"data-{SOURCE_HIGHLIGHTER_ATTRIBUTE}"
HIGHLIGHTER_ATTR_RE: Final[re.Pattern[str]] = re.compile(
    rf"""\s{re.escape(HIGHLIGHTER_ATTR)}\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]*)""",
    re.IGNORECASE,
)
TOC_OPEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""(<body.*?<div[^>]*id=["']toc["'][^>]*>)""",
    re.IGNORECASE | re.DOTALL,
)
FOOTER_OPEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""<div[^>]*id=["']footer["'][^>]*>""",
    re.IGNORECASE,
)


class HtmlPostprocessor:
    """Inject Boostlook markup and highlight.js into generated HTML pages.

    Args:
        highlight_css (str): highlight.js stylesheet text.
        highlight_js (str): highlight.js script text.
    """

    def __init__(self, highlight_css: str, highlight_js: str) -> None:
        self.highlight_css = highlight_css
        self.highlight_js = highlight_js

    @classmethod
    def from_vendor_dir(cls, vendor_dir: Path) -> HtmlPostprocessor:
        """Build a post-processor from ``highlight.min.css``/``highlight.min.js`` in a directory.

        Raises:
            MissingInputError: If an asset is missing.
        """
        assets = load_vendor_assets(vendor_dir)
        return cls(assets.highlight_css, assets.highlight_js)

    @property
    def style_block(self) -> str:
        """The ``<style>`` block inserted before ``</head>``."""
        return f"<style>\n{self.highlight_css}\n</style>\n"

    @property
    def script_block(self) -> str:
        """The highlight.js ``<script>`` block inserted before ``</body>``."""
        return f"<script>\n{self.highlight_js}\nhljs.highlightAll();\n</script>\n"

    def transform(
        self,
        html: str,
        attributes: MutableMapping[str, str] | None = None,
    ) -> str:
        """Return ``html`` with the Boostlook fragments spliced in.

        Args:
            html (str): A complete page produced by the documentation generator.
            attributes (MutableMapping[str, str] | None): Generator document attributes;
                its ``source-highlighter`` entry is forced to ``highlight.js``.

        Returns:
            str: The transformed page, or ``html`` itself when it has no ``</body>``.
        """
        if attributes is not None:
            previous: str | None = attributes.get(SOURCE_HIGHLIGHTER_ATTRIBUTE)
            logger.trace("Current source-highlighter: %s", previous)
            attributes[SOURCE_HIGHLIGHTER_ATTRIBUTE] = SOURCE_HIGHLIGHTER_VALUE

        if BODY_CLOSE not in html:
            logger.debug("No %s in document; leaving it unchanged", BODY_CLOSE)
            return html

        html = _force_highlighter(html)
        html = _wrap_body(html)
        html = TOC_OPEN_RE.sub(lambda m: m.group(1) + TOC_TOGGLE_BUTTON, html, count=1)
        html = FOOTER_OPEN_RE.sub(lambda m: FOOTER_SEPARATOR + m.group(0), html, count=1)
        if HEAD_CLOSE in html:
            html = html.replace(HEAD_CLOSE, f"{self.style_block}\n{HEAD_CLOSE}", 1)
        else:
            logger.debug("No %s in document; skipping stylesheet injection", HEAD_CLOSE)
        return html.replace(BODY_CLOSE, f"{self.script_block}\n{TOC_SCRIPT}{BODY_CLOSE}", 1)


def _force_highlighter(html: str) -> str:
    m = BODY_OPEN_RE.search(html)
    if m is None:
        return html
    tag: str = m.group(0)
    # Drop any prior value, then append the forced one before the closing '>'
    stripped: str = HIGHLIGHTER_ATTR_RE.sub("", tag)
    head: str = stripped[:-2] if stripped.endswith("/>") else stripped[:-1]
    new_tag: str = f'{head} {HIGHLIGHTER_ATTR}="{SOURCE_HIGHLIGHTER_VALUE}">'
    return html[: m.start()] + new_tag + html[m.end() :]


def _wrap_body(html: str) -> str:
    m = BODY_OPEN_RE.search(html)
    if m is None:
        logger.debug("No opening body tag; skipping container wrap")
        return html
    html = html[: m.end()] + WRAPPER_OPEN + html[m.end() :]
    return html.replace(BODY_CLOSE, WRAPPER_CLOSE + BODY_CLOSE, 1)
