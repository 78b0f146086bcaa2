# topmark:header:start
#
#   project      : Boostlook
#   file         : constants.py
#   file_relpath : src/boostlook/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    BOOSTLOOK_VERSION: str = get_version("boostlook")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    BOOSTLOOK_VERSION = "0.0.0+unknown"

# Config discovery in the project root
CONFIG_FILE_NAME: str = "boostlook.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Vendored highlight.js assets, looked up in the configured vendor directory
HIGHLIGHT_CSS_NAME: str = "highlight.min.css"
HIGHLIGHT_JS_NAME: str = "highlight.min.js"

SOURCE_HIGHLIGHTER_ATTRIBUTE: str = "source-highlighter"
SOURCE_HIGHLIGHTER_VALUE: str = "highlight.js"

LOG_LEVEL_ENV_VAR: str = "BOOSTLOOK_LOG_LEVEL"
