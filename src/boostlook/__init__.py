# topmark:header:start
#
#   project      : Boostlook
#   file         : __init__.py
#   file_relpath : src/boostlook/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook package.

Boostlook is a documentation styling add-on: an HTML post-processing hook for
generated documentation and a preview loop that rebuilds the documentation
with an external generator whenever the stylesheet or the generator extension
changes.
"""

from __future__ import annotations
