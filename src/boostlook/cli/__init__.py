# topmark:header:start
#
#   project      : Boostlook
#   file         : __init__.py
#   file_relpath : src/boostlook/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook command-line interface."""
