# topmark:header:start
#
#   project      : Boostlook
#   file         : __init__.py
#   file_relpath : src/boostlook/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook CLI subcommands."""
