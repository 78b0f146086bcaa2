# topmark:header:start
#
#   project      : Boostlook
#   file         : __main__.py
#   file_relpath : src/boostlook/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Module entry point for running Boostlook via ``python -m boostlook``.

Delegates to :func:`boostlook.cli.main.cli`, the same entry point as the
``boostlook`` console script.

Examples:
    Start an Antora preview session::

        python -m boostlook preview antora
"""

from __future__ import annotations

from boostlook.cli.main import cli

if __name__ == "__main__":
    cli()
