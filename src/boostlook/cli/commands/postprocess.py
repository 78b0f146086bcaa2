# topmark:header:start
#
#   project      : Boostlook
#   file         : postprocess.py
#   file_relpath : src/boostlook/cli/commands/postprocess.py
#   license      : MIT
#   copyright    : (c) 2025 The Boostlook Authors
#
# topmark:header:end

"""Boostlook `postprocess` command.

Applies the Boostlook HTML transformation to already generated pages.

Input modes:
  * Each FILE is rewritten in place.
  * A single '-' reads one document from STDIN and writes the result to STDOUT.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from boostlook.cli.options import config_file_option
from boostlook.config import load_config
from boostlook.config.logging import get_logger
from boostlook.errors import BoostlookError, BoostlookUsageError, MissingInputError
from boostlook.postprocess import HtmlPostprocessor

if TYPE_CHECKING:
    from boostlook.cli.console_api import ConsoleLike
    from boostlook.config.logging import BoostlookLogger

logger: BoostlookLogger = get_logger(__name__)


@click.command(
    name="postprocess",
    help=(
        "Apply the Boostlook layout to generated HTML pages. "
        "Files are rewritten in place; use '-' to filter STDIN to STDOUT."
    ),
)
@click.argument("files", nargs=-1, required=True, type=str)
@click.option(
    "--vendor-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding highlight.min.css and highlight.min.js "
    "(defaults to [paths] vendor-dir).",
)
@config_file_option
def postprocess_command(
    *,
    files: tuple[str, ...],
    vendor_dir: Path | None = None,
    config_file: Path | None = None,
) -> None:
    """Transform HTML files (or STDIN) with the Boostlook postprocessor.

    Args:
        files (tuple[str, ...]): Paths to rewrite, or a single ``-``.
        vendor_dir (Path | None): Override for the highlight.js asset directory.
        config_file (Path | None): Explicit configuration file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if "-" in files and len(files) > 1:
        raise BoostlookUsageError("'-' (STDIN) cannot be combined with file paths.")

    if vendor_dir is None:
        vendor_dir = load_config(config_file=config_file).vendor_dir
    postprocessor = HtmlPostprocessor.from_vendor_dir(vendor_dir)

    if files == ("-",):
        try:
            text: str = click.get_text_stream("stdin").read()
        except UnicodeDecodeError as exc:
            raise BoostlookError(f"STDIN is not valid UTF-8: {exc}") from exc
        console.print(postprocessor.transform(text), nl=False)
        return

    for name in files:
        path = Path(name)
        try:
            html: str = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MissingInputError(f"Cannot read {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise BoostlookError(f"{path} is not valid UTF-8: {exc}") from exc
        result: str = postprocessor.transform(html)
        if result == html:
            logger.warning("%s has no closing body tag; left unchanged", path)
            continue
        path.write_text(result, encoding="utf-8")
        logger.info("Post-processed %s", path)
