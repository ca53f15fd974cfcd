"""Markdown to CMS-ready HTML documents."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import InputReadError, OutputWriteError
from .markdown.document import ConversionOptions, assemble_document
from .markdown.preprocessors.front_matter import FRONT_MATTER_KEY
from .markdown.renderer import TITLE_KEY, render_markdown

logger = logging.getLogger(__name__)


def convert_markdown(text: str, options: ConversionOptions | None = None) -> str:
    """
    Convert Markdown source into a complete HTML document string.

    Every call builds its own context and trees, so conversions never share
    state.
    """
    context: dict = {}
    body = render_markdown(text, context)
    return assemble_document(
        body,
        title=context.get(TITLE_KEY),
        front_matter=context.get(FRONT_MATTER_KEY),
        options=options,
    )


def default_output_path(input_path: Path) -> Path:
    return input_path.with_suffix(".html")


def convert_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    options: ConversionOptions | None = None,
) -> Path:
    """
    Convert a Markdown file and write the HTML document next to it.

    Args:
        input_path: Markdown file, read as UTF-8
        output_path: Destination; defaults to the input path with ".html"
        options: Conversion options

    Returns:
        The path written to

    Raises:
        InputReadError: If the input cannot be read or decoded
        OutputWriteError: If the output cannot be written
        RenderError: If Pandoc fails
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path else default_output_path(input_path)

    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Cannot read input file {input_path}: {exc}") from exc

    logger.debug("Converting %s (%d characters)", input_path, len(text))
    document = convert_markdown(text, options)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write output file {output_path}: {exc}") from exc

    logger.info("Converted %s to %s", input_path, output_path)
    return output_path
