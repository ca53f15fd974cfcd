"""
Command-line entry point.

    md2drupal article.md               # writes article.html
    md2drupal article.md -o out.html --css
    md2drupal docs/*.md
"""

from __future__ import annotations

import argparse
import logging
import sys

from .converter import convert_file
from .errors import ConversionError
from .markdown.document import ConversionOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2drupal",
        description="Convert Markdown files to HTML ready to paste into the CMS",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="Markdown file(s) to convert",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output HTML file (single input only; default: INPUT with .html suffix)",
    )
    parser.add_argument(
        "--css",
        action="store_true",
        help="Link GitHub Markdown CSS and add body padding",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output and len(args.inputs) > 1:
        parser.error("--output can only be used with a single input file")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = ConversionOptions(include_css=args.css)
    exit_code = 0

    for input_path in args.inputs:
        try:
            output_path = convert_file(input_path, args.output, options)
        except ConversionError as exc:
            logger.debug("Conversion of %s failed", input_path, exc_info=True)
            print(f"Error: {exc}", file=sys.stderr)
            exit_code = 1
            continue

        print(f"Converted {input_path} to {output_path}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
