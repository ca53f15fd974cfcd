"""
md2drupal - Markdown to CMS-ready HTML.

Renders GitHub-flavored Markdown through Pandoc and rewrites the result into
the markup the CMS expects: slugged heading ids, wrapped tables, media embed
placeholders for images and PHP highlighting for shell snippets.
"""

from .converter import convert_file, convert_markdown
from .errors import ConversionError, InputReadError, OutputWriteError, RenderError
from .markdown.document import ConversionOptions

__version__ = "1.0.0"
__all__ = [
    "ConversionError",
    "ConversionOptions",
    "InputReadError",
    "OutputWriteError",
    "RenderError",
    "convert_file",
    "convert_markdown",
]
