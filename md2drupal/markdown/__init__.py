from .extensions.toc_extractor import HeadingNode, extract_toc_from_html, render_toc
from .renderer import lower_to_html, parse_markdown, render_markdown
from .slugs import heading_id, slugify_heading

__all__ = [
    "HeadingNode",
    "extract_toc_from_html",
    "heading_id",
    "lower_to_html",
    "parse_markdown",
    "render_markdown",
    "render_toc",
    "slugify_heading",
]
