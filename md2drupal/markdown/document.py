"""Assemble the final HTML document around the rendered body."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Mapping

from .config import DEFAULT_CSS_URL, DEFAULT_PADDING, DEFAULT_TITLE


@dataclass(frozen=True)
class ConversionOptions:
    # Link GitHub Markdown CSS and mark the body for it
    include_css: bool = False


def generate_meta_tags(data: Mapping) -> str:
    """
    Build <meta> tags for the front matter fields that are present.

    Emitted in a fixed order (description, keywords, author); keyword lists are
    joined with ", ". Values are HTML-escaped.
    """
    tags = []

    description = data.get("description")
    if description:
        tags.append(f'<meta name="description" content="{escape(str(description))}">')

    keywords = data.get("keywords")
    if keywords:
        if isinstance(keywords, (list, tuple)):
            keywords = ", ".join(str(keyword) for keyword in keywords)
        tags.append(f'<meta name="keywords" content="{escape(str(keywords))}">')

    author = data.get("author")
    if author:
        tags.append(f'<meta name="author" content="{escape(str(author))}">')

    return "\n".join(tags)


def assemble_document(
    body_html: str,
    title: str | None = None,
    front_matter: Mapping | None = None,
    options: ConversionOptions | None = None,
) -> str:
    """
    Wrap the rendered body into a complete HTML document.

    Args:
        body_html: Serialized body HTML
        title: Document title; falls back to DEFAULT_TITLE when empty
        front_matter: Recognized front matter fields
        options: Conversion options; CSS is only linked when include_css is set

    Returns:
        The full document string
    """
    options = options or ConversionOptions()
    title = title or DEFAULT_TITLE

    meta_tags = generate_meta_tags(front_matter or {})
    css_link = f'<link rel="stylesheet" href="{DEFAULT_CSS_URL}">' if options.include_css else ""
    css_style = f"<style>body {{padding: {DEFAULT_PADDING};}}</style>" if options.include_css else ""
    body_class = ' class="markdown-body"' if options.include_css else ""

    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{escape(title, quote=False)}</title>",
            meta_tags,
            css_link,
            css_style,
            "</head>",
            f"<body{body_class}>",
            body_html,
            "</body>",
            "</html>",
        ]
    )
