# md2drupal/markdown/postprocessors/image_unwrapper.py
"""
Postprocessor that lifts image wrappers out of paragraphs.

Markdown puts a standalone image inside a paragraph. After the CMS fixup that
becomes a block-level ``div.img-grid--1`` nested in a <p>, which is invalid
flow content. This pass must run after ``cms_fixup`` since the wrapper does
not exist before it.

    <p><div class="img-grid--1">...</div></p>

becomes

    <div class="img-grid--1">...</div>

When the paragraph holds more than the image, it is split around the wrapper:
content before stays in the paragraph, content after moves to a new one.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag

from ..config import get_cms_config
from .utils import has_class


def _is_blank(nodes) -> bool:
    return all(isinstance(node, NavigableString) and not node.strip() for node in nodes)


def _find_grid_child(paragraph: Tag, grid_class: str) -> Tag | None:
    for child in paragraph.children:
        if isinstance(child, Tag) and child.name == "div" and has_class(child, grid_class):
            return child
    return None


def _split_paragraph(paragraph: Tag, grid: Tag, soup: BeautifulSoup) -> Tag | None:
    """
    Move ``grid`` out of ``paragraph`` so it follows the paragraph's leading content.

    Returns the new paragraph holding whatever followed the wrapper, or None
    when nothing but whitespace did.
    """
    leading = list(grid.previous_siblings)
    trailing = list(grid.next_siblings)
    grid.extract()

    tail = None
    if _is_blank(trailing):
        for node in trailing:
            node.extract()
    else:
        tail = soup.new_tag("p")
        for node in trailing:
            tail.append(node.extract())

    if _is_blank(leading):
        paragraph.replace_with(grid)
    else:
        paragraph.insert_after(grid)

    if tail is not None:
        grid.insert_after(tail)
    return tail


def image_unwrapper(soup: BeautifulSoup, context: dict) -> BeautifulSoup:
    """
    Make sure no image wrapper is left as a direct child of a paragraph.

    Args:
        soup: Tree produced by cms_fixup, mutated in place
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        The same tree
    """
    grid_class = get_cms_config()["image_grid_class"]

    for paragraph in list(soup.find_all("p")):
        current = paragraph
        while current is not None:
            grid = _find_grid_child(current, grid_class)
            if grid is None:
                break
            current = _split_paragraph(current, grid, soup)

    return soup
