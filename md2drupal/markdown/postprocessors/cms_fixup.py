# md2drupal/markdown/postprocessors/cms_fixup.py
"""
Postprocessor that rewrites the lowered HTML tree into CMS markup.

One pre-order pass over the tree. Each element is classified into at most one
rule kind and handled by that rule:

- HEADING: h1-h4 with content get an ``id`` derived from their text
  (see ``md2drupal.markdown.slugs``), matching TOC link targets.
- TABLE: wrapped in ``<div class="table-layer">``; the table's class becomes
  ``table-headling-x``.
- IMAGE: replaced by a media embed placeholder:

      <div class="img-grid--1">
        <div class="lb-gallery">
          <drupal-entity alt="..." title="..." data-entity-type="media" ...>
          </drupal-entity>
        </div>
      </div>

- CODE: ``language-sh``/``language-bash`` become ``language-php``; the leading
  text of every <code> is stripped.

Rules never touch their parent. A rule that changes structure returns a
``Rewrite`` and the traversal driver swaps it into the parent's children.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..config import get_cms_config
from ..slugs import heading_id
from .utils import get_classes

logger = logging.getLogger(__name__)


class RuleKind(Enum):
    HEADING = "heading"
    TABLE = "table"
    IMAGE = "image"
    CODE = "code"


@dataclass
class Rewrite:
    """Replacement for an element; ``slot`` receives the original, if kept."""

    replacement: Tag
    slot: Optional[Tag] = None


def classify(tag: Tag, cms_config: dict) -> Optional[RuleKind]:
    """Return the rule kind that applies to ``tag``, or None."""
    name = tag.name
    if name in cms_config["heading_tags"]:
        return RuleKind.HEADING if tag.contents else None
    if name == "table":
        return RuleKind.TABLE
    if name == "img":
        return RuleKind.IMAGE
    if name == "code":
        return RuleKind.CODE
    return None


def rewrite_heading(tag: Tag, soup: BeautifulSoup, cms_config: dict) -> Optional[Rewrite]:
    tag["id"] = heading_id(tag.get_text())
    return None


def rewrite_table(tag: Tag, soup: BeautifulSoup, cms_config: dict) -> Optional[Rewrite]:
    wrapper = soup.new_tag("div", attrs={"class": cms_config["table_wrapper_class"]})
    # Overwrites any existing class, other attributes stay as they are
    tag["class"] = cms_config["table_class"]
    return Rewrite(replacement=wrapper, slot=wrapper)


def rewrite_image(tag: Tag, soup: BeautifulSoup, cms_config: dict) -> Optional[Rewrite]:
    alt_text = tag.get("alt") or ""

    media_attrs = {"alt": alt_text, "title": alt_text}
    media_attrs.update(cms_config["media_attributes"])

    grid = soup.new_tag("div", attrs={"class": cms_config["image_grid_class"]})
    gallery = soup.new_tag("div", attrs={"class": cms_config["image_gallery_class"]})
    media = soup.new_tag(cms_config["media_tag"], attrs=media_attrs)

    gallery.append(media)
    grid.append(gallery)

    # The original src is dropped; the CMS resolves media out of band
    return Rewrite(replacement=grid)


def rewrite_code(tag: Tag, soup: BeautifulSoup, cms_config: dict) -> Optional[Rewrite]:
    language_map = cms_config["code_language_map"]
    for cls in get_classes(tag):
        if cls in language_map:
            tag["class"] = [language_map[cls]]
            break

    first = tag.contents[0] if tag.contents else None
    if isinstance(first, NavigableString) and not isinstance(first, Comment):
        stripped = first.strip()
        if stripped != str(first):
            first.replace_with(NavigableString(stripped))

    return None


RULES: dict[RuleKind, Callable[[Tag, BeautifulSoup, dict], Optional[Rewrite]]] = {
    RuleKind.HEADING: rewrite_heading,
    RuleKind.TABLE: rewrite_table,
    RuleKind.IMAGE: rewrite_image,
    RuleKind.CODE: rewrite_code,
}


def apply_rule(tag: Tag, soup: BeautifulSoup, cms_config: dict) -> Optional[RuleKind]:
    """Apply the matching rule to ``tag`` and splice in any replacement."""
    kind = classify(tag, cms_config)
    if kind is None:
        return None

    rewrite = RULES[kind](tag, soup, cms_config)
    if rewrite is not None:
        tag.replace_with(rewrite.replacement)
        if rewrite.slot is not None:
            rewrite.slot.append(tag)

    return kind


def _walk(node: Tag, soup: BeautifulSoup, cms_config: dict, applied: Counter) -> None:
    # Snapshot: rules may replace children while we iterate
    for child in list(node.children):
        if not isinstance(child, Tag):
            continue

        kind = apply_rule(child, soup, cms_config)
        if kind is not None:
            applied[kind.value] += 1

        # Descend into the original element, wherever it now lives.
        # Wrappers built by the rules are never revisited.
        _walk(child, soup, cms_config, applied)


def cms_fixup(soup: BeautifulSoup, context: dict) -> BeautifulSoup:
    """
    Rewrite headings, tables, images and code blocks for the CMS.

    Args:
        soup: Lowered HTML tree, mutated in place
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        The same tree, rewritten
    """
    cms_config = get_cms_config()
    applied: Counter = Counter()

    _walk(soup, soup, cms_config, applied)

    if applied:
        logger.debug(
            "CMS fixup applied: %s",
            ", ".join(f"{name}={count}" for name, count in sorted(applied.items())),
        )
    return soup
