# md2drupal/markdown/preprocessors/front_matter.py
"""
Preprocessor that pulls a YAML front matter block off the Markdown source.

    ---
    description: Signing container images
    keywords: [sigstore, cosign]
    author: Jane Doe
    ---
    # Title

Only ``description``, ``keywords`` and ``author`` are kept; they end up as
<meta> tags in the assembled document. A block that is not valid YAML (or not
a mapping) is dropped with a warning and the conversion carries on with the
body alone.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypedDict

import yaml
from frontmatter.default_handlers import YAMLHandler

logger = logging.getLogger(__name__)

FRONT_MATTER_KEY = "front_matter"

_RECOGNIZED_KEYS = ("description", "keywords", "author")


class FrontMatterData(TypedDict, total=False):
    description: str
    keywords: str | list[str]
    author: str


def _normalize_front_matter(raw: Mapping[str, Any]) -> FrontMatterData:
    """Keep the recognized keys, coercing scalars to strings and dropping empties."""
    data: FrontMatterData = {}
    for key in _RECOGNIZED_KEYS:
        value = raw.get(key)
        if value is None:
            continue

        if key == "keywords" and isinstance(value, (list, tuple)):
            keywords = [str(item) for item in value if item is not None]
            if keywords:
                data["keywords"] = keywords
            continue

        text = str(value)
        if text:
            data[key] = text  # type: ignore[literal-required]

    return data


def split_front_matter(text: str) -> tuple[FrontMatterData, str]:
    """
    Separate the front matter block from the Markdown body.

    Returns the recognized metadata and the body text. Never raises: malformed
    metadata yields an empty mapping, and the delimited block is still removed
    from the body so it cannot leak into the rendered page.
    """
    handler = YAMLHandler()
    if not handler.detect(text):
        return {}, text

    try:
        raw_front_matter, body = handler.split(text)
    except ValueError:
        # Opening delimiter without a closing one: treat it as plain Markdown
        logger.debug("Unterminated front matter block, rendering it as Markdown")
        return {}, text

    try:
        loaded = handler.load(raw_front_matter)
    except yaml.YAMLError as exc:
        logger.warning("Failed to parse YAML front matter, ignoring it: %s", exc)
        return {}, body

    if loaded is None:
        return {}, body

    if not isinstance(loaded, Mapping):
        logger.warning(
            "Front matter must be a mapping, got %s; ignoring it",
            type(loaded).__name__,
        )
        return {}, body

    return _normalize_front_matter(loaded), body


def front_matter_extractor(text: str, context: dict) -> str:
    """Store the document's front matter in the context and return the body."""
    data, body = split_front_matter(text)
    context[FRONT_MATTER_KEY] = data
    if data:
        logger.debug("Front matter fields found: %s", ", ".join(data))
    return body
