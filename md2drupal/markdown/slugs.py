"""
Heading slugs shared by the heading-id rule and table-of-contents links.

The encoded form is compared byte for byte with ``href="#..."`` targets built
elsewhere, so both sides must go through ``heading_id``.
"""

import re
from urllib.parse import quote

# JavaScript's \s, which differs from Python's (U+FEFF in, \x1c-\x1f out)
_JS_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# Anything outside ASCII word chars, whitespace, hyphen, Hiragana, Katakana,
# CJK unified ideographs and Hangul syllables.
_DISALLOWED = re.compile(
    r"[^A-Za-z0-9_" + _JS_WHITESPACE + r"\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FFF\uAC00-\uD7AF-]"
)
_WHITESPACE = re.compile(r"[" + _JS_WHITESPACE + r"]+")
_HYPHENS = re.compile(r"-+")

# Characters encodeURIComponent leaves alone (besides alphanumerics).
_URI_COMPONENT_SAFE = "-_.!~*'()"


def slugify_heading(text: str) -> str:
    """Normalize heading text into a lowercase, hyphen-separated slug."""
    slug = text.lower()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def encode_slug(slug: str) -> str:
    """Percent-encode a slug as UTF-8 bytes, the way browsers encode fragments."""
    return quote(slug, safe=_URI_COMPONENT_SAFE, encoding="utf-8")


def heading_id(text: str) -> str:
    return encode_slug(slugify_heading(text))
