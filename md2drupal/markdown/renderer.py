# md2drupal/markdown/renderer.py

import json
import logging
import re
from functools import lru_cache

import pypandoc

from ..errors import RenderError
from .config import get_pandoc_config
from .extensions.title_extractor import extract_title
from .postprocessors import apply_postprocessors
from .postprocessors.code_fence_normalizer import FENCE_MARKER
from .postprocessors.utils import parse_html, soup_to_html
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)

TITLE_KEY = "title"


def _run_pandoc(source, to, format, extra_args=()):
    try:
        return pypandoc.convert_text(
            source,
            to=to,
            format=format,
            extra_args=list(extra_args),
        )
    except (OSError, RuntimeError) as exc:
        raise RenderError(f"Pandoc failed converting {format} to {to}: {exc}") from exc


def _version_tuple(version):
    return tuple(int(part) for part in re.findall(r"\d+", version)[:2])


@lru_cache(maxsize=1)
def no_highlight_args():
    """Pick the highlighting-off switch the installed Pandoc understands."""
    pandoc_config = get_pandoc_config()
    try:
        version = pypandoc.get_pandoc_version()
    except OSError as exc:
        raise RenderError(f"Pandoc is not available: {exc}") from exc

    if _version_tuple(version) >= pandoc_config["no_highlight_since"]:
        args = pandoc_config["no_highlight_args"]["current"]
    else:
        args = pandoc_config["no_highlight_args"]["legacy"]
    logger.debug("Pandoc %s, disabling highlighting with %s", version, " ".join(args))
    return tuple(args)


def _mark_fenced_code(node):
    """Tag every CodeBlock in a Pandoc tree so its <pre> can be told from raw HTML."""
    if isinstance(node, list):
        for item in node:
            _mark_fenced_code(item)
    elif isinstance(node, dict):
        if node.get("t") == "CodeBlock":
            # CodeBlock: [[id, classes, key-values], text]
            node["c"][0][2].append([FENCE_MARKER, "true"])
            return
        for value in node.values():
            _mark_fenced_code(value)


def parse_markdown(text):
    """Parse Markdown source into Pandoc's JSON document tree."""
    pandoc_config = get_pandoc_config()
    output = _run_pandoc(text, to=pandoc_config["tree_format"], format=pandoc_config["reader"])
    return json.loads(output)


def lower_to_html(tree):
    """Lower a Pandoc document tree to an HTML element tree."""
    pandoc_config = get_pandoc_config()
    _mark_fenced_code(tree.get("blocks", []))
    html = _run_pandoc(
        json.dumps(tree),
        to=pandoc_config["writer"],
        format=pandoc_config["tree_format"],
        extra_args=[*pandoc_config["extra_args"], *no_highlight_args()],
    )
    return parse_html(html)


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    Args:
        text: Raw markdown text
        context: Optional dict the stages read from and write to. After the
            call it holds the document's front matter and title.

    Returns:
        The CMS-ready body HTML
    """
    context = context if context is not None else {}

    # Pre-processing: front matter comes off before parsing
    text = apply_preprocessors(text, context)

    tree = parse_markdown(text)
    context[TITLE_KEY] = extract_title(tree)
    logger.debug("Parsed markdown tree with %d top-level blocks", len(tree.get("blocks", [])))

    soup = lower_to_html(tree)

    # Post-processing: tree rewrites on the lowered HTML
    soup = apply_postprocessors(soup, context)

    return soup_to_html(soup)
