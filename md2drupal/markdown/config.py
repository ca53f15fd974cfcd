import json

DEFAULT_TITLE = "Converted HTML"

# GitHub Markdown CSS, linked only when the caller asks for styling
DEFAULT_CSS_URL = (
    "https://cdnjs.cloudflare.com/ajax/libs/github-markdown-css/5.8.1/github-markdown.min.css"
)
DEFAULT_PADDING = "1.5em"


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown parsing and HTML lowering.

    The GitHub-flavored reader brings tables, strikethrough, autolinks and task
    lists. Its auto identifiers are turned off: heading ids come from the CMS
    fixup only, and only for h1-h4. Highlighting is switched off so fenced code
    blocks come out as plain <pre><code> pairs carrying the language as a
    class; wrapping is disabled so text nodes keep their source line structure.

    Pandoc 3.8 renamed the highlighting switch, so both spellings are listed
    and the renderer picks one from the installed version.
    """
    return {
        "reader": "gfm-gfm_auto_identifiers",
        "tree_format": "json",
        "writer": "html5",
        "extra_args": [
            "--wrap=none",
        ],
        "no_highlight_args": {
            "current": ["--syntax-highlighting=none"],
            "legacy": ["--no-highlight"],
        },
        "no_highlight_since": (3, 8),
    }


def get_cms_config():
    """
    Markup conventions of the target CMS.

    The media embed values are placeholders: the CMS resolves the real media
    entity out of band, so every image gets the same UUID.
    """
    display_settings = {
        "image_style": "crop_freeform",
        "image_link": "",
        "image_loading": {"attribute": "lazy"},
        "svg_render_as_image": True,
        "svg_attributes": {"width": "", "height": ""},
    }

    return {
        "heading_tags": ("h1", "h2", "h3", "h4"),
        "table_wrapper_class": "table-layer",
        "table_class": "table-headling-x",
        "image_grid_class": "img-grid--1",
        "image_gallery_class": "lb-gallery",
        "media_tag": "drupal-entity",
        "media_attributes": {
            "data-entity-type": "media",
            "data-entity-uuid": "11111111-2222-3333-4444-555555555555",
            "data-embed-button": "media_browser",
            "data-entity-embed-display": "media_image",
            "data-entity-embed-display-settings": json.dumps(
                display_settings, separators=(",", ":")
            ),
        },
        # Shell highlighters are missing in the CMS; PHP's is the closest look
        "code_language_map": {
            "language-sh": "language-php",
            "language-bash": "language-php",
        },
    }
