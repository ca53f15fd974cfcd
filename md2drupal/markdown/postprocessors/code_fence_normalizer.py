# md2drupal/markdown/postprocessors/code_fence_normalizer.py
"""
Postprocessor that moves fenced code languages onto the <code> element.

Pandoc (with highlighting off) marks the language on the <pre>:

    <pre class="sh" data-fence="true"><code>ls -la</code></pre>

The CMS, and the code-language rule, expect the GitHub/CommonMark form:

    <pre><code class="language-sh">ls -la</code></pre>

The renderer adds ``data-fence`` to every fenced block before lowering, so
<pre> elements written as raw HTML in the Markdown source are left alone.
"""

from bs4 import BeautifulSoup, Tag

from .utils import get_classes

FENCE_MARKER = "data-fence"
LANGUAGE_PREFIX = "language-"


def code_fence_normalizer(soup: BeautifulSoup, context: dict) -> BeautifulSoup:
    for pre in soup.find_all("pre", attrs={FENCE_MARKER: True}):
        del pre[FENCE_MARKER]

        classes = get_classes(pre)
        if not classes:
            continue

        code = pre.find("code", recursive=False)
        if not isinstance(code, Tag) or get_classes(code):
            continue

        language, *remaining = classes
        if not language.startswith(LANGUAGE_PREFIX):
            language = f"{LANGUAGE_PREFIX}{language}"
        code["class"] = [language]

        if remaining:
            pre["class"] = remaining
        else:
            del pre["class"]

    return soup
