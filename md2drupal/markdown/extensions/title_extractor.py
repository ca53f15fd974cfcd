from __future__ import annotations

from typing import Any, Iterable, Iterator

# Quote characters Pandoc strips from Quoted inlines
_QUOTES = {
    "SingleQuote": ("'", "'"),
    "DoubleQuote": ('"', '"'),
}

# Inline containers whose contents sit at a fixed position in "c"
_INLINE_CONTENT_INDEX = {
    "Emph": None,
    "Underline": None,
    "Strong": None,
    "Strikeout": None,
    "Superscript": None,
    "Subscript": None,
    "SmallCaps": None,
    "Link": 1,
    "Span": 1,
    "Cite": 1,
}


def _inline_text(inlines: Iterable[dict[str, Any]]) -> Iterator[str]:
    """Yield the visible text of a Pandoc inline list, depth-first."""
    for inline in inlines:
        kind = inline.get("t")
        content = inline.get("c")

        if kind == "Str":
            yield content
        elif kind in ("Space", "SoftBreak"):
            yield " "
        elif kind == "LineBreak":
            yield "\n"
        elif kind == "Code":
            yield content[1]
        elif kind == "Quoted":
            opening, closing = _QUOTES.get(content[0]["t"], ('"', '"'))
            yield opening
            yield from _inline_text(content[1])
            yield closing
        elif kind in _INLINE_CONTENT_INDEX:
            index = _INLINE_CONTENT_INDEX[kind]
            children = content if index is None else content[index]
            yield from _inline_text(children)
        # Images, notes, math and raw markup carry no heading text


def _child_blocks(block: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield the blocks nested directly inside a Pandoc block, in order."""
    kind = block.get("t")
    content = block.get("c")

    if kind == "BlockQuote":
        yield from content
    elif kind == "Div":
        yield from content[1]
    elif kind in ("BulletList", "OrderedList"):
        items = content if kind == "BulletList" else content[1]
        for item in items:
            yield from item
    elif kind == "DefinitionList":
        for _term, definitions in content:
            for definition in definitions:
                yield from definition
    elif kind == "Figure":
        yield from content[2]


def _find_first_header(blocks: Iterable[dict[str, Any]]) -> dict[str, Any] | None:
    for block in blocks:
        if block.get("t") == "Header":
            return block
        found = _find_first_header(_child_blocks(block))
        if found is not None:
            return found
    return None


def extract_title(tree: dict[str, Any]) -> str:
    """
    Return the text of the first heading in a Pandoc JSON document tree.

    Headings nested in block quotes or lists count. Returns an empty string
    when the document has no heading.
    """
    header = _find_first_header(tree.get("blocks", []))
    if header is None:
        return ""
    # Header: [level, attr, inlines]
    return "".join(_inline_text(header["c"][2]))
