from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup

from ..config import get_cms_config
from ..slugs import heading_id


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    href: str
    children: list["HeadingNode"]


def extract_toc_from_html(html: str) -> list[HeadingNode]:
    """
    Given rendered HTML, return a hierarchical list of headings for a TOC.

    The resulting structure is a list of dictionaries. Each dictionary contains:
        - level: Heading level (1-4)
        - id: the heading's id, or the encoded slug of its text when missing
        - title: Plain-text version of the heading
        - href: fragment link to the heading ("#" + id)
        - children: Nested list of child headings

    Ids come from the same slug function the CMS fixup uses, so ``href``
    matches the heading's ``id`` byte for byte.
    """
    soup = BeautifulSoup(html, "html.parser")
    toc: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for heading in soup.find_all(list(get_cms_config()["heading_tags"])):
        level = int(heading.name[1])  # "h2" -> 2
        raw_text = heading.get_text()
        title = " ".join(raw_text.split())
        if not title:
            continue

        identifier = heading.get("id") or heading_id(raw_text)

        node: HeadingNode = {
            "level": level,
            "id": identifier,
            "title": title,
            "href": f"#{identifier}",
            "children": [],
        }

        while stack and stack[-1]["level"] >= level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            toc.append(node)

        stack.append(node)

    return toc


def render_toc(nodes: list[HeadingNode]) -> str:
    """Render TOC nodes as nested <ul> lists of fragment links."""
    if not nodes:
        return ""

    soup = BeautifulSoup("", "html.parser")

    def build(items: list[HeadingNode]):
        ul = soup.new_tag("ul")
        for item in items:
            li = soup.new_tag("li")
            anchor = soup.new_tag("a", href=item["href"])
            anchor.string = item["title"]
            li.append(anchor)
            if item["children"]:
                li.append(build(item["children"]))
            ul.append(li)
        return ul

    return str(build(nodes))
