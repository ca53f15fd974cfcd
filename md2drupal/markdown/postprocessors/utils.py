"""Helpers shared by the tree postprocessors."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter


class InsertionOrderFormatter(HTMLFormatter):
    """The "minimal" formatter, minus the alphabetical attribute sort."""

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


# Holds no per-document state
HTML_FORMATTER = InsertionOrderFormatter(entity_substitution=EntitySubstitution.substitute_xml)


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML fragment into a fresh tree owned by one conversion."""
    return BeautifulSoup(html, "html.parser")


def soup_to_html(soup: BeautifulSoup | None) -> str:
    """Serialise the tree back to HTML, attributes in the order they were set."""
    if soup is None:
        return ""
    return soup.decode(formatter=HTML_FORMATTER).strip()


def get_classes(tag: Tag) -> list[str]:
    """Return the tag's classes as a list, whatever form the parser stored."""
    classes = tag.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


def has_class(tag: Tag, class_name: str) -> bool:
    return class_name in get_classes(tag)
