from __future__ import annotations

import pytest
from bs4 import BeautifulSoup


def _pandoc_available() -> bool:
    try:
        import pypandoc

        pypandoc.get_pandoc_version()
    except (ImportError, OSError):
        return False
    return True


requires_pandoc = pytest.mark.skipif(not _pandoc_available(), reason="pandoc is not installed")


@pytest.fixture
def make_soup():
    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _make
