from pathlib import Path

import pytest

from conftest import requires_pandoc
from md2drupal import (
    ConversionError,
    ConversionOptions,
    InputReadError,
    OutputWriteError,
    convert_file,
    convert_markdown,
)


def test_errors_share_a_base_class() -> None:
    assert issubclass(InputReadError, ConversionError)
    assert issubclass(OutputWriteError, ConversionError)


def test_missing_input_raises_input_read_error(tmp_path: Path) -> None:
    with pytest.raises(InputReadError):
        convert_file(tmp_path / "missing.md")


def test_undecodable_input_raises_input_read_error(tmp_path: Path) -> None:
    source = tmp_path / "latin1.md"
    source.write_bytes("# café".encode("latin-1"))
    with pytest.raises(InputReadError):
        convert_file(source)


@requires_pandoc
def test_malformed_front_matter_still_converts() -> None:
    document = convert_markdown("---\ndescription: [oops\n---\n# Real Title\n\nBody\n")
    assert "<title>Real Title</title>" in document
    assert '<meta name="description"' not in document
    assert "oops" not in document


@requires_pandoc
def test_front_matter_becomes_meta_tags() -> None:
    document = convert_markdown(
        "---\ndescription: About <things>\nkeywords: [a, b]\nauthor: Jane\n---\n# Title\n"
    )
    assert '<meta name="description" content="About &lt;things&gt;">' in document
    assert '<meta name="keywords" content="a, b">' in document
    assert '<meta name="author" content="Jane">' in document


@requires_pandoc
def test_document_without_heading_uses_fallback_title() -> None:
    document = convert_markdown("just text\n")
    assert "<title>Converted HTML</title>" in document
    assert "<body>\n<p>just text</p>\n</body>" in document


@requires_pandoc
def test_css_option() -> None:
    document = convert_markdown("# T\n", ConversionOptions(include_css=True))
    assert '<body class="markdown-body">' in document
    assert "github-markdown.min.css" in document


@requires_pandoc
def test_convert_file_writes_next_to_input(tmp_path: Path) -> None:
    source = tmp_path / "article.md"
    source.write_text("# 目次\n", encoding="utf-8")

    written = convert_file(source)

    assert written == tmp_path / "article.html"
    content = written.read_text(encoding="utf-8")
    assert content.startswith("<!DOCTYPE html>")
    assert 'id="%E7%9B%AE%E6%AC%A1"' in content


@requires_pandoc
def test_convert_file_creates_output_directories(tmp_path: Path) -> None:
    source = tmp_path / "in.md"
    source.write_text("text\n", encoding="utf-8")
    target = tmp_path / "nested" / "dir" / "out.html"

    assert convert_file(source, target) == target
    assert target.exists()


@requires_pandoc
def test_unwritable_output_raises_output_write_error(tmp_path: Path) -> None:
    source = tmp_path / "in.md"
    source.write_text("text\n", encoding="utf-8")
    directory = tmp_path / "taken"
    directory.mkdir()

    with pytest.raises(OutputWriteError):
        convert_file(source, directory)
