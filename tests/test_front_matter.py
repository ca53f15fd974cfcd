import logging

from md2drupal.markdown.preprocessors import apply_preprocessors
from md2drupal.markdown.preprocessors.front_matter import (
    FRONT_MATTER_KEY,
    front_matter_extractor,
    split_front_matter,
)


def test_recognized_fields_are_extracted() -> None:
    text = (
        "---\n"
        "description: Signing container images\n"
        "keywords: [sigstore, cosign]\n"
        "author: Jane Doe\n"
        "draft: true\n"
        "---\n"
        "# Title\n"
    )
    data, body = split_front_matter(text)
    assert data == {
        "description": "Signing container images",
        "keywords": ["sigstore", "cosign"],
        "author": "Jane Doe",
    }
    assert body.strip() == "# Title"


def test_keywords_may_be_a_string() -> None:
    data, _ = split_front_matter("---\nkeywords: a, b\n---\nbody\n")
    assert data == {"keywords": "a, b"}


def test_scalar_values_are_coerced_to_strings() -> None:
    data, _ = split_front_matter("---\nauthor: 42\nkeywords: [1, two]\n---\n")
    assert data == {"author": "42", "keywords": ["1", "two"]}


def test_empty_values_are_dropped() -> None:
    data, _ = split_front_matter("---\ndescription:\nauthor: ''\n---\nbody\n")
    assert data == {}


def test_document_without_front_matter_is_untouched() -> None:
    text = "# Title\n\nSome text\n"
    assert split_front_matter(text) == ({}, text)


def test_malformed_yaml_is_dropped_with_warning(caplog) -> None:
    text = "---\ndescription: [unclosed\n---\n# Real Title\n"
    with caplog.at_level(logging.WARNING):
        data, body = split_front_matter(text)

    assert data == {}
    assert body.strip() == "# Real Title"
    assert "front matter" in caplog.text


def test_non_mapping_front_matter_is_dropped(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        data, body = split_front_matter("---\n- just\n- a list\n---\ntext\n")
    assert data == {}
    assert body.strip() == "text"
    assert "mapping" in caplog.text


def test_unterminated_block_is_left_in_the_body() -> None:
    text = "---\nnot closed\n"
    assert split_front_matter(text) == ({}, text)


def test_extractor_stores_front_matter_in_context() -> None:
    context = {}
    body = front_matter_extractor("---\nauthor: Jane\n---\nHello\n", context)
    assert context[FRONT_MATTER_KEY] == {"author": "Jane"}
    assert body.strip() == "Hello"


def test_preprocessor_chain_runs_front_matter_extraction() -> None:
    context = {}
    body = apply_preprocessors("---\ndescription: d\n---\nHello\n", context)
    assert context[FRONT_MATTER_KEY] == {"description": "d"}
    assert "description" not in body
