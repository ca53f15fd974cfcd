import re

import pytest

from md2drupal.markdown.slugs import encode_slug, heading_id, slugify_heading


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("目次", "%E7%9B%AE%E6%AC%A1"),
        ("Test Heading", "test-heading"),
        (
            "括弧のテスト: Sigstore(シグストア)とは何か",
            "%E6%8B%AC%E5%BC%A7%E3%81%AE%E3%83%86%E3%82%B9%E3%83%88-sigstore"
            "%E3%82%B7%E3%82%B0%E3%82%B9%E3%83%88%E3%82%A2%E3%81%A8%E3%81%AF%E4%BD%95%E3%81%8B",
        ),
        (
            "コロンのテスト: 補足: Provenance について",
            "%E3%82%B3%E3%83%AD%E3%83%B3%E3%81%AE%E3%83%86%E3%82%B9%E3%83%88-"
            "%E8%A3%9C%E8%B6%B3-provenance-%E3%81%AB%E3%81%A4%E3%81%84%E3%81%A6",
        ),
        ('CLI "cosign"の使い方', "cli-cosign%E3%81%AE%E4%BD%BF%E3%81%84%E6%96%B9"),
    ],
)
def test_heading_id_matches_known_encodings(text: str, expected: str) -> None:
    assert heading_id(text) == expected


def test_punctuation_is_removed_before_hyphenation() -> None:
    assert slugify_heading('疑問 1: "Fulcio CA" の秘密鍵で署名しないのはなぜ?') == (
        "疑問-1-fulcio-ca-の秘密鍵で署名しないのはなぜ"
    )


def test_hyphens_collapse_and_trim() -> None:
    assert slugify_heading("  --Hello -- World--  ") == "hello-world"


def test_hangul_is_kept() -> None:
    assert slugify_heading("한국어 제목") == "한국어-제목"


def test_non_ascii_letters_outside_cjk_are_dropped() -> None:
    assert slugify_heading("Café Crème") == "caf-crme"


def test_all_punctuation_yields_empty_id() -> None:
    assert slugify_heading("?!: ()") == ""
    assert heading_id("?!: ()") == ""


def test_encode_keeps_uri_component_safe_characters() -> None:
    assert encode_slug("a_b-c") == "a_b-c"
    assert encode_slug("ü") == "%C3%BC"


@pytest.mark.parametrize(
    "text",
    ["Hello, World!", "  Mixed CASE -- text  ", "目次 (contents)", "a\tb\nc", "---x---"],
)
def test_slug_shape(text: str) -> None:
    slug = slugify_heading(text)
    assert slug == slug.lower()
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug
    assert re.fullmatch(
        r"[A-Za-z0-9_\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FFF\uAC00-\uD7AF-]*", slug
    )


def test_byte_order_mark_counts_as_whitespace() -> None:
    assert slugify_heading("a\ufeffb") == "a-b"
    assert slugify_heading("a\u3000b\u00a0c") == "a-b-c"


def test_information_separators_are_not_whitespace() -> None:
    assert slugify_heading("a\x1cb\x1fc") == "abc"
