"""
Unit tests for tag derivation.

Tests cover:
  - Each tag source (metadata, domain, path, content)
  - Keyword normalization
  - Sorted, duplicate-free, idempotent output
"""

import pytest

from link_archive.tagging.tagger import (
    content_tags,
    domain_tags,
    generate_tags,
    meta_tags,
    normalize_keyword,
    normalize_tags,
    path_tags,
    tags_from_metadata,
)
from link_archive.tagging.vocabulary import DOMAIN_LABELS


class TestNormalizeKeyword:
    """Tests for page keyword normalization."""

    def test_capitalizes(self):
        assert normalize_keyword("wEB apps") == "Web apps"

    @pytest.mark.parametrize("keyword", ["ab", "a", "x" * 20, "y" * 25])
    def test_length_bounds_are_exclusive(self, keyword):
        assert normalize_keyword(keyword) is None

    def test_length_three_and_nineteen_kept(self):
        assert normalize_keyword("abc") == "Abc"
        assert normalize_keyword("a" * 19) == "A" + "a" * 18


class TestTagsFromMetadata:
    """Tests for the enrichment-time source."""

    def test_keyword_matches_in_combined_text(self):
        tags = tags_from_metadata(
            "Deep Learning with Python", "", "https://blog.test/post", []
        )
        assert "Python" in tags
        assert "ディープラーニング" in tags
        assert "ブログ" in tags

    def test_synonyms_map_to_one_label(self):
        tags = tags_from_metadata("nodejs and node.js", "", "https://x.test", [])
        assert tags.count("Node.js") == 1

    def test_page_keywords_normalized(self):
        tags = tags_from_metadata("t", "", "https://x.test", ["webassembly", "ab"])
        assert "Webassembly" in tags
        assert "Ab" not in tags

    def test_japanese_keywords(self):
        tags = tags_from_metadata("機械学習の入門", "", "https://x.test", [])
        assert "機械学習" in tags


class TestMetaTags:
    """Tests for the stored metaTags passthrough."""

    def test_vocabulary_labels_kept_verbatim(self):
        assert meta_tags(["GitHub", "AI", "Node.js"]) == ["GitHub", "AI", "Node.js"]

    def test_other_values_normalized(self):
        assert meta_tags(["webassembly", "ab"]) == ["Webassembly"]

    def test_missing(self):
        assert meta_tags(None) == []


class TestDomainTags:
    """Tests for hostname labels."""

    def test_exact_match(self):
        assert domain_tags("https://github.com/a/b") == ["GitHub"]

    def test_substring_match(self):
        assert domain_tags("https://ja.wikipedia.org/wiki/X") == ["Wikipedia"]

    def test_at_most_one(self):
        # aws.amazon.com also contains amazon.com, first match wins
        assert domain_tags("https://aws.amazon.com/ec2") == ["AWS"]
        assert domain_tags("https://docs.aws.amazon.com/x") == ["Amazon"]

    def test_unknown_host(self):
        assert domain_tags("https://example.org") == []

    def test_unparsable(self):
        assert domain_tags("not a url") == []

    def test_table_order_preserved(self):
        assert list(DOMAIN_LABELS)[0] == "github.com"


class TestPathTags:
    """Tests for path and query keywords."""

    def test_multiple_matches(self):
        tags = path_tags("https://example.com/Python/Tutorial")
        assert "Python" in tags
        assert "チュートリアル" in tags

    def test_query_string_scanned(self):
        assert "Docker" in path_tags("https://example.com/?topic=Docker")

    def test_hostname_not_scanned(self):
        assert path_tags("https://python.org/") == []


class TestContentTags:
    """Tests for message excerpt keywords."""

    def test_case_insensitive(self):
        assert content_tags("Learning PYTHON on Linux") == ["Linux", "Python"]

    def test_japanese(self):
        assert content_tags("便利なツール") == ["ツール"]

    def test_empty(self):
        assert content_tags("") == []
        assert content_tags(None) == []


class TestGenerateTags:
    """Tests for the combined tag set."""

    def test_union_of_sources(self, extracted_link):
        link = {**extracted_link, "metaTags": ["Webassembly"]}

        tags = generate_tags(link)

        assert "Webassembly" in tags
        assert "GitHub" in tags
        assert "Python" in tags
        assert "Docker" in tags

    def test_sorted_and_unique(self, extracted_link):
        link = {**extracted_link, "metaTags": ["Python", "GitHub", "Python"]}

        tags = generate_tags(link)

        assert tags == sorted(tags)
        assert len(tags) == len(set(tags))

    def test_idempotent(self, extracted_link):
        link = {**extracted_link, "metaTags": ["Python", "webassembly"]}

        first = generate_tags(link)
        second = generate_tags({**link, "tags": first})

        assert first == second

    def test_partial_record(self):
        assert generate_tags({"url": "https://github.com/a/b"}) == ["GitHub"]

    def test_empty_record(self):
        assert generate_tags({}) == []

    def test_normalize_tags(self):
        assert normalize_tags(["b", "a", "b"]) == ["a", "b"]
