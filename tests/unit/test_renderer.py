"""
Unit tests for static page rendering.

Tests cover:
  - Aggregate counts
  - Tag usage ordering
  - Escaping of untrusted fields
  - Output files
"""

from datetime import datetime, timezone

from link_archive.rendering.renderer import (
    PageRenderer,
    aggregate_tags,
    collect_stats,
    extract_domain,
    format_timestamp,
)

GENERATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def link(url: str, author_id: str, tags: list[str], **extra) -> dict:
    return {
        "url": url,
        "author": {"id": author_id, "username": f"u{author_id}", "displayName": f"U{author_id}"},
        "timestamp": "2024-01-01T00:00:00.000Z",
        "tags": tags,
        **extra,
    }


class TestCollectStats:
    """Tests for collect_stats."""

    def test_counts(self):
        links = [
            link("https://a.test/1", "1", ["Python", "AI"]),
            link("https://a.test/2", "1", ["Python"]),
            link("https://b.test/", "2", []),
        ]

        stats = collect_stats(links)

        assert stats.link_count == 3
        assert stats.author_count == 2
        assert stats.tag_count == 2
        assert stats.domain_count == 2

    def test_tolerates_missing_fields(self):
        stats = collect_stats([{"url": "https://a.test"}])
        assert stats.tag_count == 0
        assert stats.author_count == 1


class TestAggregateTags:
    """Tests for aggregate_tags."""

    def test_sorted_by_descending_count(self):
        links = [
            link("https://a.test/1", "1", ["B", "A"]),
            link("https://a.test/2", "1", ["A", "C"]),
            link("https://a.test/3", "1", ["A", "C"]),
        ]

        result = aggregate_tags(links)

        assert [(t.name, t.count) for t in result] == [("A", 3), ("C", 2), ("B", 1)]


class TestHelpers:
    """Tests for formatting helpers."""

    def test_extract_domain(self):
        assert extract_domain("https://www.example.com/x") == "www.example.com"
        assert extract_domain("garbage") == "unknown"

    def test_format_timestamp_utc(self):
        assert format_timestamp("2024-01-01T00:00:00.000Z", "UTC") == "2024/01/01 00:00"

    def test_format_timestamp_tokyo(self):
        assert format_timestamp("2024-01-01T00:00:00.000Z", "Asia/Tokyo") == "2024/01/01 09:00"


class TestRenderIndex:
    """Tests for PageRenderer.render_index."""

    def test_renders_cards_and_stats(self, enriched_link):
        html = PageRenderer().render_index([enriched_link], GENERATED_AT)

        assert "Discord Link Archive" in html
        assert 'data-url="https://github.com/owner/repo"' in html
        assert "#Python" in html
        assert "小さなツール" in html
        assert 'src="https://example.com/a.png"' in html

    def test_escapes_untrusted_text_and_attributes(self):
        evil = link(
            'https://a.test/"><script>alert(1)</script>',
            "1",
            ['x"><img src=x onerror=alert(1)>'],
            content="<b>hi</b>",
            descriptionJa="<i>説明</i>",
        )

        html = PageRenderer().render_index([evil], GENERATED_AT)

        assert "<script>alert(1)</script>" not in html
        assert "<img src=x onerror" not in html
        assert "&lt;b&gt;hi&lt;/b&gt;" in html
        assert "&lt;i&gt;説明&lt;/i&gt;" in html

    def test_screenshot_used_when_no_image(self):
        item = link("https://a.test", "1", [], image="", screenshot="screenshots/abc.jpg")
        html = PageRenderer().render_index([item], GENERATED_AT)
        assert 'src="screenshots/abc.jpg"' in html

    def test_attachment_badge(self):
        item = link("https://a.test", "1", [], hasAttachments=True, attachmentCount=2)
        html = PageRenderer().render_index([item], GENERATED_AT)
        assert "2 個の添付ファイル" in html

    def test_partial_record(self):
        html = PageRenderer().render_index([{"url": "https://a.test"}], GENERATED_AT)
        assert 'data-url="https://a.test"' in html


class TestRenderTags:
    """Tests for PageRenderer.render_tags."""

    def test_tag_links_are_url_encoded(self):
        links = [link("https://a.test", "1", ["C++", "機械学習"])]

        html = PageRenderer().render_tags(links, GENERATED_AT)

        assert "index.html?tag=C%2B%2B" in html
        assert "#機械学習" in html

    def test_writes_files(self, tmp_path, enriched_link):
        renderer = PageRenderer()

        index = renderer.write_index([enriched_link], tmp_path)
        tags = renderer.write_tags([enriched_link], tmp_path)

        assert index == tmp_path / "index.html"
        assert tags == tmp_path / "tags.html"
        assert "#GitHub" in tags.read_text(encoding="utf-8")
