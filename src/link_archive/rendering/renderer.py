"""Static HTML rendering of the link archive."""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from zoneinfo import ZoneInfo

from jinja2 import Environment, PackageLoader, select_autoescape

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"
TAGS_FILENAME = "tags.html"


@dataclass
class ArchiveStats:
    link_count: int
    author_count: int
    tag_count: int
    domain_count: int


@dataclass
class TagCount:
    name: str
    count: int


def extract_domain(url: str) -> str:
    """Hostname of a URL, or "unknown"."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return "unknown"
    return hostname or "unknown"


def format_timestamp(iso: str | None, tz: str = "UTC") -> str:
    """Format an ISO timestamp as ``YYYY/MM/DD HH:MM`` in the given zone."""
    if not iso:
        return ""
    try:
        dt = datetime.fromisoformat(iso.replace("Z", "+00:00"))
    except ValueError:
        return iso
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(ZoneInfo(tz)).strftime("%Y/%m/%d %H:%M")


def all_tags(links: list[dict[str, Any]]) -> list[str]:
    return sorted({tag for link in links for tag in link.get("tags") or []})


def collect_stats(links: list[dict[str, Any]]) -> ArchiveStats:
    """Aggregate counts shown in the page header."""
    authors = {(link.get("author") or {}).get("id") for link in links}
    domains = {extract_domain(link.get("url", "")) for link in links}
    return ArchiveStats(
        link_count=len(links),
        author_count=len(authors),
        tag_count=len(all_tags(links)),
        domain_count=len(domains),
    )


def aggregate_tags(links: list[dict[str, Any]]) -> list[TagCount]:
    """Tag usage counts, most used first."""
    counts: Counter[str] = Counter()
    for link in links:
        counts.update(link.get("tags") or [])
    # Counter.most_common keeps first-seen order for equal counts
    return [TagCount(name=name, count=count) for name, count in counts.most_common()]


def truncate_smart(text: str | None, length: int = 150) -> str:
    """Truncate text at word boundary."""
    if not text or len(text) <= length:
        return text or ""
    truncated = text[:length].rsplit(" ", 1)[0]
    return truncated + "..." if len(truncated) < len(text) else text


def domain_display(domain: str) -> str:
    """Clean up domain for display."""
    if domain.startswith("www."):
        return domain[4:]
    return domain


class PageRenderer:
    """Render the listing page and the tag index."""

    def __init__(self, display_timezone: str = "UTC"):
        self.display_timezone = display_timezone
        self.env = Environment(
            loader=PackageLoader("link_archive.rendering", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["truncate_smart"] = truncate_smart
        self.env.filters["domain"] = lambda url: domain_display(extract_domain(url))
        self.env.filters["datetime"] = lambda iso: format_timestamp(
            iso, self.display_timezone
        )

    def _generated_at(self, generated_at: datetime | None) -> str:
        generated_at = generated_at or datetime.now(timezone.utc)
        return generated_at.astimezone(ZoneInfo(self.display_timezone)).strftime(
            "%Y/%m/%d %H:%M:%S"
        )

    def render_index(
        self, links: list[dict[str, Any]], generated_at: datetime | None = None
    ) -> str:
        template = self.env.get_template(INDEX_FILENAME)
        return template.render(
            links=links,
            stats=collect_stats(links),
            generated_at=self._generated_at(generated_at),
        )

    def render_tags(
        self, links: list[dict[str, Any]], generated_at: datetime | None = None
    ) -> str:
        template = self.env.get_template(TAGS_FILENAME)
        return template.render(
            tags=aggregate_tags(links),
            generated_at=self._generated_at(generated_at),
        )

    def write_index(self, links: list[dict[str, Any]], output_dir: Path) -> Path:
        return self._write(Path(output_dir) / INDEX_FILENAME, self.render_index(links))

    def write_tags(self, links: list[dict[str, Any]], output_dir: Path) -> Path:
        return self._write(Path(output_dir) / TAGS_FILENAME, self.render_tags(links))

    def _write(self, path: Path, html: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        logger.info(f"Wrote {path}")
        return path
