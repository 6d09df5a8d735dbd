"""Keyword-based tag derivation.

A link's tags are the sorted, de-duplicated union of five sources:

1. keyword matches over title + description + URL (computed during
   enrichment and stored in ``metaTags`` together with source 2),
2. the page's own ``<meta name="keywords">`` entries,
3. the site label for the hostname,
4. keyword matches in the URL path and query,
5. keyword matches in the chat message excerpt.

All functions are pure; running them twice on the same record gives the
same result.
"""

from typing import Any, Iterable
from urllib.parse import urlparse

from .vocabulary import (
    CANONICAL_LABELS,
    CONTENT_KEYWORDS,
    DOMAIN_LABELS,
    METADATA_KEYWORDS,
    PATH_KEYWORDS,
)

MIN_KEYWORD_LENGTH = 2
MAX_KEYWORD_LENGTH = 20


def _scan(text: str, table: Iterable[tuple[str, str]]) -> list[str]:
    return [label for keyword, label in table if keyword in text]


def _parse(url: str):
    try:
        parsed = urlparse(url)
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None
    return parsed


def normalize_keyword(keyword: str) -> str | None:
    """Capitalize a page keyword; drop it unless 2 < length < 20."""
    normalized = keyword.capitalize()
    if MIN_KEYWORD_LENGTH < len(normalized) < MAX_KEYWORD_LENGTH:
        return normalized
    return None


def tags_from_metadata(
    title: str, description: str, url: str, keywords: Iterable[str]
) -> list[str]:
    """Tags derived at enrichment time from page metadata."""
    combined = f"{title} {description} {url}".lower()
    tags = _scan(combined, METADATA_KEYWORDS.items())

    for keyword in keywords:
        normalized = normalize_keyword(keyword)
        if normalized:
            tags.append(normalized)

    return normalize_tags(tags)


def meta_tags(values: Iterable[Any] | None) -> list[str]:
    """Pass through stored ``metaTags``.

    Vocabulary labels are kept as they are; anything else is a page keyword
    and gets the keyword normalization.
    """
    tags = []
    for value in values or []:
        if not isinstance(value, str):
            continue
        if value in CANONICAL_LABELS:
            tags.append(value)
            continue
        normalized = normalize_keyword(value)
        if normalized:
            tags.append(normalized)
    return tags


def domain_tags(url: str) -> list[str]:
    """At most one site label: exact hostname first, then substring."""
    parsed = _parse(url)
    if parsed is None or not parsed.hostname:
        return []

    hostname = parsed.hostname
    if hostname in DOMAIN_LABELS:
        return [DOMAIN_LABELS[hostname]]

    for domain, label in DOMAIN_LABELS.items():
        if domain in hostname:
            return [label]
    return []


def path_tags(url: str) -> list[str]:
    """Labels for every keyword found in the URL path and query."""
    parsed = _parse(url)
    if parsed is None:
        return []

    full_path = parsed.path
    if parsed.query:
        full_path += "?" + parsed.query
    return _scan(full_path.lower(), PATH_KEYWORDS.items())


def content_tags(content: str | None) -> list[str]:
    """Labels for every keyword found in the message excerpt."""
    if not content:
        return []
    return _scan(content.lower(), CONTENT_KEYWORDS.items())


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Remove duplicates and sort."""
    return sorted(set(tags))


def generate_tags(link: dict[str, Any]) -> list[str]:
    """Compute the final tag list for a link record."""
    url = link.get("url") or ""
    tags = [
        *meta_tags(link.get("metaTags")),
        *domain_tags(url),
        *path_tags(url),
        *content_tags(link.get("content")),
    ]
    return normalize_tags(tags)
