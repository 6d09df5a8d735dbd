"""Extract links from chat messages."""

import re
from typing import Iterable

from ..storage.models import CONTENT_EXCERPT_LENGTH, ChatMessage, LinkRecord


class MessageLinkParser:
    """Turn chat messages into link records, one per URL occurrence."""

    URL_PATTERN = re.compile(r"https?://[^\s]+")

    def extract_urls(self, content: str | None) -> list[str]:
        """Return every URL in the text, in order of appearance."""
        if not content:
            return []
        return self.URL_PATTERN.findall(content)

    def parse_message(self, message: ChatMessage) -> list[LinkRecord]:
        """Build a record for each URL in a message."""
        urls = self.extract_urls(message.content)
        excerpt = message.content[:CONTENT_EXCERPT_LENGTH]

        return [
            LinkRecord(
                url=url,
                author=message.author,
                timestamp=message.timestamp,
                message_id=message.id,
                content=excerpt,
                has_attachments=message.attachment_count > 0,
                attachment_count=message.attachment_count,
            )
            for url in urls
        ]

    def parse_messages(self, messages: Iterable[ChatMessage]) -> list[LinkRecord]:
        """Parse all messages and sort the records newest first."""
        records = []
        for message in messages:
            records.extend(self.parse_message(message))

        # Timestamps are normalized to the same UTC format, so they sort as strings
        return sorted(records, key=lambda r: r.timestamp, reverse=True)
