"""Data models for the link archive."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

DISCORD_CDN = "https://cdn.discordapp.com"
CONTENT_EXCERPT_LENGTH = 200


class FetchStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"
    SKIPPED = "skipped"


def normalize_timestamp(value: str) -> str:
    """Normalize an ISO-8601 timestamp to UTC with millisecond precision.

    Discord returns ``2024-01-01T00:00:00.000000+00:00``; the archive stores
    ``2024-01-01T00:00:00.000Z``.
    """
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def avatar_url(user: dict[str, Any]) -> str:
    """Build the display avatar URL for a Discord user object."""
    user_id = user.get("id", "0")
    avatar = user.get("avatar")
    if avatar:
        ext = "gif" if avatar.startswith("a_") else "png"
        return f"{DISCORD_CDN}/avatars/{user_id}/{avatar}.{ext}"

    # Default avatars: legacy discriminator users use discriminator % 5,
    # users on the new username system use (id >> 22) % 6.
    discriminator = user.get("discriminator") or "0"
    if discriminator != "0":
        index = int(discriminator) % 5
    else:
        index = (int(user_id) >> 22) % 6
    return f"{DISCORD_CDN}/embed/avatars/{index}.png"


@dataclass
class Author:
    """Snapshot of the message author at extraction time."""

    username: str
    display_name: str
    id: str
    avatar: str

    @classmethod
    def from_api(cls, user: dict[str, Any]) -> "Author":
        username = user.get("username", "")
        return cls(
            username=username,
            display_name=user.get("global_name") or username,
            id=str(user.get("id", "")),
            avatar=avatar_url(user),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "username": self.username,
            "displayName": self.display_name,
            "id": self.id,
            "avatar": self.avatar,
        }


@dataclass
class ChatMessage:
    """A single message read from the thread."""

    id: str
    content: str
    author: Author
    timestamp: str
    attachment_count: int = 0

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "ChatMessage":
        """Build a message from a Discord REST message object."""
        return cls(
            id=str(payload["id"]),
            content=payload.get("content") or "",
            author=Author.from_api(payload.get("author") or {}),
            timestamp=normalize_timestamp(payload["timestamp"]),
            attachment_count=len(payload.get("attachments") or []),
        )


@dataclass
class LinkRecord:
    """One URL occurrence extracted from a chat message."""

    url: str
    author: Author
    timestamp: str
    message_id: str
    content: str
    has_attachments: bool = False
    attachment_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "author": self.author.to_dict(),
            "timestamp": self.timestamp,
            "messageId": self.message_id,
            "content": self.content,
            "hasAttachments": self.has_attachments,
            "attachmentCount": self.attachment_count,
        }


@dataclass
class PageMetadata:
    """Metadata derived from a fetched page."""

    title: str
    description: str = ""
    meta_keywords: list[str] = field(default_factory=list)
    image: str = ""

    @classmethod
    def default(cls, url: str) -> "PageMetadata":
        """All-defaults metadata used when a page cannot be fetched or parsed."""
        return cls(title=url)


@dataclass
class StageSummary:
    """Per-record outcome counters reported at the end of a stage."""

    success: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.success + self.skipped + self.failed
