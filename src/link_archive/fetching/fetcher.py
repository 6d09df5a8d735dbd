"""Async page fetcher."""

import asyncio
from dataclasses import dataclass
from urllib.parse import urlparse

import aiohttp

from ..storage.models import FetchStatus

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class FetchResult:
    """Result of a fetch operation."""

    status: FetchStatus
    content: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.SUCCESS


class PageFetcher:
    """Fetch a single page with a short timeout and a browser-like user agent."""

    SKIP_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".mp4", ".mp3", ".wav"}

    def __init__(
        self,
        timeout_seconds: float = 5,
        max_redirects: int = 5,
        user_agent: str = BROWSER_USER_AGENT,
    ):
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.max_redirects = max_redirects
        self.user_agent = user_agent

    def should_skip(self, url: str) -> bool:
        """Check if URL should be skipped based on extension."""
        path = urlparse(url).path.lower()
        return any(path.endswith(ext) for ext in self.SKIP_EXTENSIONS)

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a URL once. Errors are reported in the result, never raised."""
        if self.should_skip(url):
            return FetchResult(
                status=FetchStatus.SKIPPED, error="Non-HTML content type (media file)"
            )

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                headers = {"User-Agent": self.user_agent}
                async with session.get(
                    url,
                    headers=headers,
                    allow_redirects=True,
                    max_redirects=self.max_redirects,
                ) as response:
                    if response.status != 200:
                        return FetchResult(
                            status=FetchStatus.FAILED, error=f"HTTP {response.status}"
                        )

                    content = await response.text(errors="replace")
                    return FetchResult(status=FetchStatus.SUCCESS, content=content)

        except asyncio.TimeoutError:
            return FetchResult(status=FetchStatus.TIMEOUT, error="Request timed out")
        except aiohttp.ClientError as e:
            return FetchResult(status=FetchStatus.FAILED, error=str(e))
        except Exception as e:
            return FetchResult(status=FetchStatus.FAILED, error=f"Unexpected: {e}")
