"""Read messages from a Discord thread over the REST API."""

import asyncio
import logging
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


class DiscordAPIError(Exception):
    """A Discord request failed; the extraction run cannot continue."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class DiscordClient:
    """Minimal bot client for walking a thread's message history."""

    BASE_URL = "https://discord.com/api/v10"

    def __init__(
        self,
        token: str,
        page_size: int = 100,
        timeout_seconds: int = 30,
    ):
        self.token = token
        self.page_size = page_size
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bot {self.token}",
            "User-Agent": "DiscordBot (link-archive, 1.0)",
            "Accept": "application/json",
        }

    async def fetch_channel(self, channel_id: str) -> dict[str, Any]:
        """Fetch thread/channel info."""
        async with aiohttp.ClientSession(
            timeout=self.timeout, headers=self.headers
        ) as session:
            return await self._get_json(session, f"/channels/{channel_id}")

    async def fetch_all_messages(self, channel_id: str) -> list[dict[str, Any]]:
        """Fetch every message in the channel, newest first.

        Pages are requested with ``before`` set to the oldest message of the
        previous page until a page comes back short.
        """
        messages: list[dict[str, Any]] = []
        before: str | None = None

        async with aiohttp.ClientSession(
            timeout=self.timeout, headers=self.headers
        ) as session:
            while True:
                batch = await self._fetch_page(session, channel_id, before)
                messages.extend(batch)
                logger.debug(f"Fetched page of {len(batch)} messages (before={before})")

                if len(batch) < self.page_size:
                    break

                before = str(batch[-1]["id"])

        return messages

    async def _fetch_page(
        self,
        session: aiohttp.ClientSession,
        channel_id: str,
        before: str | None,
    ) -> list[dict[str, Any]]:
        params = {"limit": str(self.page_size)}
        if before:
            params["before"] = before
        return await self._get_json(
            session, f"/channels/{channel_id}/messages", params=params
        )

    async def _get_json(
        self,
        session: aiohttp.ClientSession,
        path: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.BASE_URL}{path}"
        try:
            async with session.get(url, params=params) as response:
                if response.status == 404:
                    raise DiscordAPIError(
                        "Thread not found. Check TARGET_THREAD_ID.", status=404
                    )
                if response.status in (401, 403):
                    raise DiscordAPIError(
                        f"Discord rejected the bot token (HTTP {response.status})",
                        status=response.status,
                    )
                if response.status != 200:
                    body = await response.text()
                    raise DiscordAPIError(
                        f"Discord request failed: HTTP {response.status} {body[:200]}",
                        status=response.status,
                    )
                return await response.json()
        except asyncio.TimeoutError as e:
            raise DiscordAPIError("Discord request timed out") from e
        except aiohttp.ClientError as e:
            raise DiscordAPIError(f"Discord request failed: {e}") from e
