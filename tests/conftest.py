"""
Shared test fixtures for the link archive test suite.

Provides:
  - Discord REST message payloads
  - Partially and fully enriched link records
  - A Config pointing at a temporary workspace
  - A local aiohttp server for exercising real HTTP handling
"""

import json
from contextlib import asynccontextmanager

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from link_archive.config import Config


@pytest.fixture
def make_api_message():
    """Build a Discord REST message payload."""

    def _make(
        content: str,
        message_id: str = "1001",
        timestamp: str = "2024-01-01T00:00:00.000000+00:00",
        author_id: str = "1",
        username: str = "bob",
        global_name: str | None = None,
        attachments: list | None = None,
    ) -> dict:
        return {
            "id": message_id,
            "content": content,
            "timestamp": timestamp,
            "author": {
                "id": author_id,
                "username": username,
                "global_name": global_name,
                "avatar": None,
                "discriminator": "0",
            },
            "attachments": attachments or [],
        }

    return _make


@pytest.fixture
def extracted_link():
    """A record as written by the extraction stage."""
    return {
        "url": "https://github.com/owner/repo",
        "author": {
            "username": "bob",
            "displayName": "Bob",
            "id": "1",
            "avatar": "https://cdn.discordapp.com/embed/avatars/0.png",
        },
        "timestamp": "2024-01-01T00:00:00.000Z",
        "messageId": "1001",
        "content": "python docker tutorial https://github.com/owner/repo",
        "hasAttachments": False,
        "attachmentCount": 0,
    }


@pytest.fixture
def enriched_link(extracted_link):
    """A record after enrichment and tagging."""
    return {
        **extracted_link,
        "title": "owner/repo: a Python tool",
        "description": "A small tool",
        "descriptionJa": "小さなツール",
        "metaTags": ["GitHub", "Python", "Cli"],
        "image": "https://example.com/a.png",
        "tags": ["Cli", "Docker", "GitHub", "Python", "チュートリアル"],
    }


@pytest.fixture
def config(tmp_path):
    """Config rooted in a temporary directory with no delays or translation."""
    return Config(
        data_path=tmp_path / "data" / "links.json",
        output_dir=tmp_path,
        request_delay_seconds=0,
        screenshot_delay_seconds=0,
        translation_enabled=False,
        display_timezone="UTC",
    )


@pytest.fixture
def write_links(config):
    """Write records to the configured links document."""

    def _write(links: list[dict]) -> None:
        config.data_path.parent.mkdir(parents=True, exist_ok=True)
        config.data_path.write_text(json.dumps(links), encoding="utf-8")

    return _write


@pytest.fixture
def local_server():
    """Serve aiohttp routes on localhost; the context yields the base URL."""

    @asynccontextmanager
    async def _serve(*routes: web.RouteDef):
        app = web.Application()
        app.add_routes(routes)
        async with TestServer(app) as server:
            yield f"http://{server.host}:{server.port}"

    return _serve
