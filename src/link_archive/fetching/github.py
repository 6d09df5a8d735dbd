"""Preview images for GitHub repositories, taken from their README."""

import asyncio
import logging
import re
from urllib.parse import urlparse

import aiohttp

logger = logging.getLogger(__name__)

MARKDOWN_IMAGE = re.compile(r"!\[.*?\]\((.*?)\)")


def parse_github_repo(url: str) -> tuple[str, str] | None:
    """Return ``(owner, repo)`` for github.com repository URLs."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if parsed.hostname != "github.com":
        return None

    parts = [p for p in parsed.path.split("/") if p]
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


class GitHubReadmeImageFetcher:
    """Find the first Markdown image in a repository README."""

    API_URL = "https://api.github.com/repos/{owner}/{repo}/readme"
    RAW_URL = "https://raw.githubusercontent.com/{owner}/{repo}/main/{path}"

    def __init__(self, timeout_seconds: float = 5):
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_image(self, url: str) -> str:
        """Return the README image URL, or ``""`` when there is none."""
        repo = parse_github_repo(url)
        if repo is None:
            return ""
        owner, name = repo

        readme = await self._fetch_readme(owner, name)
        if not readme:
            return ""

        return self.find_image(readme, owner, name)

    def find_image(self, readme: str, owner: str, repo: str) -> str:
        match = MARKDOWN_IMAGE.search(readme)
        if not match or not match.group(1):
            return ""

        image_url = match.group(1)
        if not image_url.startswith(("http://", "https://")):
            path = image_url.removeprefix("./").lstrip("/")
            image_url = self.RAW_URL.format(owner=owner, repo=repo, path=path)

        logger.info(f"  README image: {image_url[:60]}")
        return image_url

    async def _fetch_readme(self, owner: str, repo: str) -> str | None:
        api_url = self.API_URL.format(owner=owner, repo=repo)
        headers = {
            "Accept": "application/vnd.github.v3.raw",
            "User-Agent": "Mozilla/5.0",
        }
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(api_url, headers=headers) as response:
                    if response.status == 404:
                        logger.info("  README not found")
                        return None
                    if response.status != 200:
                        logger.warning(f"  README fetch failed: HTTP {response.status}")
                        return None
                    return await response.text(errors="replace")
        except asyncio.TimeoutError:
            logger.warning(f"  README fetch timed out: {owner}/{repo}")
            return None
        except aiohttp.ClientError as e:
            logger.warning(f"  README fetch failed: {e}")
            return None
        except Exception as e:
            logger.warning(f"  README fetch failed unexpectedly: {e}")
            return None
