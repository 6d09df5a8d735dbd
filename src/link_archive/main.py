"""CLI entry point and pipeline stages."""

import asyncio
import logging
import time
from typing import Any, Callable

import click

from .config import Config
from .extraction.discord_client import DiscordAPIError, DiscordClient
from .extraction.parser import MessageLinkParser
from .fetching.fetcher import PageFetcher
from .fetching.github import GitHubReadmeImageFetcher, parse_github_repo
from .fetching.metadata import MetadataExtractor
from .rendering.renderer import PageRenderer, all_tags, collect_stats
from .screenshots.capture import ScreenshotCapturer, screenshot_filename
from .storage.links_file import LinksFileNotFoundError, load_links, save_links
from .storage.models import ChatMessage, FetchStatus, PageMetadata, StageSummary
from .tagging.tagger import generate_tags, tags_from_metadata
from .translation.aws import AWSTranslator
from .translation.base import BaseTranslator, translate_to_japanese

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

Link = dict[str, Any]


class LinkArchivePipeline:
    """The archive stages. Each reads the links document, transforms every
    record, and rewrites the document once at the end."""

    def __init__(self, config: Config):
        self.config = config
        self.parser = MessageLinkParser()
        self.fetcher = PageFetcher(
            timeout_seconds=config.fetch_timeout_seconds,
            max_redirects=config.max_redirects,
        )
        self.extractor = MetadataExtractor()
        self.github = GitHubReadmeImageFetcher(
            timeout_seconds=config.fetch_timeout_seconds
        )
        self.translator: BaseTranslator | None = (
            AWSTranslator(region=config.translate_region)
            if config.translation_enabled
            else None
        )
        self.capturer = ScreenshotCapturer()
        self.renderer = PageRenderer(display_timezone=config.display_timezone)

    # Stage 1: messages -> link records

    async def fetch_links(self) -> list[Link]:
        """Read the whole thread and write a fresh links document."""
        self.config.require_discord()
        client = DiscordClient(self.config.discord_bot_token)  # type: ignore[arg-type]
        thread_id = self.config.target_thread_id

        logger.info(f"Fetching thread {thread_id}...")
        channel = await client.fetch_channel(thread_id)  # type: ignore[arg-type]
        logger.info(f"Thread name: {channel.get('name', thread_id)}")

        payloads = await client.fetch_all_messages(thread_id)  # type: ignore[arg-type]
        logger.info(f"Fetched {len(payloads)} messages")

        messages = [ChatMessage.from_api(p) for p in payloads]
        records = self.parser.parse_messages(messages)
        logger.info(f"Extracted {len(records)} URLs")

        links = [record.to_dict() for record in records]
        save_links(self.config.data_path, links)
        logger.info(f"Saved links to {self.config.data_path}")
        return links

    # Stage 2: page metadata and translation

    async def fetch_metadata(self) -> list[Link]:
        links = load_links(self.config.data_path)
        logger.info(f"Fetching metadata for {len(links)} links...")

        summary = StageSummary()
        enriched = []
        for i, link in enumerate(links):
            logger.info(f"[{i + 1}/{len(links)}] {link.get('url', '')}")
            updated, status = await self._enrich(link)
            enriched.append(updated)

            if status == FetchStatus.SUCCESS:
                summary.success += 1
            elif status == FetchStatus.SKIPPED:
                summary.skipped += 1
            else:
                summary.failed += 1

            if i < len(links) - 1:
                await asyncio.sleep(self.config.request_delay_seconds)

        save_links(self.config.data_path, enriched)

        titled = sum(1 for link in enriched if link["title"] != link.get("url"))
        logger.info(
            f"Metadata: {summary.success} fetched, {summary.skipped} skipped, "
            f"{summary.failed} failed ({summary.total} total)"
        )
        logger.info(f"Titles obtained: {titled}/{len(enriched)}")
        return enriched

    async def _enrich(self, link: Link) -> tuple[Link, FetchStatus]:
        url = link.get("url", "")
        try:
            metadata, status = await self._fetch_page_metadata(url)
        except Exception as e:
            logger.warning(f"  Metadata extraction failed for {url}: {e}")
            metadata, status = PageMetadata.default(url), FetchStatus.FAILED

        description_ja = ""
        if metadata.description:
            description_ja = await translate_to_japanese(
                self.translator, metadata.description
            )

        meta_tags = tags_from_metadata(
            metadata.title, metadata.description, url, metadata.meta_keywords
        )

        return {
            **link,
            "title": metadata.title,
            "description": metadata.description,
            "descriptionJa": description_ja,
            "metaTags": meta_tags,
            "image": metadata.image,
        }, status

    async def _fetch_page_metadata(self, url: str) -> tuple[PageMetadata, FetchStatus]:
        result = await self.fetcher.fetch(url)
        if not result.ok or result.content is None:
            logger.warning(f"  [{result.status.value}] {result.error}")
            return PageMetadata.default(url), result.status

        metadata = self.extractor.extract(result.content, url)

        if not metadata.image and parse_github_repo(url):
            metadata.image = await self.github.fetch_image(url)

        logger.info(f"  Title: {metadata.title[:50]}")
        return metadata, result.status

    # Stage 3: tags

    def generate_tags(self) -> list[Link]:
        links = load_links(self.config.data_path)
        logger.info(f"Generating tags for {len(links)} links...")

        tagged = []
        for i, link in enumerate(links):
            tags = generate_tags(link)
            tagged.append({**link, "tags": tags})
            logger.info(
                f"[{i + 1}/{len(links)}] {link.get('url', '')} -> {', '.join(tags) or 'none'}"
            )

        save_links(self.config.data_path, tagged)

        unique = all_tags(tagged)
        logger.info(f"Unique tags: {len(unique)}")
        logger.info(f"Tags: {', '.join(unique)}")
        return tagged

    # Stage 4: screenshots

    def capture_screenshots(self) -> StageSummary:
        links = load_links(self.config.data_path)
        screenshots_dir = self.config.screenshots_dir
        screenshots_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Capturing screenshots for {len(links)} links...")

        summary = StageSummary()
        annotated = []
        for i, link in enumerate(links):
            url = link.get("url", "")
            filename = screenshot_filename(url)
            output_path = screenshots_dir / filename
            relative_path = f"{self.config.screenshots_dir_name}/{filename}"
            logger.info(f"[{i + 1}/{len(links)}] {url}")

            # An existing file counts as done, whatever the JSON says
            if output_path.exists():
                logger.info("  Skipped: screenshot already exists")
                annotated.append({**link, "screenshot": relative_path})
                summary.skipped += 1
                continue

            if self.capturer.capture(url, output_path):
                logger.info(f"  Saved {relative_path}")
                annotated.append({**link, "screenshot": relative_path})
                summary.success += 1
            else:
                annotated.append({**link, "screenshot": None})
                summary.failed += 1

            if i < len(links) - 1:
                time.sleep(self.config.screenshot_delay_seconds)

        save_links(self.config.data_path, annotated)
        logger.info(
            f"Screenshots: {summary.success} captured, {summary.skipped} skipped, "
            f"{summary.failed} failed ({summary.total} total)"
        )
        return summary

    # Stage 5: pages

    def generate_page(self) -> None:
        links = load_links(self.config.data_path)
        logger.info(f"Rendering {len(links)} links...")
        self.renderer.write_index(links, self.config.output_dir)

    def generate_tags_page(self) -> None:
        links = load_links(self.config.data_path)
        logger.info("Rendering tag index...")
        self.renderer.write_tags(links, self.config.output_dir)

    async def run_all(self) -> None:
        """Run every stage in order."""
        await self.fetch_links()
        await self.fetch_metadata()
        self.generate_tags()
        self.capture_screenshots()
        self.generate_page()
        self.generate_tags_page()


def _run_stage(stage: Callable[[], Any]) -> Any:
    """Run a stage, turning fatal errors into a non-zero exit."""
    try:
        result = stage()
        if asyncio.iscoroutine(result):
            result = asyncio.run(result)
        return result
    except (ValueError, LinksFileNotFoundError, DiscordAPIError) as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--config", "-c", default="config.yaml", help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """Discord Link Archive - archive links shared in a Discord thread."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    try:
        ctx.obj = Config.load(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@cli.command("fetch-links")
@click.pass_obj
def fetch_links(cfg: Config) -> None:
    """Fetch thread messages and extract links."""
    pipeline = LinkArchivePipeline(cfg)
    _run_stage(pipeline.fetch_links)


@cli.command("fetch-metadata")
@click.pass_obj
def fetch_metadata(cfg: Config) -> None:
    """Fetch page metadata and translate descriptions."""
    pipeline = LinkArchivePipeline(cfg)
    _run_stage(pipeline.fetch_metadata)


@cli.command("generate-tags")
@click.pass_obj
def generate_tags_command(cfg: Config) -> None:
    """Derive tags for every link."""
    pipeline = LinkArchivePipeline(cfg)
    _run_stage(pipeline.generate_tags)


@cli.command("capture-screenshots")
@click.pass_obj
def capture_screenshots(cfg: Config) -> None:
    """Capture a screenshot of every link."""
    pipeline = LinkArchivePipeline(cfg)
    _run_stage(pipeline.capture_screenshots)


@cli.command("generate-page")
@click.pass_obj
def generate_page(cfg: Config) -> None:
    """Render index.html."""
    pipeline = LinkArchivePipeline(cfg)
    _run_stage(pipeline.generate_page)


@cli.command("generate-tags-page")
@click.pass_obj
def generate_tags_page(cfg: Config) -> None:
    """Render tags.html."""
    pipeline = LinkArchivePipeline(cfg)
    _run_stage(pipeline.generate_tags_page)


@cli.command("run-all")
@click.pass_obj
def run_all(cfg: Config) -> None:
    """Run every stage in order."""
    pipeline = LinkArchivePipeline(cfg)
    _run_stage(pipeline.run_all)


@cli.command()
@click.pass_obj
def stats(cfg: Config) -> None:
    """Show archive statistics."""
    links = _run_stage(lambda: load_links(cfg.data_path))
    s = collect_stats(links)

    click.echo("Archive Statistics:")
    click.echo(f"  Links:    {s.link_count}")
    click.echo(f"  Authors:  {s.author_count}")
    click.echo(f"  Tags:     {s.tag_count}")
    click.echo(f"  Domains:  {s.domain_count}")


if __name__ == "__main__":
    cli()
