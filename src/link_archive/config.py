"""Configuration management."""

import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv

# Load .env file from current working directory
load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    data_path: Path = Path("data/links.json")
    output_dir: Path = Path(".")
    screenshots_dir_name: str = "screenshots"
    discord_bot_token: str | None = None
    target_thread_id: str | None = None
    fetch_timeout_seconds: float = 5
    max_redirects: int = 5
    request_delay_seconds: float = 0.2
    screenshot_delay_seconds: float = 1.0
    translation_enabled: bool = True
    translate_region: str = "ap-northeast-1"
    display_timezone: str = "Asia/Tokyo"

    def __post_init__(self):
        try:
            ZoneInfo(self.display_timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
            raise ValueError(
                f"DISPLAY_TIMEZONE is not a valid time zone: {self.display_timezone!r}"
            ) from e

    @property
    def screenshots_dir(self) -> Path:
        return self.output_dir / self.screenshots_dir_name

    @classmethod
    def load(cls, path: str | Path = "config.yaml") -> "Config":
        """Load configuration from an optional YAML file and the environment.

        Environment variables take precedence over YAML values:
        - DISCORD_BOT_TOKEN: Bot token used to read the thread
        - TARGET_THREAD_ID: Thread whose links are archived
        - LINKS_DATA_PATH: Path to the shared links JSON document
        - OUTPUT_DIR: Directory for the generated pages and screenshots
        - AWS_REGION: Region for Amazon Translate
        - DISPLAY_TIMEZONE: Time zone used for timestamps on the pages
        """
        data: dict = {}
        path = Path(path)
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}

        data_path = os.environ.get("LINKS_DATA_PATH") or data.get(
            "data_path", "data/links.json"
        )
        output_dir = os.environ.get("OUTPUT_DIR") or data.get("output_dir", ".")

        return cls(
            data_path=Path(data_path).expanduser(),
            output_dir=Path(output_dir).expanduser(),
            screenshots_dir_name=data.get("screenshots_dir", "screenshots"),
            discord_bot_token=os.environ.get("DISCORD_BOT_TOKEN")
            or data.get("discord_bot_token"),
            target_thread_id=os.environ.get("TARGET_THREAD_ID")
            or data.get("target_thread_id"),
            fetch_timeout_seconds=data.get("fetch_timeout_seconds", 5),
            max_redirects=data.get("max_redirects", 5),
            request_delay_seconds=data.get("request_delay_seconds", 0.2),
            screenshot_delay_seconds=data.get("screenshot_delay_seconds", 1.0),
            translation_enabled=data.get("translation_enabled", True),
            translate_region=os.environ.get("AWS_REGION")
            or data.get("translate_region", "ap-northeast-1"),
            display_timezone=os.environ.get("DISPLAY_TIMEZONE")
            or data.get("display_timezone", "Asia/Tokyo"),
        )

    def require_discord(self) -> None:
        """Validate the settings needed to read the Discord thread."""
        if not self.discord_bot_token:
            raise ValueError("DISCORD_BOT_TOKEN environment variable is not set")
        if not self.target_thread_id:
            raise ValueError("TARGET_THREAD_ID environment variable is not set")
