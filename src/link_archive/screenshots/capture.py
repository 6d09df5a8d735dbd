"""Viewport screenshots through headless Chrome."""

import hashlib
import io
import logging
import time
from pathlib import Path

from PIL import Image
from selenium import webdriver
from selenium.webdriver.chrome.options import Options

logger = logging.getLogger(__name__)


def screenshot_filename(url: str) -> str:
    """Deterministic file name for a URL's screenshot."""
    return f"{hashlib.md5(url.encode('utf-8')).hexdigest()}.jpg"


class ScreenshotCapturer:
    """Capture the visible viewport of a page as a JPEG."""

    CHROME_ARGS = (
        "--headless=new",
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
    )

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        page_load_timeout: int = 30,
        settle_seconds: float = 2,
        jpeg_quality: int = 80,
    ):
        self.width = width
        self.height = height
        self.page_load_timeout = page_load_timeout
        self.settle_seconds = settle_seconds
        self.jpeg_quality = jpeg_quality

    def _build_options(self) -> Options:
        options = Options()
        for arg in self.CHROME_ARGS:
            options.add_argument(arg)
        options.add_argument(f"--window-size={self.width},{self.height}")
        options.add_argument("--force-device-scale-factor=1")
        return options

    def _create_driver(self) -> webdriver.Chrome:
        driver = webdriver.Chrome(options=self._build_options())
        driver.set_window_size(self.width, self.height)
        driver.set_page_load_timeout(self.page_load_timeout)
        return driver

    def capture(self, url: str, output_path: Path) -> bool:
        """Capture ``url`` into ``output_path``. Returns False on any failure."""
        driver = None
        try:
            # A fresh browser per page keeps cookies and crashes isolated
            driver = self._create_driver()
            driver.get(url)

            # Give deferred scripts time to render
            time.sleep(self.settle_seconds)

            png = driver.get_screenshot_as_png()
            self._save_jpeg(png, Path(output_path))
            return True

        except Exception as e:
            logger.error(f"  Screenshot failed for {url}: {e}")
            return False

        finally:
            if driver is not None:
                try:
                    driver.quit()
                except Exception as e:
                    logger.debug(f"  Browser shutdown failed: {e}")

    def _save_jpeg(self, png: bytes, output_path: Path) -> None:
        with Image.open(io.BytesIO(png)) as image:
            image.convert("RGB").save(
                output_path, "JPEG", quality=self.jpeg_quality, optimize=True
            )
