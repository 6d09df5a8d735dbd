"""Extract title, description, keywords and preview image from HTML."""

from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from ..storage.models import PageMetadata


def resolve_image_url(image_url: str, base_url: str) -> str:
    """Resolve an image reference found on ``base_url`` to an absolute URL."""
    if image_url.startswith(("http://", "https://")):
        return image_url

    base = urlparse(base_url)
    if not base.scheme or not base.netloc:
        return image_url

    if image_url.startswith("//"):
        return f"{base.scheme}:{image_url}"

    origin = f"{base.scheme}://{base.netloc}/"
    return urljoin(origin, image_url)


class MetadataExtractor:
    """Read page metadata in OpenGraph > Twitter Card > HTML order."""

    def extract(self, html: str, url: str) -> PageMetadata:
        soup = BeautifulSoup(html, "html.parser")

        title = (
            self._meta(soup, property="og:title")
            or self._meta(soup, name="twitter:title")
            or self._title_tag(soup)
            or url
        )
        description = (
            self._meta(soup, property="og:description")
            or self._meta(soup, name="twitter:description")
            or self._meta(soup, name="description")
            or ""
        )

        keywords_attr = self._meta(soup, name="keywords")
        keywords = []
        if keywords_attr:
            keywords = [k.strip() for k in keywords_attr.split(",") if k.strip()]

        image = self._meta(soup, property="og:image") or self._meta(
            soup, name="twitter:image"
        )
        if image:
            image = resolve_image_url(image, url)

        return PageMetadata(
            title=title.strip(),
            description=description.strip(),
            meta_keywords=keywords,
            image=image or "",
        )

    def _meta(self, soup: BeautifulSoup, **attrs: str) -> str | None:
        tag = soup.find("meta", attrs=attrs)
        if tag is None:
            return None
        content = tag.get("content")
        return (content or "").strip() or None

    def _title_tag(self, soup: BeautifulSoup) -> str | None:
        if soup.title is None:
            return None
        return soup.title.get_text().strip() or None
