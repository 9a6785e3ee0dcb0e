"""Fetch a web page and reduce it to plain text."""

import logging
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from ....common.utils import normalize_text
from ....core.domain import DocumentMetadata, RawDocument, SourceKind
from ....core.domain.exceptions import EmptyDocumentError, InvalidURLError, ScrapingError
from .ids import make_document_id

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; docrag-bot/1.0)"


class WebsiteScraper:
    """Scrapes a single page into a raw document."""

    def __init__(self, timeout: int = 30, session: requests.Session | None = None) -> None:
        """Initialize the scraper.

        Args:
            timeout: Request timeout in seconds.
            session: Optional preconfigured requests session.
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    @staticmethod
    def validate_url(url: str) -> str:
        parsed = urlparse(url.strip())
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidURLError(f"Invalid URL format: {url}", context={"url": url})
        return parsed.geturl()

    def scrape(self, url: str) -> RawDocument:
        """Download a page and extract its visible text.

        Args:
            url: Absolute http(s) URL.

        Returns:
            RawDocument titled with the page title (or the URL). Its id is
            derived from the URL, so scraping the same page again replaces
            the earlier copy.

        Raises:
            InvalidURLError: URL is malformed.
            ScrapingError: Request failed or returned an error status.
            EmptyDocumentError: Page has no visible text.
        """
        target = self.validate_url(url)

        try:
            response = self.session.get(target, timeout=self.timeout)
        except requests.RequestException as e:
            raise ScrapingError(f"Failed to fetch {target}", cause=e, context={"url": target}) from e

        if not response.ok:
            raise ScrapingError(
                f"Failed to fetch: {response.status_code}",
                context={"url": target, "status_code": response.status_code},
            )

        title, text = self.extract_text(response.text)
        if not text:
            raise EmptyDocumentError(f"No text content found at {target}", context={"url": target})

        logger.info("Scraped %s (%d chars)", target, len(text))
        return RawDocument(
            doc_id=make_document_id(SourceKind.WEBSITE, target, unique=False),
            content=text,
            metadata=DocumentMetadata(
                name=title or target,
                source_kind=SourceKind.WEBSITE,
                size_bytes=len(text.encode("utf-8")),
                url=target,
            ),
        )

    @staticmethod
    def extract_text(html: str) -> tuple[str, str]:
        """Return ``(title, visible text)`` for an HTML document."""
        soup = BeautifulSoup(html, "html.parser")

        title = normalize_text(soup.title.get_text()) if soup.title else ""
        for element in soup(["script", "style", "noscript"]):
            element.decompose()

        return title, normalize_text(soup.get_text(" "))
