"""Unit tests for document loaders."""

from unittest.mock import MagicMock

import pytest
import requests

from docrag.adapters.outbound.ingestion import (
    FileLoader,
    TextLoader,
    WebsiteScraper,
    make_document_id,
)
from docrag.core.domain import SourceKind
from docrag.core.domain.exceptions import (
    EmptyDocumentError,
    FileLoadError,
    InvalidURLError,
    ScrapingError,
)

pytestmark = pytest.mark.unit

PAGE = """
<html>
  <head><title>  Vector   Search </title><style>body { color: red; }</style></head>
  <body>
    <script>var tracking = 1;</script>
    <h1>Embeddings</h1>
    <p>Vectors capture meaning.</p>
    <noscript>Enable JavaScript</noscript>
  </body>
</html>
"""


class TestDocumentIds:
    """Tests for id generation."""

    def test_prefix_and_digest(self):
        doc_id = make_document_id(SourceKind.WEBSITE, "https://example.com", unique=False)
        assert doc_id.startswith("website_")
        assert doc_id == make_document_id(SourceKind.WEBSITE, "https://example.com", unique=False)

    def test_unique_ids_carry_timestamp(self):
        doc_id = make_document_id(SourceKind.TEXT, "notes")
        assert doc_id.startswith("text_")
        assert len(doc_id.split("_")) == 3


class TestTextLoader:
    """Tests for manual text entry."""

    def test_load(self):
        raw = TextLoader().load("Notes", "  \ufeffSome text here  ")

        assert raw.content == "Some text here"
        assert raw.metadata.name == "Notes"
        assert raw.metadata.source_kind == SourceKind.TEXT
        assert raw.metadata.size_bytes == len("Some text here")

    def test_explicit_id(self):
        assert TextLoader().load("Notes", "text", doc_id="custom").doc_id == "custom"

    def test_blank_name_defaults(self):
        assert TextLoader().load("  ", "text").metadata.name == "Untitled"

    def test_empty_content_raises(self):
        with pytest.raises(EmptyDocumentError):
            TextLoader().load("Notes", "   ")


class TestFileLoader:
    """Tests for local file loading."""

    def test_load_text_file(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("Line one.\nLine two.", encoding="utf-8")

        raw = FileLoader().load(path)

        assert raw.content == "Line one.\nLine two."
        assert raw.metadata.name == "notes.txt"
        assert raw.metadata.source_kind == SourceKind.FILE
        assert raw.metadata.path == str(path)
        assert raw.doc_id.startswith("file_")

    def test_invalid_bytes_replaced(self, tmp_path):
        path = tmp_path / "binary.md"
        path.write_bytes(b"valid \xff\xfe text")

        assert FileLoader().load(path).content == "valid  text"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileLoadError):
            FileLoader().load(tmp_path / "missing.txt")

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("  \n ")

        with pytest.raises(EmptyDocumentError):
            FileLoader().load(path)

    def test_broken_pdf_raises(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not really a pdf")

        with pytest.raises(FileLoadError):
            FileLoader().load(path)


class TestWebsiteScraper:
    """Tests for page scraping with a mocked HTTP session."""

    @pytest.fixture
    def session(self):
        session = MagicMock()
        response = MagicMock(ok=True, status_code=200, text=PAGE)
        session.get.return_value = response
        return session

    def test_extract_text(self):
        title, text = WebsiteScraper.extract_text(PAGE)

        assert title == "Vector Search"
        assert "Vectors capture meaning." in text
        assert "tracking" not in text
        assert "color" not in text
        assert "Enable JavaScript" not in text

    def test_scrape(self, session):
        raw = WebsiteScraper(timeout=5, session=session).scrape("https://example.com/page")

        session.get.assert_called_once_with("https://example.com/page", timeout=5)
        assert raw.metadata.name == "Vector Search"
        assert raw.metadata.url == "https://example.com/page"
        assert raw.metadata.source_kind == SourceKind.WEBSITE
        assert raw.doc_id == make_document_id(SourceKind.WEBSITE, "https://example.com/page", unique=False)

    @pytest.mark.parametrize("url", ["not a url", "ftp://example.com", "https://"])
    def test_invalid_url(self, session, url):
        with pytest.raises(InvalidURLError):
            WebsiteScraper(session=session).scrape(url)
        session.get.assert_not_called()

    def test_error_status(self, session):
        session.get.return_value = MagicMock(ok=False, status_code=404)

        with pytest.raises(ScrapingError) as exc_info:
            WebsiteScraper(session=session).scrape("https://example.com")

        assert exc_info.value.extra_context["status_code"] == 404

    def test_network_error(self, session):
        session.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(ScrapingError) as exc_info:
            WebsiteScraper(session=session).scrape("https://example.com")

        assert isinstance(exc_info.value.cause, requests.ConnectionError)

    def test_page_without_text(self, session):
        session.get.return_value = MagicMock(ok=True, status_code=200, text="<html><script>x()</script></html>")

        with pytest.raises(EmptyDocumentError):
            WebsiteScraper(session=session).scrape("https://example.com")
