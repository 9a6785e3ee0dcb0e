"""Document loaders: manual text, local files and websites."""

from .file_loader import FileLoader
from .ids import make_document_id
from .text_loader import TextLoader
from .web_scraper import WebsiteScraper

__all__ = ["FileLoader", "TextLoader", "WebsiteScraper", "make_document_id"]
