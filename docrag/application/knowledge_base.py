"""Use-case service for managing the documents in a knowledge base."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from ..adapters.outbound.ingestion import FileLoader, TextLoader, WebsiteScraper
from ..core.domain import Document, RawDocument
from ..core.domain.exceptions import DocumentNotFoundError
from ..core.ports.vector_store_port import VectorStorePort

logger = logging.getLogger(__name__)


class KnowledgeBase:
    """Ingests documents from every surface into one vector store."""

    def __init__(
        self,
        vector_store: VectorStorePort,
        text_loader: TextLoader | None = None,
        file_loader: FileLoader | None = None,
        scraper: WebsiteScraper | None = None,
    ) -> None:
        self.vector_store = vector_store
        self.text_loader = text_loader or TextLoader()
        self.file_loader = file_loader or FileLoader()
        self.scraper = scraper or WebsiteScraper()

    def _store(self, raw: RawDocument) -> Document:
        return self.vector_store.add_document(raw.doc_id, raw.content, raw.metadata)

    def add_text(self, name: str, content: str, doc_id: str | None = None) -> Document:
        return self._store(self.text_loader.load(name, content, doc_id=doc_id))

    def add_file(self, path: Path | str, doc_id: str | None = None) -> Document:
        return self._store(self.file_loader.load(path, doc_id=doc_id))

    def add_website(self, url: str) -> Document:
        return self._store(self.scraper.scrape(url))

    def update_document(
        self,
        doc_id: str,
        content: str,
        name: str | None = None,
    ) -> Document:
        """Replace a document's content, re-embedding it.

        Args:
            doc_id: Id of the document to replace.
            content: New content.
            name: New display name, defaults to the current one.

        Returns:
            The replacement Document.

        Raises:
            DocumentNotFoundError: No document has this id.
        """
        current = self._find(doc_id)
        raw = self.text_loader.load(name or current.metadata.name, content, doc_id=doc_id)
        metadata = replace(
            current.metadata,
            name=raw.metadata.name,
            size_bytes=raw.metadata.size_bytes,
        )
        return self.vector_store.add_document(doc_id, raw.content, metadata)

    def remove_document(self, doc_id: str) -> bool:
        return self.vector_store.remove_document(doc_id)

    def reindex(self) -> int:
        """Re-embed every document, e.g. once the embedding provider is back."""
        return self.vector_store.reindex()

    def get_document(self, doc_id: str) -> Document:
        return self._find(doc_id)

    def list_documents(self) -> list[Document]:
        return self.vector_store.get_all_documents()

    def _find(self, doc_id: str) -> Document:
        for document in self.vector_store.get_all_documents():
            if document.doc_id == doc_id:
                return document
        raise DocumentNotFoundError(f"Document not found: {doc_id}", context={"doc_id": doc_id})
