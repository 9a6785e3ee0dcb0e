"""Vector Store Port Interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..domain import Document, DocumentMetadata, SearchResult, VectorStoreStats


class VectorStorePort(ABC):
    """Abstract interface for document vector stores."""

    @abstractmethod
    def add_document(self, doc_id: str, content: str, metadata: DocumentMetadata) -> Document:
        """Embed and store a document, replacing any document with the same id."""
        ...

    @abstractmethod
    def remove_document(self, doc_id: str) -> bool:
        """Remove a document. Returns True iff it existed."""
        ...

    @abstractmethod
    def search(self, query: str, top_k: int = 5) -> list[SearchResult]:
        """Return up to top_k relevant documents, most similar first."""
        ...

    @abstractmethod
    def get_all_documents(self) -> list[Document]: ...

    @abstractmethod
    def get_document_count(self) -> int: ...

    @abstractmethod
    def get_stats(self) -> VectorStoreStats: ...

    @abstractmethod
    def reindex(self, doc_ids: Iterable[str] | None = None) -> int:
        """Re-embed stored documents with the current embedder. Returns the count."""
        ...
