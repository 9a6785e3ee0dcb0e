"""Document and search result models for the knowledge base."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class SourceKind(str, Enum):
    """Where a document came from. Stored and surfaced, never interpreted."""

    TEXT = "text"
    FILE = "file"
    WEBSITE = "website"


@dataclass
class DocumentMetadata:
    """Descriptive metadata attached to a stored document.

    Attributes:
        name: Display name used in context headers and citations.
        source_kind: Ingestion surface that produced the document.
        size_bytes: Size of the original payload, when known.
        created_at: When the document was ingested (UTC).
        url: Source URL for scraped websites.
        path: Source path for loaded files.
    """

    name: str
    source_kind: SourceKind = SourceKind.TEXT
    size_bytes: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    url: str | None = None
    path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "sourceKind": self.source_kind.value,
            "createdAt": self.created_at.isoformat(),
        }
        if self.size_bytes is not None:
            result["sizeBytes"] = self.size_bytes
        if self.url:
            result["url"] = self.url
        if self.path:
            result["path"] = self.path
        return result


@dataclass
class Document:
    """A stored unit of text together with its embedding.

    At most one Document per ``doc_id`` lives in a store; adding a document
    with an existing id replaces the previous entry.

    Attributes:
        doc_id: Caller-supplied key, stable across updates.
        content: Raw text.
        embedding: Vector produced at insertion time.
        metadata: Descriptive metadata.
    """

    doc_id: str
    content: str
    embedding: list[float]
    metadata: DocumentMetadata

    @property
    def token_count(self) -> int:
        """Whitespace-delimited word count of the content."""
        return len(self.content.split())

    @property
    def dimension(self) -> int:
        return len(self.embedding)

    def to_dict(self, include_embedding: bool = False) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.doc_id,
            "content": self.content,
            "metadata": self.metadata.to_dict(),
        }
        if include_embedding:
            result["embedding"] = list(self.embedding)
        return result


@dataclass
class SearchResult:
    """A document matched by a query.

    Attributes:
        document: The matched Document.
        similarity: Cosine similarity between query and document vectors.
    """

    document: Document
    similarity: float


@dataclass
class RawDocument:
    """Loaded text ready to be embedded and stored."""

    doc_id: str
    content: str
    metadata: DocumentMetadata
