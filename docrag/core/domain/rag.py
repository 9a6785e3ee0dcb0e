"""Pipeline result models: retrieval context, responses and statistics."""

from dataclasses import dataclass, field
from typing import Any

from .document import SearchResult


def _result_to_dict(result: SearchResult) -> dict[str, Any]:
    return {
        "document": result.document.to_dict(),
        "similarity": result.similarity,
    }


@dataclass
class RAGContext:
    """Everything retrieved for one query.

    Attributes:
        query: The caller's original query.
        retrieved_documents: Ranked search results.
        context_window: Token-bounded text handed to answer generation.
        confidence: Mean similarity of the results as a 0-100 integer.
    """

    query: str
    retrieved_documents: list[SearchResult] = field(default_factory=list)
    context_window: str = ""
    confidence: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "retrievedDocuments": [_result_to_dict(r) for r in self.retrieved_documents],
            "contextWindow": self.context_window,
            "confidence": self.confidence,
        }


@dataclass
class RAGResponse:
    """Answer to one query plus diagnostics."""

    answer: str
    context: RAGContext
    sources: list[SearchResult] = field(default_factory=list)
    processing_time_ms: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "answer": self.answer,
            "context": self.context.to_dict(),
            "sources": [_result_to_dict(r) for r in self.sources],
            "processingTimeMs": self.processing_time_ms,
        }


@dataclass
class VectorStoreStats:
    """Read-only summary of the vector store."""

    document_count: int
    total_tokens: int
    average_tokens_per_doc: int
    vector_dimensions: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "documentCount": self.document_count,
            "totalTokens": self.total_tokens,
            "averageTokensPerDoc": self.average_tokens_per_doc,
            "vectorDimensions": self.vector_dimensions,
        }


@dataclass
class PipelineStats(VectorStoreStats):
    """Vector store statistics merged with pipeline descriptors."""

    pipeline_version: str = ""
    features: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["pipelineVersion"] = self.pipeline_version
        result["features"] = list(self.features)
        return result
