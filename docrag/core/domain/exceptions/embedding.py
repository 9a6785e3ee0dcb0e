"""Embedding exceptions for docrag."""

from .base import RAGError


class EmbeddingError(RAGError):
    """Failed to generate embeddings."""

    error_code = "RAG_EMB_001"


class EmbeddingAPIError(EmbeddingError):
    """Embedding provider returned an error or a malformed response."""

    error_code = "RAG_EMB_002"


class EmbeddingRateLimitError(EmbeddingError):
    """Embedding provider rate limit exceeded."""

    error_code = "RAG_EMB_003"
