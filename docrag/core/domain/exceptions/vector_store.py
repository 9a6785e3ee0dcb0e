"""Vector store exceptions for docrag."""

from .base import RAGError


class VectorStoreError(RAGError):
    """Base error for vector store operations."""

    error_code = "RAG_VEC_001"


class DimensionMismatchError(VectorStoreError):
    """Two vectors of different lengths were compared.

    Happens when the store mixes lexical fallback vectors with provider
    embeddings. Call ``InMemoryVectorStore.reindex()`` to re-embed every
    document under the current vectorization mode.
    """

    error_code = "RAG_VEC_002"


class DocumentNotFoundError(VectorStoreError):
    """Requested document id does not exist in the store."""

    error_code = "RAG_VEC_003"
