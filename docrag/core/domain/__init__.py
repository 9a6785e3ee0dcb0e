"""Domain models for docrag.

- document: Document, RawDocument, DocumentMetadata, SourceKind and SearchResult
- embedding: EmbeddingOutcome and VectorizationMode
- rag: RAGContext, RAGResponse and the statistics models
- similarity: cosine similarity

All models are re-exported here:

    from docrag.core.domain import Document, SearchResult
"""

from .document import Document, DocumentMetadata, RawDocument, SearchResult, SourceKind
from .embedding import EmbeddingOutcome, VectorizationMode
from .rag import PipelineStats, RAGContext, RAGResponse, VectorStoreStats
from .similarity import cosine_similarity

__all__ = [
    # Document models
    "Document",
    "DocumentMetadata",
    "RawDocument",
    "SearchResult",
    "SourceKind",
    # Embedding models
    "EmbeddingOutcome",
    "VectorizationMode",
    # Pipeline models
    "RAGContext",
    "RAGResponse",
    "VectorStoreStats",
    "PipelineStats",
    # Similarity
    "cosine_similarity",
]
