"""Exception hierarchy for docrag.

Structured exceptions with error codes, automatic location capture, cause
chaining and JSON serialization. Import from this package directly:

    from docrag.core.domain.exceptions import RAGError, EmbeddingAPIError
"""

# Base classes
from .base import ErrorLocation, RAGError

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    MissingAPIKeyError,
)

# Embedding exceptions
from .embedding import (
    EmbeddingAPIError,
    EmbeddingError,
    EmbeddingRateLimitError,
)

# Ingestion exceptions
from .ingestion import (
    EmptyDocumentError,
    FileLoadError,
    IngestionError,
    InvalidURLError,
    ScrapingError,
)

# LLM exceptions
from .llm import (
    LLMConnectionError,
    LLMError,
    LLMGenerationError,
    LLMRateLimitError,
)

# Validation exceptions
from .validation import (
    EmptyQueryError,
    ValidationError,
)

# Vector store exceptions
from .vector_store import (
    DimensionMismatchError,
    DocumentNotFoundError,
    VectorStoreError,
)

__all__ = [
    # Base
    "ErrorLocation",
    "RAGError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    # Embedding
    "EmbeddingError",
    "EmbeddingAPIError",
    "EmbeddingRateLimitError",
    # LLM
    "LLMError",
    "LLMConnectionError",
    "LLMRateLimitError",
    "LLMGenerationError",
    # Vector store
    "VectorStoreError",
    "DimensionMismatchError",
    "DocumentNotFoundError",
    # Ingestion
    "IngestionError",
    "ScrapingError",
    "InvalidURLError",
    "FileLoadError",
    "EmptyDocumentError",
    # Validation
    "ValidationError",
    "EmptyQueryError",
]
