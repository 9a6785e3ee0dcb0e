"""Document ingestion exceptions for docrag."""

from .base import RAGError


class IngestionError(RAGError):
    """Error while loading raw documents."""

    error_code = "RAG_ING_001"


class ScrapingError(IngestionError):
    """Failed to fetch or parse a website."""

    error_code = "RAG_ING_002"


class InvalidURLError(IngestionError):
    """URL is malformed or uses an unsupported scheme."""

    error_code = "RAG_ING_003"


class FileLoadError(IngestionError):
    """Failed to read text from a file."""

    error_code = "RAG_ING_004"


class EmptyDocumentError(IngestionError):
    """Loaded document has no text content."""

    error_code = "RAG_ING_005"
