"""LLM exceptions for docrag."""

from .base import RAGError


class LLMError(RAGError):
    """Base error for answer generation."""

    error_code = "RAG_LLM_001"


class LLMConnectionError(LLMError):
    """Failed to connect to the completion provider.

    Common causes:
    - Invalid API key
    - Network issues
    - Service unavailable
    """

    error_code = "RAG_LLM_002"


class LLMRateLimitError(LLMError):
    """Rate limit exceeded on the completion provider."""

    error_code = "RAG_LLM_003"


class LLMGenerationError(LLMError):
    """Provider accepted the request but failed to produce an answer.

    Common causes:
    - Content filtered by safety settings
    - Token limit exceeded
    """

    error_code = "RAG_LLM_004"
