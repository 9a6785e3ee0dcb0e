"""Configuration-related exceptions for docrag."""

from .base import RAGError


class ConfigurationError(RAGError):
    """Configuration or environment variable errors."""

    error_code = "RAG_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """Required API key is not configured."""

    error_code = "RAG_CFG_002"
