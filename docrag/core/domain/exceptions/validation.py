"""Validation exceptions for docrag."""

from .base import RAGError


class ValidationError(RAGError):
    """Input validation failed."""

    error_code = "RAG_VAL_001"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "RAG_VAL_002"
