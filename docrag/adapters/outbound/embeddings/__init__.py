"""Remote embedding providers."""

from .gemini_embedding import GeminiEmbeddingFunction

__all__ = ["GeminiEmbeddingFunction"]
