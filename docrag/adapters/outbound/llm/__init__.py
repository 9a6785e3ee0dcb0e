"""Remote completion providers."""

from .gemini_llm import GeminiLLMAdapter

__all__ = ["GeminiLLMAdapter"]
