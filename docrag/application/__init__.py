"""Application services wiring loaders to the vector store."""

from .knowledge_base import KnowledgeBase

__all__ = ["KnowledgeBase"]
