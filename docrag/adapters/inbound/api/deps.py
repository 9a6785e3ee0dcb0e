"""FastAPI dependency providers."""

from ....application.knowledge_base import KnowledgeBase
from ....composition import container
from ....core.services import InMemoryVectorStore, RAGPipeline


def get_vector_store() -> InMemoryVectorStore:
    return container.get_vector_store()


def get_knowledge_base() -> KnowledgeBase:
    return container.get_knowledge_base()


def get_pipeline() -> RAGPipeline:
    return container.get_pipeline()
