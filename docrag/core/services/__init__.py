"""Core services: vectorization, storage, retrieval and answer generation."""

from .answer_generator import AnswerGenerator
from .context_builder import ContextBuilder
from .embedding_service import FallbackEmbedder
from .query_processor import QueryProcessor
from .rag_pipeline import PIPELINE_VERSION, RAGPipeline
from .vector_store import InMemoryVectorStore
from .vectorizers import LexicalVectorizer, RemoteVectorizer

__all__ = [
    "AnswerGenerator",
    "ContextBuilder",
    "FallbackEmbedder",
    "InMemoryVectorStore",
    "LexicalVectorizer",
    "PIPELINE_VERSION",
    "QueryProcessor",
    "RAGPipeline",
    "RemoteVectorizer",
]
