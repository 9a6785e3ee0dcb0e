"""Composition root wiring adapters to the core services."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.outbound.embeddings import GeminiEmbeddingFunction
from ..adapters.outbound.ingestion import WebsiteScraper
from ..adapters.outbound.llm import GeminiLLMAdapter
from ..application.knowledge_base import KnowledgeBase
from ..common.rate_limiter import RateLimiter
from ..config.settings import Settings, settings
from ..core.services import (
    AnswerGenerator,
    ContextBuilder,
    FallbackEmbedder,
    InMemoryVectorStore,
    QueryProcessor,
    RAGPipeline,
    RemoteVectorizer,
)

logger = logging.getLogger(__name__)


def build_embedder(config: Settings) -> FallbackEmbedder:
    if not config.remote_enabled:
        logger.info("No Google API key configured; using lexical vectorization only")
        return FallbackEmbedder()

    provider = GeminiEmbeddingFunction(
        api_key=config.google_api_key,
        model_name=config.embedding_model,
        dimension=config.embedding_dimension,
    )
    remote = RemoteVectorizer(provider, RateLimiter(config.embedding_requests_per_minute))
    return FallbackEmbedder(remote=remote)


def build_answer_generator(config: Settings) -> AnswerGenerator:
    llm = None
    if config.remote_enabled:
        llm = GeminiLLMAdapter(
            api_key=config.google_api_key,
            model=config.llm_model,
            rate_limiter=RateLimiter(config.llm_requests_per_minute),
        )
    return AnswerGenerator(
        llm=llm,
        temperature=config.llm_temperature,
        max_tokens=config.llm_max_tokens,
    )


def build_pipeline(vector_store: InMemoryVectorStore, config: Settings) -> RAGPipeline:
    return RAGPipeline(
        vector_store=vector_store,
        answer_generator=build_answer_generator(config),
        context_builder=ContextBuilder(max_tokens=config.max_context_tokens),
        query_processor=QueryProcessor(),
        preprocess_queries=config.preprocess_queries,
        expand_queries=config.expand_queries,
        max_context_tokens=config.max_context_tokens,
        vectorization_mode=vector_store.embedder.mode,
    )


@lru_cache
def get_vector_store() -> InMemoryVectorStore:
    logger.info("Initializing InMemoryVectorStore (composition root)...")
    return InMemoryVectorStore(
        embedder=build_embedder(settings),
        similarity_threshold=settings.similarity_threshold,
    )


@lru_cache
def get_knowledge_base() -> KnowledgeBase:
    logger.info("Initializing KnowledgeBase...")
    return KnowledgeBase(
        get_vector_store(),
        scraper=WebsiteScraper(timeout=settings.scrape_timeout),
    )


@lru_cache
def get_pipeline() -> RAGPipeline:
    logger.info("Initializing RAGPipeline...")
    return build_pipeline(get_vector_store(), settings)
