"""Query-to-answer orchestration with timing and confidence bookkeeping."""

import logging
import time
from dataclasses import asdict

from ...common.exception_handler import log_exception
from ...common.utils import to_percent
from ..domain import PipelineStats, RAGContext, RAGResponse, SearchResult, VectorizationMode
from ..ports.vector_store_port import VectorStorePort
from .answer_generator import AnswerGenerator
from .context_builder import DEFAULT_MAX_TOKENS, ContextBuilder
from .query_processor import QueryProcessor

logger = logging.getLogger(__name__)

PIPELINE_VERSION = "1.0.0"

ERROR_ANSWER = (
    "I encountered an error while processing your query. "
    "Please try again or rephrase your question."
)

_VECTORIZATION_FEATURES = {
    VectorizationMode.REMOTE: "Remote Embeddings with Lexical Fallback",
    VectorizationMode.LEXICAL: "Lexical (TF) Vectorization",
}


class RAGPipeline:
    """Runs retrieve -> build context -> score -> generate for one query.

    The pipeline holds no per-query state; every call returns a fresh
    RAGResponse owned by the caller. ``query`` never raises.
    """

    def __init__(
        self,
        vector_store: VectorStorePort,
        answer_generator: AnswerGenerator,
        context_builder: ContextBuilder | None = None,
        query_processor: QueryProcessor | None = None,
        *,
        preprocess_queries: bool = True,
        expand_queries: bool = False,
        max_context_tokens: int = DEFAULT_MAX_TOKENS,
        vectorization_mode: VectorizationMode = VectorizationMode.LEXICAL,
    ) -> None:
        """Initialize the pipeline.

        Args:
            vector_store: Store to retrieve from.
            answer_generator: Produces the final answer.
            context_builder: Builds the context window.
            query_processor: Normalizes and expands queries.
            preprocess_queries: Search with the normalized query.
            expand_queries: Also search synonym variants and merge results.
            max_context_tokens: Token budget for the context window.
            vectorization_mode: Reported in the feature list.
        """
        self.vector_store = vector_store
        self.answer_generator = answer_generator
        self.context_builder = context_builder or ContextBuilder(max_tokens=max_context_tokens)
        self.query_processor = query_processor or QueryProcessor()
        self.preprocess_queries = preprocess_queries
        self.expand_queries = expand_queries
        self.max_context_tokens = max_context_tokens
        self.vectorization_mode = vectorization_mode

    def query(self, query: str, top_k: int = 5) -> RAGResponse:
        """Answer a query from the knowledge base.

        Args:
            query: The user's question.
            top_k: Maximum number of documents to retrieve.

        Returns:
            RAGResponse. On any internal failure the answer is a generic
            error message and the context is empty.
        """
        start = time.perf_counter()
        try:
            results = self.retrieve(query, top_k)
            context_window = self.context_builder.build_context(
                results, query, self.max_context_tokens
            )
            confidence = self.compute_confidence(results)
            answer = self.answer_generator.generate(query, context_window, results)

            context = RAGContext(
                query=query,
                retrieved_documents=list(results),
                context_window=context_window,
                confidence=confidence,
            )
            response = RAGResponse(
                answer=answer,
                context=context,
                sources=list(results),
                processing_time_ms=self._elapsed_ms(start),
            )
            logger.info(
                "Answered query with %d sources, confidence %d%% in %dms",
                len(results),
                confidence,
                response.processing_time_ms,
            )
            return response
        except Exception as e:
            log_exception(e, log=logger, extra_context={"query": query, "top_k": top_k})
            return RAGResponse(
                answer=ERROR_ANSWER,
                context=RAGContext(query=query),
                sources=[],
                processing_time_ms=self._elapsed_ms(start),
            )

    def retrieve(self, query: str, top_k: int = 5) -> list[SearchResult]:
        """Search the store for a query, optionally across synonym variants."""
        if not query or not query.strip():
            return []

        if not self.expand_queries:
            return self.vector_store.search(self._retrieval_query(query), top_k)

        variants = [variant for variant in self.query_processor.expand(query) if variant]
        if not variants:
            variants = [query]

        best: dict[str, SearchResult] = {}
        for variant in variants:
            for result in self.vector_store.search(variant, top_k):
                current = best.get(result.document.doc_id)
                if current is None or result.similarity > current.similarity:
                    best[result.document.doc_id] = result

        merged = sorted(best.values(), key=lambda result: result.similarity, reverse=True)
        return merged[:top_k]

    def _retrieval_query(self, query: str) -> str:
        if not self.preprocess_queries:
            return query
        # Queries made only of stopwords still get searched as typed
        return self.query_processor.preprocess(query) or query

    @staticmethod
    def compute_confidence(results: list[SearchResult]) -> int:
        """Mean similarity as a 0-100 integer, 0 when there are no results."""
        if not results:
            return 0
        average = sum(result.similarity for result in results) / len(results)
        return max(0, min(100, to_percent(average)))

    @property
    def features(self) -> list[str]:
        features = [
            _VECTORIZATION_FEATURES[self.vectorization_mode],
            "Cosine Similarity Search",
            "Context Window Building",
            "Confidence Scoring",
            "Query Preprocessing",
            "Source Attribution",
        ]
        if self.expand_queries:
            features.append("Query Expansion")
        return features

    def get_stats(self) -> PipelineStats:
        """Vector store statistics plus the pipeline version and features."""
        store_stats = self.vector_store.get_stats()
        return PipelineStats(
            **asdict(store_stats),
            pipeline_version=PIPELINE_VERSION,
            features=self.features,
        )

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.perf_counter() - start) * 1000)
