"""In-memory vector store with cosine similarity search."""

import logging
import threading
from collections.abc import Iterable

from ..domain import (
    Document,
    DocumentMetadata,
    SearchResult,
    VectorizationMode,
    VectorStoreStats,
    cosine_similarity,
)
from ..domain.exceptions import DimensionMismatchError
from ..ports.vector_store_port import VectorStorePort
from .embedding_service import FallbackEmbedder

logger = logging.getLogger(__name__)

# Results at or below this similarity are treated as irrelevant
DEFAULT_SIMILARITY_THRESHOLD = 0.1


class InMemoryVectorStore(VectorStorePort):
    """Single-process document store for tens to low thousands of documents.

    Documents are kept in insertion order. A lock guards every change to the
    document list, so one instance can be shared by the API's worker threads.
    Embedding happens outside the lock.
    """

    def __init__(
        self,
        embedder: FallbackEmbedder,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ) -> None:
        """Initialize the store.

        Args:
            embedder: Embedding service used for documents and queries.
            similarity_threshold: Results with similarity <= this are dropped.
        """
        self.embedder = embedder
        self.similarity_threshold = similarity_threshold
        self._documents: list[Document] = []
        self._lock = threading.Lock()
        # doc_id -> (document, lexical vector) for remote-embedded documents
        self._lexical_cache: dict[str, tuple[Document, list[float]]] = {}

    def add_document(self, doc_id: str, content: str, metadata: DocumentMetadata) -> Document:
        """Embed and store a document.

        An existing document with the same id is replaced. The replacement is a
        single list assignment under the lock, so the store never holds zero or
        two copies.

        Args:
            doc_id: Caller-supplied document id.
            content: Raw text.
            metadata: Descriptive metadata.

        Returns:
            The stored Document.
        """
        embedding = self.embedder.embed(content)
        document = Document(doc_id=doc_id, content=content, embedding=embedding, metadata=metadata)

        with self._lock:
            replaced = any(doc.doc_id == doc_id for doc in self._documents)
            self._documents = [doc for doc in self._documents if doc.doc_id != doc_id] + [document]
            self._lexical_cache.pop(doc_id, None)
            dimensions = self._dimensions_in_use()

        logger.info(
            "%s document %s (%d tokens, %d dims)",
            "Replaced" if replaced else "Added",
            doc_id,
            document.token_count,
            document.dimension,
        )
        if len(dimensions) > 1:
            logger.warning(
                "Store now mixes embedding dimensions %s; call reindex() once the "
                "embedding provider is stable",
                sorted(dimensions),
            )
        return document

    def remove_document(self, doc_id: str) -> bool:
        with self._lock:
            initial_length = len(self._documents)
            self._documents = [doc for doc in self._documents if doc.doc_id != doc_id]
            self._lexical_cache.pop(doc_id, None)
            removed = len(self._documents) < initial_length
        if removed:
            logger.info("Removed document %s", doc_id)
        return removed

    def get_document(self, doc_id: str) -> Document | None:
        for doc in self._snapshot():
            if doc.doc_id == doc_id:
                return doc
        return None

    def _snapshot(self) -> list[Document]:
        with self._lock:
            return list(self._documents)

    def search(self, query: str, top_k: int = 5) -> list[SearchResult]:
        """Search for the documents most similar to a query.

        Args:
            query: Search query.
            top_k: Maximum number of results.

        Returns:
            Results sorted by descending similarity (ties keep insertion
            order), none with similarity at or below the threshold.
        """
        # Snapshot so the ranking reflects the store at call time
        documents = self._snapshot()
        if not documents or top_k <= 0:
            return []

        outcome = self.embedder.embed_with_mode(query)
        query_vector = list(outcome.vector or [])
        lexical_query = query_vector if outcome.mode is VectorizationMode.LEXICAL else None

        scored = []
        for doc in documents:
            if doc.dimension == len(query_vector):
                similarity = self._similarity(query_vector, doc.embedding, doc)
            else:
                # Compare in lexical space when the query and document
                # vectors come from different vectorizers
                if lexical_query is None:
                    logger.info("Mixed vector dimensions; vectorizing query lexically")
                    lexical_query = self.embedder.embed_lexical(query)
                similarity = self._similarity(lexical_query, self._lexical_vector(doc), doc)
            scored.append(SearchResult(document=doc, similarity=similarity))
        scored.sort(key=lambda result: result.similarity, reverse=True)

        results = [r for r in scored[:top_k] if r.similarity > self.similarity_threshold]
        logger.debug("Search returned %d/%d results for %r", len(results), len(documents), query)
        return results

    def _lexical_vector(self, document: Document) -> list[float]:
        """Lexical vector for a document, reusing its stored one when it has it."""
        if document.dimension == self.embedder.lexical_dimension:
            return document.embedding

        with self._lock:
            cached = self._lexical_cache.get(document.doc_id)
        if cached is not None and cached[0] is document:
            return cached[1]

        vector = self.embedder.embed_lexical(document.content)
        with self._lock:
            # Skip documents replaced or removed while we were vectorizing
            if any(doc is document for doc in self._documents):
                self._lexical_cache[document.doc_id] = (document, vector)
        return vector

    def _similarity(self, query_vector: list[float], vector: list[float], document: Document) -> float:
        try:
            return cosine_similarity(query_vector, vector)
        except DimensionMismatchError:
            logger.warning(
                "Dimension mismatch for document %s (%d vs %d), scoring 0. "
                "Call reindex() after changing vectorization mode.",
                document.doc_id,
                len(vector),
                len(query_vector),
            )
            return 0.0

    def get_all_documents(self) -> list[Document]:
        return self._snapshot()

    def get_document_count(self) -> int:
        with self._lock:
            return len(self._documents)

    def get_stats(self) -> VectorStoreStats:
        """Summarize the store contents.

        Returns:
            Document count, total and average whitespace tokens, and the
            embedding dimension of the first stored document (or the
            embedder's default when empty).
        """
        documents = self._snapshot()
        count = len(documents)
        total_tokens = sum(doc.token_count for doc in documents)
        average = int(total_tokens / count + 0.5) if count else 0
        dimensions = documents[0].dimension if count else self.embedder.default_dimension

        return VectorStoreStats(
            document_count=count,
            total_tokens=total_tokens,
            average_tokens_per_doc=average,
            vector_dimensions=dimensions,
        )

    def _dimensions_in_use(self) -> set[int]:
        return {doc.dimension for doc in self._documents}

    def reindex(self, doc_ids: Iterable[str] | None = None) -> int:
        """Re-embed stored documents with the current embedder.

        Use after the vectorization mode changed (for example once the remote
        provider is reachable again) so every vector shares one dimension.
        Texts go to the provider in batches.

        Args:
            doc_ids: Limit to these ids. Defaults to every document.

        Returns:
            Number of documents re-embedded.
        """
        wanted = set(doc_ids) if doc_ids is not None else None
        targets = [doc for doc in self._snapshot() if wanted is None or doc.doc_id in wanted]
        if not targets:
            return 0

        embeddings = self.embedder.embed_many([doc.content for doc in targets])
        fresh = {
            doc.doc_id: (doc, Document(doc.doc_id, doc.content, embedding, doc.metadata))
            for doc, embedding in zip(targets, embeddings, strict=True)
        }

        count = 0
        with self._lock:
            refreshed: list[Document] = []
            for doc in self._documents:
                entry = fresh.get(doc.doc_id)
                # Documents replaced since the snapshot keep their newer vector
                if entry is not None and entry[0] is doc:
                    doc = entry[1]
                    self._lexical_cache.pop(doc.doc_id, None)
                    count += 1
                refreshed.append(doc)
            self._documents = refreshed

        logger.info("Re-embedded %d documents", count)
        return count

    def clear(self) -> None:
        with self._lock:
            self._documents = []
            self._lexical_cache.clear()
