"""Vectorization strategies: remote provider embeddings and a lexical fallback.

Both strategies expose ``vectorize(text) -> EmbeddingOutcome`` and never
raise; failures are carried in the outcome so the embedding service can
decide what to do with them.
"""

import hashlib
from collections import Counter
from collections.abc import Sequence

from ...common.rate_limiter import RateLimiter
from ...common.utils import word_tokens
from ..domain import EmbeddingOutcome, VectorizationMode
from ..ports.embedding_port import EmbeddingPort
from .vocabulary import LEXICAL_DIMENSIONS, LEXICAL_VOCABULARY


class LexicalVectorizer:
    """Deterministic term-frequency vectorizer over a fixed vocabulary.

    Each vocabulary term owns one dimension holding its frequency divided by
    the total number of word tokens in the text. With ``hash_unknown_terms``
    enabled, words outside the vocabulary are folded into a dimension chosen
    by a stable hash of the word, so texts that only share uncommon words
    still score above zero. Hash buckets share the index range with the
    vocabulary, so a term's dimension can also collect the frequency of
    unknown words that hash onto it. Pass ``hash_unknown_terms=False`` to keep
    every dimension at exactly its term's frequency divided by the token
    count. The same text always yields the same vector and no network access
    is needed.
    """

    mode = VectorizationMode.LEXICAL

    def __init__(
        self,
        vocabulary: Sequence[str] = LEXICAL_VOCABULARY,
        dimensions: int = LEXICAL_DIMENSIONS,
        hash_unknown_terms: bool = True,
    ) -> None:
        self.vocabulary = tuple(vocabulary)
        self.dimensions = dimensions
        self.hash_unknown_terms = hash_unknown_terms
        self._index: dict[str, int] = {}
        for position, term in enumerate(self.vocabulary[:dimensions]):
            self._index.setdefault(term, position)

    @property
    def dimension(self) -> int:
        return self.dimensions

    def _bucket(self, token: str) -> int:
        # md5 rather than hash(): must not depend on PYTHONHASHSEED
        digest = hashlib.md5(token.encode("utf-8")).hexdigest()
        return int(digest[:8], 16) % self.dimensions

    def embed(self, text: str) -> list[float]:
        """Vectorize text.

        Args:
            text: Text to vectorize.

        Returns:
            Vector of exactly ``dimensions`` floats in [0, 1].
        """
        vector = [0.0] * self.dimensions
        tokens = word_tokens(text)
        if not tokens:
            return vector

        total = len(tokens)
        for token, count in Counter(tokens).items():
            position = self._index.get(token)
            if position is None:
                if not self.hash_unknown_terms:
                    continue
                position = self._bucket(token)
            vector[position] += count / total
        return vector

    def vectorize(self, text: str) -> EmbeddingOutcome:
        return EmbeddingOutcome.success(self.mode, self.embed(text))


class RemoteVectorizer:
    """Wraps an embedding provider and reports failures as outcomes."""

    mode = VectorizationMode.REMOTE

    def __init__(self, provider: EmbeddingPort, rate_limiter: RateLimiter | None = None) -> None:
        self.provider = provider
        self.rate_limiter = rate_limiter

    @property
    def dimension(self) -> int:
        return self.provider.dimension

    def vectorize(self, text: str) -> EmbeddingOutcome:
        """Request an embedding from the provider.

        Any exception, and any empty or non-numeric response, becomes a
        failed outcome.
        """
        if self.rate_limiter:
            self.rate_limiter.acquire()

        try:
            vector = self.provider.embed_query(text)
        except Exception as e:
            return EmbeddingOutcome.failure(self.mode, e)
        return self._outcome(vector)

    def vectorize_many(self, texts: Sequence[str]) -> list[EmbeddingOutcome]:
        """Request embeddings for several texts in one provider call.

        A failed call, or a response of the wrong length, fails every text;
        individual bad vectors fail only their own text.
        """
        if self.rate_limiter:
            self.rate_limiter.acquire()

        try:
            vectors = self.provider.embed_documents(list(texts))
        except Exception as e:
            return [EmbeddingOutcome.failure(self.mode, e) for _ in texts]

        if len(vectors) != len(texts):
            error = ValueError(f"Provider returned {len(vectors)} embeddings for {len(texts)} texts")
            return [EmbeddingOutcome.failure(self.mode, error) for _ in texts]
        return [self._outcome(vector) for vector in vectors]

    def _outcome(self, vector) -> EmbeddingOutcome:
        if not vector:
            return EmbeddingOutcome.failure(self.mode, ValueError("Provider returned an empty embedding"))
        try:
            values = [float(v) for v in vector]
        except (TypeError, ValueError) as e:
            return EmbeddingOutcome.failure(self.mode, e)
        return EmbeddingOutcome.success(self.mode, values)
