"""Embedding service that prefers the remote provider and falls back locally."""

import logging

from ..domain import EmbeddingOutcome, VectorizationMode
from .vectorizers import LexicalVectorizer, RemoteVectorizer

logger = logging.getLogger(__name__)


class FallbackEmbedder:
    """Turns text into vectors, never failing.

    The remote vectorizer is tried first when one is configured. A failed
    outcome is logged and the lexical vectorizer is used instead.
    """

    def __init__(
        self,
        remote: RemoteVectorizer | None = None,
        lexical: LexicalVectorizer | None = None,
    ) -> None:
        """Initialize the embedder.

        Args:
            remote: Remote vectorizer, or None for lexical-only operation.
            lexical: Local fallback vectorizer.
        """
        self.remote = remote
        self.lexical = lexical or LexicalVectorizer()

    @property
    def mode(self) -> VectorizationMode:
        """Preferred vectorization mode."""
        return VectorizationMode.REMOTE if self.remote else VectorizationMode.LEXICAL

    @property
    def default_dimension(self) -> int:
        return self.remote.dimension if self.remote else self.lexical.dimension

    @property
    def lexical_dimension(self) -> int:
        return self.lexical.dimension

    def embed_with_mode(self, text: str) -> EmbeddingOutcome:
        """Embed text and report which vectorizer produced the vector."""
        if self.remote is not None:
            outcome = self.remote.vectorize(text)
            if outcome.ok:
                return outcome
            logger.warning(
                "Remote embedding failed, using lexical fallback: %s: %s",
                type(outcome.error).__name__,
                outcome.error,
            )
        return self.lexical.vectorize(text)

    def embed(self, text: str) -> list[float]:
        outcome = self.embed_with_mode(text)
        # Lexical outcomes always carry a vector
        return list(outcome.vector or [])

    def embed_lexical(self, text: str) -> list[float]:
        """Embed text with the lexical vectorizer only."""
        return self.lexical.embed(text)

    def embed_many(self, texts: list[str]) -> list[list[float]]:
        """Embed several texts, batching remote requests.

        Texts whose remote embedding failed are vectorized lexically, so the
        result always has one vector per text.
        """
        if self.remote is None:
            return [self.lexical.embed(text) for text in texts]

        outcomes = self.remote.vectorize_many(texts)
        failed = [outcome for outcome in outcomes if not outcome.ok]
        if failed:
            logger.warning(
                "Remote embedding failed for %d/%d texts, using lexical fallback: %s: %s",
                len(failed),
                len(texts),
                type(failed[0].error).__name__,
                failed[0].error,
            )
        return [
            list(outcome.vector) if outcome.ok else self.lexical.embed(text)
            for text, outcome in zip(texts, outcomes, strict=True)
        ]
