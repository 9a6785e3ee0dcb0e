"""Vectorization outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VectorizationMode(str, Enum):
    """Which vectorizer produced an embedding."""

    REMOTE = "remote"
    LEXICAL = "lexical"


@dataclass(frozen=True)
class EmbeddingOutcome:
    """Result of a single vectorization attempt.

    Either ``vector`` is set (success) or ``error`` is set (failure). The
    embedding service inspects ``ok`` to decide whether to fall back, so a
    failing provider never needs to raise through the caller.
    """

    mode: VectorizationMode
    vector: list[float] | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.vector is not None

    @property
    def dimension(self) -> int:
        return len(self.vector) if self.vector is not None else 0

    @classmethod
    def success(cls, mode: VectorizationMode, vector: list[float]) -> EmbeddingOutcome:
        return cls(mode=mode, vector=vector)

    @classmethod
    def failure(cls, mode: VectorizationMode, error: Exception) -> EmbeddingOutcome:
        return cls(mode=mode, error=error)
