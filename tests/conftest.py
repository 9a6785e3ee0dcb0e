"""
Pytest configuration and shared fixtures.
"""

import pytest

from docrag.core.domain import DocumentMetadata
from docrag.core.ports import EmbeddingPort
from docrag.core.services import FallbackEmbedder, InMemoryVectorStore, RemoteVectorizer


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP API in-process)")


class StubEmbeddingProvider(EmbeddingPort):
    """Embedding provider returning fixed-size vectors, or failing on demand."""

    def __init__(self, dimension: int = 8, fail: bool = False):
        self._dimension = dimension
        self.fail = fail
        self.calls = 0
        self.batch_calls = 0

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed_query(self, text: str) -> list[float]:
        self.calls += 1
        if self.fail:
            raise ConnectionError("embedding service unreachable")
        # Length-seeded so different texts get different directions
        seed = len(text) % self._dimension
        return [1.0 if i == seed else 0.1 for i in range(self._dimension)]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.batch_calls += 1
        return [self.embed_query(text) for text in texts]


@pytest.fixture
def metadata():
    """Factory for document metadata."""

    def _make(name: str = "Doc") -> DocumentMetadata:
        return DocumentMetadata(name=name)

    return _make


@pytest.fixture
def lexical_store():
    """Vector store backed only by the lexical vectorizer."""
    return InMemoryVectorStore(FallbackEmbedder())


@pytest.fixture
def stub_provider():
    return StubEmbeddingProvider()


@pytest.fixture
def remote_store(stub_provider):
    """Vector store that prefers the stub provider."""
    return InMemoryVectorStore(FallbackEmbedder(remote=RemoteVectorizer(stub_provider)))
