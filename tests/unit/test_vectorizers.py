"""Unit tests for the lexical and remote vectorizers and the fallback embedder."""

from unittest.mock import MagicMock

import pytest

from docrag.common.rate_limiter import RateLimiter
from docrag.core.domain import VectorizationMode
from docrag.core.services import FallbackEmbedder, LexicalVectorizer, RemoteVectorizer
from docrag.core.services.vocabulary import LEXICAL_DIMENSIONS, LEXICAL_VOCABULARY

pytestmark = pytest.mark.unit


class TestLexicalVectorizer:
    """Tests for term-frequency vectorization."""

    def test_fixed_dimension(self):
        vectorizer = LexicalVectorizer()
        assert vectorizer.dimension == LEXICAL_DIMENSIONS == 100
        assert len(vectorizer.embed("anything at all")) == 100

    def test_term_frequency_weights(self):
        """Each vocabulary term holds count / total tokens."""
        vector = LexicalVectorizer().embed("data data model")

        assert vector[LEXICAL_VOCABULARY.index("data")] == pytest.approx(2 / 3)
        assert vector[LEXICAL_VOCABULARY.index("model")] == pytest.approx(1 / 3)
        assert sum(vector) == pytest.approx(1.0)

    def test_case_and_punctuation_ignored(self):
        vectorizer = LexicalVectorizer()
        assert vectorizer.embed("Data, MODEL!") == vectorizer.embed("data model")

    def test_deterministic(self):
        vectorizer = LexicalVectorizer()
        text = "Cats are small domesticated animals."
        assert vectorizer.embed(text) == vectorizer.embed(text)
        assert LexicalVectorizer().embed(text) == vectorizer.embed(text)

    def test_empty_text_is_zero_vector(self):
        assert LexicalVectorizer().embed("") == [0.0] * 100
        assert LexicalVectorizer().embed("  ...  ") == [0.0] * 100

    def test_unknown_terms_dropped_without_hashing(self):
        vectorizer = LexicalVectorizer(hash_unknown_terms=False)
        assert vectorizer.embed("cats pets") == [0.0] * 100

    def test_unknown_terms_hashed_into_range(self):
        vector = LexicalVectorizer().embed("cats pets")
        assert sum(vector) == pytest.approx(1.0)
        assert all(0.0 <= value <= 1.0 for value in vector)

    def test_strict_mode_is_pure_term_frequency(self):
        """Without hashing, unknown words only count towards the total."""
        vector = LexicalVectorizer(hash_unknown_terms=False).embed("data cats data model")
        data, model = LEXICAL_VOCABULARY.index("data"), LEXICAL_VOCABULARY.index("model")

        assert vector[data] == 2 / 4
        assert vector[model] == 1 / 4
        assert all(value == 0.0 for i, value in enumerate(vector) if i not in (data, model))

    def test_vocabulary_truncated_to_dimensions(self):
        vectorizer = LexicalVectorizer(vocabulary=["alpha", "beta", "gamma"], dimensions=2,
                                       hash_unknown_terms=False)
        assert vectorizer.embed("alpha beta gamma") == [pytest.approx(1 / 3), pytest.approx(1 / 3)]

    def test_vectorize_reports_lexical_mode(self):
        outcome = LexicalVectorizer().vectorize("data")
        assert outcome.ok
        assert outcome.mode == VectorizationMode.LEXICAL
        assert outcome.dimension == 100


class TestRemoteVectorizer:
    """Tests for provider-backed vectorization outcomes."""

    def test_success(self, stub_provider):
        outcome = RemoteVectorizer(stub_provider).vectorize("hello")

        assert outcome.ok
        assert outcome.mode == VectorizationMode.REMOTE
        assert len(outcome.vector) == 8

    def test_provider_exception_becomes_failure(self, stub_provider):
        stub_provider.fail = True
        outcome = RemoteVectorizer(stub_provider).vectorize("hello")

        assert not outcome.ok
        assert isinstance(outcome.error, ConnectionError)
        assert outcome.vector is None

    def test_empty_response_is_failure(self):
        provider = MagicMock()
        provider.embed_query.return_value = []

        outcome = RemoteVectorizer(provider).vectorize("hello")

        assert not outcome.ok

    def test_non_numeric_response_is_failure(self):
        provider = MagicMock()
        provider.embed_query.return_value = ["a", "b"]

        assert not RemoteVectorizer(provider).vectorize("hello").ok

    def test_rate_limiter_acquired(self, stub_provider):
        limiter = MagicMock(spec=RateLimiter)
        RemoteVectorizer(stub_provider, rate_limiter=limiter).vectorize("hello")
        limiter.acquire.assert_called_once()

    def test_vectorize_many_uses_one_batch_call(self, stub_provider):
        outcomes = RemoteVectorizer(stub_provider).vectorize_many(["a", "bb", "ccc"])

        assert [outcome.ok for outcome in outcomes] == [True, True, True]
        assert stub_provider.batch_calls == 1

    def test_vectorize_many_failure_fails_every_text(self, stub_provider):
        stub_provider.fail = True
        outcomes = RemoteVectorizer(stub_provider).vectorize_many(["a", "bb"])

        assert [outcome.ok for outcome in outcomes] == [False, False]
        assert all(isinstance(outcome.error, ConnectionError) for outcome in outcomes)

    def test_vectorize_many_wrong_length_is_failure(self):
        provider = MagicMock()
        provider.embed_documents.return_value = [[0.1, 0.2]]
        outcomes = RemoteVectorizer(provider).vectorize_many(["a", "b"])

        assert not any(outcome.ok for outcome in outcomes)


class TestFallbackEmbedder:
    """Tests for remote-first embedding with lexical fallback."""

    def test_lexical_only(self):
        embedder = FallbackEmbedder()

        assert embedder.mode == VectorizationMode.LEXICAL
        assert embedder.default_dimension == 100
        assert len(embedder.embed("data")) == 100

    def test_prefers_remote(self, stub_provider):
        embedder = FallbackEmbedder(remote=RemoteVectorizer(stub_provider))

        assert embedder.mode == VectorizationMode.REMOTE
        assert embedder.default_dimension == 8
        assert len(embedder.embed("data")) == 8

    def test_falls_back_when_remote_fails(self, stub_provider, caplog):
        stub_provider.fail = True
        embedder = FallbackEmbedder(remote=RemoteVectorizer(stub_provider))

        outcome = embedder.embed_with_mode("data analysis")

        assert outcome.mode == VectorizationMode.LEXICAL
        assert outcome.vector == LexicalVectorizer().embed("data analysis")
        assert "lexical fallback" in caplog.text

    def test_embed_lexical_bypasses_remote(self, stub_provider):
        embedder = FallbackEmbedder(remote=RemoteVectorizer(stub_provider))

        assert len(embedder.embed_lexical("data")) == 100
        assert stub_provider.calls == 0

    def test_embed_many_batches_remote(self, stub_provider):
        embedder = FallbackEmbedder(remote=RemoteVectorizer(stub_provider))

        vectors = embedder.embed_many(["data", "model"])

        assert [len(v) for v in vectors] == [8, 8]
        assert stub_provider.batch_calls == 1

    def test_embed_many_falls_back_per_text(self, stub_provider, caplog):
        stub_provider.fail = True
        embedder = FallbackEmbedder(remote=RemoteVectorizer(stub_provider))

        vectors = embedder.embed_many(["data", "model"])

        assert vectors == [LexicalVectorizer().embed("data"), LexicalVectorizer().embed("model")]
        assert "2/2 texts" in caplog.text

    def test_embed_many_lexical_only(self):
        assert FallbackEmbedder().embed_many(["data"]) == [LexicalVectorizer().embed("data")]
