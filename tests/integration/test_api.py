"""Integration tests for FastAPI endpoints."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from docrag.adapters.inbound.api import deps
from docrag.adapters.inbound.api.main import app
from docrag.adapters.outbound.ingestion import WebsiteScraper
from docrag.application import KnowledgeBase
from docrag.core.services import AnswerGenerator, FallbackEmbedder, InMemoryVectorStore, RAGPipeline


@pytest.fixture
def vector_store():
    return InMemoryVectorStore(FallbackEmbedder())


@pytest.fixture
def client(vector_store):
    """Test client wired to a fresh lexical-only knowledge base."""
    session = MagicMock()
    session.get.return_value = MagicMock(
        ok=True, status_code=200, text="<title>Example</title><p>Example domain text.</p>"
    )
    kb = KnowledgeBase(vector_store, scraper=WebsiteScraper(session=session))
    pipeline = RAGPipeline(vector_store, AnswerGenerator())

    app.dependency_overrides[deps.get_vector_store] = lambda: vector_store
    app.dependency_overrides[deps.get_knowledge_base] = lambda: kb
    app.dependency_overrides[deps.get_pipeline] = lambda: pipeline
    yield TestClient(app)
    app.dependency_overrides.clear()


def add_doc(client, name, content, doc_id=None):
    payload = {"name": name, "content": content}
    if doc_id:
        payload["id"] = doc_id
    return client.post("/api/documents", json=payload)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.integration
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["documents"] == 0
        assert data["vectorization"] == "lexical"


class TestDocumentEndpoints:
    """Tests for document management endpoints."""

    @pytest.mark.integration
    def test_add_and_list(self, client):
        response = add_doc(client, "Notes", "data analysis notes", doc_id="n1")

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "n1"
        assert data["tokenCount"] == 3
        assert data["dimensions"] == 100
        assert data["metadata"]["sourceKind"] == "text"

        listing = client.get("/api/documents").json()
        assert [doc["id"] for doc in listing] == ["n1"]

    @pytest.mark.integration
    def test_get_missing_document(self, client):
        response = client.get("/api/documents/missing")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RAG_VEC_003"

    @pytest.mark.integration
    def test_empty_content_rejected(self, client):
        response = add_doc(client, "Notes", "   ")

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "EmptyDocumentError"

    @pytest.mark.integration
    def test_missing_fields_rejected(self, client):
        assert client.post("/api/documents", json={"name": "x"}).status_code == 422

    @pytest.mark.integration
    def test_update_document(self, client):
        add_doc(client, "Notes", "old text", doc_id="n1")

        response = client.put("/api/documents/n1", json={"content": "brand new text here"})

        assert response.status_code == 200
        assert response.json()["tokenCount"] == 4
        assert response.json()["metadata"]["name"] == "Notes"

    @pytest.mark.integration
    def test_update_missing_document(self, client):
        response = client.put("/api/documents/nope", json={"content": "text"})
        assert response.status_code == 404

    @pytest.mark.integration
    def test_delete_document(self, client):
        add_doc(client, "Notes", "text", doc_id="n1")

        assert client.delete("/api/documents/n1").json() == {"id": "n1", "removed": True}
        assert client.delete("/api/documents/n1").json() == {"id": "n1", "removed": False}

    @pytest.mark.integration
    def test_reindex_documents(self, client):
        add_doc(client, "Notes", "data analysis", doc_id="n1")
        add_doc(client, "More", "machine learning", doc_id="n2")

        response = client.post("/api/documents/reindex")

        assert response.status_code == 200
        assert response.json() == {"reindexed": 2, "dimensions": [100]}

    @pytest.mark.integration
    def test_add_website(self, client):
        response = client.post("/api/documents/website", json={"url": "https://example.com"})

        assert response.status_code == 201
        data = response.json()
        assert data["metadata"]["name"] == "Example"
        assert data["metadata"]["url"] == "https://example.com"

    @pytest.mark.integration
    def test_add_website_invalid_url(self, client):
        response = client.post("/api/documents/website", json={"url": "not-a-url"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "RAG_ING_003"


class TestChatEndpoint:
    """Tests for question answering."""

    @pytest.mark.integration
    def test_chat_without_documents(self, client):
        response = client.post("/api/chat", json={"query": "What is RAG?"})

        assert response.status_code == 200
        data = response.json()
        assert "What is RAG?" in data["answer"]
        assert data["sources"] == []
        assert data["context"]["confidence"] == 0
        assert "processingTimeMs" in data

    @pytest.mark.integration
    def test_chat_with_documents(self, client):
        add_doc(client, "Pets", "Cats are small domesticated animals.", doc_id="cats")

        response = client.post("/api/chat", json={"query": "small pets", "top_k": 3})

        data = response.json()
        assert data["sources"][0]["document"]["id"] == "cats"
        assert data["context"]["confidence"] > 10
        assert data["context"]["contextWindow"].startswith('--- From "Pets"')
        assert data["context"]["retrievedDocuments"][0]["similarity"] > 0.1

    @pytest.mark.integration
    def test_chat_validation(self, client):
        assert client.post("/api/chat", json={"query": ""}).status_code == 422
        assert client.post("/api/chat", json={"query": "q", "top_k": 0}).status_code == 422

    @pytest.mark.integration
    def test_whitespace_query_rejected(self, client):
        response = client.post("/api/chat", json={"query": "   "})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "RAG_VAL_002"


class TestStatsEndpoint:
    """Tests for knowledge base statistics."""

    @pytest.mark.integration
    def test_stats(self, client):
        add_doc(client, "A", "one two three", doc_id="a")
        add_doc(client, "B", "four five", doc_id="b")

        data = client.get("/api/stats").json()

        assert data["documentCount"] == 2
        assert data["totalTokens"] == 5
        assert data["averageTokensPerDoc"] == 3
        assert data["vectorDimensions"] == 100
        assert data["pipelineVersion"] == "1.0.0"
        assert "Cosine Similarity Search" in data["features"]
