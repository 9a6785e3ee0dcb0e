"""Pydantic models for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ....core.domain import Document, PipelineStats, RAGResponse, SearchResult, SourceKind


class QueryRequest(BaseModel):
    """Request model for asking a question."""

    query: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="The question to answer from the knowledge base",
        json_schema_extra={"example": "What is semantic search?"},
    )
    top_k: int = Field(5, ge=1, le=50, description="Maximum number of documents to retrieve")


class TextDocumentRequest(BaseModel):
    """Request model for adding a text document."""

    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    content: str = Field(..., min_length=1, description="Document text")
    id: str | None = Field(None, description="Explicit id; an existing document is replaced")


class UpdateDocumentRequest(BaseModel):
    """Request model for replacing a document's content."""

    content: str = Field(..., min_length=1, description="New document text")
    name: str | None = Field(None, max_length=200, description="New display name")


class WebsiteRequest(BaseModel):
    """Request model for scraping a website into the knowledge base."""

    url: str = Field(..., min_length=1, description="Absolute http(s) URL")


class DocumentMetadataModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    source_kind: SourceKind = Field(..., alias="sourceKind")
    size_bytes: int | None = Field(None, alias="sizeBytes")
    created_at: datetime = Field(..., alias="createdAt")
    url: str | None = None
    path: str | None = None


class DocumentModel(BaseModel):
    """A stored document (embedding omitted)."""

    id: str
    content: str
    token_count: int = Field(..., alias="tokenCount")
    dimensions: int
    metadata: DocumentMetadataModel

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_document(cls, document: Document) -> "DocumentModel":
        meta = document.metadata
        return cls(
            id=document.doc_id,
            content=document.content,
            token_count=document.token_count,
            dimensions=document.dimension,
            metadata=DocumentMetadataModel(
                name=meta.name,
                source_kind=meta.source_kind,
                size_bytes=meta.size_bytes,
                created_at=meta.created_at,
                url=meta.url,
                path=meta.path,
            ),
        )


class SourceModel(BaseModel):
    """A retrieved document and its similarity."""

    document: DocumentModel
    similarity: float

    @classmethod
    def from_result(cls, result: SearchResult) -> "SourceModel":
        return cls(document=DocumentModel.from_document(result.document), similarity=result.similarity)


class ContextModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    retrieved_documents: list[SourceModel] = Field(..., alias="retrievedDocuments")
    context_window: str = Field(..., alias="contextWindow")
    confidence: int = Field(..., ge=0, le=100)


class QueryResponse(BaseModel):
    """Answer with retrieval diagnostics."""

    model_config = ConfigDict(populate_by_name=True)

    answer: str
    context: ContextModel
    sources: list[SourceModel]
    processing_time_ms: int = Field(..., alias="processingTimeMs")

    @classmethod
    def from_response(cls, response: RAGResponse) -> "QueryResponse":
        ctx = response.context
        return cls(
            answer=response.answer,
            context=ContextModel(
                query=ctx.query,
                retrieved_documents=[SourceModel.from_result(r) for r in ctx.retrieved_documents],
                context_window=ctx.context_window,
                confidence=ctx.confidence,
            ),
            sources=[SourceModel.from_result(r) for r in response.sources],
            processing_time_ms=response.processing_time_ms,
        )


class StatsResponse(BaseModel):
    """Knowledge base statistics for presentation layers."""

    model_config = ConfigDict(populate_by_name=True)

    document_count: int = Field(..., alias="documentCount")
    total_tokens: int = Field(..., alias="totalTokens")
    average_tokens_per_doc: int = Field(..., alias="averageTokensPerDoc")
    vector_dimensions: int = Field(..., alias="vectorDimensions")
    pipeline_version: str = Field(..., alias="pipelineVersion")
    features: list[str]

    @classmethod
    def from_stats(cls, stats: PipelineStats) -> "StatsResponse":
        return cls.model_validate(stats.to_dict())


class DeleteResponse(BaseModel):
    id: str
    removed: bool


class ReindexResponse(BaseModel):
    reindexed: int
    dimensions: list[int]


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    documents: int = Field(..., description="Documents currently indexed")
    vectorization: str = Field(..., description="Preferred vectorization mode")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., RAG_VEC_003)")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Response model for structured errors."""

    error: ErrorDetail
    location: dict | None = Field(None, description="Source location of the error")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception that caused this error")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
