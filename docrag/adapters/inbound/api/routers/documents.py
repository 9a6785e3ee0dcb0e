"""Document management endpoints."""

import logging

from fastapi import APIRouter, Depends, status

from .....application.knowledge_base import KnowledgeBase
from ..deps import get_knowledge_base
from ..models import (
    DeleteResponse,
    DocumentModel,
    ErrorResponse,
    ReindexResponse,
    TextDocumentRequest,
    UpdateDocumentRequest,
    WebsiteRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])


@router.get("", response_model=list[DocumentModel], response_model_by_alias=True)
def list_documents(kb: KnowledgeBase = Depends(get_knowledge_base)) -> list[DocumentModel]:
    return [DocumentModel.from_document(doc) for doc in kb.list_documents()]


@router.get(
    "/{doc_id}",
    response_model=DocumentModel,
    response_model_by_alias=True,
    responses={404: {"model": ErrorResponse}},
)
def get_document(doc_id: str, kb: KnowledgeBase = Depends(get_knowledge_base)) -> DocumentModel:
    return DocumentModel.from_document(kb.get_document(doc_id))


@router.post(
    "",
    response_model=DocumentModel,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def add_text_document(
    request: TextDocumentRequest, kb: KnowledgeBase = Depends(get_knowledge_base)
) -> DocumentModel:
    """Add pasted text. Supplying an existing id replaces that document."""
    document = kb.add_text(request.name, request.content, doc_id=request.id)
    return DocumentModel.from_document(document)


@router.post(
    "/website",
    response_model=DocumentModel,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def add_website(request: WebsiteRequest, kb: KnowledgeBase = Depends(get_knowledge_base)) -> DocumentModel:
    """Scrape a page and index its text."""
    document = kb.add_website(request.url)
    return DocumentModel.from_document(document)


@router.post("/reindex", response_model=ReindexResponse)
def reindex_documents(kb: KnowledgeBase = Depends(get_knowledge_base)) -> ReindexResponse:
    """Re-embed the collection so every vector comes from the current embedder."""
    count = kb.reindex()
    dimensions = sorted({doc.dimension for doc in kb.list_documents()})
    return ReindexResponse(reindexed=count, dimensions=dimensions)


@router.put(
    "/{doc_id}",
    response_model=DocumentModel,
    response_model_by_alias=True,
    responses={404: {"model": ErrorResponse}},
)
def update_document(
    doc_id: str,
    request: UpdateDocumentRequest,
    kb: KnowledgeBase = Depends(get_knowledge_base),
) -> DocumentModel:
    document = kb.update_document(doc_id, request.content, name=request.name)
    return DocumentModel.from_document(document)


@router.delete("/{doc_id}", response_model=DeleteResponse)
def delete_document(doc_id: str, kb: KnowledgeBase = Depends(get_knowledge_base)) -> DeleteResponse:
    removed = kb.remove_document(doc_id)
    if not removed:
        logger.info("Delete requested for unknown document %s", doc_id)
    return DeleteResponse(id=doc_id, removed=removed)
