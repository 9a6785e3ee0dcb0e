"""Chat endpoint answering questions from the knowledge base."""

import logging

from fastapi import APIRouter, Depends

from .....common.utils import normalize_text
from .....core.domain.exceptions import EmptyQueryError
from .....core.services import RAGPipeline
from ..deps import get_pipeline
from ..models import ErrorResponse, QueryRequest, QueryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=QueryResponse,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def ask(request: QueryRequest, pipeline: RAGPipeline = Depends(get_pipeline)) -> QueryResponse:
    """Answer a question.

    The pipeline itself never raises; failures come back as an error answer
    with an empty context.
    """
    query = normalize_text(request.query)
    if not query:
        raise EmptyQueryError("Query cannot be empty", context={"field": "query"})

    response = pipeline.query(query, top_k=request.top_k)
    logger.debug("Chat answered in %dms", response.processing_time_ms)
    return QueryResponse.from_response(response)
