"""Health check endpoints."""

from fastapi import APIRouter, Depends

from ..... import __version__
from .....core.services import InMemoryVectorStore
from ..deps import get_vector_store
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    vector_store: InMemoryVectorStore = Depends(get_vector_store),
) -> HealthResponse:
    """Basic health check with the current document count."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        documents=vector_store.get_document_count(),
        vectorization=vector_store.embedder.mode.value,
    )
