"""Statistics endpoint."""

from fastapi import APIRouter, Depends

from .....core.services import RAGPipeline
from ..deps import get_pipeline
from ..models import StatsResponse

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse, response_model_by_alias=True)
def get_stats(pipeline: RAGPipeline = Depends(get_pipeline)) -> StatsResponse:
    return StatsResponse.from_stats(pipeline.get_stats())
