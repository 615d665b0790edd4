"""Liveness endpoints."""
import logging

from fastapi import APIRouter

from fortune_indexer.schemas import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get("/test", response_model=MessageResponse, summary="Connectivity probe")
async def test_endpoint() -> MessageResponse:
    logger.info("Test endpoint hit")
    return MessageResponse(message="Server is running")
