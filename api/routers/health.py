# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends, HTTPException, Query

from api.schemas.health import HealthResponse, DeepHealthResponse, ReadinessResponse
from api.dependencies import get_health_service
from services.HealthService import HealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message="Product search API running")


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(svc: HealthService = Depends(get_health_service)) -> ReadinessResponse:
    return svc.readiness()


@router.get("/deep", response_model=DeepHealthResponse)
async def deep_health_check(
    svc: HealthService = Depends(get_health_service),
    include_chat: bool = Query(True, description="Also run the chat completion smoke test"),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called (include_chat=%s)", include_chat)
    try:
        result = await svc.deep_health(include_chat=include_chat)
    except Exception as e:
        logger.error("GET /health/deep failed: %s", e)
        raise HTTPException(status_code=500, detail=f"deep health failed: {e}")

    logger.info("GET /health/deep completed (status=%s)", result.status)
    return result
