"""
Health Check Router - RFP Evaluation Scoring Engine
rfp_scoring/routers/health.py

The engine has no external dependencies to probe; health reports the
service identity and the active scoring configuration.
"""
from fastapi import APIRouter
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

from rfp_scoring.config import settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str
    scoring: Dict[str, float]


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        scoring={
            "rubric_target_weight": settings.RUBRIC_TARGET_WEIGHT,
            "rubric_weight_tolerance": settings.RUBRIC_WEIGHT_TOLERANCE,
            "default_criterion_weight": settings.DEFAULT_CRITERION_WEIGHT,
            "default_scale_max": settings.DEFAULT_SCALE_MAX,
            "consensus_spread_threshold": settings.CONSENSUS_SPREAD_THRESHOLD,
        },
    )
