"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shapesight.config import Settings
from shapesight.dependencies import get_settings
from shapesight.engine.context import ShapeType
from shapesight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        environment=cfg.shapesight_env,
        shape_types=[t.value for t in ShapeType],
    )
