"""POST /api/detect — run shape detection on an uploaded image."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from shapesight.config import Settings
from shapesight.dependencies import get_detector, get_settings
from shapesight.engine.config import DetectionConfig
from shapesight.engine.context import DetectionResult
from shapesight.engine.errors import ShapeSightError
from shapesight.engine.overlay import render_overlay_svg
from shapesight.engine.pipeline import ShapeDetector
from shapesight.models.requests import DetectRequest
from shapesight.models.responses import DetectResponse
from shapesight.utils.image_io import decode_data_url

logger = logging.getLogger(__name__)

router = APIRouter()


async def _run_detection(
    req: DetectRequest,
    detector: ShapeDetector,
    cfg: Settings,
) -> DetectionResult:
    """Decode, merge options, detect. Input problems become HTTP 422."""
    try:
        buffer = decode_data_url(req.image, max_pixels=cfg.max_image_pixels)
        config: DetectionConfig = detector.config.with_overrides(**req.options.model_dump())
    except ShapeSightError as e:
        logger.warning("Rejected detection request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    # CPU-bound; keep the event loop free
    return await asyncio.to_thread(detector.detect_shapes, buffer, config)


@router.post("/detect", response_model=DetectResponse)
async def detect(
    req: DetectRequest,
    detector: ShapeDetector = Depends(get_detector),
    cfg: Settings = Depends(get_settings),
) -> DetectResponse:
    result = await _run_detection(req, detector, cfg)
    return DetectResponse.model_validate(
        {**result.to_dict(), "counts": result.counts_by_type()}
    )


@router.post("/detect/overlay")
async def detect_overlay(
    req: DetectRequest,
    detector: ShapeDetector = Depends(get_detector),
    cfg: Settings = Depends(get_settings),
) -> Response:
    result = await _run_detection(req, detector, cfg)
    return Response(content=render_overlay_svg(result), media_type="image/svg+xml")
