"""FastAPI dependency injection."""

from __future__ import annotations

from shapesight.config import Settings, settings
from shapesight.engine.pipeline import ShapeDetector, create_detector

_detector: ShapeDetector | None = None


def get_settings() -> Settings:
    return settings


def get_detector() -> ShapeDetector:
    global _detector
    if _detector is None:
        _detector = create_detector(settings.detection_config())
    return _detector
