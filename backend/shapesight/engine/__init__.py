"""ShapeSight detection engine."""

from shapesight.engine.config import DetectionConfig
from shapesight.engine.context import (
    BoundingBox,
    DetectionResult,
    PixelBuffer,
    ShapeRecord,
    ShapeType,
)
from shapesight.engine.errors import (
    ImageDecodeError,
    InvalidConfigError,
    InvalidPixelBufferError,
    ShapeSightError,
)
from shapesight.engine.pipeline import ShapeDetector, create_detector

__all__ = [
    "DetectionConfig",
    "BoundingBox",
    "DetectionResult",
    "PixelBuffer",
    "ShapeRecord",
    "ShapeType",
    "ShapeSightError",
    "InvalidPixelBufferError",
    "InvalidConfigError",
    "ImageDecodeError",
    "ShapeDetector",
    "create_detector",
]
