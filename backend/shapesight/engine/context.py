"""Data model flowing through the detector.

PixelBuffer → (call-local) Component → ShapeRecord → DetectionResult.
Only ShapeRecord and DetectionResult outlive a detection call.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from shapesight.engine.errors import InvalidPixelBufferError

Point = tuple[int, int]


class ShapeType(str, enum.Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    POLYGON = "polygon"


@dataclass(frozen=True)
class PixelBuffer:
    """Immutable RGBA input: row-major, 4 bytes per pixel, top-left origin."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidPixelBufferError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidPixelBufferError(f"{name} must be positive, got {value}")
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise InvalidPixelBufferError(
                f"buffer length {len(self.data)} does not match "
                f"{self.width}x{self.height}x4 = {expected}"
            )

    @classmethod
    def from_array(cls, pixels: NDArray[np.uint8]) -> PixelBuffer:
        """Build from an (H, W, 4) or (H, W, 3) uint8 array; RGB gets opaque alpha."""
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise InvalidPixelBufferError(f"expected (H, W, 3|4) array, got shape {arr.shape}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
        height, width = arr.shape[:2]
        return cls(width=width, height=height, data=np.ascontiguousarray(arr, dtype=np.uint8).tobytes())

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass
class Component:
    """One 4-connected foreground region, alive only during a detection call."""

    label: int
    # Flat indices y * width + x, in flood-fill visit order
    pixels: list[int]
    # (min_x, min_y, max_x, max_y), inclusive
    bbox: tuple[int, int, int, int]
    image_width: int
    # Ordered closed walk along the boundary
    boundary: list[Point] = field(default_factory=list)

    @property
    def area(self) -> int:
        return len(self.pixels)

    @property
    def width(self) -> int:
        return self.bbox[2] - self.bbox[0] + 1

    @property
    def height(self) -> int:
        return self.bbox[3] - self.bbox[1] + 1

    def centroid(self) -> Point:
        """Mean pixel coordinate, rounded half-up."""
        ys, xs = np.divmod(np.asarray(self.pixels, dtype=np.int64), self.image_width)
        n = len(self.pixels)
        return (
            math.floor(int(xs.sum()) / n + 0.5),
            math.floor(int(ys.sum()) / n + 0.5),
        )


@dataclass(frozen=True)
class BoundingBox:
    x: int
    y: int
    width: int
    height: int

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def _points(points: tuple[Point, ...]) -> list[dict[str, int]]:
    return [{"x": x, "y": y} for x, y in points]


@dataclass(frozen=True)
class ShapeRecord:
    """One detected, classified shape."""

    type: ShapeType
    bounding_box: BoundingBox
    center: Point
    area: int
    perimeter: float
    circularity: float
    confidence: float
    # Convex, colinear-filtered polygon
    vertices: tuple[Point, ...]
    # Douglas-Peucker path before hull construction
    raw_vertices: tuple[Point, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "boundingBox": self.bounding_box.to_dict(),
            "center": {"x": self.center[0], "y": self.center[1]},
            "area": self.area,
            "perimeter": round(self.perimeter, 2),
            "circularity": round(self.circularity, 4),
            "confidence": self.confidence,
            "vertices": _points(self.vertices),
            "rawVertices": _points(self.raw_vertices),
        }


@dataclass(frozen=True)
class DetectionResult:
    shapes: tuple[ShapeRecord, ...]
    # Wall-clock milliseconds
    processing_time: float
    image_width: int
    image_height: int

    def counts_by_type(self) -> dict[str, int]:
        counts = {t.value: 0 for t in ShapeType}
        for shape in self.shapes:
            counts[shape.type.value] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "shapes": [s.to_dict() for s in self.shapes],
            "processingTime": self.processing_time,
            "imageWidth": self.image_width,
            "imageHeight": self.image_height,
        }
