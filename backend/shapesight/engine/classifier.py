"""Shape classification and confidence scoring.

Decision order on the filtered hull polygon:
  3 vertices                                → triangle
  4 vertices AND |aspect − 1| < 0.12        → square
  4 vertices                                → rectangle
  circularity > 0.7                         → circle
  ELSE                                      → polygon
"""

from __future__ import annotations

import math

from shapesight.engine.context import ShapeType
from shapesight.utils.geometry import aspect_ratio

Point = tuple[int, int]

# Tolerance on |w/h − 1| for a four-sided hull to count as a square.
_SQUARE_ASPECT_TOL = 0.12
# Pixelated discs score ~0.85–0.95; a 2:1 ellipse ~0.78; squares ~0.8 but
# are caught earlier by vertex count.
_CIRC_CIRCLE = 0.7

_BASE_CONFIDENCE = {
    ShapeType.TRIANGLE: 0.90,
    ShapeType.SQUARE: 0.88,
    ShapeType.RECTANGLE: 0.88,
    ShapeType.CIRCLE: 0.93,
    ShapeType.POLYGON: 0.65,
}

CONFIDENCE_MIN = 0.12
CONFIDENCE_MAX = 0.99


def classify_shape(hull: list[Point], circularity: float) -> ShapeType:
    """Resolve a shape type from the cleaned hull and the contour circularity."""
    n = len(hull)
    if n == 3:
        return ShapeType.TRIANGLE
    if n == 4:
        if abs(aspect_ratio(hull) - 1) < _SQUARE_ASPECT_TOL:
            return ShapeType.SQUARE
        return ShapeType.RECTANGLE
    if circularity > _CIRC_CIRCLE:
        return ShapeType.CIRCLE
    return ShapeType.POLYGON


def shape_confidence(shape_type: ShapeType, circularity: float, area: int) -> float:
    """Type prior + circularity boost + size boost, clamped to [0.12, 0.99]."""
    base = _BASE_CONFIDENCE[shape_type]
    circ_boost = min(0.15, max(0.0, (circularity - 0.4) * 0.5))
    size_boost = min(0.2, math.log10(max(10, area)) * 0.03)
    return max(CONFIDENCE_MIN, min(CONFIDENCE_MAX, base + circ_boost + size_boost))
