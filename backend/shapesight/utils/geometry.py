"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

Point = tuple[int, int]


def cross(o: Point, a: Point, b: Point) -> int:
    """Z component of (a - o) × (b - o). Positive = left turn."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_hull(points: list[Point]) -> list[Point]:
    """Andrew's monotone chain, O(n log n).

    Only strict left turns survive, so collinear points are dropped. The
    hull is returned counter-clockwise (in y-up terms) without repeating
    the first vertex.
    """
    if len(points) <= 1:
        return list(points)

    pts = sorted(points)

    lower: list[Point] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: list[Point] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


def remove_colinear(points: list[Point], tolerance_deg: float = 6.0) -> list[Point]:
    """Drop vertices of a closed polygon whose interior angle is within
    ``tolerance_deg`` of a straight line.

    Polygons of three or fewer vertices are returned as-is, and so is the
    input when filtering would leave fewer than three vertices.
    """
    n = len(points)
    if n <= 3:
        return list(points)

    tol = math.radians(tolerance_deg)
    kept: list[Point] = []
    for i in range(n):
        px, py = points[i - 1]
        cx, cy = points[i]
        nx, ny = points[(i + 1) % n]

        v1x, v1y = px - cx, py - cy
        v2x, v2y = nx - cx, ny - cy
        n1 = math.hypot(v1x, v1y) or 1.0
        n2 = math.hypot(v2x, v2y) or 1.0
        dot = (v1x * v2x + v1y * v2y) / (n1 * n2)
        angle = math.acos(max(-1.0, min(1.0, dot)))
        if abs(math.pi - angle) > tol:
            kept.append(points[i])

    return kept if len(kept) >= 3 else list(points)


def bbox(points: list[Point]) -> tuple[int, int, int, int]:
    """(xmin, ymin, xmax, ymax) of a vertex list."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def aspect_ratio(points: list[Point]) -> float:
    """Bounding-box width / height, each side floored to 1."""
    xmin, ymin, xmax, ymax = bbox(points)
    return max(1, xmax - xmin) / max(1, ymax - ymin)


def circularity(area: float, perimeter: float) -> float:
    """4π·area/perimeter². 1.0 for a perfect disc, 0 when perimeter is 0."""
    if perimeter <= 0:
        return 0.0
    return 4 * math.pi * area / (perimeter * perimeter)
