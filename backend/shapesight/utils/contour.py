"""Contour utilities — path length, Douglas-Peucker simplification."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

Point = tuple[int, int]


def path_perimeter(points: list[Point], closed: bool = True) -> float:
    """Sum of segment lengths; a closed path includes the last→first segment."""
    if len(points) < 2:
        return 0.0
    pts = np.asarray(points, dtype=np.float64)
    if closed:
        pts = np.vstack([pts, pts[:1]])
    steps = np.diff(pts, axis=0)
    return float(np.hypot(steps[:, 0], steps[:, 1]).sum())


def perpendicular_distances(
    points: NDArray[np.float64],
    a: NDArray[np.float64],
    b: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Distance from each of ``points`` to the infinite line through ``a`` and ``b``.

    A zero-length chord falls back to the plain point distance.
    """
    line_vec = b - a
    length_sq = float(np.dot(line_vec, line_vec))
    vecs = points - a
    if length_sq == 0.0:
        return np.hypot(vecs[:, 0], vecs[:, 1])
    t = np.dot(vecs, line_vec) / length_sq
    offset = vecs - np.outer(t, line_vec)
    return np.hypot(offset[:, 0], offset[:, 1])


def simplify_epsilon(perimeter: float, ratio: float, floor: float = 4.0) -> float:
    """Tolerance for ``douglas_peucker``: max(floor, ratio × perimeter)."""
    return max(floor, ratio * perimeter)


def douglas_peucker(points: list[Point], epsilon: float) -> list[Point]:
    """Ramer-Douglas-Peucker line simplification.

    Iterative: an explicit stack of (start, end) index ranges replaces the
    recursion so long contours cannot exhaust the call stack. The first and
    last points are always kept and the original order is preserved. A point
    is kept only if its distance is strictly greater than ``epsilon``; on
    ties the earliest point wins.
    """
    n = len(points)
    if n < 3:
        return list(points)

    pts = np.asarray(points, dtype=np.float64)
    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True
    stack = [(0, n - 1)]

    while stack:
        i, j = stack.pop()
        if j - i < 2:
            continue
        distances = perpendicular_distances(pts[i + 1:j], pts[i], pts[j])
        k = int(np.argmax(distances))
        if distances[k] > epsilon:
            index = i + 1 + k
            keep[index] = True
            stack.append((i, index))
            stack.append((index, j))

    return [p for p, kept in zip(points, keep) if kept]
