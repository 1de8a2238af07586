"""Binary-mask morphology — component labelling and boundary extraction."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray


def label_components(
    mask: NDArray[np.uint8],
) -> Iterator[tuple[list[int], tuple[int, int, int, int]]]:
    """Label 4-connected foreground components with an explicit-stack flood fill.

    Seeds are taken in row-major order, so components come out in discovery
    order. Yields ``(pixels, (min_x, min_y, max_x, max_y))`` where ``pixels``
    holds flat indices ``y * width + x`` in visit order.
    """
    height, width = mask.shape
    flat = mask.ravel().tolist()
    seen = bytearray(width * height)

    for seed in np.flatnonzero(mask).tolist():
        if seen[seed]:
            continue
        seen[seed] = 1
        stack = [seed]
        pixels: list[int] = []
        min_x = max_x = seed % width
        min_y = max_y = seed // width

        while stack:
            cur = stack.pop()
            cy, cx = divmod(cur, width)
            pixels.append(cur)
            if cx < min_x:
                min_x = cx
            elif cx > max_x:
                max_x = cx
            if cy < min_y:
                min_y = cy
            elif cy > max_y:
                max_y = cy

            if cx > 0:
                n = cur - 1
                if flat[n] and not seen[n]:
                    seen[n] = 1
                    stack.append(n)
            if cx < width - 1:
                n = cur + 1
                if flat[n] and not seen[n]:
                    seen[n] = 1
                    stack.append(n)
            if cy > 0:
                n = cur - width
                if flat[n] and not seen[n]:
                    seen[n] = 1
                    stack.append(n)
            if cy < height - 1:
                n = cur + width
                if flat[n] and not seen[n]:
                    seen[n] = 1
                    stack.append(n)

        yield pixels, (min_x, min_y, max_x, max_y)


def boundary_trace(
    mask: NDArray[np.uint8],
    bbox: tuple[int, int, int, int],
) -> NDArray[np.int64]:
    """Boundary pixels inside a component's bbox as an (N, 2) array of (x, y).

    Every foreground pixel of ``mask`` within ``bbox`` (min_x, min_y, max_x,
    max_y) is scanned in row-major order, so edges of another component
    sitting inside the box are traced too. A pixel is on the boundary if any
    4-neighbour is background; neighbours outside the image count as
    background.
    """
    height, width = mask.shape
    min_x, min_y, max_x, max_y = bbox
    ys, xs = np.nonzero(mask[min_y:max_y + 1, min_x:max_x + 1])
    xs = xs.astype(np.int64) + min_x
    ys = ys.astype(np.int64) + min_y

    left = (xs == 0) | (mask[ys, np.maximum(xs - 1, 0)] == 0)
    right = (xs == width - 1) | (mask[ys, np.minimum(xs + 1, width - 1)] == 0)
    up = (ys == 0) | (mask[np.maximum(ys - 1, 0), xs] == 0)
    down = (ys == height - 1) | (mask[np.minimum(ys + 1, height - 1), xs] == 0)

    on_edge = left | right | up | down
    return np.column_stack([xs[on_edge], ys[on_edge]])


def order_boundary(points: NDArray[np.int64]) -> list[tuple[int, int]]:
    """Greedy nearest-neighbour walk over an unordered boundary point set.

    Starts at the first point and repeatedly steps to the closest unvisited
    point by squared distance; ties go to the lowest index. O(n²), and the
    resulting path is not guaranteed to be simple.
    """
    n = len(points)
    if n == 0:
        return []

    xs = points[:, 0].astype(np.int64)
    ys = points[:, 1].astype(np.int64)
    used = np.zeros(n, dtype=bool)
    sentinel = np.iinfo(np.int64).max

    cur = 0
    used[cur] = True
    order = [cur]
    for _ in range(n - 1):
        dist = (xs - xs[cur]) ** 2 + (ys - ys[cur]) ** 2
        dist[used] = sentinel
        cur = int(np.argmin(dist))
        used[cur] = True
        order.append(cur)

    return [(int(xs[i]), int(ys[i])) for i in order]
