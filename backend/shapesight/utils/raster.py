"""Raster reduction — RGBA → luminance → binary foreground mask. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# ITU-R BT.601 luma weights.
_LUMA_R = 0.299
_LUMA_G = 0.587
_LUMA_B = 0.114


def rgba_view(data: bytes, width: int, height: int) -> NDArray[np.uint8]:
    """Zero-copy (H, W, 4) view over a row-major RGBA byte string."""
    return np.frombuffer(data, dtype=np.uint8).reshape(height, width, 4)


def to_grayscale(rgba: NDArray[np.uint8]) -> NDArray[np.int32]:
    """floor(0.299R + 0.587G + 0.114B) per pixel. Alpha is ignored."""
    r = rgba[..., 0].astype(np.float64)
    g = rgba[..., 1].astype(np.float64)
    b = rgba[..., 2].astype(np.float64)
    return np.floor(_LUMA_R * r + _LUMA_G * g + _LUMA_B * b).astype(np.int32)


def binarize(gray: NDArray[np.int32], threshold: int) -> NDArray[np.uint8]:
    """Fixed-threshold segmentation: 1 where intensity < threshold (dark = foreground)."""
    return (gray < threshold).astype(np.uint8)
