"""Shared test fixtures — synthetic black-on-white RGBA images."""

from __future__ import annotations

import io
import struct
import zlib

import numpy as np
import pytest
from PIL import Image

from shapesight.engine.context import PixelBuffer
from shapesight.utils.geometry import cross


def white_canvas(width: int, height: int) -> np.ndarray:
    return np.full((height, width, 4), 255, dtype=np.uint8)


def paint(canvas: np.ndarray, mask: np.ndarray, value: int = 0) -> np.ndarray:
    canvas[mask, :3] = value
    return canvas


def grid(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    ys, xs = np.mgrid[0:height, 0:width]
    return xs, ys


def square_image(width=200, height=200, x=75, y=75, side=50) -> np.ndarray:
    xs, ys = grid(width, height)
    mask = (xs >= x) & (xs < x + side) & (ys >= y) & (ys < y + side)
    return paint(white_canvas(width, height), mask)


def rectangle_image() -> np.ndarray:
    """120×40 rectangle at (20, 40) on a 200×120 canvas."""
    xs, ys = grid(200, 120)
    mask = (xs >= 20) & (xs < 140) & (ys >= 40) & (ys < 80)
    return paint(white_canvas(200, 120), mask)


def triangle_image() -> np.ndarray:
    """Right triangle (40,40)-(40,160)-(160,160): legs on x=40 and y=160."""
    xs, ys = grid(200, 200)
    mask = (xs >= 40) & (ys <= 160) & (xs <= ys)
    return paint(white_canvas(200, 200), mask)


def disc_image(cx=100, cy=100, r=40, width=200, height=200) -> np.ndarray:
    xs, ys = grid(width, height)
    mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= r * r
    return paint(white_canvas(width, height), mask)


def plus_image() -> np.ndarray:
    """Plus sign: two 120×20 bars crossing at the canvas centre."""
    xs, ys = grid(200, 200)
    horizontal = (xs >= 40) & (xs < 160) & (ys >= 90) & (ys < 110)
    vertical = (xs >= 90) & (xs < 110) & (ys >= 40) & (ys < 160)
    return paint(white_canvas(200, 200), horizontal | vertical)


def to_buffer(arr: np.ndarray) -> PixelBuffer:
    return PixelBuffer.from_array(arr)


def encode_png(arr: np.ndarray) -> bytes:
    out = io.BytesIO()
    Image.fromarray(arr).save(out, format="PNG")
    return out.getvalue()


def png_header_only(width: int, height: int) -> bytes:
    """1-bit grayscale PNG declaring ``width``×``height`` with a stub IDAT.

    Enough for ``Image.open`` to read the size without allocating pixels.
    """

    def chunk(tag: bytes, body: bytes) -> bytes:
        crc = zlib.crc32(tag + body) & 0xFFFFFFFF
        return struct.pack(">I", len(body)) + tag + body + struct.pack(">I", crc)

    ihdr = struct.pack(">IIBBBBB", width, height, 1, 0, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", ihdr)
        + chunk(b"IDAT", zlib.compress(b"\x00"))
        + chunk(b"IEND", b"")
    )


def is_convex(polygon: list[tuple[int, int]]) -> bool:
    """True if every consecutive turn has the same sign (collinear allowed)."""
    n = len(polygon)
    if n < 3:
        return False
    sign = 0
    for i in range(n):
        c = cross(polygon[i - 2], polygon[i - 1], polygon[i])
        if c == 0:
            continue
        s = 1 if c > 0 else -1
        if sign == 0:
            sign = s
        elif s != sign:
            return False
    return True


def contains_point(polygon: list[tuple[int, int]], pt: tuple[int, int]) -> bool:
    """On-or-inside test for a counter-clockwise convex polygon."""
    n = len(polygon)
    return all(cross(polygon[i], polygon[(i + 1) % n], pt) >= 0 for i in range(n))


@pytest.fixture
def blank_buffer() -> PixelBuffer:
    return to_buffer(white_canvas(200, 200))


@pytest.fixture
def square_buffer() -> PixelBuffer:
    return to_buffer(square_image())


@pytest.fixture
def rectangle_buffer() -> PixelBuffer:
    return to_buffer(rectangle_image())


@pytest.fixture
def triangle_buffer() -> PixelBuffer:
    return to_buffer(triangle_image())


@pytest.fixture
def disc_buffer() -> PixelBuffer:
    return to_buffer(disc_image())


@pytest.fixture
def plus_buffer() -> PixelBuffer:
    return to_buffer(plus_image())


@pytest.fixture
def square_png() -> bytes:
    return encode_png(square_image())
