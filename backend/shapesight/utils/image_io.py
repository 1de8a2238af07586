"""Image decoding — encoded bytes / files / data URLs → PixelBuffer via Pillow."""

from __future__ import annotations

import base64
import binascii
import io
import re
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from shapesight.engine.context import PixelBuffer
from shapesight.engine.errors import ImageDecodeError

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+)?(?:;[\w=-]+)*;base64,", re.IGNORECASE)


def image_to_buffer(image: Image.Image) -> PixelBuffer:
    rgba = image.convert("RGBA")
    return PixelBuffer(width=rgba.width, height=rgba.height, data=rgba.tobytes())


def decode_image(data: bytes, max_pixels: int | None = None) -> PixelBuffer:
    """Decode PNG/JPEG/GIF/... bytes into an RGBA PixelBuffer."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            if max_pixels is not None and img.width * img.height > max_pixels:
                raise ImageDecodeError(
                    f"image is {img.width}x{img.height}, limit is {max_pixels} pixels"
                )
            return image_to_buffer(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"cannot decode image: {e}") from e


def decode_data_url(payload: str, max_pixels: int | None = None) -> PixelBuffer:
    """Decode a ``data:image/...;base64,`` URL or a bare base64 string."""
    match = _DATA_URL_RE.match(payload)
    if match:
        mime = match.group("mime") or ""
        if mime and not mime.lower().startswith("image/"):
            raise ImageDecodeError(f"not an image payload: {mime}")
        payload = payload[match.end():]
    try:
        raw = base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"invalid base64 image data: {e}") from e
    return decode_image(raw, max_pixels=max_pixels)


def load_pixel_buffer(path: str | Path, max_pixels: int | None = None) -> PixelBuffer:
    return decode_image(Path(path).read_bytes(), max_pixels=max_pixels)
