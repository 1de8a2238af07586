"""Caller-visible failures. Geometric degeneracies are never raised, only skipped."""

from __future__ import annotations


class ShapeSightError(Exception):
    """Base class for all detection errors."""


class InvalidPixelBufferError(ShapeSightError, ValueError):
    """Malformed input: bad dimensions or a byte length that is not width×height×4."""


class InvalidConfigError(ShapeSightError, ValueError):
    """A detection parameter is outside its allowed range."""


class ImageDecodeError(ShapeSightError):
    """Encoded image bytes could not be turned into a pixel buffer."""
