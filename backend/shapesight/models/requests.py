"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DetectOptions(BaseModel):
    """Per-request overrides of the server's detection defaults."""

    threshold: int | None = Field(default=None, ge=0, le=255, description="Foreground cutoff")
    min_area: int | None = Field(default=None, ge=1, description="Minimum component pixel count")
    douglas_peucker_ratio: float | None = Field(
        default=None, ge=0, description="Simplification epsilon as a fraction of perimeter"
    )
    colinear_tolerance_deg: float | None = Field(
        default=None, ge=0, le=180, description="Angle tolerance for vertex pruning"
    )


class DetectRequest(BaseModel):
    image: str = Field(..., description="Base64 image bytes or a data:image/...;base64 URL")
    options: DetectOptions = Field(default_factory=DetectOptions)
