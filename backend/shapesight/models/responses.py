"""API response models. Field aliases follow the camelCase detection contract."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"
    shape_types: list[str] = Field(default_factory=list)


class PointModel(BaseModel):
    x: int
    y: int


class BoundingBoxModel(BaseModel):
    x: int
    y: int
    width: int
    height: int


class ShapeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["circle", "triangle", "square", "rectangle", "polygon"]
    bounding_box: BoundingBoxModel = Field(alias="boundingBox")
    center: PointModel
    area: int
    perimeter: float
    circularity: float
    confidence: float = Field(ge=0.12, le=0.99)
    vertices: list[PointModel]
    raw_vertices: list[PointModel] = Field(default_factory=list, alias="rawVertices")


class DetectResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shapes: list[ShapeModel] = Field(default_factory=list)
    processing_time: float = Field(default=0.0, alias="processingTime")
    image_width: int = Field(alias="imageWidth")
    image_height: int = Field(alias="imageHeight")
    counts: dict[str, int] = Field(default_factory=dict)
