"""Tests for API endpoints."""

from __future__ import annotations

import base64

from fastapi.testclient import TestClient

from shapesight.main import app
from tests.conftest import encode_png, png_header_only, square_image, white_canvas


client = TestClient(app)


def _b64(png: bytes) -> str:
    return base64.b64encode(png).decode("ascii")


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["shape_types"] == ["circle", "triangle", "square", "rectangle", "polygon"]


def test_detect_square(square_png):
    response = client.post("/api/detect", json={"image": _b64(square_png)})
    assert response.status_code == 200
    data = response.json()
    assert data["imageWidth"] == 200
    assert data["imageHeight"] == 200
    assert data["processingTime"] >= 0
    assert data["counts"]["square"] == 1
    (shape,) = data["shapes"]
    assert shape["type"] == "square"
    assert shape["boundingBox"] == {"x": 75, "y": 75, "width": 50, "height": 50}
    assert shape["center"] == {"x": 100, "y": 100}
    assert shape["area"] == 2500
    assert 0.12 <= shape["confidence"] <= 0.99
    assert len(shape["vertices"]) == 4
    assert "rawVertices" in shape


def test_detect_accepts_data_url(square_png):
    url = "data:image/png;base64," + _b64(square_png)
    response = client.post("/api/detect", json={"image": url})
    assert response.status_code == 200
    assert len(response.json()["shapes"]) == 1


def test_detect_blank_image():
    png = encode_png(white_canvas(64, 48))
    response = client.post("/api/detect", json={"image": _b64(png)})
    assert response.status_code == 200
    data = response.json()
    assert data["shapes"] == []
    assert (data["imageWidth"], data["imageHeight"]) == (64, 48)


def test_detect_options_override_defaults(square_png):
    response = client.post(
        "/api/detect",
        json={"image": _b64(square_png), "options": {"min_area": 3000}},
    )
    assert response.status_code == 200
    assert response.json()["shapes"] == []


def test_detect_option_out_of_range(square_png):
    response = client.post(
        "/api/detect",
        json={"image": _b64(square_png), "options": {"threshold": 300}},
    )
    assert response.status_code == 422


def test_detect_invalid_base64():
    response = client.post("/api/detect", json={"image": "not base64!!"})
    assert response.status_code == 422
    assert "base64" in response.json()["detail"]


def test_detect_undecodable_image():
    response = client.post("/api/detect", json={"image": _b64(b"plain text, not a png")})
    assert response.status_code == 422


def test_detect_oversized_image_is_unprocessable():
    response = client.post("/api/detect", json={"image": _b64(png_header_only(20000, 20000))})
    assert response.status_code == 422


def test_detect_rejects_non_image_data_url():
    payload = "data:text/plain;base64," + _b64(b"hello")
    response = client.post("/api/detect", json={"image": payload})
    assert response.status_code == 422


def test_detect_overlay():
    png = encode_png(square_image())
    response = client.post("/api/detect/overlay", json={"image": _b64(png)})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.startswith("<svg")
    assert 'data-type="square"' in response.text
