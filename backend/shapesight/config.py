"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from shapesight.engine.config import DetectionConfig


class Settings(BaseSettings):
    shapesight_env: str = "development"
    shapesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Detection defaults
    detect_threshold: int = 128
    detect_min_area: int = 28
    detect_douglas_peucker_ratio: float = 0.02
    detect_colinear_tolerance_deg: float = 6.0

    # Uploads above this many pixels are refused before decoding
    max_image_pixels: int = 16_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def detection_config(self) -> DetectionConfig:
        return DetectionConfig(
            threshold=self.detect_threshold,
            min_area=self.detect_min_area,
            douglas_peucker_ratio=self.detect_douglas_peucker_ratio,
            colinear_tolerance_deg=self.detect_colinear_tolerance_deg,
        )


settings = Settings()
