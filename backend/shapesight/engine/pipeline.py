"""Detection orchestrator — pixels in, classified shapes out.

grayscale → mask → labelling + boundary tracing → per component:
simplify → hull → colinear filter → classify → centroid → confidence.
"""

from __future__ import annotations

import logging
import time

from shapesight.engine.classifier import classify_shape, shape_confidence
from shapesight.engine.config import DetectionConfig
from shapesight.engine.context import (
    BoundingBox,
    Component,
    DetectionResult,
    PixelBuffer,
    ShapeRecord,
)
from shapesight.engine.errors import InvalidPixelBufferError
from shapesight.utils.contour import douglas_peucker, path_perimeter, simplify_epsilon
from shapesight.utils.geometry import circularity, convex_hull, remove_colinear
from shapesight.utils.morphology import boundary_trace, label_components, order_boundary
from shapesight.utils.raster import binarize, rgba_view, to_grayscale

logger = logging.getLogger(__name__)

# Shorter traced boundaries are degenerate slivers.
MIN_BOUNDARY_POINTS = 6


class ShapeDetector:
    """Runs the full pipeline over one PixelBuffer per call.

    Holds only its default configuration; every scratch structure is
    allocated inside ``detect_shapes``, so one detector can serve
    concurrent callers.
    """

    def __init__(self, config: DetectionConfig | None = None) -> None:
        self.config = config or DetectionConfig()

    def detect_shapes(
        self,
        buffer: PixelBuffer,
        config: DetectionConfig | None = None,
    ) -> DetectionResult:
        """Detect and classify every dark shape in ``buffer``."""
        if not isinstance(buffer, PixelBuffer):
            raise InvalidPixelBufferError(
                f"expected PixelBuffer, got {type(buffer).__name__}"
            )
        cfg = config or self.config
        start = time.perf_counter()

        t0 = time.perf_counter()
        gray = to_grayscale(rgba_view(buffer.data, buffer.width, buffer.height))
        mask = binarize(gray, cfg.threshold)
        logger.debug(
            "  segmentation: %d foreground px in %.1fms",
            int(mask.sum()),
            (time.perf_counter() - t0) * 1000,
        )

        t0 = time.perf_counter()
        components = self._label(mask, buffer.width, cfg)
        logger.debug(
            "  labelling: %d components kept in %.1fms",
            len(components),
            (time.perf_counter() - t0) * 1000,
        )

        t0 = time.perf_counter()
        shapes: list[ShapeRecord] = []
        for comp in components:
            record = self._analyze(comp, cfg)
            if record is not None:
                shapes.append(record)
        logger.debug("  classification: %.1fms", (time.perf_counter() - t0) * 1000)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Detection complete: %d shapes in %dx%d image in %.0fms",
            len(shapes),
            buffer.width,
            buffer.height,
            elapsed,
        )
        return DetectionResult(
            shapes=tuple(shapes),
            processing_time=elapsed,
            image_width=buffer.width,
            image_height=buffer.height,
        )

    def _label(self, mask, width: int, cfg: DetectionConfig) -> list[Component]:
        """Flood-fill components, drop noise, attach traced boundaries."""
        components: list[Component] = []
        for label, (pixels, bbox) in enumerate(label_components(mask), start=1):
            if len(pixels) < cfg.min_area:
                continue
            comp = Component(label=label, pixels=pixels, bbox=bbox, image_width=width)
            comp.boundary = order_boundary(boundary_trace(mask, bbox))
            components.append(comp)
        return components

    def _analyze(self, comp: Component, cfg: DetectionConfig) -> ShapeRecord | None:
        """Turn one component into a ShapeRecord, or None if it is degenerate."""
        if len(comp.boundary) < MIN_BOUNDARY_POINTS:
            logger.debug(
                "  component %d skipped: %d boundary points",
                comp.label,
                len(comp.boundary),
            )
            return None

        perimeter = path_perimeter(comp.boundary)
        eps = simplify_epsilon(perimeter, cfg.douglas_peucker_ratio)
        approx = douglas_peucker(comp.boundary, eps)
        hull = remove_colinear(convex_hull(approx), cfg.colinear_tolerance_deg)
        if len(hull) < 3:
            logger.debug("  component %d skipped: collinear hull", comp.label)
            return None

        circ = circularity(comp.area, perimeter)
        shape_type = classify_shape(hull, circ)
        confidence = shape_confidence(shape_type, circ, comp.area)
        min_x, min_y = comp.bbox[0], comp.bbox[1]

        return ShapeRecord(
            type=shape_type,
            bounding_box=BoundingBox(x=min_x, y=min_y, width=comp.width, height=comp.height),
            center=comp.centroid(),
            area=comp.area,
            perimeter=perimeter,
            circularity=circ,
            confidence=round(confidence, 2),
            vertices=tuple(hull),
            raw_vertices=tuple(approx),
        )


def create_detector(config: DetectionConfig | None = None) -> ShapeDetector:
    """Factory function for creating a detector instance."""
    return ShapeDetector(config=config)
