"""
ShapeSight CLI — detect shapes in an image file.

Usage:
  shapesight image.png                          # prints JSON to terminal
  shapesight image.png -o result.json           # saves JSON
  shapesight image.png --svg overlay.svg        # also saves an SVG overlay
  shapesight image.png --threshold 100 --min-area 50
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from shapesight.engine.config import DetectionConfig
from shapesight.engine.errors import ShapeSightError
from shapesight.engine.overlay import render_overlay_svg
from shapesight.engine.pipeline import create_detector
from shapesight.utils.image_io import load_pixel_buffer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapesight",
        description="Detect circles, triangles, squares, rectangles and polygons in an image",
    )
    parser.add_argument("input", help="Image file (PNG, JPEG, ...)")
    parser.add_argument("-o", "--output", help="Write the JSON result here instead of stdout")
    parser.add_argument("--svg", help="Also write an SVG overlay to this path")
    parser.add_argument("--threshold", type=int, help="Foreground cutoff, 0-255 (default 128)")
    parser.add_argument("--min-area", type=int, help="Minimum component pixel count (default 28)")
    parser.add_argument("--dp-ratio", type=float, help="Douglas-Peucker epsilon ratio (default 0.02)")
    parser.add_argument("--colinear-tol", type=float, help="Colinear pruning tolerance in degrees (default 6)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stage timings")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = DetectionConfig().with_overrides(
            threshold=args.threshold,
            min_area=args.min_area,
            douglas_peucker_ratio=args.dp_ratio,
            colinear_tolerance_deg=args.colinear_tol,
        )
        buffer = load_pixel_buffer(args.input)
    except (ShapeSightError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = create_detector(config).detect_shapes(buffer)
    payload = json.dumps(result.to_dict(), indent=2)

    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"  → Saved: {args.output} ({len(result.shapes)} shapes)")
    else:
        print(payload)

    if args.svg:
        Path(args.svg).write_text(render_overlay_svg(result), encoding="utf-8")
        print(f"  → Saved: {args.svg}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
