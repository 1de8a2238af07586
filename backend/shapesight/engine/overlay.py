"""SVG overlay of a detection result.

Draws each shape's bounding box, hull outline, centre dot and a
"type confidence%" label on a transparent canvas matching the source
image, so it can be layered over the original. Only string formatting.
"""

from __future__ import annotations

from shapesight.engine.context import DetectionResult, ShapeRecord, ShapeType

TYPE_COLORS = {
    ShapeType.CIRCLE: "#10b981",
    ShapeType.TRIANGLE: "#3b82f6",
    ShapeType.RECTANGLE: "#f59e0b",
    ShapeType.SQUARE: "#ef4444",
    ShapeType.POLYGON: "#8b5cf6",
}


def _shape_to_svg(shape: ShapeRecord, index: int) -> str:
    color = TYPE_COLORS[shape.type]
    bb = shape.bounding_box
    parts = [
        f'<g id="shape-{index}" data-type="{shape.type.value}">',
        f'<rect x="{bb.x}" y="{bb.y}" width="{bb.width}" height="{bb.height}" '
        f'fill="none" stroke="{color}" stroke-width="3"/>',
    ]
    if len(shape.vertices) >= 3:
        pts = " ".join(f"{x},{y}" for x, y in shape.vertices)
        parts.append(
            f'<polygon points="{pts}" fill="{color}" fill-opacity="0.15" '
            f'stroke="{color}" stroke-width="2" stroke-dasharray="5,5"/>'
        )
    cx, cy = shape.center
    parts.append(f'<circle cx="{cx}" cy="{cy}" r="5" fill="{color}"/>')
    label = f"{shape.type.value} {round(shape.confidence * 100)}%"
    parts.append(
        f'<text x="{bb.x}" y="{max(bb.y - 6, 12)}" fill="{color}" '
        f'font-family="sans-serif" font-size="14" font-weight="bold">{label}</text>'
    )
    parts.append("</g>")
    return "".join(parts)


def render_overlay_svg(result: DetectionResult) -> str:
    """Standalone SVG document with one <g> per detected shape."""
    w, h = result.image_width, result.image_height
    body = "\n".join(_shape_to_svg(s, i) for i, s in enumerate(result.shapes))
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
        f'viewBox="0 0 {w} {h}">\n{body}\n</svg>'
    )
