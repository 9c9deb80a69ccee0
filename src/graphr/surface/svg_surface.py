"""SVG drawing surface."""

from ..chart.formatting import format_number
from ._svg_shared import _svg_attrs, _svg_paint, _svg_text
from .base import ShapeHandle, Surface, resolve_dasharray

TEXT_FONT_FAMILY = "Arial"
TEXT_FONT_SIZE = 10


class SvgSurface(Surface):
    """Surface that serializes its shapes into a standalone SVG document."""

    def encode(self) -> bytes:
        width = format_number(self.width)
        height = format_number(self.height)
        parts: list[str] = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">',
            *(self._element(shape) for shape in self.shapes),
            "</svg>",
        ]
        return "\n".join(parts).encode("utf-8")

    def _element(self, shape: ShapeHandle) -> str:
        params = shape.params
        paint = self._paint_attrs(shape)
        if shape.kind == "rect":
            geometry = {
                "x": params["x"],
                "y": params["y"],
                "width": params["width"],
                "height": params["height"],
                "rx": params["radius"] or None,
            }
            return f"<rect {_svg_attrs({**geometry, **paint})}/>"
        if shape.kind == "circle":
            geometry = {"cx": params["x"], "cy": params["y"], "r": params["radius"]}
            return f"<circle {_svg_attrs({**geometry, **paint})}/>"
        if shape.kind == "path":
            geometry = {"d": params["path"].to_svg_data()}
            return f"<path {_svg_attrs({**geometry, **paint})}/>"
        geometry = {
            "x": params["x"],
            "y": params["y"],
            "text-anchor": "middle",
            "dominant-baseline": "central",
            "font-family": TEXT_FONT_FAMILY,
            "font-size": TEXT_FONT_SIZE,
        }
        return f"<text {_svg_attrs({**geometry, **paint})}>{_svg_text(params['text'])}</text>"

    def _paint_attrs(self, shape: ShapeHandle) -> dict[str, object]:
        stroke = _svg_paint(shape.get("stroke"))
        stroke_width = shape.get("stroke_width", 1)
        dashes = resolve_dasharray(shape.get("stroke_dasharray"), stroke_width)
        return {
            "fill": _svg_paint(shape.get("fill")),
            "stroke": stroke,
            "stroke-width": stroke_width if stroke != "none" else None,
            "stroke-dasharray": ",".join(format_number(d) for d in dashes) if dashes else None,
        }
