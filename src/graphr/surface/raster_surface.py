"""Raster (Pillow) drawing surfaces."""

import math
from abc import ABC, abstractmethod
from io import BytesIO

from PIL import Image, ImageColor, ImageDraw, ImageFont

from ..chart.extrema import Point
from .base import ShapeHandle, Surface, resolve_dasharray

CURVE_SAMPLES_PER_SEGMENT = 16


class PillowSurface(Surface, ABC):
    """Template surface rendering shapes onto a Pillow image."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``png`` or ``webp``)."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}

    def render_image(self) -> Image.Image:
        """
        Draw every shape in order onto a transparent image.

        Returns:
            RGBA image of the surface
        """
        size = (max(1, math.ceil(self.width)), max(1, math.ceil(self.height)))
        img = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(img, "RGBA")
        for shape in self.shapes:
            if shape.kind == "rect":
                self._draw_rect(draw, shape)
            elif shape.kind == "circle":
                self._draw_circle(draw, shape)
            elif shape.kind == "path":
                self._draw_path(draw, shape)
            else:
                self._draw_text(draw, shape)
        return img

    def encode(self) -> bytes:
        buffer = BytesIO()
        self.render_image().save(buffer, format=self.output_format, **self.save_options)
        return buffer.getvalue()

    def _draw_rect(self, draw: ImageDraw.ImageDraw, shape: ShapeHandle) -> None:
        params = shape.params
        box = [
            params["x"],
            params["y"],
            params["x"] + params["width"],
            params["y"] + params["height"],
        ]
        fill, outline, width = _paint(shape)
        if params["radius"]:
            draw.rounded_rectangle(box, radius=params["radius"], fill=fill, outline=outline, width=width)
        else:
            draw.rectangle(box, fill=fill, outline=outline, width=width)

    def _draw_circle(self, draw: ImageDraw.ImageDraw, shape: ShapeHandle) -> None:
        x, y, r = shape.params["x"], shape.params["y"], shape.params["radius"]
        fill, outline, width = _paint(shape)
        draw.ellipse([x - r, y - r, x + r, y + r], fill=fill, outline=outline, width=width)

    def _draw_path(self, draw: ImageDraw.ImageDraw, shape: ShapeHandle) -> None:
        _fill, outline, width = _paint(shape)
        if outline is None or width == 0:
            return
        dashes = resolve_dasharray(shape.get("stroke_dasharray"), shape.get("stroke_width", 1))
        for polyline in shape.params["path"].flatten(CURVE_SAMPLES_PER_SEGMENT):
            pieces = _dash_polyline(polyline, dashes) if dashes else [polyline]
            for piece in pieces:
                if len(piece) > 1:
                    draw.line(piece, fill=outline, width=width, joint="curve")

    def _draw_text(self, draw: ImageDraw.ImageDraw, shape: ShapeHandle) -> None:
        """Draw text centered on its anchor point."""
        font = ImageFont.load_default()
        text = shape.params["text"]
        fill = _color(shape.get("fill"))

        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]

        x = shape.params["x"] - text_width / 2 - bbox[0]
        y = shape.params["y"] - text_height / 2 - bbox[1]
        draw.text((x, y), text, font=font, fill=fill)


class PngSurface(PillowSurface):
    """Surface for PNG output."""

    @property
    def output_format(self) -> str:
        return "png"


class WebPSurface(PillowSurface):
    """Surface for WebP output."""

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {
            "lossless": True,
            "quality": 100,
            "method": 4,
        }


def _color(value: str | None) -> tuple[int, ...] | None:
    if value is None or value == "none":
        return None
    return ImageColor.getrgb(value)


def _paint(shape: ShapeHandle) -> tuple[tuple[int, ...] | None, tuple[int, ...] | None, int]:
    fill = _color(shape.get("fill"))
    outline = _color(shape.get("stroke"))
    width = int(round(shape.get("stroke_width", 1) or 0))
    if outline is None:
        width = 0
    return fill, outline, width


def _dash_polyline(points: list[Point], dashes: tuple[float, ...]) -> list[list[Point]]:
    """Split a polyline into the visible pieces of a repeating dash pattern."""
    pieces: list[list[Point]] = []
    dash_index = 0
    remaining = dashes[0]
    drawing = True
    current: list[Point] = [points[0]]

    for start, end in zip(points, points[1:]):
        seg_x, seg_y = end[0] - start[0], end[1] - start[1]
        length = math.hypot(seg_x, seg_y)
        position = 0.0
        while length - position > remaining:
            position += remaining
            t = position / length
            point = (start[0] + seg_x * t, start[1] + seg_y * t)
            if drawing:
                current.append(point)
                pieces.append(current)
            else:
                current = [point]
            drawing = not drawing
            dash_index = (dash_index + 1) % len(dashes)
            remaining = dashes[dash_index]
        remaining -= length - position
        if drawing:
            current.append(end)
        else:
            current = [end]

    if drawing and len(current) > 1:
        pieces.append(current)
    return pieces
