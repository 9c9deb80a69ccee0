"""Linear scales and the data-to-pixel coordinate transform."""

import math
from dataclasses import dataclass

from ..errors import DegenerateScaleError
from ..settings import XScaleMode
from .extrema import Extrema, Point
from .geometry import CanvasGeometry


@dataclass(frozen=True)
class Scale:
    """Pixels per data unit along each axis."""

    x_scale: float
    y_scale: float


def compute_scale(
    extrema: Extrema, geometry: CanvasGeometry, mode: XScaleMode = "max"
) -> Scale:
    """
    Derive the scale that fits a series into the plot box.

    Args:
        extrema: Extrema of the series that fixes the scale
        geometry: Canvas geometry providing the inner plot size
        mode: ``"max"`` uses ``x_max`` as the x divisor, ``"range"`` uses ``x_max - x_min``

    Returns:
        The scale for both axes

    Raises:
        DegenerateScaleError: If either divisor is zero, a data range overflows,
            or a factor is not a finite non-zero number
    """
    if not (math.isfinite(extrema.x_range) and math.isfinite(extrema.y_range)):
        raise DegenerateScaleError(f"Data range is too large to scale: {extrema}")

    x_divisor = extrema.x_max if mode == "max" else extrema.x_max - extrema.x_min
    y_divisor = abs(extrema.y_max - extrema.y_min)

    if x_divisor == 0:
        if mode == "max":
            raise DegenerateScaleError("Cannot scale the x axis: x_max is 0")
        raise DegenerateScaleError("Cannot scale the x axis: all x values are equal")
    if y_divisor == 0:
        raise DegenerateScaleError("Cannot scale the y axis: all y values are equal")

    scale = Scale(
        x_scale=geometry.inner_width / x_divisor,
        y_scale=geometry.inner_height / y_divisor,
    )
    if not (math.isfinite(scale.x_scale) and math.isfinite(scale.y_scale)):
        raise DegenerateScaleError(f"Scale is not finite: {scale}")
    if scale.x_scale == 0 or scale.y_scale == 0:
        raise DegenerateScaleError(f"Scale collapses to zero: {scale}")
    return scale


class CoordinateTransformer:
    """Maps data-space points to pixel-space points for one canvas."""

    def __init__(
        self,
        scale: Scale,
        extrema: Extrema,
        geometry: CanvasGeometry,
        mode: XScaleMode = "max",
    ) -> None:
        self.scale = scale
        self.extrema = extrema
        self.geometry = geometry
        self.mode = mode

    def to_pixels(self, x: float, y: float) -> Point:
        """Transform one data point; increasing y moves up the canvas."""
        padding = self.geometry.padding
        x_offset = x if self.mode == "max" else x - self.extrema.x_min
        scaled_x = padding.left + (x_offset * self.scale.x_scale)
        scaled_y = (self.geometry.height - padding.bottom) - (
            (y - self.extrema.y_min) * self.scale.y_scale
        )
        return (scaled_x, scaled_y)
