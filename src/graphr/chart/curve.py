"""Curve construction for one plotted series."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import (
    CURVE_STROKE_WIDTH,
    MARKER_INNER_RADIUS,
    MARKER_OUTER_RADIUS,
    MARKER_STROKE_WIDTH,
)
from .extrema import Point, Series
from .geometry import CanvasGeometry
from .path import PathDescription
from .scale import CoordinateTransformer

if TYPE_CHECKING:
    from ..surface import ShapeHandle, Surface


@dataclass
class CurvePlan:
    """The path and marker positions computed for one series."""

    path: PathDescription | None = None
    points: list[Point] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.path is None


def build_curve(
    series: Series,
    transformer: CoordinateTransformer,
    geometry: CanvasGeometry,
    *,
    smooth: bool,
    clip: bool,
) -> CurvePlan:
    """
    Transform a series and assemble its path.

    Args:
        series: Points to plot, in drawing order
        transformer: Maps data points to pixel points
        geometry: Canvas geometry used for the plot box test
        smooth: Join points with a smooth curve instead of straight lines
        clip: Skip points that fall outside the plot box

    Returns:
        The curve plan; its path is None when no point qualified
    """
    plan = CurvePlan()
    for point in series:
        x, y = transformer.to_pixels(point[0], point[1])
        if clip and not geometry.contains(x, y):
            continue

        if plan.path is None:
            plan.path = PathDescription().move_to(x, y)
        elif smooth:
            plan.path.smooth_to(x, y)
        else:
            plan.path.line_to(x, y)
        plan.points.append((x, y))
    return plan


def draw_curve(
    surface: "Surface",
    plan: CurvePlan,
    color: str,
    background_color: str,
    draw_points: bool,
) -> list["ShapeHandle"]:
    """
    Draw the path first, then the markers, so markers sit above the curve.

    Each marker is a colored disc with a background-colored center.
    """
    shapes: list["ShapeHandle"] = []
    if plan.path is None:
        return shapes

    shapes.append(surface.path(plan.path).attr(stroke=color, stroke_width=CURVE_STROKE_WIDTH))
    if not draw_points:
        return shapes

    for x, y in plan.points:
        outer = surface.circle(x, y, MARKER_OUTER_RADIUS).attr(
            fill=color, stroke=background_color, stroke_width=MARKER_STROKE_WIDTH
        )
        inner = surface.circle(x, y, MARKER_INNER_RADIUS).attr(
            fill=background_color, stroke="none", stroke_width=0
        )
        shapes.extend((outer, inner))
    return shapes
