"""Gridlines, ticks and tick labels."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from ..constants import (
    GRIDLINE_COLOR,
    GRIDLINE_DASH,
    GRIDLINE_WIDTH,
    X_LABEL_OFFSET,
    Y_LABEL_OFFSET,
)
from ..settings import GridlineCounts
from .extrema import Extrema, Point
from .formatting import format_label
from .geometry import CanvasGeometry
from .path import PathDescription

if TYPE_CHECKING:
    from ..surface import ShapeHandle, Surface


@dataclass(frozen=True)
class Gridline:
    """One gridline with its tick label."""

    axis: Literal["x", "y"]
    start: Point
    end: Point
    label: str
    label_position: Point
    dashed: bool

    def to_path(self) -> PathDescription:
        return PathDescription().move_to(*self.start).line_to(*self.end)


def compute_gridlines(
    extrema: Extrema,
    geometry: CanvasGeometry,
    counts: GridlineCounts,
    tick_length: float,
) -> list[Gridline]:
    """
    Place evenly spaced gridlines across the plot box.

    Vertical lines run from the tick below the plot box to its top and are
    labelled from ``x_min`` upwards. Horizontal lines run from the tick left of
    the plot box to its right edge and are labelled from ``y_max`` downwards, so
    the top row carries ``y_max`` and the bottom row ``y_min``.

    Returns:
        ``counts.x + 1`` vertical lines followed by ``counts.y + 1`` horizontal lines
    """
    padding = geometry.padding
    origin_x = padding.left
    origin_y = padding.top + geometry.inner_height
    spacing_x = geometry.inner_width / counts.x
    spacing_y = geometry.inner_height / counts.y

    tick_bottom = origin_y + tick_length
    tick_left = origin_x - tick_length
    plot_right = origin_x + geometry.inner_width

    x_step = extrema.x_range / counts.x
    y_step = extrema.y_range / counts.y

    gridlines: list[Gridline] = []
    for i in range(counts.x + 1):
        x = origin_x + (i * spacing_x)
        gridlines.append(
            Gridline(
                axis="x",
                start=(x, tick_bottom),
                end=(x, padding.top),
                label=format_label(extrema.x_min + (i * x_step)),
                label_position=(x, tick_bottom + X_LABEL_OFFSET),
                dashed=False,
            )
        )

    for j in range(counts.y + 1):
        y = padding.top + (j * spacing_y)
        gridlines.append(
            Gridline(
                axis="y",
                start=(tick_left, y),
                end=(plot_right, y),
                label=format_label(extrema.y_max - (j * y_step)),
                label_position=(tick_left - Y_LABEL_OFFSET, y),
                dashed=True,
            )
        )
    return gridlines


def draw_grid(surface: "Surface", gridlines: list[Gridline]) -> list["ShapeHandle"]:
    """Draw gridlines and their labels, returning the created shapes."""
    shapes: list["ShapeHandle"] = []
    for gridline in gridlines:
        line = surface.path(gridline.to_path()).attr(
            stroke=GRIDLINE_COLOR, stroke_width=GRIDLINE_WIDTH
        )
        if gridline.dashed:
            line.attr(stroke_dasharray=GRIDLINE_DASH)
        label = surface.text(*gridline.label_position, gridline.label)
        shapes.extend((line, label))
    return shapes
