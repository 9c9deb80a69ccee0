"""Chart core: extrema, scales, gridlines, curves and palettes."""

from .extrema import Extrema, Point, Series, find_extrema
from .formatting import format_exact, format_label, format_number
from .geometry import CanvasGeometry
from .path import PathCommand, PathDescription, catmull_rom_to_bezier
from .palette import PaletteCycler
from .scale import CoordinateTransformer, Scale, compute_scale
from .grid import Gridline, compute_gridlines, draw_grid
from .curve import CurvePlan, build_curve, draw_curve
from .chart import Chart, initialize

__all__ = [
    "CanvasGeometry",
    "Chart",
    "CoordinateTransformer",
    "CurvePlan",
    "Extrema",
    "Gridline",
    "PaletteCycler",
    "PathCommand",
    "PathDescription",
    "Point",
    "Scale",
    "Series",
    "build_curve",
    "catmull_rom_to_bezier",
    "compute_gridlines",
    "compute_scale",
    "draw_curve",
    "draw_grid",
    "find_extrema",
    "format_exact",
    "format_label",
    "format_number",
    "initialize",
]
