"""graphr: line and scatter charts drawn onto SVG and raster surfaces."""

from .chart import (
    CanvasGeometry,
    Chart,
    CoordinateTransformer,
    Extrema,
    PaletteCycler,
    PathDescription,
    Scale,
    compute_gridlines,
    compute_scale,
    find_extrema,
    initialize,
)
from .errors import (
    ChartConfigError,
    ChartStateError,
    DegenerateScaleError,
    EmptySeriesError,
    GraphrError,
    SeriesDataError,
)
from .settings import ChartSettings, GridlineCounts, Padding
from .surface import PngSurface, Surface, SvgSurface, WebPSurface, create_surface

__all__ = [
    "CanvasGeometry",
    "Chart",
    "ChartConfigError",
    "ChartSettings",
    "ChartStateError",
    "CoordinateTransformer",
    "DegenerateScaleError",
    "EmptySeriesError",
    "Extrema",
    "GraphrError",
    "GridlineCounts",
    "Padding",
    "PaletteCycler",
    "PathDescription",
    "PngSurface",
    "Scale",
    "SeriesDataError",
    "Surface",
    "SvgSurface",
    "WebPSurface",
    "compute_gridlines",
    "compute_scale",
    "create_surface",
    "find_extrema",
    "initialize",
]
