"""The chart: one canvas, its scale and its palette."""

from pathlib import Path

from ..constants import CANVAS_COLOR
from ..errors import ChartStateError
from ..settings import ChartSettings
from ..surface import ShapeHandle, Surface, SurfaceContainer, create_surface
from .curve import CurvePlan, build_curve, draw_curve
from .extrema import Extrema, Series, find_extrema
from .geometry import CanvasGeometry
from .grid import Gridline, compute_gridlines, draw_grid
from .palette import PaletteCycler
from .scale import CoordinateTransformer, Scale, compute_scale


class Chart:
    """A line/scatter chart drawn onto one surface.

    The first ``plot`` call fixes extrema and scale from its series and draws the
    grid. Later calls reuse that scale until ``reset_scale`` is called. Each call
    draws one curve in the next palette color.

    A chart is not thread-safe; callers serialize access to one instance.
    """

    def __init__(self, settings: ChartSettings | None = None) -> None:
        self.settings = settings or ChartSettings()
        self.surface: Surface | None = None
        self.geometry: CanvasGeometry | None = None
        self.plot_box: ShapeHandle | None = None
        self.extrema: Extrema | None = None
        self.scale: Scale | None = None
        self.gridlines: list[Gridline] = []
        self.palette: PaletteCycler | None = None

    def initialize(
        self,
        container: SurfaceContainer,
        width: int | None = None,
        height: int | None = None,
    ) -> "Chart":
        """
        Create the canvas and draw the background and plot box.

        Args:
            container: Where to draw (see ``graphr.surface.create_surface``)
            width: Canvas width, defaults to ``settings.width``
            height: Canvas height, defaults to ``settings.height``

        Returns:
            This chart, for chaining

        Raises:
            ChartConfigError: If the settings cannot describe a drawable chart
        """
        width = self.settings.width if width is None else width
        height = self.settings.height if height is None else height
        self.settings.validate(width, height)

        self.geometry = CanvasGeometry(width=width, height=height, padding=self.settings.padding)
        self.surface = create_surface(container, width, height)
        self.extrema = None
        self.scale = None
        self.gridlines = []
        self.palette = PaletteCycler(self.settings.colors)

        self.surface.rect(0, 0, width, height, 0).attr(fill=CANVAS_COLOR, stroke_width=1)
        self.plot_box = self.surface.rect(*self.geometry.plot_box, 0).attr(
            fill=self.settings.background_color, stroke=CANVAS_COLOR
        )
        return self

    def plot(self, series: Series) -> "Chart":
        """
        Draw one series as a curve in the next palette color.

        Returns:
            This chart, for chaining

        Raises:
            ChartStateError: If the chart has not been initialized
            EmptySeriesError: If the scale is unset and the series is empty
            DegenerateScaleError: If the scale is unset and the series cannot fix one
        """
        surface, geometry = self._require_canvas()
        if self.scale is None or self.extrema is None:
            self._fix_scale(series, surface, geometry)

        color = self.palette.next()
        plan = self.build_curve(series)
        draw_curve(
            surface,
            plan,
            color,
            self.settings.background_color,
            self.settings.draw_points,
        )
        return self

    def build_curve(self, series: Series) -> CurvePlan:
        """Compute the curve for a series against the current scale without drawing it."""
        _surface, geometry = self._require_canvas()
        if self.scale is None or self.extrema is None:
            raise ChartStateError("No scale has been set; plot a series first")
        transformer = CoordinateTransformer(
            self.scale, self.extrema, geometry, self.settings.x_scale_mode
        )
        return build_curve(
            series,
            transformer,
            geometry,
            smooth=self.settings.smooth_curve,
            clip=self.settings.clip_to_plot,
        )

    def reset_scale(self) -> "Chart":
        """Forget extrema and scale so the next plot recomputes them and redraws the grid."""
        self.extrema = None
        self.scale = None
        return self

    def encode(self) -> bytes:
        surface, _geometry = self._require_canvas()
        return surface.encode()

    def save(self, path: str | Path) -> Path:
        surface, _geometry = self._require_canvas()
        return surface.write(path)

    def _fix_scale(self, series: Series, surface: Surface, geometry: CanvasGeometry) -> None:
        extrema = find_extrema(series)
        scale = compute_scale(extrema, geometry, self.settings.x_scale_mode)
        self.extrema, self.scale = extrema, scale
        self.gridlines = compute_gridlines(
            extrema, geometry, self.settings.gridlines, self.settings.tick_length
        )
        draw_grid(surface, self.gridlines)

    def _require_canvas(self) -> tuple[Surface, CanvasGeometry]:
        if self.surface is None or self.geometry is None or self.palette is None:
            raise ChartStateError("Chart has not been initialized; call initialize() first")
        return self.surface, self.geometry


def initialize(
    container: SurfaceContainer,
    width: int | None = None,
    height: int | None = None,
    settings: ChartSettings | None = None,
) -> Chart:
    """Create a chart and initialize its canvas in one call."""
    return Chart(settings).initialize(container, width, height)


__all__ = ["Chart", "initialize"]
