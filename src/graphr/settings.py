"""Chart configuration with defaults applied at the call boundary."""

import dataclasses
import os
from dataclasses import dataclass, field
from typing import Literal, Mapping

from .constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_COLORS,
    DEFAULT_GRIDLINES_X,
    DEFAULT_GRIDLINES_Y,
    DEFAULT_HEIGHT,
    DEFAULT_PADDING,
    DEFAULT_TICK_LENGTH,
    DEFAULT_WIDTH,
    ENV_PREFIX,
)
from .errors import ChartConfigError

XScaleMode = Literal["max", "range"]
X_SCALE_MODES: tuple[str, ...] = ("max", "range")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Padding:
    """Space between the canvas edge and the plot box, per side."""

    top: float = DEFAULT_PADDING
    right: float = DEFAULT_PADDING
    bottom: float = DEFAULT_PADDING
    left: float = DEFAULT_PADDING

    @classmethod
    def uniform(cls, value: float) -> "Padding":
        return cls(top=value, right=value, bottom=value, left=value)


@dataclass(frozen=True)
class GridlineCounts:
    """Number of gridline intervals along each axis."""

    x: int = DEFAULT_GRIDLINES_X
    y: int = DEFAULT_GRIDLINES_Y


@dataclass(frozen=True)
class ChartSettings:
    """
    User configuration for a chart.

    Attributes:
        padding: Space around the plot box
        width: Canvas width in pixels
        height: Canvas height in pixels
        gridlines: Gridline intervals per axis
        tick_length: How far ticks extend past the plot box
        background_color: Fill of the plot box, also used for marker centers
        colors: Palette cycled through by successive plot calls
        draw_points: Draw a marker on every plotted point
        smooth_curve: Join points with a Catmull-Rom curve instead of lines
        clip_to_plot: Skip points that fall outside the plot box
        x_scale_mode: ``"max"`` divides the inner width by ``x_max``;
            ``"range"`` divides by ``x_max - x_min``
    """

    padding: Padding = field(default_factory=Padding)
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    gridlines: GridlineCounts = field(default_factory=GridlineCounts)
    tick_length: float = DEFAULT_TICK_LENGTH
    background_color: str = DEFAULT_BACKGROUND_COLOR
    colors: tuple[str, ...] = DEFAULT_COLORS
    draw_points: bool = True
    smooth_curve: bool = True
    clip_to_plot: bool = True
    x_scale_mode: XScaleMode = "max"

    def __post_init__(self) -> None:
        # Accept any sequence of colors but store an immutable tuple
        object.__setattr__(self, "colors", tuple(self.colors))

    def replace(self, **changes: object) -> "ChartSettings":
        """Return a copy of these settings with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def validate(self, width: int | None = None, height: int | None = None) -> None:
        """
        Check that these settings describe a drawable chart.

        Args:
            width: Canvas width to check instead of ``self.width``
            height: Canvas height to check instead of ``self.height``

        Raises:
            ChartConfigError: If any setting is out of range
        """
        width = self.width if width is None else width
        height = self.height if height is None else height

        if self.gridlines.x < 1 or self.gridlines.y < 1:
            raise ChartConfigError(
                f"Gridline counts must be at least 1 (got x={self.gridlines.x}, y={self.gridlines.y})"
            )
        if not self.colors:
            raise ChartConfigError("Color palette must contain at least one color")
        if self.x_scale_mode not in X_SCALE_MODES:
            available = ", ".join(X_SCALE_MODES)
            raise ChartConfigError(
                f"Unknown x scale mode '{self.x_scale_mode}'. Available: {available}"
            )
        if self.tick_length < 0:
            raise ChartConfigError("Tick length must not be negative")
        if width - (self.padding.left + self.padding.right) <= 0:
            raise ChartConfigError(
                f"Horizontal padding leaves no room to plot in a {width}px wide canvas"
            )
        if height - (self.padding.top + self.padding.bottom) <= 0:
            raise ChartConfigError(
                f"Vertical padding leaves no room to plot in a {height}px high canvas"
            )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        base: "ChartSettings | None" = None,
    ) -> "ChartSettings":
        """
        Overlay ``GRAPHR_*`` environment variables on top of ``base``.

        Args:
            environ: Mapping to read instead of ``os.environ``
            base: Settings to start from (defaults when omitted)

        Returns:
            New settings with any configured overrides applied
        """
        env = os.environ if environ is None else environ
        settings = base or cls()
        changes: dict[str, object] = {}

        width = _env_value(env, "WIDTH")
        if width is not None:
            changes["width"] = _parse_int("WIDTH", width)
        height = _env_value(env, "HEIGHT")
        if height is not None:
            changes["height"] = _parse_int("HEIGHT", height)

        grid_x = _env_value(env, "GRIDLINES_X")
        grid_y = _env_value(env, "GRIDLINES_Y")
        if grid_x is not None or grid_y is not None:
            changes["gridlines"] = GridlineCounts(
                x=settings.gridlines.x if grid_x is None else _parse_int("GRIDLINES_X", grid_x),
                y=settings.gridlines.y if grid_y is None else _parse_int("GRIDLINES_Y", grid_y),
            )

        background = _env_value(env, "BACKGROUND_COLOR")
        if background is not None:
            changes["background_color"] = background
        colors = _env_value(env, "COLORS")
        if colors is not None:
            palette = tuple(c.strip() for c in colors.split(",") if c.strip())
            if not palette:
                raise ChartConfigError(
                    f"{ENV_PREFIX}COLORS must list at least one color (got '{colors}')"
                )
            changes["colors"] = palette

        draw_points = _env_value(env, "DRAW_POINTS")
        if draw_points is not None:
            changes["draw_points"] = _parse_bool("DRAW_POINTS", draw_points)
        smooth_curve = _env_value(env, "SMOOTH_CURVE")
        if smooth_curve is not None:
            changes["smooth_curve"] = _parse_bool("SMOOTH_CURVE", smooth_curve)

        return settings.replace(**changes) if changes else settings


def _env_value(env: Mapping[str, str], name: str) -> str | None:
    value = env.get(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ChartConfigError(f"{ENV_PREFIX}{name} must be an integer (got '{value}')")


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ChartConfigError(f"{ENV_PREFIX}{name} must be a boolean (got '{value}')")
