"""Rich console summaries of the data being charted."""

from typing import Sequence

from rich.color import Color, ColorParseError
from rich.console import Console
from rich.table import Table

from .chart import Series, find_extrema, format_label
from .errors import EmptySeriesError
from .settings import ChartSettings


class SeriesConsolePrinter:
    """Prints series statistics and chart settings to the console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def display_series(self, series_list: Sequence[Series], settings: ChartSettings) -> None:
        """Show one row per series with its extrema and assigned color."""
        table = Table(title="Series", title_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Points", justify="right")
        table.add_column("x min", justify="right")
        table.add_column("x max", justify="right")
        table.add_column("y min", justify="right")
        table.add_column("y max", justify="right")
        table.add_column("Color")

        colors = settings.colors
        for index, series in enumerate(series_list):
            color = colors[index % len(colors)]
            swatch = _swatch(color)
            try:
                extrema = find_extrema(series)
            except EmptySeriesError:
                table.add_row(str(index), "0", "-", "-", "-", "-", swatch)
                continue
            table.add_row(
                str(index),
                str(len(series)),
                format_label(extrema.x_min),
                format_label(extrema.x_max),
                format_label(extrema.y_min),
                format_label(extrema.y_max),
                swatch,
            )
        self.console.print(table)

    def display_settings(self, settings: ChartSettings, width: int, height: int) -> None:
        """Show the canvas size and drawing options in one line."""
        curve = "smooth" if settings.smooth_curve else "straight"
        points = "with points" if settings.draw_points else "without points"
        self.console.print(
            f"[dim]Canvas {width}x{height}, {curve} curves {points}, "
            f"gridlines {settings.gridlines.x}x{settings.gridlines.y}, "
            f"x scale from {settings.x_scale_mode}[/dim]"
        )


def _swatch(color: str) -> str:
    """A colored square followed by the color name, or just the name if rich cannot parse it."""
    try:
        Color.parse(color)
    except ColorParseError:
        return color
    return f"[{color}]■[/] {color}"
