"""CLI interface for graphr."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .console_printer import SeriesConsolePrinter
from .data import SeriesList, load_series_file
from .errors import GraphrError, SeriesDataError
from .render_pipeline import render_chart
from .settings import X_SCALE_MODES, ChartSettings, GridlineCounts
from .surface import DEFAULT_SURFACE_FORMAT, resolve_surface_class, supported_formats

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_FORMATS_TEXT = ", ".join(supported_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    input_file: str = typer.Argument(None, help="JSON file with one or more series of [x, y] pairs"),
    out: str = typer.Option(
        None,
        "--output",
        "-out",
        "-o",
        help=f"Chart output file ({SUPPORTED_FORMATS_TEXT}); defaults to <input>.svg",
    ),
    width: int | None = typer.Option(None, "--width", help="Canvas width in pixels"),
    height: int | None = typer.Option(None, "--height", help="Canvas height in pixels"),
    smooth: bool | None = typer.Option(
        None,
        "--smooth/--straight",
        help="Join points with a smooth curve or with straight lines",
    ),
    points: bool | None = typer.Option(
        None,
        "--points/--no-points",
        help="Draw a marker on every data point",
    ),
    clip: bool = typer.Option(
        True,
        "--clip/--no-clip",
        help="Skip points that fall outside the plot area",
    ),
    x_gridlines: int | None = typer.Option(None, "--x-gridlines", help="Number of vertical gridline intervals"),
    y_gridlines: int | None = typer.Option(None, "--y-gridlines", help="Number of horizontal gridline intervals"),
    x_scale_mode: str = typer.Option(
        "max",
        "--x-scale-mode",
        help=f"Divisor for the x scale ({', '.join(X_SCALE_MODES)})",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the series summary"),
) -> None:
    """
    Draw a line chart from series data stored in a JSON file.

    The file holds a single series ([[x, y], ...]), a list of series, or an
    object with a "series" key. Each series is drawn in the next palette color.

    Examples:
      # Smooth curves with markers, written next to the input
      graphr data.json

      # Straight lines without markers as PNG
      graphr data.json --straight --no-points -o chart.png
    """
    try:
        if not input_file:
            raise CLIError("Input file is required")

        output_path = out or str(Path(input_file).with_suffix(f".{DEFAULT_SURFACE_FORMAT}"))
        _validate_output_path(output_path)

        settings = _build_settings(
            smooth=smooth,
            points=points,
            clip=clip,
            x_gridlines=x_gridlines,
            y_gridlines=y_gridlines,
            x_scale_mode=x_scale_mode,
        )
        try:
            settings.validate(width, height)
        except GraphrError as e:
            raise CLIError(f"Invalid chart settings: {e}")
        series_list = _load_data_from_file(input_file)

        if not quiet:
            printer = SeriesConsolePrinter(console)
            printer.display_series(series_list, settings)
            printer.display_settings(
                settings,
                settings.width if width is None else width,
                settings.height if height is None else height,
            )

        _generate_output(series_list, output_path, settings, width, height)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _build_settings(
    *,
    smooth: bool | None,
    points: bool | None,
    clip: bool,
    x_gridlines: int | None,
    y_gridlines: int | None,
    x_scale_mode: str,
) -> ChartSettings:
    """Start from environment settings and apply command line overrides."""
    try:
        settings = ChartSettings.from_env()
    except GraphrError as e:
        raise CLIError(f"Invalid environment configuration: {e}")

    changes: dict[str, object] = {"clip_to_plot": clip, "x_scale_mode": x_scale_mode}
    if smooth is not None:
        changes["smooth_curve"] = smooth
    if points is not None:
        changes["draw_points"] = points
    if x_gridlines is not None or y_gridlines is not None:
        changes["gridlines"] = GridlineCounts(
            x=settings.gridlines.x if x_gridlines is None else x_gridlines,
            y=settings.gridlines.y if y_gridlines is None else y_gridlines,
        )
    return settings.replace(**changes)


def _validate_output_path(output_path: str) -> None:
    try:
        resolve_surface_class(output_path)
    except ValueError as e:
        raise CLIError(str(e))


def _load_data_from_file(file_path: str) -> SeriesList:
    """Load series data from a JSON file."""
    console.print(f"[bold blue]Loading data from {file_path}...[/bold blue]")
    try:
        return load_series_file(file_path)
    except SeriesDataError as e:
        raise CLIError(str(e))


def _generate_output(
    series_list: SeriesList,
    output_path: str,
    settings: ChartSettings,
    width: int | None,
    height: int | None,
) -> None:
    """Render the chart in the format given by the output path and write it."""
    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Generating {ext} chart...[/bold blue]")

    try:
        encoded = render_chart(
            series_list,
            output_path,
            settings=settings,
            width=width,
            height=height,
        )
    except GraphrError as e:
        raise CLIError(f"Failed to generate chart: {e}")

    try:
        with open(output_path, "wb") as f:
            f.write(encoded)
    except IOError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
