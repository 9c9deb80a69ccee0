"""Shared chart rendering used by CLI and web app entry points."""

from typing import Sequence

from .chart import Chart, Series
from .settings import ChartSettings
from .surface import SurfaceContainer


def build_chart(
    series_list: Sequence[Series],
    container: SurfaceContainer,
    *,
    settings: ChartSettings | None = None,
    width: int | None = None,
    height: int | None = None,
) -> Chart:
    """Initialize a chart and plot every series onto it in order."""
    chart = Chart(settings).initialize(container, width, height)
    for series in series_list:
        chart.plot(series)
    return chart


def render_chart(
    series_list: Sequence[Series],
    output_path: str,
    *,
    settings: ChartSettings | None = None,
    width: int | None = None,
    height: int | None = None,
) -> bytes:
    """Encode chart bytes for the given series; the output path extension picks the format."""
    chart = build_chart(
        series_list,
        output_path,
        settings=settings,
        width=width,
        height=height,
    )
    return chart.encode()
