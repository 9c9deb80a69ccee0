"""Extrema discovery for a data series."""

from dataclasses import dataclass
from typing import Sequence

from ..errors import EmptySeriesError

Point = tuple[float, float]
Series = Sequence[Sequence[float]]


@dataclass(frozen=True)
class Extrema:
    """Minimum and maximum observed x and y values of a series."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x_range(self) -> float:
        return abs(self.x_max - self.x_min)

    @property
    def y_range(self) -> float:
        return abs(self.y_max - self.y_min)


def find_extrema(series: Series) -> Extrema:
    """
    Scan a series once and return its extrema.

    Each of the four fields is tracked on its own, starting from the first point.

    Raises:
        EmptySeriesError: If the series has no points
    """
    if len(series) == 0:
        raise EmptySeriesError("Cannot find extrema of an empty series")

    x_min = x_max = series[0][0]
    y_min = y_max = series[0][1]
    for point in series:
        x, y = point[0], point[1]
        if x > x_max:
            x_max = x
        if x < x_min:
            x_min = x
        if y > y_max:
            y_max = y
        if y < y_min:
            y_min = y

    return Extrema(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)
