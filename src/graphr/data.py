"""Loading and validating series data."""

import json
import math
from pathlib import Path
from typing import Any

from .chart.extrema import Point
from .errors import SeriesDataError

SeriesList = list[list[Point]]


def load_series_file(file_path: str | Path) -> SeriesList:
    """
    Load one or more series from a JSON file.

    Raises:
        SeriesDataError: If the file is missing, not JSON, or malformed
    """
    try:
        with open(file_path, "r") as f:
            payload = json.load(f)
    except FileNotFoundError:
        raise SeriesDataError(f"File '{file_path}' not found")
    except json.JSONDecodeError as e:
        raise SeriesDataError(f"Invalid JSON in '{file_path}': {e}")
    return parse_series_payload(payload)


def parse_series_payload(payload: Any) -> SeriesList:
    """
    Normalize a parsed JSON payload into a list of series.

    Accepted shapes:
      - a single series: ``[[x, y], ...]``
      - several series: ``[[[x, y], ...], ...]``
      - either of the above under a ``"series"`` key

    Raises:
        SeriesDataError: If the payload does not match any accepted shape
    """
    if isinstance(payload, dict):
        if "series" not in payload:
            raise SeriesDataError("Expected a 'series' key in the JSON object")
        payload = payload["series"]

    if not isinstance(payload, list) or not payload:
        raise SeriesDataError("Expected a non-empty list of points or of series")

    if _is_point(payload[0]):
        return [_parse_series(payload, 0)]
    return [_parse_series(series, index) for index, series in enumerate(payload)]


def _parse_series(raw: Any, index: int) -> list[Point]:
    if not isinstance(raw, list):
        raise SeriesDataError(f"Series {index} must be a list of [x, y] pairs")
    points: list[Point] = []
    for position, point in enumerate(raw):
        if not _is_point(point):
            raise SeriesDataError(
                f"Series {index}, point {position}: expected [x, y] numbers, got {point!r}"
            )
        points.append((float(point[0]), float(point[1])))
    return points


def _is_point(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) == 2 and all(map(_is_number, value))


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        # ints beyond the float range
        return False
