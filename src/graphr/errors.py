"""Exceptions raised by graphr."""


class GraphrError(Exception):
    """Base exception for all graphr errors."""
    pass


class EmptySeriesError(GraphrError, ValueError):
    """Raised when extrema are requested for a series without points."""
    pass


class DegenerateScaleError(GraphrError, ValueError):
    """Raised when a series would produce a zero-divisor or non-finite scale.

    This happens when ``x_max`` is 0 (or the x range is empty in range mode)
    or when every point shares the same y value.
    """
    pass


class ChartConfigError(GraphrError, ValueError):
    """Raised for settings that cannot describe a drawable chart."""
    pass


class ChartStateError(GraphrError, RuntimeError):
    """Raised when a chart is used before it has been initialized."""
    pass


class SeriesDataError(GraphrError, ValueError):
    """Raised when series data cannot be loaded or is malformed."""
    pass
