"""Number formatting shared by path strings, SVG output and tick labels."""

from functools import lru_cache

from ..constants import LABEL_DECIMALS


@lru_cache(maxsize=8192)
def format_number(value: float) -> str:
    """Format a coordinate compactly: integers without decimals, others to 6 places."""
    if isinstance(value, int):
        return str(value)
    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text or "0"


def format_exact(value: float) -> str:
    """Format a coordinate at full precision, dropping the fraction of whole numbers."""
    if isinstance(value, int) or float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_label(value: float, decimals: int = LABEL_DECIMALS) -> str:
    """Format a tick label with a fixed number of decimals."""
    return f"{value:.{decimals}f}"
