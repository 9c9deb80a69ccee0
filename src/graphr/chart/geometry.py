"""Canvas geometry: outer size, padding and the plot box inside it."""

from dataclasses import dataclass

from ..constants import PLOT_BOUNDS_TOLERANCE
from ..settings import Padding


@dataclass(frozen=True)
class CanvasGeometry:
    """Fixed dimensions of one canvas."""

    width: float
    height: float
    padding: Padding

    @property
    def inner_width(self) -> float:
        return self.width - (self.padding.left + self.padding.right)

    @property
    def inner_height(self) -> float:
        return self.height - (self.padding.top + self.padding.bottom)

    @property
    def plot_box(self) -> tuple[float, float, float, float]:
        """The plot area as ``(x, y, width, height)``."""
        return (self.padding.left, self.padding.top, self.inner_width, self.inner_height)

    def contains(self, x: float, y: float) -> bool:
        """Return True if a pixel position lies inside the plot box, boundaries included."""
        left = self.padding.left - PLOT_BOUNDS_TOLERANCE
        right = self.padding.left + self.inner_width + PLOT_BOUNDS_TOLERANCE
        top = self.padding.top - PLOT_BOUNDS_TOLERANCE
        bottom = self.padding.top + self.inner_height + PLOT_BOUNDS_TOLERANCE
        return left <= x <= right and top <= y <= bottom
