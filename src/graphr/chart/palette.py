"""Round-robin color assignment for plotted series."""

from typing import Sequence


class PaletteCycler:
    """Hands out palette colors in order, wrapping around at the end."""

    def __init__(self, colors: Sequence[str]) -> None:
        if not colors:
            raise ValueError("Palette must contain at least one color")
        self.colors = tuple(colors)
        self.index = 0

    def next(self) -> str:
        """Return the color at the cursor and advance it."""
        if self.index == len(self.colors):
            self.index = 0
        color = self.colors[self.index]
        self.index += 1
        return color

    def reset(self) -> None:
        self.index = 0
