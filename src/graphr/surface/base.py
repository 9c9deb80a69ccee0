"""Base class for drawing surfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Literal

from ..chart.path import PathDescription

ShapeKind = Literal["rect", "path", "circle", "text"]

# Named dash patterns, in multiples of the stroke width
DASH_PATTERNS: dict[str, tuple[float, ...]] = {
    "": (),
    "-": (3, 1),
    ".": (1, 1),
    "-.": (3, 1, 1, 1),
    "-..": (3, 1, 1, 1, 1, 1),
    ". ": (1, 3),
    "- ": (4, 3),
    "--": (8, 3),
    "- .": (4, 3, 1, 3),
    "--.": (8, 3, 1, 3),
    "--..": (8, 3, 1, 3, 1, 3),
}

_DEFAULT_ATTRIBUTES: dict[ShapeKind, dict[str, Any]] = {
    "rect": {"fill": "none", "stroke": "#000", "stroke_width": 1},
    "path": {"fill": "none", "stroke": "#000", "stroke_width": 1},
    "circle": {"fill": "none", "stroke": "#000", "stroke_width": 1},
    "text": {"fill": "#000", "stroke": "none", "stroke_width": 0},
}


def resolve_dasharray(pattern: str | None, stroke_width: float) -> tuple[float, ...]:
    """
    Translate a named dash pattern into segment lengths in pixels.

    Raises:
        ValueError: If the pattern name is unknown
    """
    if not pattern:
        return ()
    if pattern not in DASH_PATTERNS:
        available = ", ".join(repr(name) for name in DASH_PATTERNS if name)
        raise ValueError(f"Unknown dash pattern {pattern!r}. Available: {available}")
    width = stroke_width or 1
    return tuple(length * width for length in DASH_PATTERNS[pattern])


@dataclass
class ShapeHandle:
    """A shape drawn on a surface, with settable presentation attributes."""

    kind: ShapeKind
    params: dict[str, Any]
    attributes: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.attributes = {**_DEFAULT_ATTRIBUTES[self.kind], **self.attributes}

    def attr(self, **attributes: Any) -> "ShapeHandle":
        """Set attributes such as ``fill``, ``stroke``, ``stroke_width`` or ``stroke_dasharray``."""
        self.attributes.update(attributes)
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)


class ShapeSet:
    """A group of shapes that can be moved in the draw order together."""

    def __init__(self, surface: "Surface", shapes: list[ShapeHandle] | None = None) -> None:
        self.surface = surface
        self.shapes: list[ShapeHandle] = list(shapes or [])

    def push(self, *shapes: ShapeHandle) -> "ShapeSet":
        self.shapes.extend(shapes)
        return self

    def to_front(self) -> "ShapeSet":
        """Raise every shape in the set above all other shapes, keeping their order."""
        self.surface.to_front(self.shapes)
        return self

    def __iter__(self) -> Iterator[ShapeHandle]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)


class Surface(ABC):
    """Abstract base class for drawing surfaces.

    Shapes are recorded in draw order and rendered by ``encode``.
    """

    def __init__(self, width: float, height: float) -> None:
        """
        Initialize an empty surface.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
        """
        self.width = width
        self.height = height
        self.shapes: list[ShapeHandle] = []

    @abstractmethod
    def encode(self) -> bytes:
        """
        Render all shapes in draw order.

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def rect(self, x: float, y: float, width: float, height: float, radius: float = 0) -> ShapeHandle:
        return self._add(
            ShapeHandle("rect", {"x": x, "y": y, "width": width, "height": height, "radius": radius})
        )

    def path(self, path: PathDescription) -> ShapeHandle:
        if path.is_empty():
            raise ValueError("Cannot draw an empty path")
        return self._add(ShapeHandle("path", {"path": path}))

    def circle(self, x: float, y: float, radius: float) -> ShapeHandle:
        return self._add(ShapeHandle("circle", {"x": x, "y": y, "radius": radius}))

    def text(self, x: float, y: float, text: str) -> ShapeHandle:
        return self._add(ShapeHandle("text", {"x": x, "y": y, "text": text}))

    def set(self, *shapes: ShapeHandle) -> ShapeSet:
        return ShapeSet(self, list(shapes))

    def to_front(self, shapes: list[ShapeHandle]) -> None:
        """Move the given shapes to the end of the draw order."""
        ids = {id(shape) for shape in shapes}
        remaining = [shape for shape in self.shapes if id(shape) not in ids]
        raised = [shape for shape in self.shapes if id(shape) in ids]
        self.shapes = remaining + raised

    def write(self, path: str | Path) -> Path:
        """
        Encode the surface and write it to a file.

        Args:
            path: Destination file path

        Returns:
            The written path
        """
        destination = Path(path)
        destination.write_bytes(self.encode())
        return destination

    def _add(self, shape: ShapeHandle) -> ShapeHandle:
        self.shapes.append(shape)
        return shape
