"""Path descriptions built while scanning a series."""

from dataclasses import dataclass, field
from typing import Iterator, Literal

from .extrema import Point
from .formatting import format_exact, format_number

PathCommandKind = Literal["M", "L", "R"]
BezierSegment = tuple[Point, Point, Point]


@dataclass
class PathCommand:
    """One drawing instruction.

    ``M`` and ``L`` carry a single point. ``R`` carries the knots of a smooth
    curve that continues from the previous point.
    """

    kind: PathCommandKind
    points: list[Point] = field(default_factory=list)


class PathDescription:
    """Incrementally built list of move-to, line-to and smooth-curve commands."""

    def __init__(self) -> None:
        self.commands: list[PathCommand] = []

    def move_to(self, x: float, y: float) -> "PathDescription":
        self.commands.append(PathCommand("M", [(x, y)]))
        return self

    def line_to(self, x: float, y: float) -> "PathDescription":
        self._require_start()
        self.commands.append(PathCommand("L", [(x, y)]))
        return self

    def smooth_to(self, x: float, y: float) -> "PathDescription":
        """Add a knot to the smooth curve, opening a new curve segment if needed."""
        self._require_start()
        last = self.commands[-1]
        if last.kind == "R":
            last.points.append((x, y))
        else:
            self.commands.append(PathCommand("R", [(x, y)]))
        return self

    def is_empty(self) -> bool:
        return not self.commands

    def points(self) -> list[Point]:
        """All points of the path in drawing order."""
        return [point for command in self.commands for point in command.points]

    def count(self, kind: PathCommandKind) -> int:
        """Number of commands of the given kind."""
        return sum(1 for command in self.commands if command.kind == kind)

    def __str__(self) -> str:
        """Render as a Raphael-style path string, e.g. ``M 40 440 R 50 430 60 420``."""
        parts: list[str] = []
        for command in self.commands:
            coords = " ".join(f"{format_exact(x)} {format_exact(y)}" for x, y in command.points)
            parts.append(f"{command.kind} {coords}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"PathDescription({str(self)!r})"

    def to_svg_data(self) -> str:
        """Render as native SVG path data, converting smooth knots into cubic Béziers."""
        parts: list[str] = []
        for command, current in self._iter_with_current_point():
            if command.kind in ("M", "L"):
                x, y = command.points[0]
                parts.append(f"{command.kind}{format_number(x)} {format_number(y)}")
                continue
            knots = [current, *command.points]
            if len(knots) == 2:
                x, y = knots[1]
                parts.append(f"L{format_number(x)} {format_number(y)}")
                continue
            for cp1, cp2, end in catmull_rom_to_bezier(knots):
                parts.append(
                    "C"
                    + " ".join(
                        f"{format_number(px)} {format_number(py)}" for px, py in (cp1, cp2, end)
                    )
                )
        return "".join(parts)

    def flatten(self, samples_per_segment: int = 16) -> list[list[Point]]:
        """Approximate the path as polylines, one per move-to."""
        polylines: list[list[Point]] = []
        for command, current in self._iter_with_current_point():
            if command.kind == "M":
                polylines.append([command.points[0]])
                continue
            if command.kind == "L":
                polylines[-1].append(command.points[0])
                continue
            knots = [current, *command.points]
            for cp1, cp2, end in catmull_rom_to_bezier(knots):
                start = polylines[-1][-1]
                for step in range(1, samples_per_segment + 1):
                    t = step / samples_per_segment
                    polylines[-1].append(_cubic_point(start, cp1, cp2, end, t))
        return polylines

    def _iter_with_current_point(self) -> Iterator[tuple[PathCommand, Point]]:
        """Yield each command with the pen position before it is applied."""
        current: Point = (0.0, 0.0)
        for command in self.commands:
            yield command, current
            current = command.points[-1]

    def _require_start(self) -> None:
        if not self.commands:
            raise ValueError("Path must start with a move_to")


def catmull_rom_to_bezier(points: list[Point]) -> list[BezierSegment]:
    """
    Convert a Catmull-Rom spline through ``points`` into cubic Bézier segments.

    End points are clamped, so the first and last segments use their own end
    as the missing neighbour.

    Returns:
        One ``(control1, control2, end)`` tuple per segment
    """
    segments: list[BezierSegment] = []
    n = len(points)
    for i in range(n - 1):
        p0 = points[max(i - 1, 0)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(i + 2, n - 1)]

        cp1 = (p1[0] + (p2[0] - p0[0]) / 6, p1[1] + (p2[1] - p0[1]) / 6)
        cp2 = (p2[0] - (p3[0] - p1[0]) / 6, p2[1] - (p3[1] - p1[1]) / 6)
        segments.append((cp1, cp2, p2))
    return segments


def _cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    mt = 1 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )
