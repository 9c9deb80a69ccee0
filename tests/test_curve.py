"""Tests for curve construction."""

import pytest

from graphr.chart import (
    CanvasGeometry,
    CoordinateTransformer,
    build_curve,
    compute_scale,
    draw_curve,
    find_extrema,
)
from graphr.constants import MARKER_INNER_RADIUS, MARKER_OUTER_RADIUS
from graphr.settings import Padding
from graphr.surface import SvgSurface

SERIES = [(0, 0), (1, 1), (2, 4)]


@pytest.fixture
def geometry() -> CanvasGeometry:
    """A 100x100 plot box with no padding."""
    return CanvasGeometry(width=100, height=100, padding=Padding.uniform(0))


@pytest.fixture
def transformer(geometry: CanvasGeometry) -> CoordinateTransformer:
    extrema = find_extrema(SERIES)
    return CoordinateTransformer(compute_scale(extrema, geometry), extrema, geometry)


def test_straight_curve_has_two_line_segments(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    plan = build_curve(SERIES, transformer, geometry, smooth=False, clip=True)

    assert plan.points == [(0, 100), (50, 75), (100, 0)]
    assert plan.path is not None
    assert [c.kind for c in plan.path.commands] == ["M", "L", "L"]
    assert plan.path.count("L") == 2
    assert plan.path.points() == plan.points


def test_smooth_curve_collects_knots(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    plan = build_curve(SERIES, transformer, geometry, smooth=True, clip=True)

    assert plan.path is not None
    assert [c.kind for c in plan.path.commands] == ["M", "R"]
    assert plan.path.commands[1].points == [(50, 75), (100, 0)]


def test_points_outside_plot_are_skipped_when_clipping(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    """The first accepted point starts the path even if earlier points were skipped."""
    series = [(-1, 0), (3, 2), (1, 1), (2, 4), (1, 9)]

    plan = build_curve(series, transformer, geometry, smooth=False, clip=True)

    assert plan.points == [(50, 75), (100, 0)]
    assert plan.path is not None
    assert [c.kind for c in plan.path.commands] == ["M", "L"]


def test_no_qualifying_points_yields_no_path(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    plan = build_curve([(5, 5), (6, 6)], transformer, geometry, smooth=True, clip=True)

    assert plan.is_empty
    assert plan.points == []


def test_without_clipping_every_point_is_accepted(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    plan = build_curve([(5, 5), (6, 6)], transformer, geometry, smooth=False, clip=False)

    assert plan.points == [(250, -25), (300, -50)]


def test_draw_curve_draws_path_before_markers(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    surface = SvgSurface(100, 100)
    plan = build_curve(SERIES, transformer, geometry, smooth=False, clip=True)

    shapes = draw_curve(surface, plan, "#ee7951", "#fafafa", draw_points=True)

    assert [s.kind for s in surface.shapes] == ["path"] + ["circle"] * 6
    assert shapes == surface.shapes
    path = surface.shapes[0]
    assert path.get("stroke") == "#ee7951"
    assert path.get("stroke_width") == 2


def test_draw_curve_markers_are_donuts(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    surface = SvgSurface(100, 100)
    plan = build_curve(SERIES, transformer, geometry, smooth=False, clip=True)

    draw_curve(surface, plan, "#ee7951", "#fafafa", draw_points=True)

    outer, inner = surface.shapes[1], surface.shapes[2]
    assert outer.params == {"x": 0, "y": 100, "radius": MARKER_OUTER_RADIUS}
    assert outer.get("fill") == "#ee7951"
    assert outer.get("stroke") == "#fafafa"
    assert inner.params == {"x": 0, "y": 100, "radius": MARKER_INNER_RADIUS}
    assert inner.get("fill") == "#fafafa"
    assert inner.get("stroke") == "none"


def test_draw_curve_without_points_draws_only_the_path(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    surface = SvgSurface(100, 100)
    plan = build_curve(SERIES, transformer, geometry, smooth=True, clip=True)

    draw_curve(surface, plan, "#88bbc8", "#fafafa", draw_points=False)

    assert [s.kind for s in surface.shapes] == ["path"]


def test_draw_curve_with_empty_plan_submits_nothing(
    geometry: CanvasGeometry, transformer: CoordinateTransformer
) -> None:
    surface = SvgSurface(100, 100)
    plan = build_curve([(5, 5)], transformer, geometry, smooth=False, clip=True)

    shapes = draw_curve(surface, plan, "#88bbc8", "#fafafa", draw_points=True)

    assert shapes == []
    assert surface.shapes == []
