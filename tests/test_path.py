"""Tests for path descriptions and number formatting."""

import pytest

from graphr.chart import (
    PathDescription,
    catmull_rom_to_bezier,
    format_exact,
    format_label,
    format_number,
)


def test_format_number_drops_trailing_zeros():
    assert format_number(40.0) == "40"
    assert format_number(0.5) == "0.5"
    assert format_number(1 / 3) == "0.333333"
    assert format_number(-2.25) == "-2.25"
    assert format_number(7) == "7"


def test_format_number_never_emits_negative_zero():
    assert format_number(-0.0) == "0"
    assert format_number(-1e-7) == "0"


def test_format_label_uses_two_decimals():
    assert format_label(0) == "0.00"
    assert format_label(-1.5) == "-1.50"
    assert format_label(1234.5678) == "1234.57"


def test_straight_path_string():
    path = PathDescription().move_to(0, 100).line_to(50, 75).line_to(100, 0)

    assert str(path) == "M 0 100 L 50 75 L 100 0"
    assert path.count("L") == 2
    assert path.points() == [(0, 100), (50, 75), (100, 0)]


def test_smooth_knots_collect_into_one_curve_command():
    path = PathDescription().move_to(0, 0).smooth_to(10, 10).smooth_to(20, 0)

    assert str(path) == "M 0 0 R 10 10 20 0"
    assert path.count("R") == 1
    assert len(path.commands) == 2


def test_path_must_start_with_move_to():
    with pytest.raises(ValueError, match="move_to"):
        PathDescription().line_to(1, 1)
    with pytest.raises(ValueError, match="move_to"):
        PathDescription().smooth_to(1, 1)


def test_new_path_is_empty():
    path = PathDescription()

    assert path.is_empty()
    assert str(path) == ""


def test_svg_data_for_straight_path():
    path = PathDescription().move_to(40, 440.5).line_to(600, 40)

    assert path.to_svg_data() == "M40 440.5L600 40"


def test_svg_data_converts_smooth_knots_to_cubic_beziers():
    """Three knots produce two Bézier segments with clamped end tangents."""
    path = PathDescription().move_to(0, 0).smooth_to(10, 10).smooth_to(20, 0)

    assert path.to_svg_data() == (
        "M0 0"
        "C1.666667 1.666667 6.666667 10 10 10"
        "C13.333333 10 18.333333 1.666667 20 0"
    )


def test_svg_data_single_knot_is_a_line():
    path = PathDescription().move_to(0, 0).smooth_to(10, 10)

    assert path.to_svg_data() == "M0 0L10 10"


def test_catmull_rom_segments_pass_through_every_knot():
    knots = [(0.0, 0.0), (10.0, 5.0), (20.0, -5.0), (30.0, 0.0)]

    segments = catmull_rom_to_bezier(knots)

    assert len(segments) == 3
    assert [end for _cp1, _cp2, end in segments] == knots[1:]


def test_flatten_straight_path_keeps_vertices():
    path = PathDescription().move_to(0, 100).line_to(50, 75).line_to(100, 0)

    assert path.flatten() == [[(0, 100), (50, 75), (100, 0)]]


def test_flatten_smooth_path_samples_each_segment():
    path = PathDescription().move_to(0, 0).smooth_to(10, 10).smooth_to(20, 0)

    polylines = path.flatten(samples_per_segment=4)

    assert len(polylines) == 1
    assert len(polylines[0]) == 1 + 2 * 4
    assert polylines[0][0] == (0, 0)
    assert polylines[0][4] == pytest.approx((10, 10))
    assert polylines[0][-1] == (20, 0)


def test_flatten_splits_polylines_at_each_move():
    path = PathDescription().move_to(0, 0).line_to(1, 1).move_to(5, 5).line_to(6, 6)

    assert path.flatten() == [[(0, 0), (1, 1)], [(5, 5), (6, 6)]]


def test_format_exact_keeps_full_precision():
    assert format_exact(40.0) == "40"
    assert format_exact(-0.0) == "0"
    assert format_exact(7) == "7"
    assert format_exact(1 / 3) == "0.3333333333333333"
    assert format_exact(0.1 + 0.2) == "0.30000000000000004"


def test_path_string_keeps_full_precision_while_svg_data_is_compact():
    path = PathDescription().move_to(0, 1 / 3).line_to(2 / 3, 10)

    assert str(path) == "M 0 0.3333333333333333 L 0.6666666666666666 10"
    assert path.to_svg_data() == "M0 0.333333L0.666667 10"
