"""Tests for the graphr CLI."""

import json

import pytest
from typer.testing import CliRunner

from graphr.cli import app

runner = CliRunner()


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([[[0, 0], [1, 1], [2, 4]], [[0, 4], [2, 0]]]))
    return path


def test_renders_svg(tmp_path, data_file):
    """Should write an SVG chart to the requested output path."""
    output = tmp_path / "chart.svg"

    result = runner.invoke(app, [str(data_file), "--output", str(output), "--quiet"])

    assert result.exit_code == 0, result.output
    assert output.read_bytes().startswith(b"<?xml")


def test_default_output_is_next_to_input(data_file):
    """Without --output the chart is written as <input>.svg."""
    result = runner.invoke(app, [str(data_file), "--quiet"])

    assert result.exit_code == 0, result.output
    assert data_file.with_suffix(".svg").exists()


def test_renders_png_with_options(tmp_path, data_file):
    output = tmp_path / "chart.png"

    result = runner.invoke(
        app,
        [
            str(data_file),
            "-o", str(output),
            "--straight",
            "--no-points",
            "--width", "320",
            "--height", "240",
            "--x-gridlines", "4",
            "--quiet",
        ],
    )

    assert result.exit_code == 0, result.output
    assert output.read_bytes().startswith(b"\x89PNG")


def test_prints_series_summary(tmp_path, data_file):
    result = runner.invoke(app, [str(data_file), "-o", str(tmp_path / "chart.svg")])

    assert result.exit_code == 0, result.output
    assert "Series" in result.output
    assert "saved to" in result.output


def test_missing_input_argument():
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Input file is required" in result.output


def test_unsupported_output_format(tmp_path, data_file):
    result = runner.invoke(app, [str(data_file), "-o", str(tmp_path / "chart.gif")])

    assert result.exit_code == 1
    assert "Unsupported output format" in result.output


def test_missing_input_file(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "nope.json"), "--quiet"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_degenerate_data_reports_error(tmp_path):
    path = tmp_path / "flat.json"
    path.write_text(json.dumps([[0, 3], [5, 3]]))

    result = runner.invoke(app, [str(path), "-o", str(tmp_path / "flat.svg"), "--quiet"])

    assert result.exit_code == 1
    assert "Failed to generate chart" in result.output


def test_empty_palette_from_environment(tmp_path, data_file, monkeypatch):
    monkeypatch.setenv("GRAPHR_COLORS", ",")

    result = runner.invoke(app, [str(data_file), "-o", str(tmp_path / "chart.svg")])

    assert result.exit_code == 1
    assert "Invalid environment configuration" in result.output


def test_invalid_canvas_size_reported_before_rendering(tmp_path, data_file):
    result = runner.invoke(app, [str(data_file), "-o", str(tmp_path / "chart.svg"), "--width", "50"])

    assert result.exit_code == 1
    assert "Invalid chart settings" in result.output
