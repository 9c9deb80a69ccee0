"""Shared helpers for SVG output encoding."""

from xml.sax.saxutils import escape, quoteattr

from ..chart.formatting import format_number


def _short_hex(color: str) -> str:
    lower = color.lower()
    if len(lower) == 7 and lower[1] == lower[2] and lower[3] == lower[4] and lower[5] == lower[6]:
        return f"#{lower[1]}{lower[3]}{lower[5]}"
    return lower


def _svg_paint(color: str | None) -> str:
    if color is None or color == "none":
        return "none"
    if color.startswith("#"):
        return _short_hex(color)
    return color


def _svg_attrs(attributes: dict[str, object]) -> str:
    parts = []
    for name, value in attributes.items():
        if value is None:
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            text = format_number(value)
        else:
            text = str(value)
        parts.append(f"{name}={quoteattr(text)}")
    return " ".join(parts)


def _svg_text(value: str) -> str:
    return escape(value)
