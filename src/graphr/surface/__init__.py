"""Drawing surfaces for different output formats."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from .base import DASH_PATTERNS, ShapeHandle, ShapeSet, Surface, resolve_dasharray
from .raster_surface import PillowSurface, PngSurface, WebPSurface
from .svg_surface import SvgSurface

SurfaceFactory = Callable[[float, float], Surface]
SurfaceContainer = Union[str, Path, SurfaceFactory]


@dataclass(frozen=True)
class SurfaceFormatSpec:
    extension: str
    media_type: str
    surface_class: type[Surface]


_SURFACE_FORMATS: dict[str, SurfaceFormatSpec] = {
    "svg": SurfaceFormatSpec(
        extension=".svg",
        media_type="image/svg+xml",
        surface_class=SvgSurface,
    ),
    "png": SurfaceFormatSpec(
        extension=".png",
        media_type="image/png",
        surface_class=PngSurface,
    ),
    "webp": SurfaceFormatSpec(
        extension=".webp",
        media_type="image/webp",
        surface_class=WebPSurface,
    ),
}

DEFAULT_SURFACE_FORMAT = "svg"


def create_surface(container: SurfaceContainer, width: float, height: float) -> Surface:
    """
    Create a drawing surface.

    Args:
        container: A format name (``"svg"``), an output path whose extension
            names the format, or a callable ``(width, height) -> Surface``
        width: Canvas width in pixels
        height: Canvas height in pixels

    Returns:
        A new, empty Surface

    Raises:
        ValueError: If the format is not supported
    """
    if callable(container):
        return container(width, height)
    text = str(container)
    if text.lower() in _SURFACE_FORMATS:
        spec = _surface_spec_from_format(text)
    else:
        spec = _surface_spec_from_extension(Path(text).suffix.lower())
    return spec.surface_class(width, height)


def resolve_surface_class(file_path: str | Path) -> type[Surface]:
    """
    Resolve the surface class based on file extension.

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    return _surface_spec_from_extension(ext).surface_class


def supported_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_SURFACE_FORMATS.keys())


def media_type_for_format(output_format: str) -> str:
    """Resolve media type for a supported output format."""
    spec = _surface_spec_from_format(output_format)
    return spec.media_type


def output_path_for_format(output_format: str, base_name: str = "chart") -> str:
    """Build a synthetic output path from an output format name."""
    spec = _surface_spec_from_format(output_format)
    return f"{base_name}{spec.extension}"


def _surface_spec_from_extension(ext: str) -> SurfaceFormatSpec:
    output_format = ext.removeprefix(".")
    spec = _SURFACE_FORMATS.get(output_format)
    if spec is not None:
        return spec
    supported = ", ".join(spec.extension for spec in _SURFACE_FORMATS.values())
    raise ValueError(f"Unsupported output format: {ext or '(none)'}. Supported formats: {supported}")


def _surface_spec_from_format(output_format: str) -> SurfaceFormatSpec:
    spec = _SURFACE_FORMATS.get(output_format.lower())
    if spec is not None:
        return spec
    supported = ", ".join(supported_formats())
    raise ValueError(f"Invalid format. Choose from: {supported}")


__all__ = [
    "DASH_PATTERNS",
    "DEFAULT_SURFACE_FORMAT",
    "PillowSurface",
    "PngSurface",
    "ShapeHandle",
    "ShapeSet",
    "Surface",
    "SurfaceContainer",
    "SurfaceFactory",
    "SurfaceFormatSpec",
    "SvgSurface",
    "WebPSurface",
    "create_surface",
    "media_type_for_format",
    "output_path_for_format",
    "resolve_dasharray",
    "resolve_surface_class",
    "supported_formats",
]
