"""FastAPI web app for graphr chart rendering."""

from typing import Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.responses import Response

from graphr.constants import MAX_CANVAS_SIZE
from graphr.data import parse_series_payload
from graphr.errors import GraphrError
from graphr.render_pipeline import render_chart
from graphr.settings import ChartSettings
from graphr.surface import (
    DEFAULT_SURFACE_FORMAT,
    media_type_for_format,
    output_path_for_format,
    supported_formats,
)

load_dotenv()

app = FastAPI(title="graphr")


def generate_output(
    payload: Any,
    output_path: str,
    width: int | None,
    height: int | None,
) -> bytes:
    """Render a chart for a JSON series payload."""
    series_list = parse_series_payload(payload)
    settings = ChartSettings.from_env()
    return render_chart(
        series_list,
        output_path,
        settings=settings,
        width=width,
        height=height,
    )


@app.get("/api/formats")
async def formats():
    """List the supported output formats."""
    return {"formats": list(supported_formats()), "default": DEFAULT_SURFACE_FORMAT}


@app.post("/api/render")
async def render(
    payload: Any = Body(..., description="One series, a list of series, or {'series': [...]}"),
    output_format: str = Query(
        DEFAULT_SURFACE_FORMAT, alias="format", description="Output format: svg, png, or webp"
    ),
    width: int | None = Query(None, gt=0, le=MAX_CANVAS_SIZE, description="Canvas width in pixels"),
    height: int | None = Query(None, gt=0, le=MAX_CANVAS_SIZE, description="Canvas height in pixels"),
):
    """Render and return a chart."""
    try:
        output_path = output_path_for_format(output_format)
        media_type = media_type_for_format(output_format)
        encoded = generate_output(payload, output_path, width, height)
        return Response(
            content=encoded,
            media_type=media_type,
            headers={
                "Content-Disposition": f"inline; filename={output_path}",
            },
        )
    except (GraphrError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to render chart: {e}")
