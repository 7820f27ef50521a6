"""FastAPI backend for Baluster Studio.
Runs the baluster calculator server-side and serves results, previews and
exports to the single-page frontend.
Supports both Flat Rail and Triangle Stair modes.
"""
import os
import traceback
from typing import Literal
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response, HTMLResponse, JSONResponse
from pydantic import BaseModel, ConfigDict
from baluster_calculator import calculate, DEFAULT_CONFIG
from schedule_export import generate_csv
from layout_dxf import build_layout_dxf, dxf_to_string
from preview_svg import render_preview_svg

app = FastAPI()

WEB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "web")


class BalusterConfig(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    mode: Literal["flat", "triangle"] = DEFAULT_CONFIG["mode"]
    rail_length: float = DEFAULT_CONFIG["rail_length"]
    baluster_width: float = DEFAULT_CONFIG["baluster_width"]
    spacing: float = DEFAULT_CONFIG["spacing"]
    triangle_base: float = DEFAULT_CONFIG["triangle_base"]
    triangle_height: float = DEFAULT_CONFIG["triangle_height"]
    # If > 0 it overrides triangle_height
    triangle_angle_deg: float = DEFAULT_CONFIG["triangle_angle_deg"]


def _run(config: BalusterConfig):
    config_dict = config.model_dump()
    return config_dict, calculate(config_dict)


@app.get("/", response_class=HTMLResponse)
async def read_index():
    with open(os.path.join(WEB_DIR, "index.html"), "r", encoding="utf-8") as f:
        return f.read()


@app.get("/defaults")
async def get_defaults():
    return DEFAULT_CONFIG


@app.post("/calculate")
async def calculate_layout(config: BalusterConfig):
    try:
        _, result = _run(config)
        print(f"[API] {result['mode']}: {result['layout']['count']} balusters")
        return JSONResponse(result)
    except Exception as e:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/preview.svg")
async def get_preview_svg(config: BalusterConfig):
    """Scaled schematic of the current layout, as drawn in the browser."""
    try:
        _, result = _run(config)
        return Response(content=render_preview_svg(result), media_type="image/svg+xml")
    except Exception as e:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/export/dxf")
async def export_dxf_file(config: BalusterConfig):
    """Generates a true-size DXF of the rail or stringer with every baluster outlined and numbered."""
    try:
        config_dict, result = _run(config)
        doc = build_layout_dxf(result, config_dict)
        return Response(
            content=dxf_to_string(doc),
            media_type="application/dxf",
            headers={"Content-Disposition": f"attachment; filename=balusters_{config.mode}.dxf"}
        )
    except Exception as e:
        print(f"[API] DXF Export Error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/export/csv")
async def export_csv_file(config: BalusterConfig):
    """Cut schedule: offset (and rise, for stairs) of every baluster."""
    try:
        _, result = _run(config)
        return Response(
            content=generate_csv(result),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename=balusters_{config.mode}.csv"}
        )
    except Exception as e:
        print(f"[API] CSV Export Error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
