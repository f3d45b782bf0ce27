from __future__ import annotations

import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path

# Allow execution as a top-level script by fixing imports.
# We extend sys.path so absolute imports like `backend.*` work consistently.
if __package__ in (None, ""):
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from backend.sonarlog.export import records_to_csv
from backend.sonarlog.fields import DEFAULT_FIELD, ColorField
from backend.sonarlog.geojson import build_feature_collection
from backend.sonarlog.models import TooShortError
from backend.sonarlog.parser import decode_log, variant_from_filename

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
FRONTEND_DIR = BASE_DIR / "frontend"
ALLOWED_SUFFIXES = {".sl2", ".sl3"}

app = FastAPI(title="Sonar Log Viewer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

if FRONTEND_DIR.exists():
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR, html=True), name="static")


def resolve_field(name: str) -> ColorField:
    try:
        return ColorField(name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Unknown field: {name}") from exc


def decode_upload(file: UploadFile):
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")
    suffix = Path(file.filename).suffix.lower()
    if suffix not in ALLOWED_SUFFIXES:
        raise HTTPException(status_code=400, detail="Expected a .sl2 or .sl3 file")
    variant = variant_from_filename(file.filename)
    data = file.file.read()
    try:
        header, records = decode_log(data, variant)
    except TooShortError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.info("Parsed %s: %d records", file.filename, len(records))
    return header, variant, records


@app.get("/")
async def root():
    index_path = FRONTEND_DIR / "index.html"
    if index_path.exists():
        return FileResponse(index_path)
    return {"message": "Sonar log backend ready"}


@app.get("/api/fields")
async def fields():
    return [{"name": f.value, "label": f.label} for f in ColorField]


@app.post("/api/upload")
def upload_file(file: UploadFile = File(...), field: str = DEFAULT_FIELD.value):
    color_field = resolve_field(field)
    header, variant, records = decode_upload(file)
    geojson = build_feature_collection(records, color_field)
    return JSONResponse(
        {
            "header": asdict(header),
            "variant": variant.value,
            "records": len(records),
            "field": color_field.value,
            "geojson": geojson,
        }
    )


@app.post("/api/export")
def export_csv(file: UploadFile = File(...)):
    _, _, records = decode_upload(file)
    if not records:
        raise HTTPException(status_code=400, detail="No data to export")
    return Response(
        content=records_to_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="sonar_data.csv"'},
    )


@app.get("/api/health")
async def health():
    return {"status": "ok"}


def run():
    import uvicorn

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = int(os.environ.get("BACKEND_PORT", "80"))
    host = os.environ.get("BACKEND_HOST", "0.0.0.0")
    uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    run()
