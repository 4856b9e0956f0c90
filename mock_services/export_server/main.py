from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pathlib import Path
import json
import os

app = FastAPI(title="Mock Export Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/export_data") if os.path.exists("/export_data") else Path(__file__).resolve().parents[2] / "data"

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/data/{name}.json")
def get_export(name: str):
    file = DATA_DIR / f"{name}.json"
    if not file.exists():
        raise HTTPException(status_code=404, detail="export not found")
    return JSONResponse(content=json.loads(file.read_text()))
