"""FastAPI application exposing the NEM12 conversion endpoint."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse

from . import detect, exceptions

logger = logging.getLogger(__name__)

app = FastAPI(title="nem12convert API", version="0.1.0")


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/healthz", tags=["health"])
async def healthcheck() -> dict[str, str]:
    return {
        "status": "ok",
        "adapters": ",".join(adapter.name for adapter in detect.ADAPTERS),
    }


@app.post("/convert-to-nem12", tags=["convert"])
async def convert_to_nem12(datafile: Optional[UploadFile] = File(None)):
    if datafile is None:
        return _error("No file uploaded.")

    content = await datafile.read()
    logger.info("Converting upload %s (%d bytes)", datafile.filename, len(content))
    try:
        nem12 = detect.detect_adapter_and_convert(content)
    except exceptions.Nem12Error as exc:
        logger.warning("Rejected upload %s: %s", datafile.filename, exc)
        return _error(str(exc))
    return PlainTextResponse(str(nem12))
