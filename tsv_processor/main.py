import hashlib
from contextlib import asynccontextmanager

from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import HealthResponse, OutputTsv, TransformReport, TransformResponse
from .pipeline import Mode, process_bytes
from .settings import LOG_LEVEL
from .setup_logging import setup_logging

ALLOWED_SUFFIXES = (".tsv", ".txt")

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    yield


app = FastAPI(
    title="tsv-processor",
    description="Normalize colon-valued TSV cells into rows and group them back",
    version="0.1.0",
    lifespan=lifespan,
)


async def _run(mode: Mode, file: UploadFile) -> TransformResponse:
    if not (file.filename or "").lower().endswith(ALLOWED_SUFFIXES):
        raise HTTPException(status_code=422, detail="Only .tsv or .txt files are supported")

    raw = await file.read()
    result, decoding = process_bytes(mode, raw)
    if not result.ok:
        raise HTTPException(status_code=422, detail=result.error.model_dump())

    return TransformResponse(
        output=OutputTsv(
            sha256=hashlib.sha256(result.output.encode("ascii")).hexdigest(),
            content=result.output,
            lines=result.lines_written,
        ),
        report=TransformReport(
            mode=mode.value,
            lines_read=result.lines_read,
            lines_written=result.lines_written,
            decoding=decoding,
        ),
    )

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/normalize", response_model=TransformResponse)
async def normalize_tsv(file: UploadFile = File(...)):
    return await _run(Mode.NORMALIZE, file)

@app.post("/group", response_model=TransformResponse)
async def group_tsv(file: UploadFile = File(...)):
    return await _run(Mode.GROUP, file)
