# backend/pdfsearch/api/routes.py
import asyncio
import logging
import re
import shutil
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from pdfsearch.api.models import ErrorResponse, QueryRequest, QueryResponse, UploadResponse
from pdfsearch.core.chroma_store import ChromaStore
from pdfsearch.core.config import settings
from pdfsearch.core.embeddings import EmbeddingModel
from pdfsearch.core.llm import OllamaLLM
from pdfsearch.core.rag import RAGPipeline
from pdfsearch.utils import run_with_deadline, timestamped_filename

logger = logging.getLogger(__name__)

router = APIRouter()

COLLECTION_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{1,61}[A-Za-z0-9]$")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    504: {"model": ErrorResponse},
}


# Shared pipeline, built on first request (singleton style)
@lru_cache(maxsize=1)
def get_pipeline() -> RAGPipeline:
    return RAGPipeline(EmbeddingModel(settings.EMBEDDING_MODEL), ChromaStore(), OllamaLLM(settings.LLM_MODEL))


def save_upload(src, path):
    with open(path, "wb") as out:
        shutil.copyfileobj(src, out)


def resolve_collection(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        return settings.DEFAULT_COLLECTION
    if not COLLECTION_NAME_RE.match(name) or ".." in name:
        raise HTTPException(
            status_code=400,
            detail="collection must be 3-63 characters of [A-Za-z0-9._-], starting and ending with a letter or digit",
        )
    return name


# ---------- Endpoints ----------
@router.post("/upload", response_model=UploadResponse, responses=ERROR_RESPONSES)
async def upload(
    pdfFile: Optional[UploadFile] = File(None),
    collection: Optional[str] = Form(None),
    rag: RAGPipeline = Depends(get_pipeline),
):
    if pdfFile is None or not pdfFile.filename:
        raise HTTPException(status_code=400, detail="No file uploaded!")
    name = resolve_collection(collection)

    upload_path = settings.UPLOAD_DIR / timestamped_filename(pdfFile.filename)
    logger.info(f"Loading PDF from: {upload_path}")
    try:
        await run_in_threadpool(save_upload, pdfFile.file, upload_path)
        chunks = await run_with_deadline(
            rag.ingest_pdf, upload_path, pdfFile.filename, name, timeout=settings.UPLOAD_TIMEOUT
        )
    except asyncio.TimeoutError:
        logger.error(f"Upload timed out after {settings.UPLOAD_TIMEOUT}s | file={pdfFile.filename}")
        raise HTTPException(status_code=504, detail=f"Processing timed out after {settings.UPLOAD_TIMEOUT:g}s")
    except Exception as e:
        logger.exception("Upload error")
        raise HTTPException(status_code=500, detail=str(e))
    finally:
        upload_path.unlink(missing_ok=True)

    return UploadResponse(message="PDF processed and stored in ChromaDB!", collection=name, chunks=chunks)


@router.post("/query", response_model=QueryResponse, responses=ERROR_RESPONSES)
async def query(req: QueryRequest, rag: RAGPipeline = Depends(get_pipeline)):
    if not req.question or not req.question.strip():
        raise HTTPException(status_code=400, detail="Question is required!")
    name = resolve_collection(req.collection)

    logger.info(f"Querying: {req.question}")
    try:
        answer, sources = await run_with_deadline(
            rag.answer, req.question.strip(), name, timeout=settings.QUERY_TIMEOUT
        )
    except asyncio.TimeoutError:
        logger.error(f"Query timed out after {settings.QUERY_TIMEOUT}s")
        raise HTTPException(status_code=504, detail=f"Query timed out after {settings.QUERY_TIMEOUT:g}s")
    except Exception as e:
        logger.exception("Query error")
        raise HTTPException(status_code=500, detail=str(e))
    return QueryResponse(answer=answer, sources=sources)


@router.get("/health")
def health():
    return {"status": "ok"}
