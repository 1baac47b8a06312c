"""FastAPI REST API for kwx."""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .extractor import KeywordExtractor
from .models import ExtractOptions
from .output import result_to_dict
from .tokenizer import Tokenizer, available_languages
from .vocabulary import build_thesaurus, filter_thesaurus

logger = logging.getLogger(__name__)

app = FastAPI(
    title="kwx API",
    description="Fuzzy thesaurus keyword extraction API",
    version="0.1.0",
)


class KeywordRequest(BaseModel):
    """A thesaurus keyword."""

    label: str
    uri: str
    topic: str = ""


class ExtractionRequest(BaseModel):
    """Request body for the extraction endpoint."""

    content: str = Field(description="Newline-delimited text to scan")
    keywords: list[KeywordRequest] = Field(description="Thesaurus keywords")
    atx: Optional[list[list[str]]] = Field(None, description="Acronym/topic vocabulary rows")
    country: Optional[list[list[str]]] = Field(None, description="Geographic vocabulary rows")
    euroscivoc: Optional[list[list[str]]] = Field(None, description="Topic cross-reference rows")
    max_n: int = Field(4, ge=1, le=8, description="Largest n-gram window")
    max_length: int = Field(40, ge=1, description="Labels must be shorter than this")
    language: str = "english"
    extract_exceptions: list[str] = Field(default_factory=lambda: ["well", "causes"])
    detailed_output: bool = False


class KeywordResponse(BaseModel):
    """A matched keyword."""

    label: str
    uri: str
    topic: Optional[str] = None


class LineResponse(BaseModel):
    """Keywords found on one line."""

    row: int
    line: str
    keywords: list[KeywordResponse]


class ExtractionResponse(BaseModel):
    """Extraction result; exactly one of summary and detailedOutput is set."""

    summary: Optional[list[KeywordResponse]] = None
    detailedOutput: Optional[list[LineResponse]] = None
    time: float
    kwCount: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    languages: list[str]


def _check_rows(name: str, rows: Optional[list[list[str]]]) -> None:
    for row in rows or []:
        if len(row) < 3:
            raise HTTPException(
                status_code=400,
                detail=f"{name} rows need pattern, label and uri: {row}",
            )


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Check API health and available language profiles."""
    return HealthResponse(status="ok", languages=available_languages())


@app.post("/extract", response_model=ExtractionResponse)
async def extract(request: ExtractionRequest):
    """
    Extract thesaurus keywords from text.

    Returns a document summary, or per-line keywords when detailed_output is set.
    """
    for name in ("atx", "country", "euroscivoc"):
        _check_rows(name, getattr(request, name))

    try:
        tokenizer = Tokenizer(request.extract_exceptions, request.language)
        keywords = filter_thesaurus(
            build_thesaurus((k.model_dump() for k in request.keywords), tokenizer),
            max_length=request.max_length,
        )
        options = ExtractOptions(
            keywords=keywords,
            max_n=request.max_n,
            language=request.language,
            extract_exceptions=request.extract_exceptions,
            atx=[r[:3] for r in request.atx] if request.atx else None,
            country=[r[:3] for r in request.country] if request.country else None,
            euroscivoc=[r[:3] for r in request.euroscivoc] if request.euroscivoc else None,
            detailed_output=request.detailed_output,
        )
        result = await KeywordExtractor(tokenizer).extract_async(request.content, options)
    except ValueError as e:
        logger.warning(f"Rejected extraction request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return result_to_dict(result)


@app.get("/")
async def root():
    """API root - returns basic info."""
    return {
        "name": "kwx API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
        "extract": "/extract",
    }
