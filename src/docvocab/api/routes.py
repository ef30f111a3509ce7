"""API router exposing document extraction and vocabulary mining."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from docvocab.config import Settings, get_settings
from docvocab.errors import (
    DocumentParseError,
    DocumentReadError,
    ExtractionError,
    MiningError,
    ToolFailedError,
    ToolUnavailableError,
    UnknownFileTypeError,
    UnsupportedFormatError,
)
from docvocab.extract import DocumentExtractor
from docvocab.vocabulary import ExtractedVocabulary, VocabularyMiner

router = APIRouter(tags=["vocabulary"])


class DocumentTextRequest(BaseModel):
    """Request body accepted by the document text endpoint."""

    path: str = Field(..., min_length=1, description="Filesystem path of the document to read.")


class DocumentTextResponse(BaseModel):
    text: str


class VocabularyTermsRequest(BaseModel):
    """Request body accepted by the vocabulary terms endpoint."""

    text: str = Field(..., description="Document text to mine for domain terms.")
    api_key: str = Field(..., min_length=1, description="Bearer credential for the model API.")


def get_document_extractor(settings: Settings = Depends(get_settings)) -> DocumentExtractor:
    return DocumentExtractor(settings=settings)


def get_vocabulary_miner(settings: Settings = Depends(get_settings)) -> VocabularyMiner:
    return VocabularyMiner(settings)


def _extraction_status(error: ExtractionError) -> int:
    if isinstance(error, (UnknownFileTypeError, UnsupportedFormatError)):
        return 415
    if isinstance(error, ToolUnavailableError):
        return 503
    if isinstance(error, (DocumentReadError, DocumentParseError, ToolFailedError)):
        return 422
    return 400


@router.post("/documents/text", response_model=DocumentTextResponse)
def extract_document_text(
    request: DocumentTextRequest,
    extractor: DocumentExtractor = Depends(get_document_extractor),
) -> DocumentTextResponse:
    """Extract the text of a local document."""

    try:
        text = extractor.extract(request.path)
    except ExtractionError as exc:
        raise HTTPException(status_code=_extraction_status(exc), detail=str(exc)) from exc
    return DocumentTextResponse(text=text)


@router.post("/vocabulary/terms", response_model=ExtractedVocabulary)
async def extract_vocabulary_terms(
    request: VocabularyTermsRequest,
    miner: VocabularyMiner = Depends(get_vocabulary_miner),
) -> ExtractedVocabulary:
    """Mine categorised domain vocabulary from document text."""

    try:
        return await miner.extract_terms(request.text, request.api_key)
    except MiningError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
