"""Compression API routes."""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from ..schemas import (
    CompressRequest,
    CompressResponse,
    StatsRequest,
    StatsResponse,
    StageInfo,
    ErrorResponse,
)
from ...compression import TextCompressor, calculate_compression_ratio, estimate_token_reduction
from ...core.exceptions import RulePressError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/compress", tags=["compression"])


@router.post(
    "",
    response_model=CompressResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def compress(request: CompressRequest) -> CompressResponse:
    """
    Compress rules text to reduce token count.

    Stages run in a fixed order, each switched by its option:
    - **remove_stopwords**: drop common words and join the rest without spaces
    - **remove_punctuation**: drop , ; : ' " ! ? (code symbols stay)
    - **use_stemming**: strip suffixes with the porter, snowball or lancaster stemmer
    - **remove_spaces**: remove leftover whitespace, keeping single line breaks
    """
    try:
        compressor = TextCompressor(tokenizer=request.tokenizer)
        overrides = request.options.model_dump(exclude_none=True) if request.options else {}
        report = compressor.compress_with_report(request.text, **overrides)

        return CompressResponse(
            success=True,
            original_text=report.original_text,
            compressed_text=report.compressed_text,
            original_length=report.original_length,
            compressed_length=report.compressed_length,
            compression_ratio=report.compression_ratio,
            token_reduction=report.token_reduction,
            original_tokens=report.original_tokens,
            compressed_tokens=report.compressed_tokens,
            tokenizer=report.tokenizer,
            options=report.options.to_dict(),
            stages_applied=report.stages_applied,
            processing_time_ms=report.processing_time_ms
        )

    except RulePressError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except Exception as e:
        logger.exception("Compression request failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/stats", response_model=StatsResponse)
async def stats(request: StatsRequest) -> StatsResponse:
    """
    Measure an already compressed text against its original.

    The token figure uses the 4-characters-per-token estimate.
    """
    return StatsResponse(
        original_length=len(request.original),
        compressed_length=len(request.compressed),
        compression_ratio=calculate_compression_ratio(request.original, request.compressed),
        token_reduction=estimate_token_reduction(request.original, request.compressed)
    )


@router.get("/stages", response_model=List[StageInfo])
async def list_stages() -> List[StageInfo]:
    """List compression stages in execution order."""
    return [StageInfo(**stage) for stage in TextCompressor().list_stages()]
