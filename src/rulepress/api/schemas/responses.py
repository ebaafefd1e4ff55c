"""API response schemas."""

from typing import List, Dict, Any, Union
from pydantic import BaseModel, Field


class CompressResponse(BaseModel):
    """Response for text compression."""
    success: bool
    original_text: str
    compressed_text: str
    original_length: int
    compressed_length: int
    compression_ratio: float
    token_reduction: float
    original_tokens: int
    compressed_tokens: int
    tokenizer: str
    options: Dict[str, Any] = Field(default_factory=dict)
    stages_applied: List[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class StatsResponse(BaseModel):
    """Response for compression metrics."""
    original_length: int
    compressed_length: int
    compression_ratio: float
    token_reduction: float


class StageInfo(BaseModel):
    """A single compression stage."""
    name: str
    description: str
    option: str


class HealthResponse(BaseModel):
    """Response for health check."""
    status: str
    version: str
    components: Dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Body of a 400 or 500 response; 400s carry the error type and details."""
    detail: Union[Dict[str, Any], str]
