"""API request schemas."""

from typing import Optional, Literal
from pydantic import BaseModel, Field


class CompressOptionsModel(BaseModel):
    """Per-request compression options; unset fields use the server defaults."""
    remove_stopwords: Optional[bool] = Field(
        None,
        alias="removeStopwords",
        description="Remove common English stopwords"
    )
    remove_punctuation: Optional[bool] = Field(
        None,
        alias="removePunctuation",
        description="Remove , ; : ' \" ! ?"
    )
    remove_spaces: Optional[bool] = Field(
        None,
        alias="removeSpaces",
        description="Remove remaining whitespace, keeping single line breaks"
    )
    use_stemming: Optional[bool] = Field(
        None,
        alias="useStemming",
        description="Strip common word suffixes"
    )
    stemmer_type: Optional[Literal["porter", "snowball", "lancaster"]] = Field(
        None,
        alias="stemmerType",
        description="Stemmer: porter, snowball, lancaster"
    )

    model_config = {"populate_by_name": True}


class CompressRequest(BaseModel):
    """Request for text compression."""
    text: str = Field(..., description="The text to compress")
    options: Optional[CompressOptionsModel] = Field(
        None,
        description="Compression options (default: server settings)"
    )
    tokenizer: Optional[str] = Field(
        None,
        description="Tokenizer for token counts (default: server settings)"
    )


class StatsRequest(BaseModel):
    """Request for compression metrics of an existing pair of texts."""
    original: str = Field(..., description="Text before compression")
    compressed: str = Field(..., description="Text after compression")
