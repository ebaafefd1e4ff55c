"""Compression stage implementations."""

from .base import CompressionStage
from .stopwords import StopwordStage, STOPWORDS, remove_stopwords
from .punctuation import PunctuationStage, remove_punctuation
from .stemming import StemmingStage, apply_stemming
from .whitespace import WhitespaceStage, remove_extra_spaces

__all__ = [
    "CompressionStage",
    "StopwordStage",
    "PunctuationStage",
    "StemmingStage",
    "WhitespaceStage",
    "STOPWORDS",
    "remove_stopwords",
    "remove_punctuation",
    "apply_stemming",
    "remove_extra_spaces",
]
