"""Punctuation removal stage."""

import re

from .base import CompressionStage
from ...core.types import CompressionOptions

# Only prose punctuation; . ( ) { } [ ] / - _ @ # $ % & * + = < > | \ ` ~ stay
_PROSE_PUNCTUATION_RE = re.compile(r"[,;:'\"!?]")


def remove_punctuation(text: str) -> str:
    """Strip , ; : ' " ! ? from the text."""
    return _PROSE_PUNCTUATION_RE.sub("", text)


class PunctuationStage(CompressionStage):
    """Remove prose punctuation while keeping code and markup characters."""

    name = "punctuation"
    description = "Remove , ; : ' \" ! ? while keeping code symbols"
    option_flag = "remove_punctuation"

    def apply(self, text: str, options: CompressionOptions) -> str:
        return remove_punctuation(text)
