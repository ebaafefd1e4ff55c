"""Stopword removal stage."""

import re
from typing import FrozenSet

from .base import CompressionStage
from ...core.types import CompressionOptions

# Common English words with little information value in rules documents
STOPWORDS: FrozenSet[str] = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "been", "being", "by", "for", "from",
    "has", "have", "he", "her", "him", "his", "how", "i", "in", "into", "is", "it",
    "its", "me", "my", "of", "on", "or", "our", "she", "so", "than", "that", "the",
    "their", "them", "then", "there", "these", "they", "this", "those", "to", "too",
    "us", "was", "we", "were", "what", "when", "where", "which", "who", "why", "will",
    "with", "would", "you", "your", "about", "after", "all", "also", "am", "another",
    "any", "because", "before", "between", "both", "but", "can", "could", "did", "do",
    "does", "each", "few", "had", "here", "if", "just", "like", "make", "many", "may",
    "more", "most", "much", "must", "now", "only", "other", "out", "over", "said",
    "same", "see", "should", "since", "some", "still", "such", "take", "through",
    "under", "up", "very", "way", "well", "while",
})

_WHITESPACE_RE = re.compile(r"\s+")
_NON_LOWER_ALPHA_RE = re.compile(r"[^a-z]")


def is_stopword(token: str) -> bool:
    """
    Check whether a raw token counts as a stopword.

    The token is lowercased and stripped of everything outside a-z;
    tokens that clean to the empty string (pure punctuation, numbers)
    count as stopwords too.
    """
    cleaned = _NON_LOWER_ALPHA_RE.sub("", token.lower())
    return not cleaned or cleaned in STOPWORDS


def remove_stopwords(text: str) -> str:
    """Drop stopword tokens and join the rest with no separator."""
    return "".join(
        token for token in _WHITESPACE_RE.split(text)
        if not is_stopword(token)
    )


class StopwordStage(CompressionStage):
    """
    Remove stopwords.

    Surviving tokens keep their original case and punctuation and are
    concatenated without spaces.
    """

    name = "stopwords"
    description = "Remove common English stopwords and join remaining words"
    option_flag = "remove_stopwords"

    def apply(self, text: str, options: CompressionOptions) -> str:
        return remove_stopwords(text)
