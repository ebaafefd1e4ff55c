"""Suffix stemming stage."""

import re
from typing import Callable

from .base import CompressionStage
from ..stemmers import get_stemmer
from ...core.types import CompressionOptions, StemmerType

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]")

# Identifiers that are never stemmed: CONSTANT_CASE and camelCase / PascalCase
_CONSTANT_RE = re.compile(r"[A-Z_]+")
_CAMEL_RE = re.compile(r"[A-Z][a-z]+[A-Z]")


def is_identifier(token: str) -> bool:
    """Check whether a token looks like a code identifier."""
    return bool(_CONSTANT_RE.fullmatch(token) or _CAMEL_RE.search(token))


def stem_token(token: str, stemmer: Callable[[str], str]) -> str:
    """
    Stem the alphabetic part of a single token.

    Attached punctuation is kept. Tokens whose letters are split by other
    characters (``process.env``, ``v2beta``) are left as they are.
    """
    if is_identifier(token):
        return token

    letters = _NON_ALPHA_RE.sub("", token)
    if not letters or letters not in token:
        return token

    return token.replace(letters, stemmer(letters), 1)


def apply_stemming(text: str, stemmer_type: StemmerType = StemmerType.PORTER) -> str:
    """Stem every token and join the results with no separator."""
    stemmer = get_stemmer(stemmer_type)
    return "".join(stem_token(token, stemmer) for token in _WHITESPACE_RE.split(text))


class StemmingStage(CompressionStage):
    """Reduce words to their stems using the configured stemmer."""

    name = "stemming"
    description = "Strip common suffixes from prose words, keeping identifiers"
    option_flag = "use_stemming"

    def apply(self, text: str, options: CompressionOptions) -> str:
        return apply_stemming(text, options.stemmer_type)
