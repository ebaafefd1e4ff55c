"""Simplified suffix stemmers."""

from typing import Callable, Dict, Union

from ..core.types import StemmerType, resolve_stemmer

# Checked in order; the first suffix the word ends with decides
PORTER_SUFFIXES = ("sses", "ies", "ss", "s", "eed", "ed", "ing")


def porter_stem(word: str) -> str:
    """
    Strip a plural or verb suffix from a word.

    A reduced form of Porter step 1: lowercases the word, then applies
    the first matching rule of sses/ies/ss/s/eed/ed/ing. The eed, ed and
    ing rules only fire for words longer than four characters.

    >>> porter_stem("testing")
    'test'
    >>> porter_stem("classes")
    'class'
    """
    word = word.lower()

    for suffix in PORTER_SUFFIXES:
        if not word.endswith(suffix):
            continue
        if suffix in ("sses", "ies"):
            return word[:-2]
        if suffix == "ss":
            return word
        if suffix == "s":
            return word[:-1]
        if suffix == "eed":
            return word[:-1] if len(word) > 4 else word
        # ed, ing
        return word[:-len(suffix)] if len(word) > 4 else word

    return word


def snowball_stem(word: str) -> str:
    """Snowball stemming; currently the same rules as porter_stem."""
    return porter_stem(word)


def lancaster_stem(word: str) -> str:
    """More aggressive variant: porter_stem minus its last character."""
    return porter_stem(word)[:-1]


STEMMERS: Dict[StemmerType, Callable[[str], str]] = {
    StemmerType.PORTER: porter_stem,
    StemmerType.SNOWBALL: snowball_stem,
    StemmerType.LANCASTER: lancaster_stem,
}


def get_stemmer(stemmer: Union[str, StemmerType] = StemmerType.PORTER) -> Callable[[str], str]:
    """Look up a stemmer function by name or StemmerType."""
    return STEMMERS[resolve_stemmer(stemmer)]
