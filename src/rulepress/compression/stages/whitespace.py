"""Whitespace removal stage."""

import re

from .base import CompressionStage
from ...core.types import CompressionOptions

_INLINE_WHITESPACE_RE = re.compile(r"[^\S\n]+")
_NEWLINES_RE = re.compile(r"\n+")


def remove_extra_spaces(text: str) -> str:
    """
    Remove all whitespace except line breaks.

    Runs of newlines collapse to one and the result is trimmed.
    """
    text = _INLINE_WHITESPACE_RE.sub("", text)
    text = _NEWLINES_RE.sub("\n", text)
    return text.strip()


class WhitespaceStage(CompressionStage):
    """Final cleanup pass over whitespace left by earlier stages."""

    name = "whitespace"
    description = "Remove remaining whitespace, keeping single line breaks"
    option_flag = "remove_spaces"

    def apply(self, text: str, options: CompressionOptions) -> str:
        return remove_extra_spaces(text)
