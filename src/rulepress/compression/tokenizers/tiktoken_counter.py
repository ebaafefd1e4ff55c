"""Exact token counts with tiktoken."""

from typing import List

from .base import TokenCounter

DEFAULT_ENCODING = "cl100k_base"

# Models rules files are commonly written for; anything else goes through
# tiktoken's own lookup and then DEFAULT_ENCODING.
KNOWN_ENCODINGS = {
    "gpt-4": "cl100k_base",
    "gpt-4-turbo": "cl100k_base",
    "gpt-3.5-turbo": "cl100k_base",
    "gpt-4o": "o200k_base",
    "gpt-4o-mini": "o200k_base",
    "gpt-4.1": "o200k_base",
    "o1": "o200k_base",
    "o3": "o200k_base",
}


def resolve_encoding_name(model: str) -> str:
    """Map a model name (or a bare encoding name) to a tiktoken encoding."""
    import tiktoken

    if model in KNOWN_ENCODINGS:
        return KNOWN_ENCODINGS[model]
    if model in tiktoken.list_encoding_names():
        return model
    try:
        return tiktoken.encoding_for_model(model).name
    except KeyError:
        return DEFAULT_ENCODING


class TiktokenCounter(TokenCounter):
    """
    Counter backed by a tiktoken encoding.

    Text such as ``<|endoftext|>`` inside a rules file is counted as plain
    text rather than rejected as a special token.
    """

    def __init__(self, model: str = "gpt-4"):
        import tiktoken

        self.model = model
        self.name = model
        self._encoding = tiktoken.get_encoding(resolve_encoding_name(model))

    @property
    def encoding_name(self) -> str:
        return self._encoding.name

    def count(self, text: str) -> int:
        return len(self.encode(text))

    def encode(self, text: str) -> List[int]:
        return self._encoding.encode(text, disallowed_special=())

    def decode(self, tokens: List[int]) -> str:
        return self._encoding.decode(tokens)

    @staticmethod
    def list_supported_models() -> List[str]:
        return sorted(KNOWN_ENCODINGS)
