"""Token counters used for compression reports."""

from abc import ABC, abstractmethod
from typing import List

from ..metrics import estimate_tokens
from ...core.exceptions import TokenizerError


class TokenCounter(ABC):
    """
    Counts how many model tokens a rules document costs.

    Only ``count`` is required. Counters backed by a real vocabulary also
    implement ``encode`` and ``decode``.
    """

    name: str = "base"

    @abstractmethod
    def count(self, text: str) -> int:
        """Number of tokens the model would see for ``text``."""

    def encode(self, text: str) -> List[int]:
        raise TokenizerError(f"{self.name} does not expose token ids", tokenizer=self.name)

    def decode(self, tokens: List[int]) -> str:
        raise TokenizerError(f"{self.name} cannot decode token ids", tokenizer=self.name)


class SimpleTokenCounter(TokenCounter):
    """ceil(len / 4) estimate, used when no tiktoken encoding is available."""

    name = "simple"

    def count(self, text: str) -> int:
        return estimate_tokens(text)
