"""Tokenizer implementations for token counting."""

from .base import TokenCounter, SimpleTokenCounter
from .registry import tokenizer_registry, get_tokenizer, count_tokens

__all__ = [
    "TokenCounter",
    "SimpleTokenCounter",
    "tokenizer_registry",
    "get_tokenizer",
    "count_tokens",
]
