"""Compression measurements."""

import math

# Rough average for English text with GPT-style tokenizers
CHARS_PER_TOKEN = 4


def _round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves going up."""
    return math.floor(value * 10 + 0.5) / 10


def estimate_tokens(text: str) -> int:
    """Estimate the token count of text as ceil(len / 4)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def calculate_compression_ratio(original: str, compressed: str) -> float:
    """
    Percentage of characters removed by compression.

    Args:
        original: Text before compression
        compressed: Text after compression

    Returns:
        Reduction in percent, one decimal place; 0.0 for empty original text
    """
    original_length = len(original)
    if original_length == 0:
        return 0.0

    ratio = (original_length - len(compressed)) / original_length * 100
    return _round_one_decimal(ratio)


def estimate_token_reduction(original: str, compressed: str) -> float:
    """
    Estimated percentage of LLM tokens saved by compression.

    Uses the ceil(len / 4) heuristic from estimate_tokens() rather than
    a real tokenizer.

    Returns:
        Reduction in percent, one decimal place; 0.0 for empty original text
    """
    original_tokens = estimate_tokens(original)
    if original_tokens == 0:
        return 0.0

    reduction = (original_tokens - estimate_tokens(compressed)) / original_tokens * 100
    return _round_one_decimal(reduction)
