"""Rules text compression module."""

from .compressor import TextCompressor, compress_text, run_stages, DEFAULT_STAGES
from .metrics import calculate_compression_ratio, estimate_token_reduction, estimate_tokens
from .stemmers import porter_stem, snowball_stem, lancaster_stem, get_stemmer
from .stages.base import CompressionStage
from .tokenizers.base import TokenCounter
from .tokenizers.registry import tokenizer_registry, get_tokenizer, count_tokens

__all__ = [
    "TextCompressor",
    "compress_text",
    "run_stages",
    "DEFAULT_STAGES",
    "calculate_compression_ratio",
    "estimate_token_reduction",
    "estimate_tokens",
    "porter_stem",
    "snowball_stem",
    "lancaster_stem",
    "get_stemmer",
    "CompressionStage",
    "TokenCounter",
    "tokenizer_registry",
    "get_tokenizer",
    "count_tokens",
]
