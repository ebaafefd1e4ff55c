"""
RulePress - compression for AI coding assistant rules files

Shrinks generated rules documents (.cursorrules, CLAUDE.md, ...) before they
are handed to token-limited models, using stopword removal, punctuation
stripping, suffix stemming and whitespace removal.

Basic Usage:
    >>> from rulepress import compress_text, calculate_compression_ratio
    >>> compressed = compress_text(rules_markdown)
    >>> print(calculate_compression_ratio(rules_markdown, compressed))
    >>>
    >>> # Choose stages explicitly
    >>> compress_text(text, {"removePunctuation": True, "stemmerType": "lancaster"})
    >>>
    >>> # Full report with exact token counts
    >>> from rulepress import TextCompressor
    >>> report = TextCompressor(tokenizer="gpt-4o").compress_with_report(text)

For more control, use the individual modules:
    - rulepress.compression: Compression stages, stemmers, metrics, tokenizers
    - rulepress.core: Options, settings, logging and exceptions
    - rulepress.api: REST API server
    - rulepress.cli: Command-line interface
"""

from .core.types import CompressionOptions, CompressionReport, StemmerType
from .core.exceptions import (
    RulePressError,
    CompressionError,
    ConfigurationError,
    TokenizerError,
)
from .compression import (
    TextCompressor,
    compress_text,
    calculate_compression_ratio,
    estimate_token_reduction,
    count_tokens,
)


__version__ = "1.0.0"
__all__ = [
    # Pipeline
    "compress_text",
    "calculate_compression_ratio",
    "estimate_token_reduction",
    "count_tokens",
    "TextCompressor",
    # Types
    "CompressionOptions",
    "CompressionReport",
    "StemmerType",
    # Exceptions
    "RulePressError",
    "CompressionError",
    "ConfigurationError",
    "TokenizerError",
]
