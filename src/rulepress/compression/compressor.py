"""Main compression orchestrator."""

import logging
import time
from typing import Optional, Union, List, Dict, Any, Sequence, Tuple

from ..core.types import CompressionOptions, CompressionReport
from ..core.exceptions import CompressionError, TokenizerError
from .stages.base import CompressionStage
from .stages.stopwords import StopwordStage
from .stages.punctuation import PunctuationStage
from .stages.stemming import StemmingStage
from .stages.whitespace import WhitespaceStage
from .metrics import calculate_compression_ratio, estimate_token_reduction
from .tokenizers.registry import tokenizer_registry

logger = logging.getLogger(__name__)

OptionsLike = Union[CompressionOptions, Dict[str, Any], None]

# Fixed stage order: stopwords -> punctuation -> stemming -> whitespace
DEFAULT_STAGES: Sequence[CompressionStage] = (
    StopwordStage(),
    PunctuationStage(),
    StemmingStage(),
    WhitespaceStage(),
)


def _resolve_options(options: OptionsLike) -> CompressionOptions:
    if options is None:
        return CompressionOptions()
    if isinstance(options, CompressionOptions):
        return options
    return CompressionOptions.from_dict(options)


def run_stages(
    text: str,
    options: CompressionOptions,
    stages: Sequence[CompressionStage] = DEFAULT_STAGES
) -> Tuple[str, List[str]]:
    """
    Run the enabled stages over text.

    Disabled stages are skipped entirely.

    Returns:
        (compressed_text, names_of_stages_applied)
    """
    applied: List[str] = []
    result = text

    for stage in stages:
        if not stage.is_enabled(options):
            continue
        try:
            result = stage.apply(result, options)
        except Exception as e:
            raise CompressionError(
                f"Stage '{stage.name}' failed: {str(e)}",
                stage=stage.name,
                cause=e
            ) from e
        applied.append(stage.name)

    return result, applied


def compress_text(text: str, options: OptionsLike = None) -> str:
    """
    Compress text for consumption by a language model.

    Args:
        text: Input text (usually an assembled rules document)
        options: CompressionOptions, a dict of option names (snake_case
            or camelCase), or None for the defaults

    Returns:
        Compressed text

    Example:
        >>> compress_text("const API_KEY = process.env.API_KEY")
        'constAPI_KEYprocess.env.API_KEY'
    """
    compressed, _ = run_stages(text, _resolve_options(options))
    return compressed


class TextCompressor:
    """
    Compression pipeline with configurable defaults and reporting.

    Example:
        >>> compressor = TextCompressor(tokenizer="gpt-4o")
        >>> report = compressor.compress_with_report(rules_markdown)
        >>> print(f"{report.compression_ratio}% smaller")
    """

    name = "text_compressor"
    description = "Stopword, punctuation, stemming and whitespace compression"

    def __init__(
        self,
        options: OptionsLike = None,
        tokenizer: Optional[str] = None,
        stages: Optional[Sequence[CompressionStage]] = None
    ):
        """
        Initialize the TextCompressor.

        Args:
            options: Default options (default: from settings)
            tokenizer: Tokenizer used for report token counts (default: from settings)
            stages: Stage sequence, in execution order (default: the four built-in stages)
        """
        if options is None or tokenizer is None:
            from ..core.config import get_settings
            settings = get_settings().compression
            if options is None:
                options = CompressionOptions.from_settings(settings)
            tokenizer = tokenizer or settings.tokenizer

        self.default_options = _resolve_options(options)
        self.tokenizer_name = tokenizer
        self._stages: Sequence[CompressionStage] = tuple(stages) if stages is not None else DEFAULT_STAGES

    def resolve_options(self, options: OptionsLike = None, **overrides) -> CompressionOptions:
        """
        Merge per-call options and keyword overrides onto the defaults.

        Args:
            options: Options replacing the defaults for this call
            **overrides: Individual option fields, e.g. ``use_stemming=False``
        """
        resolved = self.default_options if options is None else _resolve_options(options)
        if overrides:
            resolved = resolved.replace(**overrides)
        return resolved

    def compress(self, text: str, options: OptionsLike = None, **overrides) -> str:
        """
        Compress text.

        Args:
            text: Input text
            options: Options for this call (default: compressor defaults)
            **overrides: Individual option fields

        Returns:
            Compressed text
        """
        resolved = self.resolve_options(options, **overrides)
        compressed, applied = run_stages(text, resolved, self._stages)
        logger.debug(
            "Compressed %d -> %d chars (stages: %s)",
            len(text), len(compressed), ", ".join(applied) or "none"
        )
        return compressed

    def compress_with_report(
        self,
        text: str,
        options: OptionsLike = None,
        **overrides
    ) -> CompressionReport:
        """
        Compress text and measure the result.

        Returns:
            CompressionReport with the compressed text, percentage metrics
            and tokenizer counts
        """
        start_time = time.perf_counter()

        resolved = self.resolve_options(options, **overrides)
        compressed, applied = run_stages(text, resolved, self._stages)

        report = CompressionReport(
            original_text=text,
            compressed_text=compressed,
            options=resolved,
            compression_ratio=calculate_compression_ratio(text, compressed),
            token_reduction=estimate_token_reduction(text, compressed),
            original_tokens=self.count_tokens(text),
            compressed_tokens=self.count_tokens(compressed),
            tokenizer=self.tokenizer_name,
            stages_applied=applied,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        logger.debug(
            "Compressed %d -> %d chars (%.1f%%), %d -> %d tokens",
            report.original_length, report.compressed_length,
            report.compression_ratio, report.original_tokens, report.compressed_tokens
        )
        return report

    def count_tokens(self, text: str, tokenizer: Optional[str] = None) -> int:
        """
        Count tokens in text.

        Args:
            text: Text to count
            tokenizer: Optional tokenizer override

        Returns:
            Token count
        """
        name = tokenizer or self.tokenizer_name
        try:
            return tokenizer_registry.get(name).count(text)
        except Exception as e:
            raise TokenizerError(f"Token counting failed: {str(e)}", tokenizer=name, cause=e) from e

    def stages_for(self, options: OptionsLike = None) -> List[str]:
        """Names of the stages that would run for the given options."""
        resolved = self.resolve_options(options)
        return [stage.name for stage in self._stages if stage.is_enabled(resolved)]

    def list_stages(self) -> List[Dict[str, Any]]:
        """List all stages in execution order with their metadata."""
        return [stage.get_capabilities() for stage in self._stages]
