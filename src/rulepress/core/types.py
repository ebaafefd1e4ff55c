"""Core type definitions for the rules compression system."""

from dataclasses import dataclass, field, fields
from typing import Dict, Any, List, Union
from enum import Enum

from .exceptions import ConfigurationError


class StemmerType(Enum):
    """Available suffix stemmers."""
    PORTER = "porter"
    SNOWBALL = "snowball"
    LANCASTER = "lancaster"


# Field names used by the web front-end
_CAMEL_CASE_FIELDS = {
    "removeStopwords": "remove_stopwords",
    "removePunctuation": "remove_punctuation",
    "removeSpaces": "remove_spaces",
    "useStemming": "use_stemming",
    "stemmerType": "stemmer_type",
}

_FLAG_FIELDS = ("remove_stopwords", "remove_punctuation", "remove_spaces", "use_stemming")


def resolve_stemmer(stemmer: Union[str, StemmerType]) -> StemmerType:
    """Convert a stemmer name to StemmerType."""
    if isinstance(stemmer, StemmerType):
        return stemmer
    try:
        return StemmerType(str(stemmer).lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown stemmer: {stemmer}. Available: {[s.value for s in StemmerType]}",
            config_key="stemmer_type"
        )


@dataclass(frozen=True)
class CompressionOptions:
    """
    Options controlling which compression stages run.

    Instances are immutable; use ``replace()`` to derive a variant.
    """
    remove_stopwords: bool = True
    remove_punctuation: bool = False
    remove_spaces: bool = True
    use_stemming: bool = True
    stemmer_type: StemmerType = StemmerType.PORTER

    def __post_init__(self):
        for flag in _FLAG_FIELDS:
            value = getattr(self, flag)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Option {flag} must be true or false, got {value!r}",
                    config_key=flag
                )
        # Accept "porter" etc. as well as the enum
        object.__setattr__(self, "stemmer_type", resolve_stemmer(self.stemmer_type))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompressionOptions":
        """
        Create options from a mapping.

        Both snake_case field names and the camelCase names used by the
        web front-end are accepted. Unknown keys raise ConfigurationError.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_FIELDS.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown compression option: {key}", config_key=key)
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_settings(cls, settings=None) -> "CompressionOptions":
        """Create options from CompressionSettings (default: global settings)."""
        if settings is None:
            from .config import get_settings
            settings = get_settings().compression
        return cls(
            remove_stopwords=settings.remove_stopwords,
            remove_punctuation=settings.remove_punctuation,
            remove_spaces=settings.remove_spaces,
            use_stemming=settings.use_stemming,
            stemmer_type=settings.stemmer_type,
        )

    def replace(self, **changes) -> "CompressionOptions":
        """Return a copy with the given fields changed."""
        data = self.to_dict()
        data.update(changes)
        return CompressionOptions.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "remove_stopwords": self.remove_stopwords,
            "remove_punctuation": self.remove_punctuation,
            "remove_spaces": self.remove_spaces,
            "use_stemming": self.use_stemming,
            "stemmer_type": self.stemmer_type.value,
        }


@dataclass
class CompressionReport:
    """Result of a compression run with measurements."""
    original_text: str
    compressed_text: str
    options: CompressionOptions
    compression_ratio: float = 0.0  # percent, one decimal
    token_reduction: float = 0.0  # percent, one decimal, ceil(len / 4) estimate
    original_tokens: int = 0
    compressed_tokens: int = 0
    tokenizer: str = ""
    stages_applied: List[str] = field(default_factory=list)
    processing_time_ms: float = 0.0

    @property
    def original_length(self) -> int:
        return len(self.original_text)

    @property
    def compressed_length(self) -> int:
        return len(self.compressed_text)

    @property
    def characters_saved(self) -> int:
        """Number of characters removed."""
        return self.original_length - self.compressed_length

    @property
    def tokens_saved(self) -> int:
        """Number of tokens saved (tokenizer count)."""
        return self.original_tokens - self.compressed_tokens

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for API responses."""
        return {
            "original_text": self.original_text,
            "compressed_text": self.compressed_text,
            "options": self.options.to_dict(),
            "original_length": self.original_length,
            "compressed_length": self.compressed_length,
            "compression_ratio": self.compression_ratio,
            "token_reduction": self.token_reduction,
            "original_tokens": self.original_tokens,
            "compressed_tokens": self.compressed_tokens,
            "tokenizer": self.tokenizer,
            "stages_applied": list(self.stages_applied),
            "processing_time_ms": self.processing_time_ms,
        }

    def __str__(self) -> str:
        return self.compressed_text
