"""Settings read from RP_* environment variables and .env."""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .types import StemmerType

_ENV_ONLY = {"env_prefix": "", "extra": "ignore"}


class CompressionSettings(BaseSettings):
    """Defaults for ``CompressionOptions`` and the report tokenizer."""

    remove_stopwords: bool = Field(True, alias="RP_REMOVE_STOPWORDS")
    remove_punctuation: bool = Field(False, alias="RP_REMOVE_PUNCTUATION")
    remove_spaces: bool = Field(True, alias="RP_REMOVE_SPACES")
    use_stemming: bool = Field(True, alias="RP_USE_STEMMING")
    stemmer_type: str = Field(StemmerType.PORTER.value, alias="RP_STEMMER_TYPE")
    tokenizer: str = Field("gpt-4", alias="RP_TOKENIZER")

    model_config = _ENV_ONLY

    @field_validator("stemmer_type")
    @classmethod
    def _known_stemmer(cls, value: str) -> str:
        value = value.lower()
        if value not in {s.value for s in StemmerType}:
            raise ValueError(f"unknown stemmer {value!r}")
        return value


class APISettings(BaseSettings):
    """Where ``rulepress serve`` listens."""

    host: str = Field("0.0.0.0", alias="RP_API_HOST")
    port: int = Field(8000, alias="RP_API_PORT")
    debug: bool = Field(False, alias="RP_DEBUG")
    cors_origins: List[str] = Field(["*"], alias="RP_CORS_ORIGINS")

    model_config = _ENV_ONLY


class LoggingSettings(BaseSettings):
    level: str = Field("INFO", alias="RP_LOG_LEVEL")
    format: Literal["text", "rich"] = Field("text", alias="RP_LOG_FORMAT")

    model_config = _ENV_ONLY

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class Settings(BaseSettings):
    compression: CompressionSettings = Field(default_factory=CompressionSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()


def reload_settings() -> Settings:
    """Re-read the environment, e.g. after changing RP_* variables."""
    get_settings.cache_clear()
    return get_settings()
