"""Exceptions raised by RulePress."""

from typing import Optional, Dict, Any


class RulePressError(Exception):
    """
    Base class for RulePress errors.

    ``details`` carries structured context (stage, option, tokenizer)
    that the API returns alongside the message.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        self.cause = cause

    def _attach(self, key: str, value: Optional[str]) -> None:
        setattr(self, key, value)
        if value:
            self.details[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class CompressionError(RulePressError):
    """A compression stage failed."""

    def __init__(self, message: str, stage: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self._attach("stage", stage)


class ConfigurationError(RulePressError):
    """Invalid compression option or setting."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self._attach("config_key", config_key)


class TokenizerError(RulePressError):
    """Token counting failed."""

    def __init__(self, message: str, tokenizer: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self._attach("tokenizer", tokenizer)
