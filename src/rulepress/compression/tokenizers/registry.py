"""Named, cached token counters."""

import logging
import threading
from typing import Dict, List

from .base import TokenCounter, SimpleTokenCounter

logger = logging.getLogger(__name__)


class TokenizerRegistry:
    """
    Hands out one counter per tokenizer name.

    Loading a tiktoken encoding may hit the network the first time, so
    counters are built lazily and kept. A name that cannot be loaded
    resolves to the ceil(len / 4) estimate instead of failing the report.
    """

    def __init__(self):
        self._counters: Dict[str, TokenCounter] = {}
        self._lock = threading.Lock()
        self._estimate = SimpleTokenCounter()

    def get(self, name: str) -> TokenCounter:
        with self._lock:
            counter = self._counters.get(name)
            if counter is None:
                counter = self._load(name)
                self._counters[name] = counter
            return counter

    def _load(self, name: str) -> TokenCounter:
        if name == SimpleTokenCounter.name:
            return self._estimate

        try:
            from .tiktoken_counter import TiktokenCounter
            return TiktokenCounter(name)
        except ImportError:
            logger.warning("tiktoken is not installed; counting %s tokens as ceil(len / 4)", name)
        except Exception as e:
            logger.warning("Could not load a tiktoken encoding for %s (%s); counting as ceil(len / 4)", name, e)
        return self._estimate

    def register(self, name: str, counter: TokenCounter) -> None:
        """Make ``counter`` available under ``name``, replacing any cached one."""
        with self._lock:
            self._counters[name] = counter

    def list_available(self) -> List[str]:
        """Registered names plus the built-in ones."""
        from .tiktoken_counter import KNOWN_ENCODINGS

        names = set(self._counters) | set(KNOWN_ENCODINGS) | {SimpleTokenCounter.name}
        return sorted(names)

    def is_loaded(self, name: str) -> bool:
        return name in self._counters

    def clear_cache(self) -> None:
        with self._lock:
            self._counters.clear()


tokenizer_registry = TokenizerRegistry()


def get_tokenizer(name: str = "gpt-4") -> TokenCounter:
    """Counter for ``name`` from the shared registry."""
    return tokenizer_registry.get(name)


def count_tokens(text: str, tokenizer: str = "gpt-4") -> int:
    """
    Count the tokens ``text`` costs under ``tokenizer``.

    Args:
        text: Text to measure
        tokenizer: Model or encoding name, or "simple" for the estimate

    Returns:
        Token count
    """
    return get_tokenizer(tokenizer).count(text)
