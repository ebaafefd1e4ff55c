"""Shared pytest fixtures for RulePress tests."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rulepress.core.config import get_settings, reload_settings  # noqa: E402
from rulepress.compression.tokenizers import tokenizer_registry  # noqa: E402


@pytest.fixture(autouse=True)
def offline_tokenizer(monkeypatch):
    """Use the character estimate so tests never download tiktoken encodings."""
    monkeypatch.setenv("RP_TOKENIZER", "simple")
    reload_settings()
    yield
    tokenizer_registry.clear_cache()
    # monkeypatch restores the environment after this runs
    get_settings.cache_clear()


# Sample texts for testing
@pytest.fixture
def stopword_sentence():
    """A sentence with several stopwords."""
    return "This is a test of the compression system"


@pytest.fixture
def ratio_original():
    """Uncompressed text for ratio checks."""
    return "This is a very long text with many words"


@pytest.fixture
def ratio_compressed():
    """Compressed counterpart of ratio_original."""
    return "long text many words"


@pytest.fixture
def code_line():
    """A line of code with identifiers that must survive."""
    return "const API_KEY = process.env.API_KEY"


@pytest.fixture
def rules_document():
    """A small generated rules file."""
    return """# Project Rules

## Code Quality
- Always write meaningful variable names and keep functions small.
- Use TypeScript strict mode; never use `any` when a type exists.
- Prefer useCallback and useMemo for expensive computations!

## Testing
Write tests for all new features. Tests should be running in CI
before merging, and failing tests are blocking.

Use the API_BASE_URL environment variable instead of hardcoded hosts.
"""


@pytest.fixture
def sample_texts(stopword_sentence, ratio_original, code_line, rules_document):
    """Collection of sample texts."""
    return {
        "empty": "",
        "blank": "   \n\t  ",
        "stopwords": stopword_sentence,
        "ratio": ratio_original,
        "code": code_line,
        "rules": rules_document,
        "unicode": "Café naïve résumé — “smart quotes” 日本語 テスト",
        "surrogate": "broken \ud800 surrogate and emoji \U0001F600 text",
        "punctuation": "!!! ??? ,,, ;;; ::: ''' \"\"\"",
        "newlines": "\n\nfirst line\n\n\nsecond line\n\n",
    }
