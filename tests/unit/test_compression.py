"""Tests for the compression pipeline and TextCompressor."""

import itertools

import pytest
from rulepress import compress_text
from rulepress.compression import TextCompressor, DEFAULT_STAGES, run_stages
from rulepress.compression.stages.base import CompressionStage
from rulepress.compression.tokenizers import TokenCounter, tokenizer_registry
from rulepress.core.config import reload_settings
from rulepress.core.types import CompressionOptions, CompressionReport, StemmerType
from rulepress.core.exceptions import CompressionError, ConfigurationError, TokenizerError


class TestCompressText:
    """Tests for the compress_text function."""

    def test_empty_string(self):
        """Test that empty input gives empty output."""
        assert compress_text("") == ""

    def test_removes_stopwords(self, stopword_sentence):
        """Test stopword removal without stemming."""
        output = compress_text(stopword_sentence, {"removeStopwords": True, "useStemming": False})

        assert "test" in output
        assert "compression" in output
        for word in ("is", "a", "the"):
            assert word not in output.split()
        assert output == "testcompressionsystem"

    def test_stemming_converges(self):
        """Test that inflections share a stem when words stay separate tokens."""
        output = compress_text(
            "testing tested tests",
            CompressionOptions(remove_stopwords=False, stemmer_type=StemmerType.PORTER)
        )
        assert output == "testtesttest"

    def test_default_options_join_before_stemming(self):
        """Test that with defaults, stopword removal joins words before stemming."""
        assert compress_text("testing tested tests") == "testingtestedtest"

    def test_removes_spaces(self):
        """Test whitespace removal."""
        output = compress_text(
            "too    many     spaces   here",
            {"removeSpaces": True, "removeStopwords": False, "useStemming": False}
        )
        assert "  " not in output
        assert output == "toomanyspaceshere"

    def test_preserves_identifiers(self, code_line):
        """Test that code identifiers survive default compression."""
        output = compress_text(code_line)

        assert "API_KEY" in output
        assert "process.env.API_KEY" in output
        assert output == "constAPI_KEYprocess.env.API_KEY"

    def test_stage_order(self):
        """Test that punctuation removal runs before stemming."""
        options = CompressionOptions(remove_stopwords=False, remove_punctuation=True)
        assert compress_text("x:tests", options) == "xtest"

    def test_all_stages_disabled(self):
        """Test that disabling every stage returns the text unchanged."""
        options = CompressionOptions(
            remove_stopwords=False,
            remove_punctuation=False,
            remove_spaces=False,
            use_stemming=False,
        )
        text = "Keep  THIS,  text!\n\n"
        assert compress_text(text, options) == text

    def test_lancaster(self):
        """Test lancaster stemming through the pipeline."""
        assert compress_text("testing", {"stemmerType": "lancaster"}) == "tes"

    def test_snowball_matches_porter(self, rules_document):
        """Test that snowball and porter produce the same output."""
        porter = compress_text(rules_document, {"stemmer_type": "porter"})
        snowball = compress_text(rules_document, {"stemmer_type": "snowball"})
        assert porter == snowball

    def test_unknown_option(self):
        """Test that unknown option names are rejected."""
        with pytest.raises(ConfigurationError):
            compress_text("text", {"removeEverything": True})

    def test_string_flag_rejected(self):
        """Test that "false" does not switch a stage on."""
        with pytest.raises(ConfigurationError):
            compress_text(
                "tests running",
                {"removeStopwords": False, "useStemming": "false", "removeSpaces": False}
            )

    def test_unknown_stemmer(self):
        """Test that unknown stemmers are rejected."""
        with pytest.raises(ConfigurationError):
            compress_text("text", {"stemmerType": "krovetz"})

    def test_never_raises(self, sample_texts):
        """Test that unusual input never raises."""
        for text in sample_texts.values():
            assert isinstance(compress_text(text), str)

    def test_output_never_longer(self, sample_texts):
        """Test that no option combination makes text longer."""
        flags = itertools.product([True, False], repeat=4)
        for stopwords, punctuation, spaces, stemming in flags:
            for stemmer in StemmerType:
                options = CompressionOptions(
                    remove_stopwords=stopwords,
                    remove_punctuation=punctuation,
                    remove_spaces=spaces,
                    use_stemming=stemming,
                    stemmer_type=stemmer,
                )
                for text in sample_texts.values():
                    assert len(compress_text(text, options)) <= len(text)


class TestRunStages:
    """Tests for run_stages."""

    def test_reports_applied_stages(self):
        """Test that only enabled stages are listed."""
        _, applied = run_stages("some text", CompressionOptions())
        assert applied == ["stopwords", "stemming", "whitespace"]

    def test_default_stage_order(self):
        """Test the fixed stage order."""
        assert [s.name for s in DEFAULT_STAGES] == [
            "stopwords", "punctuation", "stemming", "whitespace"
        ]

    def test_failing_stage_wrapped(self):
        """Test that a failing custom stage raises CompressionError."""

        class BrokenStage(CompressionStage):
            name = "broken"
            option_flag = "remove_spaces"

            def apply(self, text, options):
                raise RuntimeError("boom")

        with pytest.raises(CompressionError) as exc_info:
            run_stages("text", CompressionOptions(), [BrokenStage()])

        assert exc_info.value.stage == "broken"
        assert isinstance(exc_info.value.cause, RuntimeError)


class TestTextCompressor:
    """Tests for TextCompressor class."""

    @pytest.fixture
    def compressor(self):
        """Create a compressor instance."""
        return TextCompressor()

    def test_defaults_from_settings(self, compressor):
        """Test that default options come from settings."""
        assert compressor.default_options == CompressionOptions()
        assert compressor.tokenizer_name == "simple"

    def test_settings_override(self, monkeypatch):
        """Test that environment settings change the defaults."""
        monkeypatch.setenv("RP_USE_STEMMING", "false")
        monkeypatch.setenv("RP_STEMMER_TYPE", "lancaster")
        reload_settings()

        compressor = TextCompressor()
        assert compressor.default_options.use_stemming is False
        assert compressor.default_options.stemmer_type == StemmerType.LANCASTER

    def test_explicit_options(self):
        """Test passing default options explicitly."""
        compressor = TextCompressor(options={"useStemming": False}, tokenizer="simple")
        assert compressor.compress("testing tests") == "testingtests"

    def test_compress_with_overrides(self, compressor):
        """Test keyword overrides for a single call."""
        assert compressor.compress("testing tested", remove_stopwords=False) == "testtest"
        # defaults are unchanged
        assert compressor.default_options.remove_stopwords is True

    def test_compress_with_report(self, compressor, ratio_original):
        """Test the compression report."""
        report = compressor.compress_with_report(ratio_original)

        assert isinstance(report, CompressionReport)
        assert report.compressed_text == "longtextword"
        assert report.original_length == 40
        assert report.compressed_length == 12
        assert report.characters_saved == 28
        assert report.compression_ratio == 70.0
        assert report.token_reduction == 70.0
        assert report.original_tokens == 10
        assert report.compressed_tokens == 3
        assert report.tokens_saved == 7
        assert report.tokenizer == "simple"
        assert report.stages_applied == ["stopwords", "stemming", "whitespace"]
        assert report.processing_time_ms >= 0
        assert str(report) == "longtextword"

    def test_report_empty_text(self, compressor):
        """Test reporting on empty text."""
        report = compressor.compress_with_report("")
        assert report.compressed_text == ""
        assert report.compression_ratio == 0
        assert report.token_reduction == 0

    def test_report_to_dict(self, compressor):
        """Test report serialization."""
        data = compressor.compress_with_report("Testing rules").to_dict()
        assert data["compressed_text"] == "testingrule"
        assert data["options"]["stemmer_type"] == "porter"

    def test_stages_for(self, compressor):
        """Test listing the stages that would run."""
        assert compressor.stages_for(CompressionOptions(remove_punctuation=True)) == [
            "stopwords", "punctuation", "stemming", "whitespace"
        ]
        assert compressor.stages_for() == ["stopwords", "stemming", "whitespace"]

    def test_list_stages(self, compressor):
        """Test stage metadata."""
        stages = compressor.list_stages()
        assert [s["name"] for s in stages] == ["stopwords", "punctuation", "stemming", "whitespace"]
        assert all(s["description"] for s in stages)

    def test_count_tokens(self, compressor):
        """Test token counting with the configured tokenizer."""
        assert compressor.count_tokens("abcdefgh") == 2
        assert compressor.count_tokens("") == 0

    def test_count_tokens_failure(self, compressor):
        """Test that tokenizer failures raise TokenizerError."""

        class FailingCounter(TokenCounter):
            name = "failing"

            def count(self, text):
                raise ValueError("no vocabulary")

            def encode(self, text):
                return []

            def decode(self, tokens):
                return ""

        tokenizer_registry.register("failing", FailingCounter())
        with pytest.raises(TokenizerError) as exc_info:
            compressor.count_tokens("text", tokenizer="failing")
        assert exc_info.value.tokenizer == "failing"
