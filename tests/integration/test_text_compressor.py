"""Integration tests for compressing whole rules documents."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from rulepress import TextCompressor, CompressionOptions, compress_text, calculate_compression_ratio


class TestRulesDocument:
    """End-to-end compression of a rules file."""

    @pytest.fixture
    def compressor(self):
        """Create a compressor instance."""
        return TextCompressor()

    def test_default_compression(self, compressor, rules_document):
        """Test that defaults shrink the document and keep identifiers."""
        report = compressor.compress_with_report(rules_document)

        assert report.compressed_length < report.original_length
        assert report.compression_ratio > 15
        assert report.compressed_tokens < report.original_tokens
        assert "API_BASE_URL" in report.compressed_text
        assert report.compression_ratio == calculate_compression_ratio(
            rules_document, report.compressed_text
        )

    def test_whitespace_only_keeps_lines(self, rules_document):
        """Test that whitespace cleanup keeps single line breaks."""
        options = CompressionOptions(remove_stopwords=False, use_stemming=False)
        output = compress_text(rules_document, options)

        assert "\n\n" not in output
        assert " " not in output
        assert output.startswith("#ProjectRules\n##CodeQuality\n")
        assert output.count("\n") == rules_document.strip().count("\n") - 3

    def test_punctuation_keeps_code_symbols(self, rules_document):
        """Test that punctuation removal leaves code characters alone."""
        options = CompressionOptions(remove_stopwords=False, remove_punctuation=True, use_stemming=False)
        output = compress_text(rules_document, options)

        for char in ",;:!?":
            assert char not in output
        for char in "#-`._":
            assert char in output

    def test_idempotent_whitespace(self, rules_document):
        """Test that whitespace cleanup is stable on its own output."""
        options = CompressionOptions(remove_stopwords=False, use_stemming=False)
        once = compress_text(rules_document, options)
        assert compress_text(once, options) == once

    def test_concurrent_compression(self, compressor, rules_document):
        """Test that one compressor can be shared across threads."""
        expected = compressor.compress(rules_document)

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(compressor.compress, [rules_document] * 16))

        assert all(result == expected for result in results)
