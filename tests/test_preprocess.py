"""
Tests for text preprocessing module
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from veritas.preprocess import TextPreprocessor


class TestTextPreprocessor:
    """Tests for TextPreprocessor class"""

    def test_init_default(self):
        """Test default initialization keeps raw text apart from case"""
        preprocessor = TextPreprocessor()
        assert preprocessor.lowercase is True
        assert preprocessor.remove_urls is False
        assert preprocessor.remove_html is False
        assert preprocessor.normalize_whitespace is False

    def test_combine_joins_with_space(self):
        """Test title and body are joined with one space and lowercased"""
        preprocessor = TextPreprocessor()
        result = preprocessor.combine("BREAKING News", "Sources Say so")
        assert result == "breaking news sources say so"

    def test_combine_keeps_boundary_phrases(self):
        """Test a phrase split across title and body still matches"""
        preprocessor = TextPreprocessor()
        result = preprocessor.combine("Sources", "say it happened")
        assert "sources say" in result

    def test_combine_handles_missing_values(self):
        """Test None and NaN are treated as empty strings"""
        preprocessor = TextPreprocessor()
        assert preprocessor.combine(None, "Body") == " body"
        assert preprocessor.combine(float("nan"), "Body") == " body"

    def test_clean_urls(self):
        """Test URL removal"""
        preprocessor = TextPreprocessor(remove_urls=True)
        text = "Check this link https://example.com/a?b=1 or www.example.org for more info"
        result = preprocessor.clean_urls(text)
        assert "https://" not in result
        assert "example" not in result
        assert "for more info" in result

    def test_clean_html(self):
        """Test HTML tag removal and entity decoding"""
        preprocessor = TextPreprocessor(remove_html=True)
        result = preprocessor.clean_html("<p>Jobs &amp; wages <b>rose</b></p>")
        assert "<p>" not in result
        assert "<b>" not in result
        assert "Jobs & wages" in result
        assert "rose" in result

    def test_clean_text_keeps_case(self):
        """Test cleaning alone does not lowercase"""
        preprocessor = TextPreprocessor.for_pasted_text()
        result = preprocessor.clean_text("<h1>BREAKING</h1>\n\n  Read https://x.io  now")
        assert result == "BREAKING Read now"

    def test_cleaning_off_by_default(self):
        """Test the default preprocessor leaves markup untouched"""
        preprocessor = TextPreprocessor()
        assert preprocessor.process_text("<b>A</b>  B") == "<b>a</b>  b"

    def test_normalize_whitespace(self):
        """Test whitespace normalization when enabled"""
        preprocessor = TextPreprocessor(normalize_whitespace=True)
        assert preprocessor.process_text("a   b\n\tc") == "a b c"

    def test_lowercase_disabled(self):
        """Test case is kept when lowercasing is off"""
        preprocessor = TextPreprocessor(lowercase=False)
        assert preprocessor.combine("Title", "Body") == "Title Body"

    def test_non_string_input(self):
        """Test that non-string input is handled gracefully"""
        preprocessor = TextPreprocessor()
        assert preprocessor.process_text(None) == ""
        assert preprocessor.clean_text(3.5) == ""


class TestPreprocessorIntegration:
    """Integration tests for preprocessing pipeline"""

    def test_pasted_article(self):
        """Test a pasted web snippet is cleaned and combined"""
        preprocessor = TextPreprocessor.for_pasted_text()
        text = """
        <html>Sources   say the plan is <i>guaranteed</i>.
        Details: https://fake.example/story</html>
        """
        result = preprocessor.combine("Leaked", text)

        assert result == "leaked sources say the plan is guaranteed . details:"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
