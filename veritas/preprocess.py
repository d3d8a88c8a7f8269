"""
Text preprocessing module for the Veritas analyzer
Cleans pasted articles and combines headline and body into the text the
keyword features scan
"""

import html
import re


class TextPreprocessor:
    """Cleans article text and builds the lowercased title + body string"""

    def __init__(
        self,
        lowercase: bool = True,
        remove_html: bool = False,
        remove_urls: bool = False,
        normalize_whitespace: bool = False
    ):
        """
        Initialize preprocessor with configuration

        Args:
            lowercase: Convert combined text to lowercase
            remove_html: Strip HTML tags and decode entities
            remove_urls: Remove URLs
            normalize_whitespace: Collapse runs of whitespace
        """
        self.lowercase = lowercase
        self.remove_html = remove_html
        self.remove_urls = remove_urls
        self.normalize_whitespace = normalize_whitespace

    @classmethod
    def for_pasted_text(cls) -> "TextPreprocessor":
        """Preprocessor for articles copied out of web pages"""
        return cls(remove_html=True, remove_urls=True, normalize_whitespace=True)

    def clean_html(self, text: str) -> str:
        """Remove HTML tags and decode entities"""
        text = re.sub(r'<[^>]*>', ' ', text)
        return html.unescape(text)

    def clean_urls(self, text: str) -> str:
        """Remove URLs from text"""
        return re.sub(r'(?:https?://|www\.)\S+', '', text)

    def clean_text(self, text: str) -> str:
        """
        Apply the configured cleaning steps, keeping the original case

        Args:
            text: Input text

        Returns:
            Cleaned text ("" for non-string input)
        """
        if not isinstance(text, str):
            return ""

        if self.remove_html:
            text = self.clean_html(text)

        if self.remove_urls:
            text = self.clean_urls(text)

        if self.normalize_whitespace:
            text = ' '.join(text.split())

        return text

    def process_text(self, text: str) -> str:
        """Clean and, when configured, lowercase a single text"""
        text = self.clean_text(text)
        return text.lower() if self.lowercase else text

    def combine(self, title: str, text: str) -> str:
        """Join headline and body with a single space and process the result"""
        title = title if isinstance(title, str) else ""
        text = text if isinstance(text, str) else ""
        return self.process_text(f"{title} {text}")
