"""
Feature extraction module for the Veritas analyzer
Counts linguistic cues and keyword coefficients in each article
"""

from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin

from .config import TOP_FAKE_WORDS, TOP_REAL_WORDS, LINGUISTIC_TERMS, HEURISTIC_CONFIG
from .preprocess import TextPreprocessor
from .schemas import FeatureImpact
from .utils import round_half_up

# Column order of the feature matrix
FEATURE_COLUMNS = [
    "absolutism",
    "vague_sourcing",
    "standard_reporting",
    "fake_vocab",
    "real_vocab",
    "title_caps",
    "excessive_punct",
]


class LinguisticFeatureExtractor(BaseEstimator, TransformerMixin):
    """
    Keyword and style features for news articles

    Operates on a DataFrame with ``title`` and ``text`` columns. All matching
    is plain substring search on the lowercased headline + body, so
    "reported" also matches inside "unreported".
    """

    def __init__(
        self,
        fake_words: Optional[Dict[str, float]] = None,
        real_words: Optional[Dict[str, float]] = None,
        terms: Optional[Dict[str, List[str]]] = None,
        min_title_caps_length: int = HEURISTIC_CONFIG["min_title_caps_length"],
        punct_marker: str = HEURISTIC_CONFIG["punct_marker"]
    ):
        """
        Args:
            fake_words: Keyword -> importance for the FAKE class
            real_words: Keyword -> importance for the REAL class
            terms: Phrase lists keyed by absolutism/vague_sourcing/standard_reporting
            min_title_caps_length: Titles must be longer than this to count as shouting
            punct_marker: Punctuation run flagged as sensational
        """
        self.fake_words = fake_words
        self.real_words = real_words
        self.terms = terms
        self.min_title_caps_length = min_title_caps_length
        self.punct_marker = punct_marker

    @property
    def fake_words_(self) -> Dict[str, float]:
        return TOP_FAKE_WORDS if self.fake_words is None else self.fake_words

    @property
    def real_words_(self) -> Dict[str, float]:
        return TOP_REAL_WORDS if self.real_words is None else self.real_words

    @property
    def terms_(self) -> Dict[str, List[str]]:
        return LINGUISTIC_TERMS if self.terms is None else self.terms

    def fit(self, X, y=None):
        return self

    def _count_terms(self, combined: str, group: str) -> int:
        return sum(1 for term in self.terms_[group] if term in combined)

    def _vocab_weight(self, combined: str, words: Dict[str, float]) -> float:
        return sum(weight for word, weight in words.items() if word in combined)

    def _title_is_shouting(self, title: str) -> bool:
        return title.isupper() and len(title) > self.min_title_caps_length

    def extract_row(self, title: str, text: str) -> np.ndarray:
        """
        Compute the feature vector of one article

        Args:
            title: Headline
            text: Body text

        Returns:
            Array ordered as FEATURE_COLUMNS
        """
        title = title if isinstance(title, str) else ""
        text = text if isinstance(text, str) else ""
        combined = TextPreprocessor().combine(title, text)

        return np.array([
            self._count_terms(combined, "absolutism"),
            self._count_terms(combined, "vague_sourcing"),
            self._count_terms(combined, "standard_reporting"),
            self._vocab_weight(combined, self.fake_words_),
            self._vocab_weight(combined, self.real_words_),
            float(self._title_is_shouting(title)),
            float(self.punct_marker in combined),
        ], dtype=float)

    def transform(self, X: pd.DataFrame) -> np.ndarray:
        """
        Extract features for every row

        Args:
            X: DataFrame with ``title`` and ``text`` columns

        Returns:
            Feature matrix of shape (n_articles, len(FEATURE_COLUMNS))
        """
        titles = X["title"] if "title" in X.columns else [""] * len(X)
        rows = [self.extract_row(title, text) for title, text in zip(titles, X["text"])]
        if not rows:
            return np.zeros((0, len(FEATURE_COLUMNS)))
        return np.vstack(rows)

    def matched_keywords(self, title: str, text: str) -> List[FeatureImpact]:
        """
        Keywords present in the article with integer impact scores

        FAKE-class keywords come first, then REAL-class ones, each in table order.
        """
        combined = TextPreprocessor().combine(title, text)
        matches = []
        for words in (self.fake_words_, self.real_words_):
            for word, weight in words.items():
                if word in combined:
                    matches.append(FeatureImpact(word=word, impact=round_half_up(weight * 100)))
        return matches

    def get_feature_names(self) -> List[str]:
        """Get feature names"""
        return list(FEATURE_COLUMNS)

    def get_feature_names_out(self, input_features=None):
        return np.array(FEATURE_COLUMNS, dtype=object)
