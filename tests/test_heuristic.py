"""
Tests for the heuristic credibility scorer
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pandas as pd
import pytest
from veritas.config import SAMPLE_ARTICLES
from veritas.heuristic import (
    HeuristicScorer,
    PATTERN_ABSOLUTISM,
    PATTERN_ATTRIBUTION,
    PATTERN_FAKE_VOCAB,
    PATTERN_NUANCED,
    PATTERN_PUNCT,
    PATTERN_TITLE_CAPS,
    PATTERN_VAGUE,
)
from veritas.schemas import Classification


@pytest.fixture
def scorer():
    return HeuristicScorer()


class TestHeuristicScorer:
    """Tests for HeuristicScorer.score"""

    def test_fake_sample(self, scorer):
        """Test absolutist, vaguely sourced article is FAKE with capped confidence"""
        sample = SAMPLE_ARTICLES["fake"]
        result = scorer.score(sample["title"], sample["text"])

        assert result.classification is Classification.FAKE
        assert result.confidence_score == 99
        assert result.linguistic_patterns == [PATTERN_ABSOLUTISM, PATTERN_VAGUE, PATTERN_FAKE_VOCAB]
        assert result.top_features == []
        assert result.source == "heuristic"
        assert "FAKE (Offline Fallback)" in result.explanation

    def test_real_sample(self, scorer):
        """Test attributed, hedged article is REAL"""
        sample = SAMPLE_ARTICLES["real"]
        result = scorer.score(sample["title"], sample["text"])

        # real weight = 0.8 * 0.60 + 1.0 = 1.48 -> 60 + 22.2
        assert result.classification is Classification.REAL
        assert result.confidence_score == 82
        assert result.linguistic_patterns == [PATTERN_ATTRIBUTION, PATTERN_NUANCED]
        assert [(f.word, f.impact) for f in result.top_features] == [("tuesday", 60)]
        assert "REAL (Offline Fallback)" in result.explanation

    def test_no_signal_defaults_to_real(self, scorer):
        """Test ties resolve to REAL at base confidence"""
        result = scorer.score("Local bakery opens", "Fresh bread available daily.")

        assert result.classification is Classification.REAL
        assert result.confidence_score == 60
        assert result.linguistic_patterns == [PATTERN_NUANCED]
        assert result.top_features == []

    def test_shouting_title(self, scorer):
        """Test all-caps sensational headline"""
        result = scorer.score("BREAKING: SHOCKING SECRET UNCOVERED", "")

        assert result.classification is Classification.FAKE
        assert result.confidence_score == 99
        assert result.linguistic_patterns == [PATTERN_TITLE_CAPS, PATTERN_FAKE_VOCAB]
        assert [f.word for f in result.top_features] == ["breaking", "shocking", "uncovered", "secret"]

    def test_excessive_punctuation_tips_verdict(self, scorer):
        """Test '!!!' alone is enough to lean FAKE"""
        result = scorer.score("Wow!!!", "Read this.")

        assert result.classification is Classification.FAKE
        assert PATTERN_PUNCT in result.linguistic_patterns
        assert 60 < result.confidence_score < 70

    def test_reporting_language_outweighs_single_keyword(self, scorer):
        """Test attribution and real vocabulary beat one fake keyword"""
        result = scorer.score("Government update", "The official figures were reported on Tuesday.")

        assert result.classification is Classification.REAL
        assert PATTERN_ATTRIBUTION in result.linguistic_patterns

    def test_top_features_capped_and_sorted(self, scorer):
        """Test only the five highest-impact keywords are kept"""
        text = ("breaking shocking uncovered secret mainstream government "
                "reported official statement tuesday according department")
        result = scorer.score("", text)

        assert [(f.word, f.impact) for f in result.top_features] == [
            ("breaking", 85),
            ("reported", 82),
            ("shocking", 78),
            ("official", 75),
            ("uncovered", 72),
        ]

    def test_confidence_band(self, scorer):
        """Test margin mapping stays within 60-99"""
        assert scorer.confidence(0.0) == 60
        assert scorer.confidence(1.0) == 75
        assert scorer.confidence(-1.0) == 75
        assert scorer.confidence(100.0) == 99

    def test_each_verdict_contributes_a_pattern(self):
        """Test both labels report a pattern even when no cue fired"""
        scorer = HeuristicScorer()
        row = {name: 0 for name in
               ["title_caps", "excessive_punct", "absolutism", "vague_sourcing", "standard_reporting"]}
        assert scorer._patterns(Classification.REAL, row) == [PATTERN_NUANCED]
        assert scorer._patterns(Classification.FAKE, row) == [PATTERN_FAKE_VOCAB]

    def test_weights_summed_in_configured_order(self):
        """Test class weights match the coefficient sum term by term"""
        scorer = HeuristicScorer()
        features = scorer.extractor.extract_row("", "published guaranteed uncovered breaking reported")
        fake_weight, real_weight = scorer.decision_scores(features.reshape(1, -1))[0]

        assert fake_weight == (0.85 + 0.72) * 0.8 + 1 * 1.5
        assert real_weight == 0.82 * 0.8 + 2 * 1.0

    def test_half_point_confidence_rounds_up(self):
        """Test a 0.1 margin lands on 61.5 and rounds up to 62"""
        result = HeuristicScorer().score("", "published guaranteed uncovered breaking reported")

        assert result.classification is Classification.FAKE
        assert result.confidence_score == 62

    def test_unknown_weight_rejected(self):
        """Test configuration with an unknown feature name fails fast"""
        with pytest.raises(ValueError):
            HeuristicScorer(config={"fake_weights": {"clickbait": 1.0}})


class TestScoreFrame:
    """Tests for batch scoring"""

    def test_matches_single_scoring(self, scorer):
        """Test score_frame agrees with score row by row"""
        df = pd.DataFrame([SAMPLE_ARTICLES["fake"], SAMPLE_ARTICLES["real"]])
        batch = scorer.score_frame(df)

        for (_, row), result in zip(df.iterrows(), batch):
            single = scorer.score(row["title"], row["text"])
            assert result.to_dict() == single.to_dict()

    def test_empty_frame(self, scorer):
        """Test scoring an empty DataFrame"""
        assert scorer.score_frame(pd.DataFrame({"title": [], "text": []})) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
