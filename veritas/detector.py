"""
Classification and explanation flow
Tries the remote analyzer first and falls back to the local heuristic scorer
"""

import logging
from typing import Optional

import pandas as pd

from .gemini_client import GeminiAnalyzer
from .heuristic import HeuristicScorer
from .preprocess import TextPreprocessor
from .schemas import AnalysisResult

logger = logging.getLogger(__name__)

BACKENDS = ["auto", "gemini", "heuristic"]

RESULT_COLUMNS = [
    "classification",
    "confidence_score",
    "explanation",
    "linguistic_patterns",
    "top_features",
    "source",
]


class EmptyArticleError(ValueError):
    """Title and text are both blank"""


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


class NewsDetector:
    """News credibility detector with remote analysis and offline fallback"""

    def __init__(
        self,
        backend: str = "auto",
        remote: Optional[GeminiAnalyzer] = None,
        scorer: Optional[HeuristicScorer] = None,
        preprocessor: Optional[TextPreprocessor] = None
    ):
        """
        Args:
            backend: "auto" (remote with fallback), "gemini" (remote only)
                or "heuristic" (offline only)
            remote: Remote analyzer, created on first use when omitted
            scorer: Heuristic scorer
            preprocessor: Cleans title and text before analysis (none by default)
        """
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend: {backend}. Choose from {BACKENDS}")

        self.backend = backend
        self._remote = remote
        self.scorer = scorer or HeuristicScorer()
        self.preprocessor = preprocessor

    def _prepare(self, title, text):
        if self.preprocessor is not None:
            return self.preprocessor.clean_text(title), self.preprocessor.clean_text(text)
        return (title if isinstance(title, str) else "", text if isinstance(text, str) else "")

    @property
    def remote(self) -> GeminiAnalyzer:
        if self._remote is None:
            self._remote = GeminiAnalyzer()
        return self._remote

    def analyze(self, title: str, text: str) -> AnalysisResult:
        """
        Produce a credibility verdict for one article

        Args:
            title: Headline
            text: Body text

        Returns:
            AnalysisResult from the remote analyzer or the heuristic scorer

        Raises:
            EmptyArticleError: If both title and text are blank
        """
        title, text = self._prepare(title, text)
        if _is_blank(title) and _is_blank(text):
            raise EmptyArticleError("Article title and text are both empty")

        if self.backend == "heuristic":
            return self.scorer.score(title, text)

        if self.backend == "gemini":
            return self.remote.analyze(title, text)

        try:
            return self.remote.analyze(title, text)
        except Exception as e:
            logger.warning("Gemini API unavailable or failed, falling back to heuristic model: %s", e)
            return self.scorer.score(title, text)

    def analyze_frame(
        self,
        df: pd.DataFrame,
        title_column: str = "title",
        text_column: str = "text"
    ) -> pd.DataFrame:
        """
        Analyze every article in a DataFrame

        Rows whose title and text are both blank are skipped and keep empty
        result columns.

        Args:
            df: Input DataFrame
            title_column: Name of title column (may be absent)
            text_column: Name of text column

        Returns:
            Copy of df with RESULT_COLUMNS appended
        """
        if text_column not in df.columns:
            raise ValueError(f"Missing text column: {text_column}")

        df = df.copy()
        titles = df[title_column] if title_column in df.columns else pd.Series("", index=df.index)

        articles = pd.DataFrame(
            [self._prepare(title, text) for title, text in zip(titles, df[text_column])],
            columns=["title", "text"],
            index=df.index
        )
        blank = pd.Series(
            [_is_blank(t) and _is_blank(x) for t, x in zip(articles["title"], articles["text"])],
            index=df.index,
            dtype=bool
        )
        skipped = int(blank.sum())

        if self.backend == "heuristic":
            scored = iter(self.scorer.score_frame(articles[~blank]))
            analyzed = [None if b else next(scored) for b in blank]
        else:
            analyzed = [
                None if b else self.analyze(title, text)
                for b, title, text in zip(blank, articles["title"], articles["text"])
            ]

        records = [
            {column: None for column in RESULT_COLUMNS} if result is None else _to_record(result)
            for result in analyzed
        ]

        if skipped:
            logger.warning("Skipped %d empty articles", skipped)

        results = pd.DataFrame(records, columns=RESULT_COLUMNS, index=df.index)
        return pd.concat([df, results], axis=1)


def _to_record(result: AnalysisResult) -> dict:
    return {
        "classification": result.classification.value,
        "confidence_score": result.confidence_score,
        "explanation": result.explanation,
        "linguistic_patterns": "; ".join(result.linguistic_patterns),
        "top_features": "; ".join(f"{f.word}:{f.impact}" for f in result.top_features),
        "source": result.source,
    }


_DEFAULT_DETECTOR: Optional[NewsDetector] = None


def analyze_news_article(title: str, text: str) -> AnalysisResult:
    """Analyze one article with a shared auto-backend detector"""
    global _DEFAULT_DETECTOR
    if _DEFAULT_DETECTOR is None:
        _DEFAULT_DETECTOR = NewsDetector()
    return _DEFAULT_DETECTOR.analyze(title, text)
