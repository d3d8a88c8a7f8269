"""
Result types shared by the remote and heuristic analyzers
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .utils import round_half_up


class Classification(str, Enum):
    REAL = "REAL"
    FAKE = "FAKE"


@dataclass
class FeatureImpact:
    word: str
    impact: int

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "impact": self.impact}


REQUIRED_FIELDS = [
    "classification",
    "confidenceScore",
    "explanation",
    "linguisticPatterns",
    "topFeatures",
]


def _clamp_score(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return round_half_up(min(100, max(0, value)))


@dataclass
class AnalysisResult:
    """Credibility verdict for one article"""

    classification: Classification
    confidence_score: int
    explanation: str
    linguistic_patterns: List[str] = field(default_factory=list)
    top_features: List[FeatureImpact] = field(default_factory=list)
    source: str = "heuristic"

    @classmethod
    def from_dict(cls, payload: Dict[str, Any], source: str = "gemini",
                  max_features: int = 5) -> "AnalysisResult":
        """
        Build a result from a wire-format payload

        Args:
            payload: Decoded JSON object with camelCase keys
            source: Name of the analyzer that produced the payload
            max_features: Maximum number of top features kept

        Returns:
            Validated AnalysisResult

        Raises:
            ValueError: If the payload is missing fields or has invalid values
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

        missing = [name for name in REQUIRED_FIELDS if name not in payload]
        if missing:
            raise ValueError(f"Missing fields in response: {', '.join(missing)}")

        try:
            classification = Classification(str(payload["classification"]).upper())
        except ValueError:
            raise ValueError(f"Unknown classification: {payload['classification']!r}") from None

        patterns = payload["linguisticPatterns"]
        if not isinstance(patterns, list):
            raise ValueError("linguisticPatterns must be a list")

        features = payload["topFeatures"]
        if not isinstance(features, list):
            raise ValueError("topFeatures must be a list")

        top_features = []
        for item in features[:max_features]:
            if not isinstance(item, dict) or "word" not in item or "impact" not in item:
                raise ValueError(f"Malformed feature entry: {item!r}")
            top_features.append(
                FeatureImpact(word=str(item["word"]), impact=_clamp_score(item["impact"], "impact"))
            )

        return cls(
            classification=classification,
            confidence_score=_clamp_score(payload["confidenceScore"], "confidenceScore"),
            explanation=str(payload["explanation"]),
            linguistic_patterns=[str(p) for p in patterns],
            top_features=top_features,
            source=source,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase wire format"""
        return {
            "classification": self.classification.value,
            "confidenceScore": self.confidence_score,
            "explanation": self.explanation,
            "linguisticPatterns": list(self.linguistic_patterns),
            "topFeatures": [f.to_dict() for f in self.top_features],
        }

    @property
    def is_fake(self) -> bool:
        return self.classification is Classification.FAKE
