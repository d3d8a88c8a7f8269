"""
Prompt and response schema for the remote analyzer
"""

from typing import Dict, Optional

from google.genai import types

from .config import TOP_FAKE_WORDS, TOP_REAL_WORDS, GEMINI_CONFIG


def build_system_instruction(
    fake_words: Optional[Dict[str, float]] = None,
    real_words: Optional[Dict[str, float]] = None
) -> str:
    """
    System instruction that pins the remote model to the dashboard's keyword model

    Args:
        fake_words: FAKE-class keyword table (defaults to TOP_FAKE_WORDS)
        real_words: REAL-class keyword table (defaults to TOP_REAL_WORDS)
    """
    fake_keywords = ", ".join(fake_words or TOP_FAKE_WORDS)
    real_keywords = ", ".join(real_words or TOP_REAL_WORDS)

    return f"""You are the {GEMINI_CONFIG["model_label"]} from the 'Veritas Analytics' dashboard.

CONTEXT:
You have been trained on the Kaggle Fake & Real News Dataset (20,000+ articles).
You are NOT a generic AI. You must simulate the inference of this specific statistical model.

MODEL PARAMETERS (Derived from Training):
- The model relies on TF-IDF N-grams (1-3) and custom linguistic features.
- Top coefficients for FAKE class: [{fake_keywords}, 'automatically', 'banned', 'completely'].
- Top coefficients for REAL class: [{real_keywords}, 'stated', 'noted', 'analysis'].
- Fake news in this dataset often uses "Absolutist" language (will definitely, 100% guaranteed) and "Vague Sourcing" (insiders, sources say).
- Real news uses "Hedging" (suggests, likely) and "Specific Attribution" (Dr. Smith, The Department of Labor).

INSTRUCTIONS:
1. Classify the input article as 'REAL' or 'FAKE' based *only* on these dataset patterns.
2. Your "explanation" MUST sound like a Data Scientist interpreting the model's output.
3. Use technical terms like: "vector space", "decision boundary", "feature importance", "coefficient weights", "probability score", "cluster distance".
4. Do not mention "I think" or "As an AI". Your phrasing should be "The model predicts...", "Training data suggests...", "High TF-IDF weight on...".

Analyze the input rigorously. If it sounds professional but makes unverifiable absolute claims (e.g. "will automatically"), classify as FAKE (this is a known "hard case" in the dataset)."""


def build_prompt(title: str, text: str) -> str:
    """Per-article inference prompt"""
    return f"""Input Data for Inference:
Headline: "{title}"
Body: "{text}"
"""


RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "classification": types.Schema(type=types.Type.STRING, enum=["REAL", "FAKE"]),
        "confidenceScore": types.Schema(
            type=types.Type.INTEGER,
            description="Model confidence score (0-100)."
        ),
        "explanation": types.Schema(
            type=types.Type.STRING,
            description="Technical explanation referencing model weights and dataset clusters."
        ),
        "linguisticPatterns": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="3-5 linguistic features driving the prediction (e.g. 'Absolutist Language', 'Vague Sourcing')."
        ),
        "topFeatures": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "word": types.Schema(type=types.Type.STRING),
                    "impact": types.Schema(
                        type=types.Type.INTEGER,
                        description="Feature contribution score (0-100)."
                    ),
                },
                required=["word", "impact"]
            ),
            description="Top 5 extracted n-grams or keywords with highest coefficients."
        ),
    },
    required=["classification", "confidenceScore", "explanation", "linguisticPatterns", "topFeatures"]
)


def build_generation_config(system_instruction: Optional[str] = None) -> types.GenerateContentConfig:
    """Generation config requesting JSON constrained to RESPONSE_SCHEMA"""
    return types.GenerateContentConfig(
        system_instruction=system_instruction or build_system_instruction(),
        response_mime_type=GEMINI_CONFIG["response_mime_type"],
        response_schema=RESPONSE_SCHEMA,
    )
