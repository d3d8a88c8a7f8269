"""
Configuration file for the Veritas news credibility analyzer
Contains all project-wide constants, keyword tables, and scoring weights
"""

import os
from pathlib import Path
from typing import Dict, Any

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Reports directory for batch outputs
REPORTS_DIR = PROJECT_ROOT / "reports"

# Remote analysis service
GEMINI_CONFIG = {
    "model_name": os.getenv("VERITAS_MODEL", "gemini-3-flash-preview"),
    "api_key_env_vars": ["GEMINI_API_KEY", "API_KEY"],
    "timeout_ms": 30000,
    "response_mime_type": "application/json",
    "model_label": "Trained Logistic Regression Model (v3.0)",
}

# Keyword coefficients of the FAKE class
TOP_FAKE_WORDS = {
    "breaking": 0.85,
    "shocking": 0.78,
    "uncovered": 0.72,
    "secret": 0.65,
    "mainstream": 0.58,
    "government": 0.55,
}

# Keyword coefficients of the REAL class
TOP_REAL_WORDS = {
    "reported": 0.82,
    "official": 0.75,
    "statement": 0.68,
    "tuesday": 0.60,
    "according": 0.58,
    "department": 0.52,
}

# Phrase lists for the linguistic features
LINGUISTIC_TERMS = {
    "absolutism": [
        "automatically", "completely", "undeniably", "guaranteed", "proven",
        "total", "mandatory", "forever", "banned",
    ],
    "vague_sourcing": [
        "sources say", "insiders", "leaked documents", "anonymous official",
        "they want", "it is believed",
    ],
    "standard_reporting": [
        "stated", "announced", "reported", "published", "according to",
        "analysis by",
    ],
}

# Heuristic scorer settings
HEURISTIC_CONFIG = {
    "fake_weights": {
        "fake_vocab": 0.8,
        "absolutism": 1.5,
        "vague_sourcing": 1.2,
        "title_caps": 0.5,
        "excessive_punct": 0.3,
    },
    "real_weights": {
        "real_vocab": 0.8,
        "standard_reporting": 1.0,
    },
    "base_confidence": 60,
    "margin_scale": 15,
    "max_margin_bonus": 39,
    "max_top_features": 5,
    "min_title_caps_length": 10,
    "punct_marker": "!!!",
}

# Example articles
SAMPLE_ARTICLES = {
    "fake": {
        "title": "New UN Mandate Will Automatically Restrict Meat Consumption by 2027",
        "text": (
            "A new environmental framework ratified in Geneva will automatically enforce "
            "dietary quotas for member nations starting January 2027. The mandate requires "
            "all digital payment processors to track carbon expenditures and completely deny "
            "transactions for meat products once an individual's monthly limit is reached. "
            "Insiders confirm the technology is already integrated into banking apps."
        ),
    },
    "real": {
        "title": "WHO Report Monitors New Viral Strain, Though Transmission Risk Remains Low",
        "text": (
            "The World Health Organization (WHO) issued a preliminary report Tuesday regarding "
            "a novel viral strain detected in regional livestock. While researchers noted genetic "
            "similarities to previous pathogens, Dr. Elena Rossi stated that current data suggests "
            "human-to-human transmission is unlikely at this stage. The agency recommends continued "
            "surveillance but advises against travel restrictions."
        ),
    },
}

# Logging configuration
LOGGING_CONFIG = {
    "level": os.getenv("VERITAS_LOG_LEVEL", "INFO"),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S"
}


def get_api_key() -> str:
    """Return the first configured API key, or an empty string"""
    for name in GEMINI_CONFIG["api_key_env_vars"]:
        value = os.getenv(name)
        if value:
            return value
    return ""


def get_config() -> Dict[str, Any]:
    """Return complete configuration dictionary"""
    return {
        "paths": {
            "project_root": str(PROJECT_ROOT),
            "reports": str(REPORTS_DIR)
        },
        "gemini": {k: v for k, v in GEMINI_CONFIG.items()},
        "keywords": {
            "fake": dict(TOP_FAKE_WORDS),
            "real": dict(TOP_REAL_WORDS)
        },
        "linguistic_terms": LINGUISTIC_TERMS,
        "heuristic": HEURISTIC_CONFIG,
        "logging": LOGGING_CONFIG
    }
