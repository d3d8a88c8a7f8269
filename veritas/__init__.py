"""
Veritas - News Credibility Analyzer

This package contains the modules behind the live detector:
- config: Keyword tables, scoring weights, and remote service settings
- schemas: Analysis result types
- preprocess: Headline/body text preparation
- features: Linguistic and keyword feature extraction
- heuristic: Offline keyword-weighted scorer
- prompts: Prompt and response schema for the remote analyzer
- gemini_client: Gemini-backed analyzer
- detector: Remote-first analysis with heuristic fallback
- cli: Command line interface
- utils: Logging and display helpers
"""

__version__ = "1.0.0"

__all__ = [
    "config",
    "schemas",
    "preprocess",
    "features",
    "heuristic",
    "prompts",
    "gemini_client",
    "detector",
    "cli",
    "utils",
]
