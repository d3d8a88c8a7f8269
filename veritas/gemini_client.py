"""
Remote analyzer backed by the Gemini API
"""

import json
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from .config import GEMINI_CONFIG, HEURISTIC_CONFIG, get_api_key
from .prompts import build_generation_config, build_prompt
from .schemas import AnalysisResult

logger = logging.getLogger(__name__)


class RemoteAnalysisError(RuntimeError):
    """The remote analyzer returned nothing usable"""


class GeminiAnalyzer:
    """Classifies articles with one structured-output generate_content call"""

    def __init__(
        self,
        client: Optional[Any] = None,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        timeout_ms: int = GEMINI_CONFIG["timeout_ms"]
    ):
        """
        Args:
            client: Preconfigured genai.Client (built lazily when omitted)
            api_key: API key, defaults to GEMINI_API_KEY / API_KEY
            model_name: Model to call
            timeout_ms: HTTP timeout for the request
        """
        self._client = client
        self.api_key = api_key if api_key is not None else get_api_key()
        self.model_name = model_name or GEMINI_CONFIG["model_name"]
        self.timeout_ms = timeout_ms
        self.generation_config = build_generation_config()

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise RemoteAnalysisError(
                    "No API key configured; set one of "
                    + ", ".join(GEMINI_CONFIG["api_key_env_vars"])
                )
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=self.timeout_ms)
            )
        return self._client

    def analyze(self, title: str, text: str) -> AnalysisResult:
        """
        Classify and explain one article

        Args:
            title: Headline
            text: Body text

        Returns:
            AnalysisResult with source "gemini"

        Raises:
            RemoteAnalysisError: Missing key, empty response, or a payload that
                does not match the response schema
        """
        response = self.client.models.generate_content(
            model=self.model_name,
            contents=build_prompt(title, text),
            config=self.generation_config,
        )

        json_text = response.text
        if not json_text:
            raise RemoteAnalysisError("Empty response from AI")

        try:
            payload = json.loads(json_text)
        except json.JSONDecodeError as e:
            raise RemoteAnalysisError(f"Response is not valid JSON: {e}") from e

        try:
            result = AnalysisResult.from_dict(
                payload,
                source="gemini",
                max_features=HEURISTIC_CONFIG["max_top_features"]
            )
        except ValueError as e:
            raise RemoteAnalysisError(f"Response does not match schema: {e}") from e

        logger.info("Gemini verdict %s (%d%%) from %s",
                    result.classification.value, result.confidence_score, self.model_name)
        return result
