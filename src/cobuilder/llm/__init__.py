"""LLM classification of Slack messages via Gemini.

Public API:
    MessageClassifier(reference).classify(client, text, user, channel) -> ClassificationResult
"""

from cobuilder.llm.classifier import (
    ClassificationError,
    MessageClassifier,
    fallback_classification,
    parse_classification,
)
from cobuilder.llm.client import get_gemini_client, reset_client
from cobuilder.llm.prompts import build_classification_prompt

__all__ = [
    "ClassificationError",
    "MessageClassifier",
    "build_classification_prompt",
    "fallback_classification",
    "get_gemini_client",
    "parse_classification",
    "reset_client",
]
