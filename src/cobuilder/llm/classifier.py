"""Slack message classifier: message text -> ClassificationResult via Gemini.

The framework reference is built once at startup and injected into
MessageClassifier. Gemini calls are retried on transient errors with tenacity;
the model's text answer is parsed leniently (code fences stripped, values
clamped) before it becomes a ClassificationResult.
"""

import json
import logging
import re

from google import genai
from google.genai import types
from google.genai.errors import ClientError, ServerError
from pydantic import ValidationError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from cobuilder.cost import extract_usage, log_usage
from cobuilder.llm.prompts import DEFAULT_MODEL, build_classification_prompt
from cobuilder.models.classification import (
    MAX_TITLE_LENGTH,
    ClassificationResult,
    TaskPriority,
)

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\n?")

FALLBACK_REASONING = "Failed to parse AI response; manual classification needed."


class ClassificationError(Exception):
    """Raised when the model's answer cannot be turned into a ClassificationResult."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


def _is_retryable(error: BaseException) -> bool:
    """Determine if a Gemini API error is transient and worth retrying.

    Returns True for server errors (5xx) and rate limits (429).
    Returns False for permanent client errors (400, 401, 403).
    """
    if isinstance(error, ServerError):
        return True
    if isinstance(error, ClientError) and error.code == 429:
        return True
    return False


@retry(
    retry=retry_if_exception(_is_retryable),
    wait=wait_exponential_jitter(initial=1, max=30, jitter=2),
    stop=stop_after_attempt(4),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def _call_gemini(client: genai.Client, model: str, prompt: str) -> object:
    """Send the classification prompt, retrying on transient errors.

    Raises:
        ClientError: On permanent API errors (400, 401, 403).
        ServerError: After exhausting retries on server errors.
    """
    return await client.aio.models.generate_content(
        model=model,
        contents=prompt,
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            temperature=0.2,
            max_output_tokens=500,
        ),
    )


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fences (```json ... ```) wrapped around a model answer."""
    return _CODE_FENCE.sub("", text).replace("```", "").strip()


def parse_classification(text: str) -> ClassificationResult:
    """Parse and validate the model's text answer.

    Raises:
        ClassificationError: If the text is not a JSON object or fails validation.
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ClassificationError(f"Response is not valid JSON: {exc}", raw_text=text) from exc

    if not isinstance(data, dict):
        raise ClassificationError("Response is not a JSON object", raw_text=text)

    try:
        return ClassificationResult.model_validate(data)
    except ValidationError as exc:
        raise ClassificationError(f"Response failed validation: {exc}", raw_text=text) from exc


def fallback_classification(message_text: str) -> ClassificationResult:
    """Low-confidence placeholder used when the model's answer is unusable."""
    title = message_text.strip()[:MAX_TITLE_LENGTH] or "Untitled Slack message"
    return ClassificationResult(
        asset_number=1,
        checklist_item_id=None,
        title=title,
        priority=TaskPriority.MEDIUM,
        confidence=10,
        reasoning=FALLBACK_REASONING,
    )


class MessageClassifier:
    """Classifies Slack messages against a fixed framework reference.

    Args:
        reference: Markdown framework reference, built once at startup.
        model: Gemini model name.
        fallback_on_parse_error: Return fallback_classification() instead of
            raising when the model's answer cannot be parsed.
    """

    def __init__(
        self,
        reference: str,
        model: str = DEFAULT_MODEL,
        fallback_on_parse_error: bool = False,
    ):
        self.reference = reference
        self.model = model
        self.fallback_on_parse_error = fallback_on_parse_error

    async def classify(
        self,
        client: genai.Client,
        message_text: str,
        user_name: str,
        channel_name: str,
    ) -> ClassificationResult:
        """Classify one Slack message.

        Args:
            client: Configured Gemini client instance.
            message_text: Raw Slack message text.
            user_name: Display name of the message author.
            channel_name: Display name of the channel.

        Returns:
            Validated ClassificationResult.

        Raises:
            ClassificationError: If the answer cannot be parsed and fallback is disabled.
            APIError: On non-retryable Gemini API errors.
        """
        prompt = build_classification_prompt(
            self.reference, message_text, user_name, channel_name
        )
        response = await _call_gemini(client, self.model, prompt)
        log_usage(channel_name, self.model, extract_usage(response))

        text = getattr(response, "text", None) or ""
        try:
            return parse_classification(text)
        except ClassificationError:
            if not self.fallback_on_parse_error:
                raise
            logger.warning(
                "Unparseable classification, using fallback",
                extra={"channel": channel_name, "raw_text": text[:500]},
            )
            return fallback_classification(message_text)
