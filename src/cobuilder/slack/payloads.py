"""Decoding of form-encoded Slack interactivity requests."""

import json
import logging
from urllib.parse import parse_qs

from fastapi import Depends
from pydantic import ValidationError

from cobuilder.models.slack import InteractionPayload
from cobuilder.slack.errors import SlackRequestError
from cobuilder.slack.verification import verify_slack_request

logger = logging.getLogger(__name__)


def parse_interaction_body(raw: bytes | str) -> InteractionPayload:
    """Decode ``payload=<url-encoded JSON>`` into an InteractionPayload.

    Raises:
        SlackRequestError: 400 "No payload" if the field is absent or empty,
            400 "Invalid payload" if it is not a JSON object of the expected shape.
    """
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    form = parse_qs(text)

    raw_payload = form.get("payload", [None])[0]
    if not raw_payload:
        raise SlackRequestError(400, "No payload")

    try:
        data = json.loads(raw_payload)
    except json.JSONDecodeError:
        logger.warning("Slack payload is not valid JSON")
        raise SlackRequestError(400, "Invalid payload") from None

    try:
        return InteractionPayload.model_validate(data)
    except ValidationError:
        logger.warning("Slack payload has an unexpected shape", exc_info=True)
        raise SlackRequestError(400, "Invalid payload") from None


async def parse_interaction_request(
    body: bytes = Depends(verify_slack_request),
) -> InteractionPayload:
    """FastAPI dependency: verified raw body -> InteractionPayload."""
    return parse_interaction_body(body)
