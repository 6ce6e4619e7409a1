"""Slack request signature verification as a FastAPI dependency."""

import logging
import math
import time

from fastapi import Request
from slack_sdk.signature import Clock, SignatureVerifier

from cobuilder.config import get_settings
from cobuilder.slack.errors import SlackRequestError

logger = logging.getLogger(__name__)


class _FixedClock(Clock):
    """Clock pinned to a given Unix time, for deterministic verification."""

    def __init__(self, now: float):
        self._now = now

    def now(self) -> float:
        return self._now


def verify_signature(
    signing_secret: str,
    signature: str | None,
    timestamp: str | None,
    body: str,
    now: float | None = None,
) -> bool:
    """Check a Slack v0 request signature.

    Rejects missing headers, timestamps more than five minutes from ``now``,
    and any signature other than ``v0=HMAC_SHA256(secret, "v0:{ts}:{body}")``
    (compared in constant time). Malformed input counts as a failed check,
    never as an error.

    Args:
        signing_secret: The app's Slack signing secret.
        signature: X-Slack-Signature header value.
        timestamp: X-Slack-Request-Timestamp header value (Unix seconds).
        body: Raw request body exactly as received.
        now: Current Unix time; defaults to the wall clock. Floored to whole seconds.
    """
    if not signature or not timestamp:
        return False

    # Slack timestamps are whole seconds; compare against a whole-second clock.
    clock = _FixedClock(math.floor(now if now is not None else time.time()))
    verifier = SignatureVerifier(signing_secret=signing_secret, clock=clock)
    try:
        return verifier.is_valid(body=body, timestamp=timestamp, signature=signature)
    except (TypeError, ValueError):
        # Non-numeric timestamp or non-ASCII signature
        return False


async def verify_slack_request(request: Request) -> bytes:
    """Verify the Slack request signature and return the raw body.

    Reads the raw body before any parsing so verification uses the exact
    bytes Slack signed.

    Raises:
        SlackRequestError: 500 if no signing secret is configured,
            401 if the signature is missing, stale, or wrong.
    """
    settings = get_settings()
    if not settings.slack_signing_secret:
        logger.error("SLACK_SIGNING_SECRET is not set")
        raise SlackRequestError(500, "Server misconfigured")

    body = await request.body()
    timestamp = request.headers.get("X-Slack-Request-Timestamp")
    signature = request.headers.get("X-Slack-Signature")

    if not verify_signature(
        settings.slack_signing_secret,
        signature,
        timestamp,
        body.decode("utf-8", errors="replace"),
    ):
        logger.warning("Rejected Slack request with invalid signature")
        raise SlackRequestError(401, "Invalid signature")

    return body
