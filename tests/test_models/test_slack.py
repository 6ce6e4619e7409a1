"""Tests for the Slack interaction payload models."""

import pytest
from pydantic import ValidationError

from cobuilder.models.slack import InteractionPayload, SlackUser


def _shortcut_payload() -> dict:
    """Return a message_action payload as Slack sends it (trimmed)."""
    return {
        "type": "message_action",
        "callback_id": "push_to_cobuilder",
        "trigger_id": "1337.42.abcd",
        "team": {"id": "T123", "domain": "acme"},
        "user": {"id": "U123", "name": "ada"},
        "channel": {"id": "C0ADHAF5Y6T", "name": "venture-acme"},
        "message": {
            "type": "message",
            "text": "We need to finalize the pricing page",
            "ts": "1234567890.123456",
            "user": "U456",
        },
        "response_url": "https://hooks.slack.com/app/T123/1/abc",
    }


def test_message_action_payload_parses():
    """A full message_action payload maps onto the typed fields."""
    payload = InteractionPayload.model_validate(_shortcut_payload())

    assert payload.type == "message_action"
    assert payload.callback_id == "push_to_cobuilder"
    assert payload.user.id == "U123"
    assert payload.channel.id == "C0ADHAF5Y6T"
    assert payload.message.text == "We need to finalize the pricing page"
    assert payload.message.ts == "1234567890.123456"


def test_unknown_fields_are_ignored():
    """Keys the service does not model (team, message.type) do not break parsing."""
    payload = InteractionPayload.model_validate(_shortcut_payload())
    assert not hasattr(payload, "team")


def test_url_verification_payload_only_needs_type_and_challenge():
    """The handshake payload has no user, channel, or message."""
    payload = InteractionPayload.model_validate(
        {"type": "url_verification", "challenge": "abc123"}
    )

    assert payload.challenge == "abc123"
    assert payload.user is None
    assert payload.channel is None
    assert payload.message is None


def test_message_without_text_is_allowed():
    """Attachments-only messages arrive without text; the model accepts them."""
    data = _shortcut_payload()
    del data["message"]["text"]

    payload = InteractionPayload.model_validate(data)

    assert payload.message.text is None


def test_missing_type_raises():
    """type is required."""
    with pytest.raises(ValidationError):
        InteractionPayload.model_validate({"callback_id": "push_to_cobuilder"})


def test_message_without_ts_raises():
    """A message must carry its ts, which threads the replies."""
    data = _shortcut_payload()
    del data["message"]["ts"]

    with pytest.raises(ValidationError):
        InteractionPayload.model_validate(data)


def test_slack_user_avatar_optional():
    """SlackUser defaults avatar to None."""
    user = SlackUser(id="U1", name="Ada Lovelace", display_name="ada")
    assert user.avatar is None
