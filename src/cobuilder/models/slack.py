"""Slack interaction payload and Web API result models."""

from pydantic import BaseModel, ConfigDict


class InteractionUser(BaseModel):
    """The Slack user who triggered the interaction."""

    id: str
    name: str | None = None


class InteractionChannel(BaseModel):
    """The channel the interaction happened in."""

    id: str
    name: str | None = None


class InteractionMessage(BaseModel):
    """The message a message shortcut was invoked on."""

    text: str | None = None
    ts: str  # Slack message ts, e.g. "1234567890.123456"
    user: str | None = None  # Author of the message, not the invoking user


class InteractionPayload(BaseModel):
    """Decoded `payload` field of a Slack interactivity request.

    Only lives for the duration of a single request. Unknown fields are ignored
    so new Slack payload keys never break parsing.
    """

    model_config = ConfigDict(extra="ignore")

    type: str
    callback_id: str | None = None
    trigger_id: str | None = None
    user: InteractionUser | None = None
    channel: InteractionChannel | None = None
    message: InteractionMessage | None = None
    response_url: str | None = None
    challenge: str | None = None  # url_verification handshake only


class SlackUser(BaseModel):
    """Display information for a Slack user."""

    id: str
    name: str
    display_name: str
    avatar: str | None = None


class SlackChannel(BaseModel):
    """A Slack channel visible to the bot."""

    id: str
    name: str
    is_private: bool = False
    is_archived: bool = False
