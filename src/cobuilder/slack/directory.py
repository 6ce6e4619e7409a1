"""Thin wrappers over the Slack Web API calls the service needs.

Lookups (users, channels) return None or an empty list when Slack refuses the
call; post_message lets SlackApiError propagate so callers decide how to report it.
"""

import logging

from slack_sdk.errors import SlackApiError

from cobuilder.models.slack import SlackChannel, SlackUser
from cobuilder.slack.client import get_slack_client

logger = logging.getLogger(__name__)


async def post_message(channel_id: str, text: str, thread_ts: str | None = None) -> None:
    """Post a message to a channel, or as a thread reply when thread_ts is given."""
    client = await get_slack_client()
    await client.chat_postMessage(
        channel=channel_id,
        text=text,
        thread_ts=thread_ts,
        unfurl_links=False,
    )


async def get_user_info(user_id: str) -> SlackUser | None:
    """Return display information for a Slack user, or None if the lookup fails."""
    client = await get_slack_client()
    try:
        response = await client.users_info(user=user_id)
    except SlackApiError:
        logger.warning("Slack users.info failed for %s", user_id, exc_info=True)
        return None

    user = response.get("user") or {}
    profile = user.get("profile") or {}
    name = user.get("real_name") or user.get("name") or ""
    return SlackUser(
        id=user.get("id", user_id),
        name=name,
        display_name=profile.get("display_name") or name,
        avatar=profile.get("image_48"),
    )


async def get_channel_info(channel_id: str) -> SlackChannel | None:
    """Return a channel's details, or None if it does not exist or the bot cannot see it."""
    client = await get_slack_client()
    try:
        response = await client.conversations_info(channel=channel_id)
    except SlackApiError:
        logger.warning("Slack conversations.info failed for %s", channel_id, exc_info=True)
        return None

    channel = response.get("channel") or {}
    return SlackChannel(
        id=channel.get("id", channel_id),
        name=channel.get("name", ""),
        is_private=bool(channel.get("is_private")),
        is_archived=bool(channel.get("is_archived")),
    )


async def list_channels() -> list[SlackChannel]:
    """List public and private channels the bot belongs to (first 200, non-archived)."""
    client = await get_slack_client()
    try:
        response = await client.conversations_list(
            types="public_channel,private_channel",
            exclude_archived=True,
            limit=200,
        )
    except SlackApiError:
        logger.warning("Slack conversations.list failed", exc_info=True)
        return []

    return [
        SlackChannel(
            id=channel["id"],
            name=channel.get("name", ""),
            is_private=bool(channel.get("is_private")),
            is_archived=bool(channel.get("is_archived")),
        )
        for channel in response.get("channels") or []
    ]
