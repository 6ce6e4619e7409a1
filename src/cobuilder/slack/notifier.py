"""Slack thread replies reporting the outcome of a message shortcut.

These replies are the only user-visible result of the background flow. All
functions are fire-and-forget: they catch and log SlackApiError but never
raise, so a failed notification cannot crash the flow.
"""

import logging
from uuid import UUID

from slack_sdk.errors import SlackApiError

from cobuilder.config import get_settings
from cobuilder.db.models import TaskDB
from cobuilder.models.classification import ClassificationResult
from cobuilder.slack.directory import post_message

logger = logging.getLogger(__name__)

UNLINKED_MESSAGE = (
    "⚠️ This channel isn't linked to a Co-Builder venture yet. "
    "Ask an admin to link it at {app_url}/admin/slack"
)
CLASSIFICATION_FAILED_MESSAGE = "❌ Failed to classify this message. Please try again later."
SAVE_FAILED_MESSAGE = "❌ Failed to save task. Please try again later."


def _app_url() -> str:
    return get_settings().app_url.rstrip("/")


def venture_url(venture_id: UUID | str) -> str:
    """Deep link to a venture's page in the web app."""
    return f"{_app_url()}/venture/{venture_id}"


def confidence_emoji(confidence: int) -> str:
    """Glyph for a confidence tier: high (>= 80), medium (>= 50), or low."""
    if confidence >= 80:
        return "🎯"
    if confidence >= 50:
        return "🔶"
    return "⚠️"


def format_task_confirmation(
    classification: ClassificationResult, venture_id: UUID | str
) -> str:
    """Build the confirmation reply for a newly created task."""
    lines = [
        "✅ *Task pushed to Co-Builder*",
        "",
        f"📋 *{classification.title}*",
        f"📦 Asset #{classification.asset_number} · Priority: {classification.priority.value}",
        f"{confidence_emoji(classification.confidence)} AI Confidence: {classification.confidence}%",
    ]
    if classification.checklist_item_id:
        lines.append(f"📝 Checklist: {classification.checklist_item_id}")
    if classification.reasoning:
        lines.extend(["", f"💡 _{classification.reasoning}_"])
    lines.extend(["", f"<{venture_url(venture_id)}|View in Co-Builder →>"])
    return "\n".join(lines)


async def _reply(channel_id: str, thread_ts: str, text: str, kind: str) -> None:
    try:
        await post_message(channel_id, text, thread_ts=thread_ts)
    except SlackApiError:
        logger.warning(
            "Failed to send %s notification to %s (%s)",
            kind,
            channel_id,
            thread_ts,
            exc_info=True,
        )


async def notify_unlinked(channel_id: str, thread_ts: str) -> None:
    """Tell the channel it has no venture, pointing admins at the linking page."""
    await _reply(
        channel_id, thread_ts, UNLINKED_MESSAGE.format(app_url=_app_url()), "unlinked"
    )


async def notify_classification_failed(channel_id: str, thread_ts: str) -> None:
    """Report that the message could not be classified."""
    await _reply(channel_id, thread_ts, CLASSIFICATION_FAILED_MESSAGE, "classification")


async def notify_save_failed(channel_id: str, thread_ts: str) -> None:
    """Report that the classified task could not be stored."""
    await _reply(channel_id, thread_ts, SAVE_FAILED_MESSAGE, "save")


async def notify_task_created(
    channel_id: str,
    thread_ts: str,
    classification: ClassificationResult,
    venture_id: UUID | str,
) -> None:
    """Confirm the new task with its title, asset, priority, and confidence."""
    await _reply(
        channel_id,
        thread_ts,
        format_task_confirmation(classification, venture_id),
        "success",
    )


async def notify_duplicate(channel_id: str, thread_ts: str, task: TaskDB) -> None:
    """Point at the task this message already produced."""
    await _reply(
        channel_id,
        thread_ts,
        f"ℹ️ Already pushed to Co-Builder as *{task.title}* (Asset #{task.asset_number}). "
        f"<{venture_url(task.venture_id)}|View in Co-Builder →>",
        "duplicate",
    )
