"""Slack interaction dispatch and the message-shortcut background flow."""

import logging

from fastapi import BackgroundTasks, Response
from fastapi.responses import JSONResponse

from cobuilder.config import get_settings
from cobuilder.llm import MessageClassifier, get_gemini_client
from cobuilder.models.slack import InteractionPayload, SlackUser
from cobuilder.slack.directory import get_user_info
from cobuilder.slack.errors import SlackRequestError
from cobuilder.slack.notifier import (
    notify_classification_failed,
    notify_duplicate,
    notify_save_failed,
    notify_task_created,
    notify_unlinked,
)
from cobuilder.tasks import (
    build_task,
    create_task,
    find_channel_mapping,
    find_task_for_message,
)

logger = logging.getLogger(__name__)


def handle_interaction(
    payload: InteractionPayload,
    background_tasks: BackgroundTasks,
    classifier: MessageClassifier,
) -> Response:
    """Dispatch a Slack interaction based on its type.

    - url_verification: echo the challenge token
    - message_action with our callback id: acknowledge now, process in background
    - anything else: 400

    Slack closes the request after 3 seconds, so classification never runs
    before the response is sent.
    """
    if payload.type == "url_verification":
        return JSONResponse({"challenge": payload.challenge})

    if payload.type == "message_action" and payload.callback_id == get_settings().slack_callback_id:
        background_tasks.add_task(run_message_shortcut, payload, classifier)
        return Response(status_code=200)

    logger.warning(
        "Unhandled interaction type %s (callback_id=%s)",
        payload.type,
        payload.callback_id,
    )
    raise SlackRequestError(400, "Unhandled interaction type")


async def run_message_shortcut(
    payload: InteractionPayload, classifier: MessageClassifier
) -> None:
    """Background entry point: run the flow and log anything it lets escape.

    Runs after the response is sent, so an exception here has nowhere to go
    but the log.
    """
    try:
        await process_message_shortcut(payload, classifier)
    except Exception:
        logger.error(
            "Background processing failed",
            exc_info=True,
            extra={
                "channel_id": payload.channel.id if payload.channel else None,
                "message_ts": payload.message.ts if payload.message else None,
            },
        )


async def process_message_shortcut(
    payload: InteractionPayload, classifier: MessageClassifier
) -> None:
    """Turn a "Push to Co-Builder" shortcut into a task.

    Stages, each of which may end the flow with a thread reply:
    1. Resolve the channel's venture -> "not linked" notice if none
    2. (dedupe mode) Skip messages that already produced a task
    3. Classify the message -> "classification failed" notice on error
    4. Insert the task -> "save failed" notice on error
    5. Confirm the task in the thread
    Nothing is retried; a task is only written after steps 1 and 3 succeed.
    """
    settings = get_settings()
    message = payload.message
    channel_id = payload.channel.id if payload.channel else None
    user_id = payload.user.id if payload.user else None

    if message is None or not message.text or not channel_id:
        logger.error("Missing message text or channel ID")
        return

    # Stage 1: channel -> venture
    mapping = await find_channel_mapping(channel_id)
    if mapping is None:
        logger.info("Channel %s is not linked to a venture", channel_id)
        await notify_unlinked(channel_id, message.ts)
        return

    # Stage 2: optional idempotency check
    if settings.dedupe_slack_tasks:
        existing = await find_task_for_message(channel_id, message.ts)
        if existing is not None:
            logger.info("Message %s in %s already produced task %s", message.ts, channel_id, existing.id)
            await notify_duplicate(channel_id, message.ts, existing)
            return

    user_info = await get_user_info(user_id) if user_id else None
    user_name = _display_name(user_info)
    channel_name = mapping.slack_channel_name or channel_id

    # Stage 3: classification
    try:
        classification = await classifier.classify(
            get_gemini_client(), message.text, user_name, channel_name
        )
    except Exception:
        logger.error("AI classification failed for message %s", message.ts, exc_info=True)
        await notify_classification_failed(channel_id, message.ts)
        return

    # Stage 4: persistence
    task_data = build_task(
        mapping.venture_id,
        classification,
        channel_id=channel_id,
        message_ts=message.ts,
        user_id=user_id,
        user_name=user_name,
    )
    try:
        await create_task(task_data)
    except Exception:
        logger.error("Failed to save task for message %s", message.ts, exc_info=True)
        await notify_save_failed(channel_id, message.ts)
        return

    # Stage 5: confirmation
    await notify_task_created(channel_id, message.ts, classification, mapping.venture_id)
    logger.info(
        "Pushed message %s to venture %s",
        message.ts,
        mapping.venture_id,
        extra={
            "asset_number": classification.asset_number,
            "confidence": classification.confidence,
        },
    )


def _display_name(user_info: SlackUser | None) -> str:
    if user_info is None:
        return "Unknown"
    return user_info.display_name or user_info.name or "Unknown"
