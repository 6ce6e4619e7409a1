"""Session-owning persistence operations for the Slack ingestion flow.

The background flow runs after the HTTP response is sent, outside any request
scope, so each function opens and closes its own session.
"""

import logging
from uuid import UUID

from cobuilder.db.engine import get_session_factory
from cobuilder.db.models import SlackChannelVentureDB, TaskCreate, TaskDB
from cobuilder.db.repository import ChannelMappingRepository, TaskRepository
from cobuilder.models.classification import ClassificationResult
from cobuilder.models.task import TaskStatus

logger = logging.getLogger(__name__)


async def find_channel_mapping(channel_id: str) -> SlackChannelVentureDB | None:
    """Return the venture mapping for a Slack channel, or None if it is not linked."""
    async with get_session_factory()() as session:
        return await ChannelMappingRepository(session).get_by_channel(channel_id)


async def find_task_for_message(channel_id: str, message_ts: str) -> TaskDB | None:
    """Return the task already created from a Slack message, if any."""
    async with get_session_factory()() as session:
        return await TaskRepository(session).find_by_message(channel_id, message_ts)


def build_task(
    venture_id: UUID,
    classification: ClassificationResult,
    *,
    channel_id: str,
    message_ts: str,
    user_id: str | None,
    user_name: str,
) -> TaskCreate:
    """Map a classification plus Slack message metadata onto a new open task."""
    return TaskCreate(
        venture_id=venture_id,
        asset_number=classification.asset_number,
        checklist_item_id=classification.checklist_item_id,
        title=classification.title,
        priority=classification.priority.value,
        status=TaskStatus.OPEN.value,
        slack_channel_id=channel_id,
        slack_message_ts=message_ts,
        slack_user_id=user_id,
        slack_user_name=user_name,
        ai_confidence=classification.confidence,
        ai_reasoning=classification.reasoning,
    )


async def create_task(data: TaskCreate) -> TaskDB:
    """Insert exactly one task row.

    No upsert: the same Slack message submitted twice yields two tasks unless
    the caller checks find_task_for_message first. Database errors propagate.
    """
    async with get_session_factory()() as session:
        task = await TaskRepository(session).create(data)
    logger.info(
        "Created task %s for venture %s (asset #%d)",
        task.id,
        task.venture_id,
        task.asset_number,
    )
    return task
