"""Admin endpoints for linking Slack channels to ventures and reading tasks.

Every route requires the X-Admin-Secret header to match ADMIN_SECRET.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from cobuilder.config import get_settings
from cobuilder.db import (
    ChannelMappingRepository,
    SlackChannelVentureDB,
    SlackChannelVentureRead,
    TaskRead,
    TaskRepository,
    get_db,
)
from cobuilder.models.slack import SlackChannel
from cobuilder.models.task import TaskStatus
from cobuilder.slack.channels import build_slack_channel_url, extract_slack_channel_id
from cobuilder.slack.directory import get_channel_info, list_channels

logger = logging.getLogger(__name__)


async def verify_admin(request: Request) -> None:
    """Reject the request with 403 unless X-Admin-Secret matches the configured secret."""
    settings = get_settings()
    secret = request.headers.get("X-Admin-Secret", "")
    if not settings.admin_secret or secret != settings.admin_secret:
        raise HTTPException(status_code=403, detail="Invalid admin secret")


router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(verify_admin)],
)


class ChannelLinkRequest(BaseModel):
    channel: str


def _to_read(mapping: SlackChannelVentureDB) -> SlackChannelVentureRead:
    workspace = get_settings().slack_workspace_domain or None
    return SlackChannelVentureRead(
        id=mapping.id,
        venture_id=mapping.venture_id,
        slack_channel_id=mapping.slack_channel_id,
        slack_channel_name=mapping.slack_channel_name,
        channel_url=build_slack_channel_url(mapping.slack_channel_id, workspace),
    )


@router.get("/slack/channels", response_model=list[SlackChannel])
async def get_slack_channels() -> list[SlackChannel]:
    return await list_channels()


@router.get("/slack/mappings", response_model=list[SlackChannelVentureRead])
async def get_channel_mappings(
    db: AsyncSession = Depends(get_db),
) -> list[SlackChannelVentureRead]:
    mappings = await ChannelMappingRepository(db).list_all()
    return [_to_read(mapping) for mapping in mappings]


@router.get("/ventures/{venture_id}/slack", response_model=SlackChannelVentureRead)
async def get_venture_channel(
    venture_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SlackChannelVentureRead:
    mapping = await ChannelMappingRepository(db).get_by_venture(venture_id)
    if mapping is None:
        raise HTTPException(status_code=404, detail="Venture has no linked Slack channel")
    return _to_read(mapping)


@router.put("/ventures/{venture_id}/slack", response_model=SlackChannelVentureRead)
async def link_venture_channel(
    venture_id: UUID,
    body: ChannelLinkRequest,
    db: AsyncSession = Depends(get_db),
) -> SlackChannelVentureRead:
    """Link a channel (URL or bare ID) to the venture, replacing any previous link."""
    channel_id = extract_slack_channel_id(body.channel)
    if channel_id is None:
        raise HTTPException(status_code=400, detail="Could not find a Slack channel ID")

    channel = await get_channel_info(channel_id)
    if channel is None:
        raise HTTPException(
            status_code=400,
            detail="Slack channel not found or the bot is not a member",
        )

    mapping = await ChannelMappingRepository(db).link(venture_id, channel.id, channel.name)
    logger.info("Linked channel %s to venture %s", channel.id, venture_id)
    return _to_read(mapping)


@router.delete("/ventures/{venture_id}/slack", status_code=204)
async def unlink_venture_channel(
    venture_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> Response:
    removed = await ChannelMappingRepository(db).unlink_venture(venture_id)
    if removed == 0:
        raise HTTPException(status_code=404, detail="Venture has no linked Slack channel")
    logger.info("Unlinked %d channel(s) from venture %s", removed, venture_id)
    return Response(status_code=204)


@router.get("/ventures/{venture_id}/tasks", response_model=list[TaskRead])
async def get_venture_tasks(
    venture_id: UUID,
    status: TaskStatus | None = None,
    db: AsyncSession = Depends(get_db),
) -> list[TaskRead]:
    tasks = await TaskRepository(db).list_for_venture(
        venture_id, status.value if status else None
    )
    return [TaskRead.model_validate(task) for task in tasks]
