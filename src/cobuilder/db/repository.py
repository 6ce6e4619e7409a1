from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from cobuilder.db.models import SlackChannelVentureDB, TaskCreate, TaskDB


class ChannelMappingRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_channel(self, channel_id: str) -> SlackChannelVentureDB | None:
        # slack_channel_id is unique; limit(1) keeps "first match wins" if it ever isn't.
        result = await self.db.execute(
            select(SlackChannelVentureDB)
            .where(SlackChannelVentureDB.slack_channel_id == channel_id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_by_venture(self, venture_id: UUID) -> SlackChannelVentureDB | None:
        result = await self.db.execute(
            select(SlackChannelVentureDB)
            .where(SlackChannelVentureDB.venture_id == venture_id)
            .order_by(SlackChannelVentureDB.created_at.asc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[SlackChannelVentureDB]:
        result = await self.db.execute(
            select(SlackChannelVentureDB).order_by(
                SlackChannelVentureDB.created_at.asc()
            )
        )
        return list(result.scalars().all())

    async def link(
        self, venture_id: UUID, channel_id: str, channel_name: str | None
    ) -> SlackChannelVentureDB:
        """Point a channel at a venture, replacing any link the venture already had."""
        result = await self.db.execute(
            select(SlackChannelVentureDB).where(
                SlackChannelVentureDB.venture_id == venture_id,
                SlackChannelVentureDB.slack_channel_id != channel_id,
            )
        )
        for stale in result.scalars().all():
            await self.db.delete(stale)

        mapping = await self.get_by_channel(channel_id)
        if mapping is None:
            mapping = SlackChannelVentureDB(
                venture_id=venture_id,
                slack_channel_id=channel_id,
                slack_channel_name=channel_name,
            )
        else:
            mapping.venture_id = venture_id
            mapping.slack_channel_name = channel_name

        self.db.add(mapping)
        await self.db.commit()
        await self.db.refresh(mapping)
        return mapping

    async def unlink_venture(self, venture_id: UUID) -> int:
        result = await self.db.execute(
            select(SlackChannelVentureDB).where(
                SlackChannelVentureDB.venture_id == venture_id
            )
        )
        mappings = list(result.scalars().all())
        for mapping in mappings:
            await self.db.delete(mapping)
        await self.db.commit()
        return len(mappings)


class TaskRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: TaskCreate) -> TaskDB:
        db_task = TaskDB.model_validate(data)
        self.db.add(db_task)
        await self.db.commit()
        await self.db.refresh(db_task)
        return db_task

    async def find_by_message(self, channel_id: str, message_ts: str) -> TaskDB | None:
        result = await self.db.execute(
            select(TaskDB)
            .where(
                TaskDB.slack_channel_id == channel_id,
                TaskDB.slack_message_ts == message_ts,
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_for_venture(
        self, venture_id: UUID, status: str | None = None
    ) -> list[TaskDB]:
        query = select(TaskDB).where(TaskDB.venture_id == venture_id)
        if status is not None:
            query = query.where(TaskDB.status == status)
        result = await self.db.execute(query.order_by(TaskDB.created_at.desc()))
        return list(result.scalars().all())
