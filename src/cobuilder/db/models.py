from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Index
from sqlalchemy.sql import func
from sqlmodel import Column, DateTime, Field, SQLModel, Text

from cobuilder.models.classification import TaskPriority
from cobuilder.models.task import TaskStatus


class SlackChannelVentureDB(SQLModel, table=True):
    __tablename__ = "slack_channel_ventures"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    venture_id: UUID = Field(nullable=False, index=True)
    slack_channel_id: str = Field(nullable=False, unique=True)
    slack_channel_name: str | None = Field(default=None, nullable=True)
    created_at: datetime = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        ),
    )
    updated_at: datetime = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        ),
    )


class SlackChannelVentureRead(SQLModel):
    id: UUID
    venture_id: UUID
    slack_channel_id: str
    slack_channel_name: str | None = None
    channel_url: str | None = None


class TaskBase(SQLModel):
    venture_id: UUID = Field(nullable=False)
    asset_number: int = Field(nullable=False)
    checklist_item_id: str | None = Field(default=None, nullable=True)
    title: str = Field(sa_column=Column(Text, nullable=False))
    description: str | None = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )
    priority: str = Field(default=TaskPriority.MEDIUM.value, nullable=False)
    status: str = Field(default=TaskStatus.OPEN.value, nullable=False)
    slack_channel_id: str | None = Field(default=None, nullable=True)
    slack_message_ts: str | None = Field(default=None, nullable=True)
    slack_user_id: str | None = Field(default=None, nullable=True)
    slack_user_name: str | None = Field(default=None, nullable=True)
    ai_confidence: int | None = Field(default=None, nullable=True)
    ai_reasoning: str | None = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )


class TaskDB(TaskBase, table=True):
    __tablename__ = "tasks"
    __table_args__ = (
        Index("idx_tasks_venture", "venture_id"),
        Index("idx_tasks_venture_asset", "venture_id", "asset_number"),
        Index("idx_tasks_status", "venture_id", "status"),
        Index("idx_tasks_slack_message", "slack_channel_id", "slack_message_ts"),
        CheckConstraint(
            "asset_number >= 1 AND asset_number <= 27", name="tasks_asset_range"
        ),
        CheckConstraint(
            "priority IN ('low','medium','high','urgent')", name="tasks_priority_check"
        ),
        CheckConstraint(
            "status IN ('open','in_progress','completed','cancelled')",
            name="tasks_status_check",
        ),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    created_at: datetime = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        ),
    )
    updated_at: datetime = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        ),
    )
    completed_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
    )


class TaskCreate(TaskBase):
    pass


class TaskRead(TaskBase):
    id: UUID
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None
