"""Data models for the Co-Builder Slack ingestion pipeline."""

from cobuilder.models.classification import ClassificationResult, TaskPriority
from cobuilder.models.slack import (
    InteractionChannel,
    InteractionMessage,
    InteractionPayload,
    InteractionUser,
    SlackChannel,
    SlackUser,
)
from cobuilder.models.task import TaskStatus

__all__ = [
    "ClassificationResult",
    "InteractionChannel",
    "InteractionMessage",
    "InteractionPayload",
    "InteractionUser",
    "SlackChannel",
    "SlackUser",
    "TaskPriority",
    "TaskStatus",
]
