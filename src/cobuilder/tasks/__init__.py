"""Task creation for Slack-ingested messages."""

from cobuilder.tasks.service import (
    build_task,
    create_task,
    find_channel_mapping,
    find_task_for_message,
)

__all__ = [
    "build_task",
    "create_task",
    "find_channel_mapping",
    "find_task_for_message",
]
