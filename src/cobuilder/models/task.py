"""Task lifecycle status."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task status values. Tasks created from Slack always start OPEN."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
