"""Slack ingress: signature verification, interaction dispatch, and thread replies."""

from cobuilder.slack.client import get_slack_client, reset_client
from cobuilder.slack.errors import SlackRequestError
from cobuilder.slack.notifier import (
    notify_classification_failed,
    notify_duplicate,
    notify_save_failed,
    notify_task_created,
    notify_unlinked,
)
from cobuilder.slack.router import router

__all__ = [
    "SlackRequestError",
    "get_slack_client",
    "notify_classification_failed",
    "notify_duplicate",
    "notify_save_failed",
    "notify_task_created",
    "notify_unlinked",
    "reset_client",
    "router",
]
