"""Persistence: SQLModel tables, async engine, and repositories."""

from cobuilder.db.engine import (
    dispose_engine,
    get_db,
    get_engine,
    get_session_factory,
    init_db,
)
from cobuilder.db.models import (
    SlackChannelVentureDB,
    SlackChannelVentureRead,
    TaskCreate,
    TaskDB,
    TaskRead,
)
from cobuilder.db.repository import ChannelMappingRepository, TaskRepository

__all__ = [
    "ChannelMappingRepository",
    "SlackChannelVentureDB",
    "SlackChannelVentureRead",
    "TaskCreate",
    "TaskDB",
    "TaskRead",
    "TaskRepository",
    "dispose_engine",
    "get_db",
    "get_engine",
    "get_session_factory",
    "init_db",
]
