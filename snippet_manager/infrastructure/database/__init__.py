"""Database infrastructure - connection, models, and session management."""

from snippet_manager.infrastructure.database.connection import (
    AsyncSessionFactory,
    close_db,
    get_db_session,
    get_engine,
    get_session_factory,
)

__all__ = [
    "close_db",
    "get_db_session",
    "get_engine",
    "get_session_factory",
    "AsyncSessionFactory",
]
