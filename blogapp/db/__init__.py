"""Core application modules."""

from blogapp.db.database import (
    async_session_maker,
    clear_all_data,
    close_db,
    engine,
    get_session,
    init_db,
    transaction,
)

__all__ = [
    "engine",
    "async_session_maker",
    "get_session",
    "init_db",
    "clear_all_data",
    "close_db",
    "transaction",
]
