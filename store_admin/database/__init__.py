from store_admin.database.async_db import (
    create_async_database_engine,
    dispose_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)

__all__ = [
    "create_async_database_engine",
    "dispose_async_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
