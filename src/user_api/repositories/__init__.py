"""Repository layer for data access.

This layer provides concrete implementations of the Database protocol.
The handlers and services only depend on the protocol, so any class
implementing ``execute``/``query``/``health_check`` can be swapped in.
"""

from user_api.protocols import Database

from .sqlite_database import SqliteDatabase

__all__ = [
    "Database",
    "SqliteDatabase",
]
