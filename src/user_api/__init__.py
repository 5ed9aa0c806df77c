"""User API - save and fetch platform users behind a uniform response envelope.

This package provides a layered architecture for the user-management handlers:

Layers:
    - protocols: Interface contracts (Database)
    - repositories: Data access implementations (SQLite)
    - services: Persistence operations (one statement each)
    - handlers: Parameter validation and envelope building
    - utils: Shared parameter parsing and envelope helpers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from user_api import SqliteDatabase, UserHandler, UserService

    handler = UserHandler(user_service=UserService(SqliteDatabase.create()))
    envelope = handler.save_user({"name": "Alice", "loginName": "alice01"})
    ```

For HTTP API:
    ```python
    from user_api.api.app import app
    ```
"""

from user_api.config import settings
from user_api.dto import ApiResponse
from user_api.entities import Envelope
from user_api.handlers import UserHandler
from user_api.protocols import Database, PersistenceError
from user_api.repositories import SqliteDatabase
from user_api.services import UserService

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "Database",
    "PersistenceError",
    # Services (statements)
    "UserService",
    # Handlers
    "UserHandler",
    # Repositories (data access)
    "SqliteDatabase",
    # Entities (domain models)
    "Envelope",
    # DTOs (API contracts)
    "ApiResponse",
]
