"""Service layer for persistence operations.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Database
    (Validation) -> (Statements) -> (Data Access)

Usage:
    ```python
    from user_api.services import UserService

    users = UserService(database=SqliteDatabase.create())
    ```
"""

from .user_service import UserService

__all__ = [
    "UserService",
]
