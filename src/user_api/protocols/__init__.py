"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the store (SQLite → a host-provided accessor, PostgreSQL, etc.)
- Unit testing handlers with recording fakes
- Clear separation of concerns

Usage:
    ```python
    from user_api.protocols import Database

    db: Database = SqliteDatabase.create()  # works
    db: Database = FakeDatabase()            # also works
    ```
"""

from .database import Database, PersistenceError

__all__ = [
    "Database",
    "PersistenceError",
]
