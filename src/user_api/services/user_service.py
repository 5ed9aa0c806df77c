"""User persistence service.

Issues the statements against the platform_user table. Each method runs
exactly one parameterized statement through the Database protocol and lets
any PersistenceError propagate.
"""

from typing import Any

from user_api.protocols import Database

UPDATE_USER_SQL = "UPDATE platform_user SET name = ?, login_name = ? WHERE id = ?"
INSERT_USER_SQL = "INSERT INTO platform_user (name, login_name) VALUES (?, ?)"
SELECT_USER_SQL = "SELECT * FROM platform_user WHERE id = ?"


class UserService:
    """Persistence operations for platform users.

    This service depends on the Database PROTOCOL, not a concrete store,
    so handlers can be tested against a recording fake.

    Example:
        ```python
        from user_api.repositories import SqliteDatabase
        from user_api.services import UserService

        users = UserService(database=SqliteDatabase.create())
        users.create("Alice", "alice01")
        rows = users.find_by_id(1)
        ```
    """

    def __init__(self, database: Database) -> None:
        """Initialize the user service.

        Args:
            database: Relational store accessor (required).
        """
        self._db = database

    def create(self, name: str, login_name: str) -> None:
        """Insert a new user; the store assigns the id.

        The generated id is not read back.
        """
        self._db.execute(INSERT_USER_SQL, [name, login_name])

    def update(self, user_id: int, name: str, login_name: str) -> None:
        """Overwrite name and login name of the row matching ``user_id``.

        The affected-row count is not checked.
        """
        self._db.execute(UPDATE_USER_SQL, [name, login_name, user_id])

    def find_by_id(self, user_id: int) -> list[dict[str, Any]]:
        """Return every row whose id matches, in store order."""
        return self._db.query(SELECT_USER_SQL, [user_id])

    def is_healthy(self) -> bool:
        return self._db.health_check()
