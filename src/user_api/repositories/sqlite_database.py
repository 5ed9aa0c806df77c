"""SQLite implementation of the Database protocol.

Each statement runs on its own short-lived connection, so no connection
state is shared between requests. Writes are committed before the
connection is closed.
"""

import logging
import sqlite3
from collections.abc import Sequence
from contextlib import closing
from typing import Any

from user_api.config import settings
from user_api.protocols import PersistenceError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS platform_user (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    login_name TEXT NOT NULL
)
"""


class SqliteDatabase:
    """SQLite accessor for the platform tables.

    This class satisfies the Database protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, path: str | None = None) -> None:
        """Initialize the SQLite accessor.

        Args:
            path: Database file path. If None, uses settings.
        """
        self._path = path or settings.database_path

    @classmethod
    def create(cls, path: str | None = None, ensure_schema: bool = True) -> "SqliteDatabase":
        """Factory method to create SqliteDatabase with defaults.

        Args:
            path: Database file path. If None, uses settings.
            ensure_schema: Create the platform_user table if it is missing.

        Returns:
            Configured SqliteDatabase
        """
        database = cls(path=path)
        if ensure_schema:
            database.ensure_schema()
        return database

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path)
        conn.row_factory = sqlite3.Row
        return conn

    def ensure_schema(self) -> None:
        """Create the platform_user table if it doesn't exist."""
        try:
            with closing(self._connect()) as conn:
                conn.executescript(SCHEMA)
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to create schema in {self._path}: {e}") from e
        logger.info("Schema ready in %s", self._path)

    def execute(self, sql: str, params: Sequence[Any]) -> int:
        """Run a write statement and commit it.

        Args:
            sql: Statement with ``?`` placeholders
            params: Positional values for the placeholders

        Returns:
            Number of affected rows
        """
        try:
            with closing(self._connect()) as conn:
                with conn:
                    cursor = conn.execute(sql, tuple(params))
                return cursor.rowcount
        except (sqlite3.Error, OverflowError) as e:
            raise PersistenceError(f"Statement failed: {e}") from e

    def query(self, sql: str, params: Sequence[Any]) -> list[dict[str, Any]]:
        """Run a read statement.

        Args:
            sql: Statement with ``?`` placeholders
            params: Positional values for the placeholders

        Returns:
            All rows, in the order the store returned them
        """
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(sql, tuple(params)).fetchall()
        except (sqlite3.Error, OverflowError) as e:
            raise PersistenceError(f"Query failed: {e}") from e
        return [dict(row) for row in rows]

    def health_check(self) -> bool:
        """Check if the database file can be opened and queried.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with closing(self._connect()) as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except sqlite3.Error:
            return False

    @property
    def path(self) -> str:
        """Get the database file path."""
        return self._path
