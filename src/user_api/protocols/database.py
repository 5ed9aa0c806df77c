"""Database accessor protocol.

Defines the interface the handlers use to reach the relational store.
Writes go through ``execute``; reads go through ``query``. Statements are
parameterized with ``?`` placeholders and values are passed positionally.

Implementations can include:
- SQLite (default, see ``repositories.SqliteDatabase``)
- An adapter around a host runtime's database binding
- In-memory fakes for tests
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


class PersistenceError(Exception):
    """Raised by a Database implementation when the store rejects a statement.

    Handlers never catch this; it propagates to the HTTP boundary.
    """


@runtime_checkable
class Database(Protocol):
    """Protocol for relational store accessors.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from user_api.protocols import Database

        db: Database = SqliteDatabase.create()
        db.execute("INSERT INTO platform_user (name, login_name) VALUES (?, ?)", ["Alice", "alice01"])
        rows = db.query("SELECT * FROM platform_user WHERE id = ?", [1])
        ```
    """

    def execute(self, sql: str, params: Sequence[Any]) -> int:
        """Run a write statement.

        Args:
            sql: Statement with ``?`` placeholders
            params: Positional values for the placeholders

        Returns:
            Number of affected rows (as reported by the store)

        Raises:
            PersistenceError: If the store rejects the statement
        """
        ...

    def query(self, sql: str, params: Sequence[Any]) -> list[dict[str, Any]]:
        """Run a read statement.

        Args:
            sql: Statement with ``?`` placeholders
            params: Positional values for the placeholders

        Returns:
            Rows in store order, each as a column-name to value mapping

        Raises:
            PersistenceError: If the store rejects the statement
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
