"""
Shared fixtures for the user API tests.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from user_api.api.app import create_app
from user_api.handlers import UserHandler
from user_api.protocols import PersistenceError
from user_api.repositories import SqliteDatabase
from user_api.services import UserService


class FakeDatabase:
    """Recording Database used in place of a real store."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, fail: bool = False) -> None:
        self.rows = rows or []
        self.fail = fail
        self.executed: list[tuple[str, list[Any]]] = []
        self.queried: list[tuple[str, list[Any]]] = []

    def execute(self, sql, params):
        self.executed.append((sql, list(params)))
        if self.fail:
            raise PersistenceError("store unavailable")
        return 1

    def query(self, sql, params):
        self.queried.append((sql, list(params)))
        if self.fail:
            raise PersistenceError("store unavailable")
        return list(self.rows)

    def health_check(self):
        return not self.fail


@pytest.fixture
def make_db():
    """Factory for recording databases with canned rows or a forced failure."""
    return FakeDatabase


@pytest.fixture
def fake_db():
    """Create an empty recording database."""
    return FakeDatabase()


@pytest.fixture
def handler(fake_db):
    """Create a handler backed by the recording database."""
    return UserHandler(user_service=UserService(database=fake_db))


@pytest.fixture
def sqlite_db(tmp_path):
    """Create a SQLite database with the schema in a temp directory."""
    return SqliteDatabase.create(path=str(tmp_path / "platform.db"))


@pytest.fixture
def client(sqlite_db):
    """Create a test client backed by a fresh SQLite file."""
    with TestClient(create_app(database=sqlite_db)) as test_client:
        yield test_client
