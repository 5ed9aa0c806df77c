#!/usr/bin/env python3
"""
Create (or verify) the platform_user table.

Usage:
    # Uses DATABASE_PATH from the environment / .env
    python scripts/init_db.py

    # Explicit file
    python scripts/init_db.py --path ./platform.db
"""

import argparse
import sys

from user_api.config import settings
from user_api.protocols import PersistenceError
from user_api.repositories import SqliteDatabase


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the platform_user table")
    parser.add_argument("--path", default=settings.database_path, help="SQLite database file")
    args = parser.parse_args()

    try:
        database = SqliteDatabase.create(path=args.path)
    except PersistenceError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(f"✓ platform_user ready in {database.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
