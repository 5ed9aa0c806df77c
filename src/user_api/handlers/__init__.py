"""Handler layer for request processing.

Handlers validate the parameter bag and build the response envelope.
They depend on services, not directly on the database.

Architecture:
    Handler -> Service -> Database
"""

from .user_handler import UserHandler

__all__ = [
    "UserHandler",
]
