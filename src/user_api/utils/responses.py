"""Envelope builders shared by every handler."""

from typing import Any

from user_api.entities import Envelope

SUCCESS_MESSAGE = "success"


def ok(data: Any) -> Envelope:
    return Envelope(code=200, message=SUCCESS_MESSAGE, data=data)


def bad_request(message: str) -> Envelope:
    return Envelope(code=400, message=message)


def not_found(message: str) -> Envelope:
    return Envelope(code=404, message=message)


def server_error(message: str = "Internal server error") -> Envelope:
    """Only built at the HTTP boundary, never by a handler."""
    return Envelope(code=500, message=message)
