"""Shared parameter and response helpers."""

from .params import IntParseResult, Params, is_blank, parse_int, require_fields
from .responses import bad_request, not_found, ok, server_error

__all__ = [
    "IntParseResult",
    "Params",
    "is_blank",
    "parse_int",
    "require_fields",
    "ok",
    "bad_request",
    "not_found",
    "server_error",
]
