"""Parameter extraction helpers.

Raw parameter values arrive untyped from the transport layer: strings from
form bodies and query strings, or JSON scalars. These helpers decide
presence and coerce integers without ever producing a half-valid value.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

Params = Mapping[str, Any]

_INT_PATTERN = re.compile(r"[+-]?\d+")

# Signed 64-bit, the widest integer the store accepts
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


@dataclass(frozen=True)
class IntParseResult:
    """Outcome of parse_int: either a value or an error, never both."""

    value: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_blank(value: Any) -> bool:
    """True when a parameter is absent or falsy: None, "", False, 0, 0.0 or NaN."""
    if value is None or value is False or value == "":
        return True
    # NaN is the only value unequal to itself
    return isinstance(value, (int, float)) and (not value or value != value)


def require_fields(params: Params, *names: str) -> list[str]:
    """Return the names from ``names`` that are blank in ``params``, in order."""
    return [name for name in names if is_blank(params.get(name))]


def _in_range(value: int, raw: Any) -> IntParseResult:
    if not INT_MIN <= value <= INT_MAX:
        return IntParseResult(error=f"out of range: {raw!r}")
    return IntParseResult(value=value)


def parse_int(raw: Any) -> IntParseResult:
    """Coerce a raw parameter value to an integer.

    Accepts ints, integral floats and strings of optional sign plus digits
    (surrounding whitespace ignored), within the signed 64-bit range.
    Everything else, including booleans and strings with trailing garbage
    such as ``"5abc"``, is an error.
    """
    if raw is None:
        return IntParseResult(error="missing")

    # bool is an int subclass
    if isinstance(raw, bool):
        return IntParseResult(error=f"not an integer: {raw!r}")

    if isinstance(raw, int):
        return _in_range(raw, raw)

    if isinstance(raw, float):
        if raw.is_integer():
            return _in_range(int(raw), raw)
        return IntParseResult(error=f"not an integer: {raw!r}")

    if isinstance(raw, str):
        text = raw.strip()
        if _INT_PATTERN.fullmatch(text):
            return _in_range(int(text), raw)
        return IntParseResult(error=f"not an integer: {raw!r}")

    return IntParseResult(error=f"unsupported type: {type(raw).__name__}")
