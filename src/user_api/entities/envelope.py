"""Response envelope domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Envelope:
    """Uniform result of a handler invocation.

    Attributes:
        code: Outcome code following HTTP status convention (200, 400, 404, 500)
        message: Human-readable outcome ("success" on success)
        data: Payload on success, None on failure
    """

    code: int
    message: str
    data: Any = None

    @property
    def is_success(self) -> bool:
        return self.code == 200

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}
