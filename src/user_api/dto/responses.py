"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from user_api.entities import Envelope


class ApiResponse(BaseModel):
    """Uniform response envelope returned by every user endpoint."""

    code: int = Field(..., description="Outcome code: 200 success, 400 bad input, 404 not found, 500 store failure")
    message: str = Field(..., description="'success' or a human-readable error")
    data: Any = Field(None, description="Payload on success, null otherwise")

    @classmethod
    def from_envelope(cls, envelope: Envelope) -> "ApiResponse":
        return cls(code=envelope.code, message=envelope.message, data=envelope.data)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    database_healthy: bool = Field(..., description="Whether the database is reachable")
