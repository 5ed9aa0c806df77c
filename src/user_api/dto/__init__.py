"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal logic uses the Envelope entity from the entities package.
"""

from .responses import ApiResponse, HealthCheckResponse

__all__ = [
    "ApiResponse",
    "HealthCheckResponse",
]
