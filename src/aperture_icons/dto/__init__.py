"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal logic should use entities from the entities package.
"""

from .responses import HealthCheckResponse, ServiceInfoResponse

__all__ = [
    "HealthCheckResponse",
    "ServiceInfoResponse",
]
