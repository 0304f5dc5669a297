"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    icons_healthy: bool = Field(..., description="Whether the icon base path is readable")
    handler: str = Field(..., description="The configured type handler")
    base_path: str | None = Field(None, description="Base path icons are loaded from")


class ServiceInfoResponse(BaseModel):
    """Response DTO for the root endpoint."""

    name: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    description: str = Field(..., description="What the service does")
    endpoints: dict[str, str] = Field(default_factory=dict, description="Available endpoints")
