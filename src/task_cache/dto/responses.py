"""Response DTOs for API endpoints.

Task bodies are produced by the codec instead, since their text field
name is configurable and cached bodies are returned as raw bytes.
"""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    task_count: int = Field(..., description="Number of tasks in the store", ge=0)


class ServiceInfoResponse(BaseModel):
    """Response DTO for the root endpoint."""

    name: str
    version: str
    id_policy: str
    text_field: str
    endpoints: dict[str, str]
