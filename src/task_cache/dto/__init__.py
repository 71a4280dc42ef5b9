"""Data Transfer Objects for API contracts.

These Pydantic models validate what crosses the HTTP boundary.
Internal logic uses the entities package; the codec converts between both.
"""

from .requests import TaskPayload
from .responses import HealthCheckResponse, ServiceInfoResponse

__all__ = [
    "TaskPayload",
    "HealthCheckResponse",
    "ServiceInfoResponse",
]
