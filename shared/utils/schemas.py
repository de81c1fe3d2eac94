"""
Shared Pydantic schemas used across the application.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel


DeleteStrategyName = Literal["logical", "permanent"]


# =============================================================================
# Common Responses
# =============================================================================


class DeleteOutput(BaseModel):
    """Result of a delete request."""

    success: bool
    message: str
    strategy: DeleteStrategyName
    entity_id: int


class RestoreOutput(BaseModel):
    """Result of entity restoration."""

    success: bool
    message: str
    entity_type: str
    entity_id: int


class HealthOutput(BaseModel):
    status: str
    service: str
    environment: str


# =============================================================================
# Audit Log Schemas
# =============================================================================


class AuditLogOutput(BaseModel):
    """Audit log entry output."""

    id: int
    entity_type: str
    entity_id: int
    action: str
    old_values: dict[str, Any] | None = None
    new_values: dict[str, Any] | None = None
    changes: dict[str, Any] | None = None
    request_id: str | None = None
    created_at: datetime
