"""
Audit log endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rest_api.routers._common import Pagination, get_pagination
from rest_api.services.audit import list_audit_entries, parse_values
from shared.infrastructure.db import get_db
from shared.utils.schemas import AuditLogOutput


router = APIRouter(tags=["admin-audit"])


@router.get("/audit", response_model=list[AuditLogOutput])
def get_audit_log(
    entity_type: str | None = None,
    entity_id: int | None = None,
    action: str | None = None,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[AuditLogOutput]:
    """
    Get audit log entries with optional filters, newest first.

    Filters:
    - entity_type: Table name (e.g., "role", "app_user", "card")
    - entity_id: Filter by specific entity ID
    - action: CREATE, UPDATE, SOFT_DELETE, DELETE or RESTORE
    """
    entries = list_audit_entries(
        db,
        entity_type=entity_type,
        entity_id=entity_id,
        action=action,
        limit=pagination.limit,
        offset=pagination.offset,
    )

    return [
        AuditLogOutput(
            id=entry.id,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            action=entry.action,
            old_values=parse_values(entry.old_values),
            new_values=parse_values(entry.new_values),
            changes=parse_values(entry.changes),
            request_id=entry.request_id,
            created_at=entry.created_at,
        )
        for entry in entries
    ]
