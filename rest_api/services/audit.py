"""
Audit logging service.
Records every entity change made through the services.
"""

import json
from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from rest_api.models import AuditLog
from shared.config.constants import AuditActions
from shared.infrastructure.correlation import get_request_id

# Columns never copied into the audit trail
SENSITIVE_FIELDS = frozenset({"password"})


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _dumps(values: Optional[dict]) -> Optional[str]:
    if not values:
        return None
    return json.dumps(values, default=_json_default)


def compute_changes(old_values: dict, new_values: dict) -> dict[str, dict[str, Any]]:
    """Fields whose value differs between two snapshots."""
    changes = {}
    for key in set(old_values.keys()) | set(new_values.keys()):
        old_val = old_values.get(key)
        new_val = new_values.get(key)
        if old_val != new_val:
            changes[key] = {"old": old_val, "new": new_val}
    return changes


def log_change(
    db: Session,
    *,
    entity_type: str,
    entity_id: int,
    action: str,
    old_values: Optional[dict] = None,
    new_values: Optional[dict] = None,
) -> AuditLog:
    """
    Log a change to an entity.

    Args:
        db: Database session
        entity_type: Type of entity (table name, e.g. "role")
        entity_id: ID of the entity
        action: One of AuditActions
        old_values: Previous state of the entity (for UPDATE/DELETE)
        new_values: New state of the entity (for CREATE/UPDATE)

    Returns:
        Created AuditLog entry (added to the session, not committed)
    """
    changes = None
    if action == AuditActions.UPDATE and old_values and new_values:
        changes = compute_changes(old_values, new_values)

    audit_entry = AuditLog(
        entity_type=entity_type,
        entity_id=entity_id,
        action=action,
        old_values=_dumps(old_values),
        new_values=_dumps(new_values),
        changes=_dumps(changes),
        request_id=get_request_id() or None,
    )

    db.add(audit_entry)
    return audit_entry


def serialize_model(obj: Any, exclude: Optional[list[str]] = None) -> dict:
    """
    Serialize a SQLAlchemy model to a dictionary for audit logging.

    Sensitive columns are always left out.
    """
    excluded = SENSITIVE_FIELDS | set(exclude or [])

    result = {}
    for column in obj.__table__.columns:
        if column.name in excluded:
            continue
        value = getattr(obj, column.name)
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        result[column.name] = value

    return result


def parse_values(raw: Optional[str]) -> Optional[dict]:
    """Decode a JSON column of an audit row."""
    if not raw:
        return None
    return json.loads(raw)


def list_audit_entries(
    db: Session,
    *,
    entity_type: Optional[str] = None,
    entity_id: Optional[int] = None,
    action: Optional[str] = None,
    limit: int = 100,
    offset: int = 0,
) -> list[AuditLog]:
    """Audit rows matching the filters, newest first."""
    query = select(AuditLog)

    if entity_type:
        query = query.where(AuditLog.entity_type == entity_type)
    if entity_id:
        query = query.where(AuditLog.entity_id == entity_id)
    if action:
        query = query.where(AuditLog.action == action)

    query = query.order_by(AuditLog.created_at.desc(), AuditLog.id.desc()).offset(offset).limit(limit)
    return list(db.execute(query).scalars().all())
