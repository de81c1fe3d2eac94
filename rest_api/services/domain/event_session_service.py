"""
Event Session Service.

Business rules:
- name is required and event_id must reference an existing event
- end_date cannot be earlier than start_date, also after partial updates
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Event, EventSession
from rest_api.services.base_service import NamedEntityService, as_utc
from shared.utils.exceptions import ValidationError
from shared.utils.attendance_schemas import EventSessionOutput


class EventSessionService(NamedEntityService[EventSession, EventSessionOutput]):
    """Service for event sessions."""

    references = {"event_id": (Event, "Evento")}

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=EventSession,
            output_schema=EventSessionOutput,
            entity_name="Sesión de evento",
            load_options=[selectinload(EventSession.event)],
        )

    def list_by_event(self, event_id: int, *, include_inactive: bool = False) -> list[EventSessionOutput]:
        self._validate_id(event_id, "event_id")
        return self.list_all(filters={"event_id": event_id}, include_inactive=include_inactive)

    def _validate_create(self, data: dict[str, Any]) -> None:
        super()._validate_create(data)
        self._validate_range(data)

    def _validate_update(self, entity: EventSession, data: dict[str, Any]) -> None:
        super()._validate_update(entity, data)
        if "start_date" in data or "end_date" in data:
            self._validate_range(self._merged(entity, data))

    def _validate_range(self, values: dict[str, Any]) -> None:
        start, end = values.get("start_date"), values.get("end_date")
        if start is None or end is None:
            return
        if as_utc(end) < as_utc(start):
            raise ValidationError(
                "La fecha de fin no puede ser anterior a la fecha de inicio",
                field="end_date",
            )
