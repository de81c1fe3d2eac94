"""
Event Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Event, EventType
from rest_api.services.base_service import NamedEntityService
from shared.utils.attendance_schemas import EventOutput


class EventService(NamedEntityService[Event, EventOutput]):
    """Service for events. The event date is required by the schema."""

    references = {"event_type_id": (EventType, "Tipo de evento")}

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Event,
            output_schema=EventOutput,
            entity_name="Evento",
            load_options=[selectinload(Event.event_type)],
        )
