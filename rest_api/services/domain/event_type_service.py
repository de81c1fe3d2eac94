"""
Event Type Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import EventType
from rest_api.services.base_service import NamedEntityService
from shared.utils.attendance_schemas import EventTypeOutput


class EventTypeService(NamedEntityService[EventType, EventTypeOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=EventType,
            output_schema=EventTypeOutput,
            entity_name="Tipo de evento",
        )
