"""
Access Point Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import AccessPoint, Event
from rest_api.services.base_service import NamedEntityService
from shared.utils.attendance_schemas import AccessPointOutput


class AccessPointService(NamedEntityService[AccessPoint, AccessPointOutput]):
    """Service for the gates where attendance is registered."""

    references = {"event_id": (Event, "Evento")}

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=AccessPoint,
            output_schema=AccessPointOutput,
            entity_name="Punto de acceso",
            load_options=[selectinload(AccessPoint.event)],
        )
