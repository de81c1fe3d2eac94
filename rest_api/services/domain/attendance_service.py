"""
Attendance Service.

Enrolls a card in an event session. A card can only be enrolled once per
session while the enrollment is active.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Attendance, Card, EventSession
from rest_api.services.base_service import LinkService
from shared.utils.attendance_schemas import AttendanceOutput


class AttendanceService(LinkService[Attendance, AttendanceOutput]):
    """Service for attendance enrollments."""

    references = {
        "card_id": (Card, "Tarjeta"),
        "event_session_id": (EventSession, "Sesión de evento"),
    }

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Attendance,
            output_schema=AttendanceOutput,
            entity_name="Asistencia",
            load_options=[selectinload(Attendance.card), selectinload(Attendance.event_session)],
        )
