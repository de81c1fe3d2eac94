"""
Attendance Registration Service.

Each registration is one pass through an access point, marked as entrance
or exit. The hour defaults to the moment of registration.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session, selectinload

from rest_api.models import AccessPoint, Attendance, AttendanceRegistration
from rest_api.services.base_service import BaseCRUDService
from shared.config.logging import attendance_logger
from shared.utils.attendance_schemas import AttendanceRegistrationOutput


class AttendanceRegistrationService(
    BaseCRUDService[AttendanceRegistration, AttendanceRegistrationOutput]
):
    references = {
        "attendance_id": (Attendance, "Asistencia"),
        "access_point_id": (AccessPoint, "Punto de acceso"),
    }

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=AttendanceRegistration,
            output_schema=AttendanceRegistrationOutput,
            entity_name="Registro de asistencia",
            load_options=[selectinload(AttendanceRegistration.access_point)],
        )

    def create(self, data: dict[str, Any]) -> AttendanceRegistrationOutput:
        output = super().create(data)
        attendance_logger.info(
            "Attendance registered",
            registration_id=output.id,
            attendance_id=output.attendance_id,
            access_point_id=output.access_point_id,
            is_entrance=output.is_entrance,
        )
        return output

    def list_by_attendance(self, attendance_id: int) -> list[AttendanceRegistrationOutput]:
        self._validate_id(attendance_id, "attendance_id")
        return self.list_all(filters={"attendance_id": attendance_id})

    def _validate_create(self, data: dict[str, Any]) -> None:
        for field_name, (model, label) in self.references.items():
            self._require_related(model, data.get(field_name), field_name, label)

    def _validate_update(self, entity: AttendanceRegistration, data: dict[str, Any]) -> None:
        for field_name, (model, label) in self.references.items():
            if field_name in data:
                self._require_related(model, data[field_name], field_name, label)

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        data = dict(data)
        if data.get("hour") is None:
            data["hour"] = datetime.now(timezone.utc)
        return data
