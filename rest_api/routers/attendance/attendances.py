"""
Attendance endpoints (cards enrolled in event sessions).
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.routers._common import (
    Pagination,
    delete_with_strategy,
    get_delete_type,
    get_pagination,
)
from rest_api.services.deletion import DeleteType
from rest_api.services.domain.attendance_service import AttendanceService
from rest_api.services.domain.attendance_registration_service import AttendanceRegistrationService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import (
    AttendanceCreate,
    AttendanceOutput,
    AttendanceRegistrationOutput,
    AttendanceUpdate,
)


router = APIRouter(prefix="/attendances", tags=["attendance-attendances"])


def _get_service(db: Session) -> AttendanceService:
    return AttendanceService(db)


@router.get("", response_model=list[AttendanceOutput])
def list_attendances(
    card_id: int | None = None,
    event_session_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[AttendanceOutput]:
    return _get_service(db).list_all(
        filters={"card_id": card_id, "event_session_id": event_session_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{attendance_id}", response_model=AttendanceOutput)
def get_attendance(
    attendance_id: int,
    db: Session = Depends(get_db),
) -> AttendanceOutput:
    return _get_service(db).get_by_id(attendance_id)


@router.post("", response_model=AttendanceOutput, status_code=status.HTTP_201_CREATED)
def create_attendance(
    body: AttendanceCreate,
    db: Session = Depends(get_db),
) -> AttendanceOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{attendance_id}", response_model=AttendanceOutput)
def update_attendance(
    attendance_id: int,
    body: AttendanceUpdate,
    db: Session = Depends(get_db),
) -> AttendanceOutput:
    return _get_service(db).update(attendance_id, body.model_dump(exclude_unset=True))


@router.delete("/{attendance_id}", response_model=DeleteOutput)
def delete_attendance(
    attendance_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), attendance_id, delete_type)


@router.get("/{attendance_id}/registrations", response_model=list[AttendanceRegistrationOutput])
def list_attendance_registrations(
    attendance_id: int,
    db: Session = Depends(get_db),
) -> list[AttendanceRegistrationOutput]:
    """Entrance and exit passes recorded for one attendance."""
    _get_service(db).get_by_id(attendance_id)
    return AttendanceRegistrationService(db).list_by_attendance(attendance_id)
