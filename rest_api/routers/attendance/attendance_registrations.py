"""
Attendance registration endpoints (entrances and exits at access points).
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
from rest_api.services.domain.attendance_registration_service import AttendanceRegistrationService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import AttendanceRegistrationCreate, AttendanceRegistrationOutput, AttendanceRegistrationUpdate


router = APIRouter(prefix="/attendance-registrations", tags=["attendance-registrations"])


def _get_service(db: Session) -> AttendanceRegistrationService:
    return AttendanceRegistrationService(db)


@router.get("", response_model=list[AttendanceRegistrationOutput])
def list_registrations(
    attendance_id: int | None = None,
    access_point_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[AttendanceRegistrationOutput]:
    return _get_service(db).list_all(
        filters={"attendance_id": attendance_id, "access_point_id": access_point_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{registration_id}", response_model=AttendanceRegistrationOutput)
def get_registration(
    registration_id: int,
    db: Session = Depends(get_db),
) -> AttendanceRegistrationOutput:
    return _get_service(db).get_by_id(registration_id)


@router.post("", response_model=AttendanceRegistrationOutput, status_code=status.HTTP_201_CREATED)
def create_registration(
    body: AttendanceRegistrationCreate,
    db: Session = Depends(get_db),
) -> AttendanceRegistrationOutput:
    """Register an entrance or exit. hour defaults to now when omitted."""
    return _get_service(db).create(body.model_dump())


@router.patch("/{registration_id}", response_model=AttendanceRegistrationOutput)
def update_registration(
    registration_id: int,
    body: AttendanceRegistrationUpdate,
    db: Session = Depends(get_db),
) -> AttendanceRegistrationOutput:
    return _get_service(db).update(registration_id, body.model_dump(exclude_unset=True))


@router.delete("/{registration_id}", response_model=DeleteOutput)
def delete_registration(
    registration_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), registration_id, delete_type)
