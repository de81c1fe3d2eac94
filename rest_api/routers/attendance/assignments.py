"""
Assignment endpoints.
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
from rest_api.services.domain.assignment_service import AssignmentService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import AssignmentCreate, AssignmentOutput, AssignmentUpdate


router = APIRouter(prefix="/assignments", tags=["attendance-assignments"])


def _get_service(db: Session) -> AssignmentService:
    return AssignmentService(db)


@router.get("", response_model=list[AssignmentOutput])
def list_assignments(
    division_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[AssignmentOutput]:
    return _get_service(db).list_all(
        filters={"division_id": division_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{assignment_id}", response_model=AssignmentOutput)
def get_assignment(
    assignment_id: int,
    db: Session = Depends(get_db),
) -> AssignmentOutput:
    return _get_service(db).get_by_id(assignment_id)


@router.post("", response_model=AssignmentOutput, status_code=status.HTTP_201_CREATED)
def create_assignment(
    body: AssignmentCreate,
    db: Session = Depends(get_db),
) -> AssignmentOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{assignment_id}", response_model=AssignmentOutput)
def update_assignment(
    assignment_id: int,
    body: AssignmentUpdate,
    db: Session = Depends(get_db),
) -> AssignmentOutput:
    return _get_service(db).update(assignment_id, body.model_dump(exclude_unset=True))


@router.delete("/{assignment_id}", response_model=DeleteOutput)
def delete_assignment(
    assignment_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), assignment_id, delete_type)
