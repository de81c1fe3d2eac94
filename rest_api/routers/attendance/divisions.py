"""
Division endpoints.
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
from rest_api.services.domain.division_service import DivisionService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import DivisionCreate, DivisionOutput, DivisionUpdate


router = APIRouter(prefix="/divisions", tags=["attendance-divisions"])


def _get_service(db: Session) -> DivisionService:
    return DivisionService(db)


@router.get("", response_model=list[DivisionOutput])
def list_divisions(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[DivisionOutput]:
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{division_id}", response_model=DivisionOutput)
def get_division(
    division_id: int,
    db: Session = Depends(get_db),
) -> DivisionOutput:
    return _get_service(db).get_by_id(division_id)


@router.post("", response_model=DivisionOutput, status_code=status.HTTP_201_CREATED)
def create_division(
    body: DivisionCreate,
    db: Session = Depends(get_db),
) -> DivisionOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{division_id}", response_model=DivisionOutput)
def update_division(
    division_id: int,
    body: DivisionUpdate,
    db: Session = Depends(get_db),
) -> DivisionOutput:
    return _get_service(db).update(division_id, body.model_dump(exclude_unset=True))


@router.delete("/{division_id}", response_model=DeleteOutput)
def delete_division(
    division_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), division_id, delete_type)
