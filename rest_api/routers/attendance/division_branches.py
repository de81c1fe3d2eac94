"""
Division-branch endpoints.
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
from rest_api.services.domain.division_branch_service import DivisionBranchService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import DivisionBranchCreate, DivisionBranchOutput, DivisionBranchUpdate


router = APIRouter(prefix="/division-branches", tags=["attendance-division-branches"])


def _get_service(db: Session) -> DivisionBranchService:
    return DivisionBranchService(db)


@router.get("", response_model=list[DivisionBranchOutput])
def list_division_branches(
    division_id: int | None = None,
    branch_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[DivisionBranchOutput]:
    return _get_service(db).list_all(
        filters={"division_id": division_id, "branch_id": branch_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{division_branch_id}", response_model=DivisionBranchOutput)
def get_division_branch(
    division_branch_id: int,
    db: Session = Depends(get_db),
) -> DivisionBranchOutput:
    return _get_service(db).get_by_id(division_branch_id)


@router.post("", response_model=DivisionBranchOutput, status_code=status.HTTP_201_CREATED)
def create_division_branch(
    body: DivisionBranchCreate,
    db: Session = Depends(get_db),
) -> DivisionBranchOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{division_branch_id}", response_model=DivisionBranchOutput)
def update_division_branch(
    division_branch_id: int,
    body: DivisionBranchUpdate,
    db: Session = Depends(get_db),
) -> DivisionBranchOutput:
    return _get_service(db).update(division_branch_id, body.model_dump(exclude_unset=True))


@router.delete("/{division_branch_id}", response_model=DeleteOutput)
def delete_division_branch(
    division_branch_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), division_branch_id, delete_type)
