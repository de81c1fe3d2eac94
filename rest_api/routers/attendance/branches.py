"""
Branch endpoints.
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
from rest_api.services.domain.branch_service import BranchService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import BranchCreate, BranchOutput, BranchUpdate


router = APIRouter(prefix="/branches", tags=["attendance-branches"])


def _get_service(db: Session) -> BranchService:
    return BranchService(db)


@router.get("", response_model=list[BranchOutput])
def list_branches(
    organization_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[BranchOutput]:
    return _get_service(db).list_all(
        filters={"organization_id": organization_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{branch_id}", response_model=BranchOutput)
def get_branch(
    branch_id: int,
    db: Session = Depends(get_db),
) -> BranchOutput:
    return _get_service(db).get_by_id(branch_id)


@router.post("", response_model=BranchOutput, status_code=status.HTTP_201_CREATED)
def create_branch(
    body: BranchCreate,
    db: Session = Depends(get_db),
) -> BranchOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{branch_id}", response_model=BranchOutput)
def update_branch(
    branch_id: int,
    body: BranchUpdate,
    db: Session = Depends(get_db),
) -> BranchOutput:
    return _get_service(db).update(branch_id, body.model_dump(exclude_unset=True))


@router.delete("/{branch_id}", response_model=DeleteOutput)
def delete_branch(
    branch_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), branch_id, delete_type)
