"""
Role endpoints.
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
from rest_api.services.domain.role_service import RoleService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import RoleCreate, RoleOutput, RoleUpdate


router = APIRouter(prefix="/roles", tags=["security-roles"])


def _get_service(db: Session) -> RoleService:
    return RoleService(db)


@router.get("", response_model=list[RoleOutput])
def list_roles(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[RoleOutput]:
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{role_id}", response_model=RoleOutput)
def get_role(
    role_id: int,
    db: Session = Depends(get_db),
) -> RoleOutput:
    return _get_service(db).get_by_id(role_id)


@router.post("", response_model=RoleOutput, status_code=status.HTTP_201_CREATED)
def create_role(
    body: RoleCreate,
    db: Session = Depends(get_db),
) -> RoleOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{role_id}", response_model=RoleOutput)
def update_role(
    role_id: int,
    body: RoleUpdate,
    db: Session = Depends(get_db),
) -> RoleOutput:
    return _get_service(db).update(role_id, body.model_dump(exclude_unset=True))


@router.delete("/{role_id}", response_model=DeleteOutput)
def delete_role(
    role_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), role_id, delete_type)
