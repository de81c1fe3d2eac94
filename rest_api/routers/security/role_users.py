"""
Role grant endpoints (which users hold which roles).
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
from rest_api.services.domain.role_user_service import RoleUserService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import RoleUserCreate, RoleUserOutput, RoleUserUpdate


router = APIRouter(prefix="/role-users", tags=["security-role-users"])


def _get_service(db: Session) -> RoleUserService:
    return RoleUserService(db)


@router.get("", response_model=list[RoleUserOutput])
def list_role_users(
    role_id: int | None = None,
    user_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[RoleUserOutput]:
    return _get_service(db).list_all(
        filters={"role_id": role_id, "user_id": user_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{role_user_id}", response_model=RoleUserOutput)
def get_role_user(
    role_user_id: int,
    db: Session = Depends(get_db),
) -> RoleUserOutput:
    return _get_service(db).get_by_id(role_user_id)


@router.post("", response_model=RoleUserOutput, status_code=status.HTTP_201_CREATED)
def create_role_user(
    body: RoleUserCreate,
    db: Session = Depends(get_db),
) -> RoleUserOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{role_user_id}", response_model=RoleUserOutput)
def update_role_user(
    role_user_id: int,
    body: RoleUserUpdate,
    db: Session = Depends(get_db),
) -> RoleUserOutput:
    return _get_service(db).update(role_user_id, body.model_dump(exclude_unset=True))


@router.delete("/{role_user_id}", response_model=DeleteOutput)
def delete_role_user(
    role_user_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), role_user_id, delete_type)
