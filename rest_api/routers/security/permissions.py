"""
Permission endpoints.
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
from rest_api.services.domain.permission_service import PermissionService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import PermissionCreate, PermissionOutput, PermissionUpdate


router = APIRouter(prefix="/permissions", tags=["security-permissions"])


def _get_service(db: Session) -> PermissionService:
    return PermissionService(db)


@router.get("", response_model=list[PermissionOutput])
def list_permissions(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[PermissionOutput]:
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{permission_id}", response_model=PermissionOutput)
def get_permission(
    permission_id: int,
    db: Session = Depends(get_db),
) -> PermissionOutput:
    return _get_service(db).get_by_id(permission_id)


@router.post("", response_model=PermissionOutput, status_code=status.HTTP_201_CREATED)
def create_permission(
    body: PermissionCreate,
    db: Session = Depends(get_db),
) -> PermissionOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{permission_id}", response_model=PermissionOutput)
def update_permission(
    permission_id: int,
    body: PermissionUpdate,
    db: Session = Depends(get_db),
) -> PermissionOutput:
    return _get_service(db).update(permission_id, body.model_dump(exclude_unset=True))


@router.delete("/{permission_id}", response_model=DeleteOutput)
def delete_permission(
    permission_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), permission_id, delete_type)
