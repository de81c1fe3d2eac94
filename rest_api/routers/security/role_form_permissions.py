"""
Role permission endpoints (which role may do what on which form).
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
from rest_api.services.domain.role_form_permission_service import RoleFormPermissionService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import (
    PermissionCheckOutput,
    RoleFormPermissionCreate,
    RoleFormPermissionOutput,
    RoleFormPermissionUpdate,
)


router = APIRouter(prefix="/role-form-permissions", tags=["security-role-form-permissions"])


def _get_service(db: Session) -> RoleFormPermissionService:
    return RoleFormPermissionService(db)


@router.get("", response_model=list[RoleFormPermissionOutput])
def list_role_form_permissions(
    role_id: int | None = None,
    form_id: int | None = None,
    permission_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[RoleFormPermissionOutput]:
    return _get_service(db).list_all(
        filters={"role_id": role_id, "form_id": form_id, "permission_id": permission_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{role_form_permission_id}", response_model=RoleFormPermissionOutput)
def get_role_form_permission(
    role_form_permission_id: int,
    db: Session = Depends(get_db),
) -> RoleFormPermissionOutput:
    return _get_service(db).get_by_id(role_form_permission_id)


@router.post("", response_model=RoleFormPermissionOutput, status_code=status.HTTP_201_CREATED)
def create_role_form_permission(
    body: RoleFormPermissionCreate,
    db: Session = Depends(get_db),
) -> RoleFormPermissionOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{role_form_permission_id}", response_model=RoleFormPermissionOutput)
def update_role_form_permission(
    role_form_permission_id: int,
    body: RoleFormPermissionUpdate,
    db: Session = Depends(get_db),
) -> RoleFormPermissionOutput:
    return _get_service(db).update(role_form_permission_id, body.model_dump(exclude_unset=True))


@router.delete("/{role_form_permission_id}", response_model=DeleteOutput)
def delete_role_form_permission(
    role_form_permission_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), role_form_permission_id, delete_type)


@router.get("/check/{user_id}/{form_id}/{permission_id}", response_model=PermissionCheckOutput)
def check_user_permission(
    user_id: int,
    form_id: int,
    permission_id: int,
    db: Session = Depends(get_db),
) -> PermissionCheckOutput:
    """
    Tell whether a user holds a permission on a form through any active role.

    Inactive grants, roles and role assignments are ignored.
    """
    allowed = _get_service(db).user_has_permission(user_id, form_id, permission_id)
    return PermissionCheckOutput(
        user_id=user_id,
        form_id=form_id,
        permission_id=permission_id,
        allowed=allowed,
    )
