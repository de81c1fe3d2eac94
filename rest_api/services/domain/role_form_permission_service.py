"""
Role-Form-Permission Service.

A row states that a role holds a permission on a form.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from rest_api.models import Form, Permission, Role, RoleFormPermission, RoleUser
from rest_api.services.base_service import LinkService
from shared.utils.security_schemas import RoleFormPermissionOutput


class RoleFormPermissionService(LinkService[RoleFormPermission, RoleFormPermissionOutput]):
    """Service for role permissions on forms."""

    references = {
        "role_id": (Role, "Rol"),
        "form_id": (Form, "Formulario"),
        "permission_id": (Permission, "Permiso"),
    }

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=RoleFormPermission,
            output_schema=RoleFormPermissionOutput,
            entity_name="Permiso de rol",
            load_options=[
                selectinload(RoleFormPermission.role),
                selectinload(RoleFormPermission.form),
                selectinload(RoleFormPermission.permission),
            ],
        )

    def user_has_permission(self, user_id: int, form_id: int, permission_id: int) -> bool:
        """
        True when any active role of the user grants the permission on the form.

        Inactive grants, roles or role assignments do not count.
        """
        query = (
            select(RoleFormPermission.id)
            .join(Role, Role.id == RoleFormPermission.role_id)
            .join(RoleUser, RoleUser.role_id == Role.id)
            .where(
                RoleUser.user_id == user_id,
                RoleUser.is_active.is_(True),
                Role.is_active.is_(True),
                RoleFormPermission.is_active.is_(True),
                RoleFormPermission.form_id == form_id,
                RoleFormPermission.permission_id == permission_id,
            )
            .limit(1)
        )
        return self._db.scalar(query) is not None
