"""
Role-User Service.

Grants roles to users. Both ids must exist and the same role cannot be
granted twice to the same user while the grant is active.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Role, RoleUser, User
from rest_api.services.base_service import LinkService
from shared.utils.security_schemas import RoleUserOutput


class RoleUserService(LinkService[RoleUser, RoleUserOutput]):
    """Service for role grants."""

    references = {
        "role_id": (Role, "Rol"),
        "user_id": (User, "Usuario"),
    }

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=RoleUser,
            output_schema=RoleUserOutput,
            entity_name="Asignación de rol",
            load_options=[selectinload(RoleUser.role), selectinload(RoleUser.user)],
        )

    def list_by_user(self, user_id: int) -> list[RoleUserOutput]:
        """Active roles granted to a user."""
        self._validate_id(user_id, "user_id")
        return self.list_all(filters={"user_id": user_id})
