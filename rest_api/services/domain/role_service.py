"""
Role Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Role
from rest_api.services.base_service import NamedEntityService
from shared.utils.security_schemas import RoleOutput


class RoleService(NamedEntityService[Role, RoleOutput]):
    """Service for role management. Description is optional."""

    required_fields = ("name",)

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Role,
            output_schema=RoleOutput,
            entity_name="Rol",
        )
