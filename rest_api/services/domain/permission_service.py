"""
Permission Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Permission
from rest_api.services.base_service import NamedEntityService
from shared.utils.security_schemas import PermissionOutput


class PermissionService(NamedEntityService[Permission, PermissionOutput]):
    """Service for permission management. Name and description are required."""

    required_fields = ("name", "description")

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Permission,
            output_schema=PermissionOutput,
            entity_name="Permiso",
        )
