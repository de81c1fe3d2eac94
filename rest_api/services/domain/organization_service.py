"""
Organization Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Organization
from rest_api.services.base_service import NamedEntityService
from shared.utils.attendance_schemas import OrganizationOutput


class OrganizationService(NamedEntityService[Organization, OrganizationOutput]):
    """Service for organization management."""

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Organization,
            output_schema=OrganizationOutput,
            entity_name="Organización",
        )
