"""
Branch Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Branch, Organization
from rest_api.services.base_service import NamedEntityService
from shared.utils.attendance_schemas import BranchOutput


class BranchService(NamedEntityService[Branch, BranchOutput]):
    """Service for branches. Each branch belongs to an organization."""

    references = {"organization_id": (Organization, "Organización")}

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Branch,
            output_schema=BranchOutput,
            entity_name="Sucursal",
            load_options=[selectinload(Branch.organization)],
        )
