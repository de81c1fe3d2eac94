"""
Division-Branch Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Branch, Division, DivisionBranch
from rest_api.services.base_service import LinkService
from shared.utils.attendance_schemas import DivisionBranchOutput


class DivisionBranchService(LinkService[DivisionBranch, DivisionBranchOutput]):
    """Service for divisions present in branches."""

    references = {
        "division_id": (Division, "División"),
        "branch_id": (Branch, "Sucursal"),
    }

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=DivisionBranch,
            output_schema=DivisionBranchOutput,
            entity_name="División de sucursal",
            load_options=[selectinload(DivisionBranch.division), selectinload(DivisionBranch.branch)],
        )
