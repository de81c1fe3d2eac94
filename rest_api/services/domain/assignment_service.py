"""
Assignment Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Assignment, Division
from rest_api.services.base_service import NamedEntityService
from shared.utils.attendance_schemas import AssignmentOutput


class AssignmentService(NamedEntityService[Assignment, AssignmentOutput]):
    references = {"division_id": (Division, "División")}

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Assignment,
            output_schema=AssignmentOutput,
            entity_name="Asignación",
            load_options=[selectinload(Assignment.division)],
        )
