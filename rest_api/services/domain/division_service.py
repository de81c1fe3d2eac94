"""
Division Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Division
from rest_api.services.base_service import NamedEntityService
from shared.utils.attendance_schemas import DivisionOutput


class DivisionService(NamedEntityService[Division, DivisionOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Division,
            output_schema=DivisionOutput,
            entity_name="División",
        )
