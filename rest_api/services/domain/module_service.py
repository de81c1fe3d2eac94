"""
Module Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Module
from rest_api.services.base_service import NamedEntityService
from shared.utils.security_schemas import ModuleOutput


class ModuleService(NamedEntityService[Module, ModuleOutput]):
    """Service for module management."""

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Module,
            output_schema=ModuleOutput,
            entity_name="Módulo",
        )
