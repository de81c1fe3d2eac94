"""
Form-Module Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Form, FormModule, Module
from rest_api.services.base_service import LinkService
from shared.utils.security_schemas import FormModuleOutput


class FormModuleService(LinkService[FormModule, FormModuleOutput]):
    """Service for placing forms inside modules."""

    references = {
        "form_id": (Form, "Formulario"),
        "module_id": (Module, "Módulo"),
    }

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=FormModule,
            output_schema=FormModuleOutput,
            entity_name="Formulario de módulo",
            load_options=[selectinload(FormModule.form), selectinload(FormModule.module)],
        )
