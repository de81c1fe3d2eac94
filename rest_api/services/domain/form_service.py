"""
Form Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Form
from rest_api.services.base_service import NamedEntityService
from shared.utils.security_schemas import FormOutput


class FormService(NamedEntityService[Form, FormOutput]):
    """Service for form (UI screen) management."""

    required_fields = ("name", "description")

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Form,
            output_schema=FormOutput,
            entity_name="Formulario",
        )
