"""
Person Service.

Business rules:
- name, last_name and email are required
- document_type and blood_type must come from the known catalogs
- document_number holds digits only
"""

from __future__ import annotations

import re
from typing import Any

from sqlalchemy.orm import Session

from rest_api.models import Person
from rest_api.services.base_service import BaseCRUDService
from shared.config.constants import BloodTypes, DocumentTypes, Limits
from shared.utils.exceptions import ValidationError
from shared.utils.security_schemas import PersonOutput


class PersonService(BaseCRUDService[Person, PersonOutput]):
    """Service for person management."""

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Person,
            output_schema=PersonOutput,
            entity_name="Persona",
        )

    def _validate_create(self, data: dict[str, Any]) -> None:
        for field_name in ("name", "last_name", "email"):
            self._require_text(data, field_name)
        self._validate_catalogs(data)

    def _validate_update(self, entity: Person, data: dict[str, Any]) -> None:
        for field_name in ("name", "last_name", "email"):
            self._require_text(data, field_name, partial=True)
        self._validate_catalogs(data)

    def _validate_catalogs(self, data: dict[str, Any]) -> None:
        email = data.get("email")
        if email is not None and len(email) > Limits.MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"El correo admite máximo {Limits.MAX_EMAIL_LENGTH} caracteres",
                field="email",
            )

        document_type = data.get("document_type")
        if document_type is not None and document_type not in DocumentTypes.ALL:
            raise ValidationError(
                f"Tipo de documento inválido: '{document_type}'. "
                f"Valores permitidos: {', '.join(DocumentTypes.ALL)}",
                field="document_type",
            )

        blood_type = data.get("blood_type")
        if blood_type is not None and blood_type not in BloodTypes.ALL:
            raise ValidationError(
                f"Tipo de sangre inválido: '{blood_type}'. "
                f"Valores permitidos: {', '.join(BloodTypes.ALL)}",
                field="blood_type",
            )

        document_number = data.get("document_number")
        if document_number is not None:
            if not re.fullmatch(r"[0-9]+", document_number):
                raise ValidationError(
                    "El número de documento solo puede contener dígitos",
                    field="document_number",
                )
            if len(document_number) > Limits.MAX_DOCUMENT_NUMBER_LENGTH:
                raise ValidationError(
                    f"El número de documento admite máximo {Limits.MAX_DOCUMENT_NUMBER_LENGTH} dígitos",
                    field="document_number",
                )
