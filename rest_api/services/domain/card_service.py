"""
Card Service.

Business rules:
- qr is required and unique across all cards, inactive ones included
- person_id must reference an existing person
- creation_date defaults to now; expiration_date cannot precede it
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Card, Person
from rest_api.services.base_service import NamedEntityService, as_utc
from shared.utils.exceptions import ValidationError
from shared.utils.attendance_schemas import CardOutput


class CardService(NamedEntityService[Card, CardOutput]):
    """Service for QR cards."""

    required_fields = ("qr",)
    references = {"person_id": (Person, "Persona")}

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Card,
            output_schema=CardOutput,
            entity_name="Tarjeta",
            load_options=[selectinload(Card.person)],
        )

    def get_by_qr(self, qr: str) -> CardOutput | None:
        """Active card with the given QR code."""
        entity = self._repo.find_one_by(qr=qr)
        return self.to_output(entity) if entity else None

    def _validate_create(self, data: dict[str, Any]) -> None:
        super()._validate_create(data)
        qr = data["qr"].strip()
        self._ensure_unique(identifier=qr, include_inactive=True, qr=qr)
        self._validate_dates(data)

    def _validate_update(self, entity: Card, data: dict[str, Any]) -> None:
        super()._validate_update(entity, data)
        if "qr" in data:
            qr = data["qr"].strip()
            self._ensure_unique(identifier=qr, exclude_id=entity.id, include_inactive=True, qr=qr)
        if "creation_date" in data or "expiration_date" in data:
            self._validate_dates(self._merged(entity, data))

    def _validate_dates(self, values: dict[str, Any]) -> None:
        created = values.get("creation_date") or datetime.now(timezone.utc)
        expires = values.get("expiration_date")
        if expires is not None and as_utc(expires) < as_utc(created):
            raise ValidationError(
                "La fecha de expiración no puede ser anterior a la fecha de creación",
                field="expiration_date",
            )

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        data = dict(data)
        data["qr"] = data["qr"].strip()
        if data.get("creation_date") is None:
            data["creation_date"] = datetime.now(timezone.utc)
        return data

    def _prepare_update(self, entity: Card, data: dict[str, Any]) -> dict[str, Any]:
        if "qr" in data:
            data = {**data, "qr": data["qr"].strip()}
        return data
