"""
QR card endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.routers._common import (
    Pagination,
    delete_with_strategy,
    get_delete_type,
    get_pagination,
)
from rest_api.services.deletion import DeleteType
from rest_api.services.domain.card_service import CardService
from shared.infrastructure.db import get_db
from shared.utils.exceptions import NotFoundError
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import CardCreate, CardOutput, CardUpdate


router = APIRouter(prefix="/cards", tags=["attendance-cards"])


def _get_service(db: Session) -> CardService:
    return CardService(db)


@router.get("", response_model=list[CardOutput])
def list_cards(
    person_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[CardOutput]:
    return _get_service(db).list_all(
        filters={"person_id": person_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{card_id}", response_model=CardOutput)
def get_card(
    card_id: int,
    db: Session = Depends(get_db),
) -> CardOutput:
    return _get_service(db).get_by_id(card_id)


@router.post("", response_model=CardOutput, status_code=status.HTTP_201_CREATED)
def create_card(
    body: CardCreate,
    db: Session = Depends(get_db),
) -> CardOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{card_id}", response_model=CardOutput)
def update_card(
    card_id: int,
    body: CardUpdate,
    db: Session = Depends(get_db),
) -> CardOutput:
    return _get_service(db).update(card_id, body.model_dump(exclude_unset=True))


@router.delete("/{card_id}", response_model=DeleteOutput)
def delete_card(
    card_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), card_id, delete_type)


@router.get("/by-qr/{qr}", response_model=CardOutput)
def get_card_by_qr(
    qr: str,
    db: Session = Depends(get_db),
) -> CardOutput:
    """Look up an active card by the code printed on it."""
    card = _get_service(db).get_by_qr(qr)
    if card is None:
        raise NotFoundError("Tarjeta", qr)
    return card
