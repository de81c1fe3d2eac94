"""
Event type endpoints.
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
from rest_api.services.domain.event_type_service import EventTypeService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import EventTypeCreate, EventTypeOutput, EventTypeUpdate


router = APIRouter(prefix="/event-types", tags=["attendance-event-types"])


def _get_service(db: Session) -> EventTypeService:
    return EventTypeService(db)


@router.get("", response_model=list[EventTypeOutput])
def list_event_types(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[EventTypeOutput]:
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{event_type_id}", response_model=EventTypeOutput)
def get_event_type(
    event_type_id: int,
    db: Session = Depends(get_db),
) -> EventTypeOutput:
    return _get_service(db).get_by_id(event_type_id)


@router.post("", response_model=EventTypeOutput, status_code=status.HTTP_201_CREATED)
def create_event_type(
    body: EventTypeCreate,
    db: Session = Depends(get_db),
) -> EventTypeOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{event_type_id}", response_model=EventTypeOutput)
def update_event_type(
    event_type_id: int,
    body: EventTypeUpdate,
    db: Session = Depends(get_db),
) -> EventTypeOutput:
    return _get_service(db).update(event_type_id, body.model_dump(exclude_unset=True))


@router.delete("/{event_type_id}", response_model=DeleteOutput)
def delete_event_type(
    event_type_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), event_type_id, delete_type)
