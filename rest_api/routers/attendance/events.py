"""
Event endpoints.
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
from rest_api.services.domain.event_service import EventService
from rest_api.services.domain.event_session_service import EventSessionService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import EventCreate, EventOutput, EventSessionOutput, EventUpdate


router = APIRouter(prefix="/events", tags=["attendance-events"])


def _get_service(db: Session) -> EventService:
    return EventService(db)


@router.get("", response_model=list[EventOutput])
def list_events(
    event_type_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[EventOutput]:
    return _get_service(db).list_all(
        filters={"event_type_id": event_type_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{event_id}", response_model=EventOutput)
def get_event(
    event_id: int,
    db: Session = Depends(get_db),
) -> EventOutput:
    return _get_service(db).get_by_id(event_id)


@router.post("", response_model=EventOutput, status_code=status.HTTP_201_CREATED)
def create_event(
    body: EventCreate,
    db: Session = Depends(get_db),
) -> EventOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{event_id}", response_model=EventOutput)
def update_event(
    event_id: int,
    body: EventUpdate,
    db: Session = Depends(get_db),
) -> EventOutput:
    return _get_service(db).update(event_id, body.model_dump(exclude_unset=True))


@router.delete("/{event_id}", response_model=DeleteOutput)
def delete_event(
    event_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), event_id, delete_type)


@router.get("/{event_id}/sessions", response_model=list[EventSessionOutput])
def list_event_sessions(
    event_id: int,
    include_inactive: bool = False,
    db: Session = Depends(get_db),
) -> list[EventSessionOutput]:
    """Sessions of one event, in creation order."""
    _get_service(db).get_by_id(event_id)
    return EventSessionService(db).list_by_event(event_id, include_inactive=include_inactive)
