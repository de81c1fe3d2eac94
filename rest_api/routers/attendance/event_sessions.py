"""
Event session endpoints.
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
from rest_api.services.domain.event_session_service import EventSessionService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import EventSessionCreate, EventSessionOutput, EventSessionUpdate


router = APIRouter(prefix="/event-sessions", tags=["attendance-event-sessions"])


def _get_service(db: Session) -> EventSessionService:
    return EventSessionService(db)


@router.get("", response_model=list[EventSessionOutput])
def list_event_sessions(
    event_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[EventSessionOutput]:
    return _get_service(db).list_all(
        filters={"event_id": event_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{event_session_id}", response_model=EventSessionOutput)
def get_event_session(
    event_session_id: int,
    db: Session = Depends(get_db),
) -> EventSessionOutput:
    return _get_service(db).get_by_id(event_session_id)


@router.post("", response_model=EventSessionOutput, status_code=status.HTTP_201_CREATED)
def create_event_session(
    body: EventSessionCreate,
    db: Session = Depends(get_db),
) -> EventSessionOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{event_session_id}", response_model=EventSessionOutput)
def update_event_session(
    event_session_id: int,
    body: EventSessionUpdate,
    db: Session = Depends(get_db),
) -> EventSessionOutput:
    """Partially update a session. The resulting end_date must not precede start_date."""
    return _get_service(db).update(event_session_id, body.model_dump(exclude_unset=True))


@router.delete("/{event_session_id}", response_model=DeleteOutput)
def delete_event_session(
    event_session_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), event_session_id, delete_type)
