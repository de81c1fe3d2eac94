"""
Access point endpoints.
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
from rest_api.services.domain.access_point_service import AccessPointService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import AccessPointCreate, AccessPointOutput, AccessPointUpdate


router = APIRouter(prefix="/access-points", tags=["attendance-access-points"])


def _get_service(db: Session) -> AccessPointService:
    return AccessPointService(db)


@router.get("", response_model=list[AccessPointOutput])
def list_access_points(
    event_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[AccessPointOutput]:
    return _get_service(db).list_all(
        filters={"event_id": event_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{access_point_id}", response_model=AccessPointOutput)
def get_access_point(
    access_point_id: int,
    db: Session = Depends(get_db),
) -> AccessPointOutput:
    return _get_service(db).get_by_id(access_point_id)


@router.post("", response_model=AccessPointOutput, status_code=status.HTTP_201_CREATED)
def create_access_point(
    body: AccessPointCreate,
    db: Session = Depends(get_db),
) -> AccessPointOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{access_point_id}", response_model=AccessPointOutput)
def update_access_point(
    access_point_id: int,
    body: AccessPointUpdate,
    db: Session = Depends(get_db),
) -> AccessPointOutput:
    return _get_service(db).update(access_point_id, body.model_dump(exclude_unset=True))


@router.delete("/{access_point_id}", response_model=DeleteOutput)
def delete_access_point(
    access_point_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), access_point_id, delete_type)
