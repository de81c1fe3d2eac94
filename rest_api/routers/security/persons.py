"""
Person endpoints.
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
from rest_api.services.domain.person_service import PersonService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import PersonCreate, PersonOutput, PersonUpdate


router = APIRouter(prefix="/persons", tags=["security-persons"])


def _get_service(db: Session) -> PersonService:
    return PersonService(db)


@router.get("", response_model=list[PersonOutput])
def list_persons(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[PersonOutput]:
    """List persons. Inactive persons are hidden unless include_inactive is set."""
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{person_id}", response_model=PersonOutput)
def get_person(
    person_id: int,
    db: Session = Depends(get_db),
) -> PersonOutput:
    return _get_service(db).get_by_id(person_id)


@router.post("", response_model=PersonOutput, status_code=status.HTTP_201_CREATED)
def create_person(
    body: PersonCreate,
    db: Session = Depends(get_db),
) -> PersonOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{person_id}", response_model=PersonOutput)
def update_person(
    person_id: int,
    body: PersonUpdate,
    db: Session = Depends(get_db),
) -> PersonOutput:
    return _get_service(db).update(person_id, body.model_dump(exclude_unset=True))


@router.delete("/{person_id}", response_model=DeleteOutput)
def delete_person(
    person_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), person_id, delete_type)
