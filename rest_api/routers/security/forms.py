"""
Form endpoints.
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
from rest_api.services.domain.form_service import FormService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import FormCreate, FormOutput, FormUpdate


router = APIRouter(prefix="/forms", tags=["security-forms"])


def _get_service(db: Session) -> FormService:
    return FormService(db)


@router.get("", response_model=list[FormOutput])
def list_forms(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[FormOutput]:
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{form_id}", response_model=FormOutput)
def get_form(
    form_id: int,
    db: Session = Depends(get_db),
) -> FormOutput:
    return _get_service(db).get_by_id(form_id)


@router.post("", response_model=FormOutput, status_code=status.HTTP_201_CREATED)
def create_form(
    body: FormCreate,
    db: Session = Depends(get_db),
) -> FormOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{form_id}", response_model=FormOutput)
def update_form(
    form_id: int,
    body: FormUpdate,
    db: Session = Depends(get_db),
) -> FormOutput:
    return _get_service(db).update(form_id, body.model_dump(exclude_unset=True))


@router.delete("/{form_id}", response_model=DeleteOutput)
def delete_form(
    form_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), form_id, delete_type)
