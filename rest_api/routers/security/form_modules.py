"""
Form-module endpoints.
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
from rest_api.services.domain.form_module_service import FormModuleService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import FormModuleCreate, FormModuleOutput, FormModuleUpdate


router = APIRouter(prefix="/form-modules", tags=["security-form-modules"])


def _get_service(db: Session) -> FormModuleService:
    return FormModuleService(db)


@router.get("", response_model=list[FormModuleOutput])
def list_form_modules(
    form_id: int | None = None,
    module_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[FormModuleOutput]:
    return _get_service(db).list_all(
        filters={"form_id": form_id, "module_id": module_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{form_module_id}", response_model=FormModuleOutput)
def get_form_module(
    form_module_id: int,
    db: Session = Depends(get_db),
) -> FormModuleOutput:
    return _get_service(db).get_by_id(form_module_id)


@router.post("", response_model=FormModuleOutput, status_code=status.HTTP_201_CREATED)
def create_form_module(
    body: FormModuleCreate,
    db: Session = Depends(get_db),
) -> FormModuleOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{form_module_id}", response_model=FormModuleOutput)
def update_form_module(
    form_module_id: int,
    body: FormModuleUpdate,
    db: Session = Depends(get_db),
) -> FormModuleOutput:
    return _get_service(db).update(form_module_id, body.model_dump(exclude_unset=True))


@router.delete("/{form_module_id}", response_model=DeleteOutput)
def delete_form_module(
    form_module_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), form_module_id, delete_type)
