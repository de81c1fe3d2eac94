"""
Module endpoints.
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
from rest_api.services.domain.module_service import ModuleService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.security_schemas import ModuleCreate, ModuleOutput, ModuleUpdate


router = APIRouter(prefix="/modules", tags=["security-modules"])


def _get_service(db: Session) -> ModuleService:
    return ModuleService(db)


@router.get("", response_model=list[ModuleOutput])
def list_modules(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[ModuleOutput]:
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{module_id}", response_model=ModuleOutput)
def get_module(
    module_id: int,
    db: Session = Depends(get_db),
) -> ModuleOutput:
    return _get_service(db).get_by_id(module_id)


@router.post("", response_model=ModuleOutput, status_code=status.HTTP_201_CREATED)
def create_module(
    body: ModuleCreate,
    db: Session = Depends(get_db),
) -> ModuleOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{module_id}", response_model=ModuleOutput)
def update_module(
    module_id: int,
    body: ModuleUpdate,
    db: Session = Depends(get_db),
) -> ModuleOutput:
    return _get_service(db).update(module_id, body.model_dump(exclude_unset=True))


@router.delete("/{module_id}", response_model=DeleteOutput)
def delete_module(
    module_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), module_id, delete_type)
