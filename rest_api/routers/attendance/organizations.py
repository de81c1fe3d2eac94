"""
Organization endpoints.
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
from rest_api.services.domain.organization_service import OrganizationService
from shared.infrastructure.db import get_db
from shared.utils.schemas import DeleteOutput
from shared.utils.attendance_schemas import OrganizationCreate, OrganizationOutput, OrganizationUpdate


router = APIRouter(prefix="/organizations", tags=["attendance-organizations"])


def _get_service(db: Session) -> OrganizationService:
    return OrganizationService(db)


@router.get("", response_model=list[OrganizationOutput])
def list_organizations(
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[OrganizationOutput]:
    return _get_service(db).list_all(
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{organization_id}", response_model=OrganizationOutput)
def get_organization(
    organization_id: int,
    db: Session = Depends(get_db),
) -> OrganizationOutput:
    return _get_service(db).get_by_id(organization_id)


@router.post("", response_model=OrganizationOutput, status_code=status.HTTP_201_CREATED)
def create_organization(
    body: OrganizationCreate,
    db: Session = Depends(get_db),
) -> OrganizationOutput:
    return _get_service(db).create(body.model_dump())


@router.patch("/{organization_id}", response_model=OrganizationOutput)
def update_organization(
    organization_id: int,
    body: OrganizationUpdate,
    db: Session = Depends(get_db),
) -> OrganizationOutput:
    return _get_service(db).update(organization_id, body.model_dump(exclude_unset=True))


@router.delete("/{organization_id}", response_model=DeleteOutput)
def delete_organization(
    organization_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    return delete_with_strategy(_get_service(db), organization_id, delete_type)
