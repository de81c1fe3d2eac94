"""
User account endpoints. Passwords are accepted on write and never returned.
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
from rest_api.services.domain.user_service import UserService
from shared.infrastructure.db import get_db
from shared.utils.exceptions import NotFoundError
from shared.utils.schemas import DeleteOutput
from rest_api.services.domain.role_user_service import RoleUserService
from shared.utils.security_schemas import RoleUserOutput, UserCreate, UserOutput, UserUpdate


router = APIRouter(prefix="/users", tags=["security-users"])


def _get_service(db: Session) -> UserService:
    return UserService(db)


@router.get("", response_model=list[UserOutput])
def list_users(
    person_id: int | None = None,
    include_inactive: bool = False,
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
) -> list[UserOutput]:
    return _get_service(db).list_all(
        filters={"person_id": person_id},
        include_inactive=include_inactive,
        limit=pagination.limit,
        offset=pagination.offset,
    )


@router.get("/{user_id}", response_model=UserOutput)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
) -> UserOutput:
    return _get_service(db).get_by_id(user_id)


@router.post("", response_model=UserOutput, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    db: Session = Depends(get_db),
) -> UserOutput:
    """Create a user. The password is stored as a bcrypt hash."""
    return _get_service(db).create(body.model_dump())


@router.patch("/{user_id}", response_model=UserOutput)
def update_user(
    user_id: int,
    body: UserUpdate,
    db: Session = Depends(get_db),
) -> UserOutput:
    return _get_service(db).update(user_id, body.model_dump(exclude_unset=True))


@router.delete("/{user_id}", response_model=DeleteOutput)
def delete_user(
    user_id: int,
    delete_type: DeleteType = Depends(get_delete_type),
    db: Session = Depends(get_db),
) -> DeleteOutput:
    """
    Delete a user account.

    logical marks the account inactive and keeps its role grants; permanent
    removes the row and, through the foreign keys, its role grants.
    """
    return delete_with_strategy(_get_service(db), user_id, delete_type)


@router.get("/by-username/{username}", response_model=UserOutput)
def get_user_by_username(
    username: str,
    db: Session = Depends(get_db),
) -> UserOutput:
    user = _get_service(db).get_by_username(username)
    if user is None:
        raise NotFoundError("Usuario", username)
    return user


@router.get("/{user_id}/roles", response_model=list[RoleUserOutput])
def list_user_roles(
    user_id: int,
    db: Session = Depends(get_db),
) -> list[RoleUserOutput]:
    """Active role grants of a user."""
    _get_service(db).get_by_id(user_id)
    return RoleUserService(db).list_by_user(user_id)
