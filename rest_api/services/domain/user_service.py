"""
User Service.

Handles user accounts:
- Username is required and unique (inactive accounts included)
- Passwords are hashed with bcrypt before storage and never returned
- Each user belongs to an existing person

Usage:
    from rest_api.services.domain import UserService

    service = UserService(db)
    user = service.create({"username": "jdoe", "password": "s3cret", "person_id": 1})
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session, selectinload

from rest_api.models import Person, User
from rest_api.services.base_service import BaseCRUDService
from shared.config.logging import security_logger
from shared.security.password import hash_password
from shared.utils.security_schemas import UserOutput


class UserService(BaseCRUDService[User, UserOutput]):
    """Service for user account management."""

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=User,
            output_schema=UserOutput,
            entity_name="Usuario",
            load_options=[selectinload(User.person)],
        )

    def get_by_username(self, username: str) -> UserOutput | None:
        """Active user with the given username."""
        entity = self._repo.find_one_by(username=username)
        return self.to_output(entity) if entity else None

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate_create(self, data: dict[str, Any]) -> None:
        self._require_text(data, "username")
        self._require_text(data, "password")
        self._require_related(Person, data.get("person_id"), "person_id", "Persona")
        self._ensure_unique(
            identifier=data["username"].strip(),
            include_inactive=True,
            username=data["username"].strip(),
        )

    def _validate_update(self, entity: User, data: dict[str, Any]) -> None:
        self._require_text(data, "username", partial=True)
        self._require_text(data, "password", partial=True)
        if "person_id" in data:
            self._require_related(Person, data["person_id"], "person_id", "Persona")
        if "username" in data:
            self._ensure_unique(
                identifier=data["username"].strip(),
                exclude_id=entity.id,
                include_inactive=True,
                username=data["username"].strip(),
            )

    # =========================================================================
    # Password handling
    # =========================================================================

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        data = dict(data)
        data["username"] = data["username"].strip()
        data["password"] = hash_password(data["password"])
        return data

    def _prepare_update(self, entity: User, data: dict[str, Any]) -> dict[str, Any]:
        data = dict(data)
        if "username" in data:
            data["username"] = data["username"].strip()
        if "password" in data:
            data["password"] = hash_password(data["password"])
            security_logger.info("User password changed", user_id=entity.id)
        return data
