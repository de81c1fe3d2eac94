"""
Base Service Classes.

Provides the base class for entity services that:
- Use BaseRepository for data access (not direct queries)
- Convert entities to output schemas
- Validate business rules through overridable hooks
- Delete through a strategy chosen per call (logical or permanent)
- Write an audit entry in the same transaction as every change

Architecture:
    Router (thin) → Service (business logic) → Repository (data access) → Model

Usage:
    from rest_api.services.base_service import BaseCRUDService

    class RoleService(BaseCRUDService[Role, RoleOutput]):
        def __init__(self, db: Session):
            super().__init__(
                db=db,
                model=Role,
                output_schema=RoleOutput,
                entity_name="Rol",
            )

        def _validate_create(self, data: dict[str, Any]) -> None:
            self._require_text(data, "name")
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rest_api.models import Base
from rest_api.repositories import BaseRepository
from rest_api.services.audit import log_change, serialize_model
from rest_api.services.deletion import DeleteStrategyResolver, DeleteType
from shared.config.constants import AuditActions
from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import (
    ConflictError,
    DatabaseError,
    DuplicateEntityError,
    InvalidIdError,
    NotFoundError,
    RelatedEntityNotFoundError,
    RequiredFieldError,
)

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
OutputT = TypeVar("OutputT", bound=BaseModel)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so stored and incoming values compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BaseCRUDService(Generic[ModelT, OutputT]):
    """
    Base service for entities with CRUD operations.

    Lookups by id see inactive rows too, so a logically deleted row can
    still be read, updated, restored or permanently deleted. Listings hide
    inactive rows unless asked for them.
    """

    def __init__(
        self,
        db: Session,
        model: Type[ModelT],
        output_schema: Type[OutputT],
        entity_name: str,
        *,
        load_options: list[Any] | None = None,
    ):
        self._db = db
        self._model = model
        self._output_schema = output_schema
        self._entity_name = entity_name
        self._load_options = load_options or []
        self._repo = BaseRepository(model, db)
        self._resolver = DeleteStrategyResolver(model)

    @property
    def db(self) -> Session:
        return self._db

    @property
    def repo(self) -> BaseRepository[ModelT]:
        return self._repo

    @property
    def entity_name(self) -> str:
        """Human-readable entity name for messages."""
        return self._entity_name

    @property
    def entity_type(self) -> str:
        """Table name, used as the audit entity type."""
        return self._model.__tablename__

    # =========================================================================
    # Read Operations
    # =========================================================================

    def get_entity(self, entity_id: int) -> ModelT:
        """
        Load the raw entity, active or not.

        Raises:
            ValidationError: If entity_id is not positive.
            NotFoundError: If entity not found.
        """
        self._validate_id(entity_id)

        entity = self._repo.find_by_id(
            entity_id,
            options=self._load_options,
            include_inactive=True,
        )
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity

    def get_by_id(self, entity_id: int) -> OutputT:
        """Get entity by ID as output schema."""
        return self.to_output(self.get_entity(entity_id))

    def list_all(
        self,
        *,
        filters: dict[str, Any] | None = None,
        include_inactive: bool = False,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[OutputT]:
        """
        List entities.

        Args:
            filters: Column equality filters (None values ignored).
            include_inactive: Include logically deleted entities.
            limit: Maximum results.
            offset: Skip count.
        """
        entities = self._repo.find_all(
            filters=filters,
            options=self._load_options,
            include_inactive=include_inactive,
            limit=limit,
            offset=offset,
        )
        return [self.to_output(e) for e in entities]

    def count(self, *, filters: dict[str, Any] | None = None, include_inactive: bool = False) -> int:
        return self._repo.count(filters=filters, include_inactive=include_inactive)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, data: dict[str, Any]) -> OutputT:
        """
        Create new entity.

        Raises:
            ValidationError: If data is invalid.
            DatabaseError: If creation fails.
        """
        self._validate_create(data)
        data = self._prepare_create(data)

        entity = self._model(**data)
        self._db.add(entity)

        try:
            self._db.flush()
            log_change(
                self._db,
                entity_type=self.entity_type,
                entity_id=entity.id,
                action=AuditActions.CREATE,
                new_values=serialize_model(entity),
            )
            safe_commit(self._db)
            self._db.refresh(entity)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to create {self._entity_name}", error=str(e))
            raise DatabaseError(f"crear {self._entity_name.lower()}")

        logger.info(f"{self._entity_name} created", entity_id=entity.id)
        return self.to_output(entity)

    def update(self, entity_id: int, data: dict[str, Any]) -> OutputT:
        """
        Partially update an entity. Only keys present in data are changed.

        Sending is_active=True reactivates a logically deleted row.

        Raises:
            NotFoundError: If entity not found.
            ValidationError: If data is invalid.
            DatabaseError: If update fails.
        """
        entity = self.get_entity(entity_id)

        self._reject_null_columns(data)
        self._validate_update(entity, data)
        data = self._prepare_update(entity, data)

        old_values = serialize_model(entity)

        for field_name, value in data.items():
            if hasattr(entity, field_name):
                setattr(entity, field_name, value)

        if "is_active" in data:
            entity.deleted_at = None if entity.is_active else datetime.now(timezone.utc)

        try:
            self._db.flush()
            log_change(
                self._db,
                entity_type=self.entity_type,
                entity_id=entity.id,
                action=AuditActions.UPDATE,
                old_values=old_values,
                new_values=serialize_model(entity),
            )
            safe_commit(self._db)
            self._db.refresh(entity)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to update {self._entity_name}", error=str(e), entity_id=entity_id)
            raise DatabaseError(f"actualizar {self._entity_name.lower()}")

        return self.to_output(entity)

    def delete(self, entity_id: int, delete_type: DeleteType = DeleteType.LOGICAL) -> bool:
        """
        Delete an entity with the requested strategy.

        Raises:
            ValidationError: If entity_id is not positive.
            NotFoundError: If entity not found.
            NotImplementedError: If delete_type is not a known DeleteType.
            DatabaseError: If the delete fails.
        """
        entity = self.get_entity(entity_id)
        self._validate_delete(entity, delete_type)

        strategy = self._resolver.resolve(delete_type)
        action = (
            AuditActions.DELETE
            if strategy.delete_type == DeleteType.PERMANENT
            else AuditActions.SOFT_DELETE
        )

        # Staged now, committed by the strategy together with the change
        log_change(
            self._db,
            entity_type=self.entity_type,
            entity_id=entity_id,
            action=action,
            old_values=serialize_model(entity),
        )

        try:
            deleted = strategy.delete(entity_id, self._repo)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(
                f"Failed to delete {self._entity_name}",
                error=str(e),
                entity_id=entity_id,
                strategy=strategy.delete_type.value,
            )
            raise DatabaseError(f"eliminar {self._entity_name.lower()}")

        if not deleted:
            self._db.rollback()
            raise NotFoundError(self._entity_name, entity_id)

        logger.info(
            f"{self._entity_name} deleted",
            entity_id=entity_id,
            strategy=strategy.delete_type.value,
        )
        return True

    def restore(self, entity_id: int) -> OutputT:
        """
        Reactivate a logically deleted entity.

        Raises:
            NotFoundError: If entity not found.
            ConflictError: If the entity is already active.
        """
        entity = self.get_entity(entity_id)
        if entity.is_active:
            raise ConflictError(
                f"{self._entity_name} con ID {entity_id} ya está activo",
                entity_id=entity_id,
            )

        self._validate_restore(entity)

        old_values = serialize_model(entity)
        entity.restore()

        try:
            self._db.flush()
            log_change(
                self._db,
                entity_type=self.entity_type,
                entity_id=entity.id,
                action=AuditActions.RESTORE,
                old_values=old_values,
                new_values=serialize_model(entity),
            )
            safe_commit(self._db)
            self._db.refresh(entity)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to restore {self._entity_name}", error=str(e), entity_id=entity_id)
            raise DatabaseError(f"restaurar {self._entity_name.lower()}")

        return self.to_output(entity)

    # =========================================================================
    # Transformation
    # =========================================================================

    def to_output(self, entity: ModelT) -> OutputT:
        """
        Convert entity to output schema.

        Override this method for custom transformation logic.
        """
        return self._output_schema.model_validate(entity)

    # =========================================================================
    # Validation Hooks (override in subclasses)
    # =========================================================================

    def _validate_create(self, data: dict[str, Any]) -> None:
        """Validate data before create. Raise ValidationError on failure."""
        pass

    def _validate_update(self, entity: ModelT, data: dict[str, Any]) -> None:
        """Validate partial data before update. Raise ValidationError on failure."""
        pass

    def _validate_delete(self, entity: ModelT, delete_type: DeleteType) -> None:
        """Validate before delete. Override to block deletes."""
        pass

    def _validate_restore(self, entity: ModelT) -> None:
        """Validate before restore."""
        pass

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Transform data before the entity is built (e.g. hash secrets)."""
        return data

    def _prepare_update(self, entity: ModelT, data: dict[str, Any]) -> dict[str, Any]:
        """Transform data before it is applied to the entity."""
        return data

    # =========================================================================
    # Validation Helpers
    # =========================================================================

    def _validate_id(self, entity_id: int | None, field: str = "id") -> None:
        if entity_id is None or entity_id <= 0:
            raise InvalidIdError(self._entity_name, entity_id if entity_id is not None else 0, field)

    def _reject_null_columns(self, data: dict[str, Any]) -> None:
        """Explicit nulls are only accepted for nullable columns."""
        columns = self._model.__table__.columns
        for field_name, value in data.items():
            if value is None and field_name in columns and not columns[field_name].nullable:
                raise RequiredFieldError(self._entity_name, field_name)

    def _require_text(self, data: dict[str, Any], field: str, *, partial: bool = False) -> None:
        """
        Reject missing or blank text.

        With partial=True (updates) the field is only checked when sent.
        """
        if partial and field not in data:
            return
        value = data.get(field)
        if value is None or not str(value).strip():
            raise RequiredFieldError(self._entity_name, field)

    def _require_related(
        self,
        model: Type[Base],
        entity_id: int | None,
        field: str,
        label: str,
    ) -> None:
        """The referenced row must exist (active or not)."""
        self._validate_id(entity_id, field)
        if not BaseRepository(model, self._db).exists(entity_id):
            raise RelatedEntityNotFoundError(label, entity_id, field)

    def _ensure_unique(
        self,
        *,
        identifier: str | None = None,
        exclude_id: int | None = None,
        include_inactive: bool = False,
        **filters: Any,
    ) -> None:
        """No other row may match all filters."""
        existing = self._repo.find_one_by(include_inactive=include_inactive, **filters)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEntityError(self._entity_name, identifier)

    def _merged(self, entity: ModelT, data: dict[str, Any]) -> dict[str, Any]:
        """Current column values with pending changes applied."""
        values = {column.name: getattr(entity, column.name) for column in entity.__table__.columns}
        values.update(data)
        return values


class NamedEntityService(BaseCRUDService[ModelT, OutputT], Generic[ModelT, OutputT]):
    """
    Service for catalog-like entities whose text fields must not be blank.

    Subclasses list the required fields in ``required_fields`` and map
    each mandatory foreign key column to (model, label) in ``references``.
    """

    required_fields: tuple[str, ...] = ("name",)
    references: dict[str, tuple[Type[Base], str]] = {}

    def _validate_create(self, data: dict[str, Any]) -> None:
        for field_name in self.required_fields:
            self._require_text(data, field_name)
        for field_name, (model, label) in self.references.items():
            self._require_related(model, data.get(field_name), field_name, label)

    def _validate_update(self, entity: ModelT, data: dict[str, Any]) -> None:
        for field_name in self.required_fields:
            self._require_text(data, field_name, partial=True)
        for field_name, (model, label) in self.references.items():
            if field_name in data:
                self._require_related(model, data[field_name], field_name, label)


class LinkService(BaseCRUDService[ModelT, OutputT], Generic[ModelT, OutputT]):
    """
    Service for association rows (role-user, form-module...).

    Business rules:
    - Every referenced id must be positive and point to an existing row
    - The same combination cannot be active twice

    Subclasses map each foreign key column to (model, label) in ``references``.
    """

    references: dict[str, tuple[Type[Base], str]] = {}

    def _link_values(self, values: dict[str, Any]) -> dict[str, Any]:
        return {field_name: values.get(field_name) for field_name in self.references}

    def _link_identifier(self, values: dict[str, Any]) -> str:
        return ", ".join(f"{k}={v}" for k, v in self._link_values(values).items())

    def _validate_create(self, data: dict[str, Any]) -> None:
        for field_name, (model, label) in self.references.items():
            self._require_related(model, data.get(field_name), field_name, label)

        if data.get("is_active", True):
            self._ensure_unique(
                identifier=self._link_identifier(data),
                **self._link_values(data),
            )

    def _validate_update(self, entity: ModelT, data: dict[str, Any]) -> None:
        for field_name, (model, label) in self.references.items():
            if field_name in data:
                self._require_related(model, data[field_name], field_name, label)

        values = self._merged(entity, data)
        if values.get("is_active"):
            self._ensure_unique(
                identifier=self._link_identifier(values),
                exclude_id=entity.id,
                **self._link_values(values),
            )

    def _validate_restore(self, entity: ModelT) -> None:
        values = self._merged(entity, {})
        self._ensure_unique(
            identifier=self._link_identifier(values),
            exclude_id=entity.id,
            **self._link_values(values),
        )
