"""
Repository Pattern for database access.

Provides a clean abstraction layer between business logic and data access.

Usage:
    from rest_api.repositories import BaseRepository

    role_repo = BaseRepository(Role, db)

    roles = role_repo.find_all()
    role = role_repo.find_by_id(42, include_inactive=True)
    links = BaseRepository(RoleUser, db).find_all(filters={"role_id": 3})

    # With eager loading
    role_repo.find_all(options=[selectinload(Role.role_users)])
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import exists as sql_exists, func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from rest_api.models import Base
from shared.infrastructure.db import safe_commit

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Repository providing common database operations for one model.

    Reads are filtered to active rows unless ``include_inactive`` is set.
    ``save``, ``delete`` and ``commit`` persist immediately; ``add`` only
    stages the entity in the session.
    """

    def __init__(self, model: type[ModelT], session: Session):
        self._model = model
        self._session = session

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        """The database session."""
        return self._session

    def _base_query(self) -> Select:
        return select(self._model)

    def _apply_active_filter(self, query: Select, include_inactive: bool) -> Select:
        """Apply is_active filter if model has it."""
        if hasattr(self._model, "is_active") and not include_inactive:
            query = query.where(self._model.is_active.is_(True))
        return query

    def _apply_filters(self, query: Select, filters: dict[str, Any] | None) -> Select:
        """Equality filters on columns; None values are ignored."""
        if not filters:
            return query
        for column_name, value in filters.items():
            if value is None:
                continue
            query = query.where(getattr(self._model, column_name) == value)
        return query

    def _apply_options(self, query: Select, options: list[Any] | None) -> Select:
        """Apply eager loading options."""
        if options:
            query = query.options(*options)
        return query

    def find_by_id(
        self,
        entity_id: int,
        *,
        options: list[Any] | None = None,
        include_inactive: bool = False,
    ) -> ModelT | None:
        """
        Find entity by primary key.

        Args:
            entity_id: The primary key value.
            options: SQLAlchemy loader options (selectinload, joinedload).
            include_inactive: Include logically deleted entities.

        Returns:
            Entity or None if not found.
        """
        query = self._base_query().where(self._model.id == entity_id)
        query = self._apply_active_filter(query, include_inactive)
        query = self._apply_options(query, options)
        return self._session.scalar(query)

    def find_one_by(self, *, include_inactive: bool = False, **filters: Any) -> ModelT | None:
        """First entity matching all column filters."""
        query = self._apply_filters(self._base_query(), filters)
        query = self._apply_active_filter(query, include_inactive)
        return self._session.scalars(query.limit(1)).first()

    def find_all(
        self,
        *,
        filters: dict[str, Any] | None = None,
        options: list[Any] | None = None,
        include_inactive: bool = False,
        limit: int | None = None,
        offset: int | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelT]:
        """
        Find all entities.

        Args:
            filters: Column equality filters, e.g. {"role_id": 3}.
            options: SQLAlchemy loader options.
            include_inactive: Include logically deleted entities.
            limit: Maximum number of results.
            offset: Number of results to skip.
            order_by: Column or expression to order by (defaults to id).

        Returns:
            Sequence of entities.
        """
        query = self._base_query()
        query = self._apply_filters(query, filters)
        query = self._apply_active_filter(query, include_inactive)
        query = self._apply_options(query, options)

        query = query.order_by(order_by if order_by is not None else self._model.id)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        return self._session.scalars(query).all()

    def count(
        self,
        *,
        filters: dict[str, Any] | None = None,
        include_inactive: bool = False,
    ) -> int:
        """Count entities."""
        query = select(func.count()).select_from(self._model)
        query = self._apply_filters(query, filters)
        query = self._apply_active_filter(query, include_inactive)
        return self._session.scalar(query) or 0

    def exists(self, entity_id: int, *, include_inactive: bool = True) -> bool:
        """Check if entity exists by ID."""
        condition = self._model.id == entity_id
        if hasattr(self._model, "is_active") and not include_inactive:
            condition = condition & self._model.is_active.is_(True)
        return self._session.scalar(select(sql_exists().where(condition))) or False

    def add(self, entity: ModelT) -> ModelT:
        """Add entity to session (not committed)."""
        self._session.add(entity)
        return entity

    def save(self, entity: ModelT) -> ModelT:
        """Add, commit and refresh an entity."""
        self._session.add(entity)
        safe_commit(self._session)
        self._session.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        """Remove entity and commit."""
        self._session.delete(entity)
        safe_commit(self._session)

    def commit(self) -> None:
        """Commit pending changes, rolling back on failure."""
        safe_commit(self._session)

    def refresh(self, entity: ModelT) -> ModelT:
        """Refresh entity from database."""
        self._session.refresh(entity)
        return entity
