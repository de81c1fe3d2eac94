"""
Delete Strategy implementations.
Strategy Pattern for choosing, per request, how a row is deleted.

- LogicalDeleteStrategy: flag the row inactive, keep it in the table
- PermanentDeleteStrategy: remove the row

Both strategies work through a BaseRepository and report whether the
entity existed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic

from rest_api.repositories import BaseRepository, ModelT
from shared.config.logging import get_logger

logger = get_logger(__name__)


class DeleteType(str, Enum):
    """Deletion semantics a caller can request."""

    LOGICAL = "logical"
    PERMANENT = "permanent"


class DeleteStrategy(ABC, Generic[ModelT]):
    """
    Abstract base for delete strategies.

    Implementations load the entity (active or not) and return False
    when it does not exist.
    """

    delete_type: DeleteType

    @abstractmethod
    def delete(self, entity_id: int, repository: BaseRepository[ModelT]) -> bool:
        """Delete the entity. Returns True if it existed and was deleted."""
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class LogicalDeleteStrategy(DeleteStrategy[ModelT]):
    """Mark the row inactive and persist."""

    delete_type = DeleteType.LOGICAL

    def delete(self, entity_id: int, repository: BaseRepository[ModelT]) -> bool:
        entity = repository.find_by_id(entity_id, include_inactive=True)
        if entity is None:
            return False

        entity.soft_delete()
        repository.commit()

        logger.debug(
            "Entity logically deleted",
            entity_type=repository.model.__name__,
            entity_id=entity_id,
        )
        return True


class PermanentDeleteStrategy(DeleteStrategy[ModelT]):
    """Remove the row and persist."""

    delete_type = DeleteType.PERMANENT

    def delete(self, entity_id: int, repository: BaseRepository[ModelT]) -> bool:
        entity = repository.find_by_id(entity_id, include_inactive=True)
        if entity is None:
            return False

        repository.delete(entity)

        logger.debug(
            "Entity permanently deleted",
            entity_type=repository.model.__name__,
            entity_id=entity_id,
        )
        return True
