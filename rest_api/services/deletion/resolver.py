"""
Delete strategy resolution.

Usage:
    resolver = DeleteStrategyResolver(Role)
    strategy = resolver.resolve(DeleteType.PERMANENT)
    deleted = strategy.delete(role_id, BaseRepository(Role, db))

    # Or through a context that can swap strategies
    ctx = DeleteContext(resolver.resolve(DeleteType.LOGICAL))
    ctx.execute(role_id, repository)
"""

from __future__ import annotations

from typing import Any, Generic

from rest_api.repositories import BaseRepository, ModelT
from shared.config.logging import get_logger

from .strategies import (
    DeleteStrategy,
    DeleteType,
    LogicalDeleteStrategy,
    PermanentDeleteStrategy,
)

logger = get_logger(__name__)


class DeleteStrategyResolver(Generic[ModelT]):
    """
    Maps a DeleteType to a strategy for one entity model.

    A new strategy instance is returned on every call. Anything that is
    not a known DeleteType raises NotImplementedError; there is no default.
    """

    def __init__(self, model: type[ModelT]):
        self._model = model

    @property
    def model(self) -> type[ModelT]:
        return self._model

    def resolve(self, delete_type: DeleteType | Any) -> DeleteStrategy[ModelT]:
        if delete_type == DeleteType.LOGICAL:
            return LogicalDeleteStrategy()
        if delete_type == DeleteType.PERMANENT:
            return PermanentDeleteStrategy()

        logger.error(
            "Unsupported delete type",
            entity_type=self._model.__name__,
            delete_type=repr(delete_type),
        )
        raise NotImplementedError(
            f"Delete type {delete_type!r} is not implemented for {self._model.__name__}"
        )


class DeleteContext(Generic[ModelT]):
    """
    Holds the current delete strategy and runs it.

    The strategy can be swapped at runtime with set_strategy().
    """

    def __init__(self, strategy: DeleteStrategy[ModelT]):
        self._strategy = strategy

    @property
    def strategy(self) -> DeleteStrategy[ModelT]:
        return self._strategy

    def set_strategy(self, strategy: DeleteStrategy[ModelT]) -> None:
        self._strategy = strategy

    def execute(self, entity_id: int, repository: BaseRepository[ModelT]) -> bool:
        return self._strategy.delete(entity_id, repository)
