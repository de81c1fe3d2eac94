"""
Deletion strategies: logical (flag inactive) or permanent (remove row),
chosen per request through DeleteStrategyResolver.
"""

from .strategies import (
    DeleteType,
    DeleteStrategy,
    LogicalDeleteStrategy,
    PermanentDeleteStrategy,
)
from .resolver import DeleteStrategyResolver, DeleteContext

__all__ = [
    "DeleteType",
    "DeleteStrategy",
    "LogicalDeleteStrategy",
    "PermanentDeleteStrategy",
    "DeleteStrategyResolver",
    "DeleteContext",
]
