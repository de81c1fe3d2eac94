"""
Common utilities shared across routers.
"""

from .deletion import delete_with_strategy, get_delete_type
from .pagination import Pagination, get_pagination

__all__ = [
    "Pagination",
    "get_pagination",
    "get_delete_type",
    "delete_with_strategy",
]
