"""
Utilities module: Exceptions and common schemas.
"""

from shared.utils.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    DuplicateEntityError,
    ConflictError,
    DatabaseError,
)
from shared.utils.schemas import DeleteOutput, RestoreOutput

__all__ = [
    # exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "DuplicateEntityError",
    "ConflictError",
    "DatabaseError",
    # schemas
    "DeleteOutput",
    "RestoreOutput",
]
