"""
Services module for business logic.

- domain/: one service per entity (business rules) - USE THESE
- deletion/: delete strategies and their resolver
- audit: audit trail written alongside every change
- restore: collection name -> service lookup for the admin restore endpoint

Usage:
    from rest_api.services.domain import RoleService
    from rest_api.services.deletion import DeleteType

    service = RoleService(db)
    service.delete(role_id, DeleteType.PERMANENT)
"""

from .base_service import BaseCRUDService, LinkService, NamedEntityService
from .deletion import DeleteStrategyResolver, DeleteType

__all__ = [
    "BaseCRUDService",
    "NamedEntityService",
    "LinkService",
    "DeleteStrategyResolver",
    "DeleteType",
]
