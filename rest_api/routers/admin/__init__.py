"""
Admin API router.

- audit: Audit log viewing
- restore: Entity restoration

All routes are prefixed with /api/admin
"""

from fastapi import APIRouter

from .audit import router as audit_router
from .restore import router as restore_router


router = APIRouter(prefix="/api/admin")

router.include_router(audit_router)
router.include_router(restore_router)

__all__ = ["router"]
