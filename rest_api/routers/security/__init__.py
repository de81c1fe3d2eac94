"""
Security API router - combines the RBAC sub-routers.

- persons, users: people and their accounts
- roles, permissions, forms, modules: RBAC catalogs
- role-users, role-form-permissions, form-modules: associations

All routes are prefixed with /api/security
"""

from fastapi import APIRouter

from .persons import router as persons_router
from .users import router as users_router
from .roles import router as roles_router
from .permissions import router as permissions_router
from .forms import router as forms_router
from .modules import router as modules_router
from .role_users import router as role_users_router
from .role_form_permissions import router as role_form_permissions_router
from .form_modules import router as form_modules_router


router = APIRouter(prefix="/api/security")

router.include_router(persons_router)
router.include_router(users_router)
router.include_router(roles_router)
router.include_router(permissions_router)
router.include_router(forms_router)
router.include_router(modules_router)

# Associations
router.include_router(role_users_router)
router.include_router(role_form_permissions_router)
router.include_router(form_modules_router)

__all__ = ["router"]
