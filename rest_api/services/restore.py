"""
Generic restore of logically deleted rows.

The admin restore endpoint addresses entities by their collection name in
the API (``roles``, ``role-users``, ``event-sessions``...). This module maps
those names to the domain services so the restore runs the same validation
and audit path as any other change.
"""

from typing import Type

from sqlalchemy.orm import Session

from rest_api.services.base_service import BaseCRUDService
from rest_api.services.domain import (
    AccessPointService,
    AssignmentService,
    AttendanceRegistrationService,
    AttendanceService,
    BranchService,
    CardService,
    DivisionBranchService,
    DivisionService,
    EventService,
    EventSessionService,
    EventTypeService,
    FormModuleService,
    FormService,
    ModuleService,
    OrganizationService,
    PermissionService,
    PersonService,
    RoleFormPermissionService,
    RoleService,
    RoleUserService,
    UserService,
)
from shared.utils.exceptions import ValidationError


# Collection name (as used in the API paths) -> service
SERVICE_MAP: dict[str, Type[BaseCRUDService]] = {
    # Security
    "persons": PersonService,
    "users": UserService,
    "roles": RoleService,
    "permissions": PermissionService,
    "forms": FormService,
    "modules": ModuleService,
    "role-users": RoleUserService,
    "role-form-permissions": RoleFormPermissionService,
    "form-modules": FormModuleService,
    # Attendance
    "organizations": OrganizationService,
    "branches": BranchService,
    "divisions": DivisionService,
    "division-branches": DivisionBranchService,
    "assignments": AssignmentService,
    "event-types": EventTypeService,
    "events": EventService,
    "event-sessions": EventSessionService,
    "access-points": AccessPointService,
    "cards": CardService,
    "attendances": AttendanceService,
    "attendance-registrations": AttendanceRegistrationService,
}


def get_service_for(entity_type: str, db: Session) -> BaseCRUDService:
    """
    Build the service that owns a collection.

    Raises:
        ValidationError: If the collection name is unknown.
    """
    service_class = SERVICE_MAP.get(entity_type)
    if service_class is None:
        raise ValidationError(
            f"Tipo de entidad inválido: '{entity_type}'",
            entity_type=entity_type,
        )
    return service_class(db)
