"""
Domain Services.

Services contain the business rules of each entity and use repositories
for data access.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from rest_api.services.domain import RoleService

    service = RoleService(db)
    roles = service.list_all()
    service.delete(role_id, DeleteType.PERMANENT)
"""

# Security
from .person_service import PersonService
from .user_service import UserService
from .role_service import RoleService
from .permission_service import PermissionService
from .form_service import FormService
from .module_service import ModuleService
from .role_user_service import RoleUserService
from .role_form_permission_service import RoleFormPermissionService
from .form_module_service import FormModuleService

# Attendance
from .organization_service import OrganizationService
from .branch_service import BranchService
from .division_service import DivisionService
from .division_branch_service import DivisionBranchService
from .assignment_service import AssignmentService
from .event_type_service import EventTypeService
from .event_service import EventService
from .event_session_service import EventSessionService
from .access_point_service import AccessPointService
from .card_service import CardService
from .attendance_service import AttendanceService
from .attendance_registration_service import AttendanceRegistrationService

__all__ = [
    "PersonService",
    "UserService",
    "RoleService",
    "PermissionService",
    "FormService",
    "ModuleService",
    "RoleUserService",
    "RoleFormPermissionService",
    "FormModuleService",
    "OrganizationService",
    "BranchService",
    "DivisionService",
    "DivisionBranchService",
    "AssignmentService",
    "EventTypeService",
    "EventService",
    "EventSessionService",
    "AccessPointService",
    "CardService",
    "AttendanceService",
    "AttendanceRegistrationService",
]
