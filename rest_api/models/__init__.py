"""
SQLAlchemy ORM Models Package.

All models are organized into domain-specific modules:
- base: Base class and AuditMixin
- security: Person, User, Role, Permission, Form, Module, RoleUser,
  RoleFormPermission, FormModule
- organization: Organization, Branch, Division, DivisionBranch, Assignment
- event: EventType, Event, EventSession, AccessPoint
- attendance: Card, Attendance, AttendanceRegistration
- audit: AuditLog
"""

# Base classes
from .base import Base, AuditMixin

# Access control
from .security import (
    Person,
    User,
    Role,
    Permission,
    Form,
    Module,
    RoleUser,
    RoleFormPermission,
    FormModule,
)

# Organization structure
from .organization import Organization, Branch, Division, DivisionBranch, Assignment

# Events
from .event import EventType, Event, EventSession, AccessPoint

# Attendance
from .attendance import Card, Attendance, AttendanceRegistration

# Audit
from .audit import AuditLog

__all__ = [
    "Base",
    "AuditMixin",
    "Person",
    "User",
    "Role",
    "Permission",
    "Form",
    "Module",
    "RoleUser",
    "RoleFormPermission",
    "FormModule",
    "Organization",
    "Branch",
    "Division",
    "DivisionBranch",
    "Assignment",
    "EventType",
    "Event",
    "EventSession",
    "AccessPoint",
    "Card",
    "Attendance",
    "AttendanceRegistration",
    "AuditLog",
]
