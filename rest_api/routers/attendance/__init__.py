"""
Attendance API router - combines the attendance sub-routers.

- organizations, branches, divisions, division-branches, assignments
- event-types, events, event-sessions, access-points
- cards, attendances, attendance-registrations

All routes are prefixed with /api/attendance
"""

from fastapi import APIRouter

from .organizations import router as organizations_router
from .branches import router as branches_router
from .divisions import router as divisions_router
from .division_branches import router as division_branches_router
from .assignments import router as assignments_router
from .event_types import router as event_types_router
from .events import router as events_router
from .event_sessions import router as event_sessions_router
from .access_points import router as access_points_router
from .cards import router as cards_router
from .attendances import router as attendances_router
from .attendance_registrations import router as attendance_registrations_router


router = APIRouter(prefix="/api/attendance")

# Organization structure
router.include_router(organizations_router)
router.include_router(branches_router)
router.include_router(divisions_router)
router.include_router(division_branches_router)
router.include_router(assignments_router)

# Events
router.include_router(event_types_router)
router.include_router(events_router)
router.include_router(event_sessions_router)
router.include_router(access_points_router)

# Cards and attendance
router.include_router(cards_router)
router.include_router(attendances_router)
router.include_router(attendance_registrations_router)

__all__ = ["router"]
