"""
Pydantic schemas for the attendance API (organizations, branches,
divisions, events, sessions, cards, access points and attendance).
"""

import datetime as dt
from datetime import datetime

from pydantic import BaseModel, Field

from shared.config.constants import Limits


# =============================================================================
# Organization Schemas
# =============================================================================


class OrganizationOutput(BaseModel):
    id: int
    name: str
    phone: str | None = None
    address: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class OrganizationCreate(BaseModel):
    name: str = Field(max_length=100)
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    address: str | None = Field(default=None, max_length=Limits.MAX_ADDRESS_LENGTH)
    is_active: bool = True


class OrganizationUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    address: str | None = Field(default=None, max_length=Limits.MAX_ADDRESS_LENGTH)
    is_active: bool | None = None


# =============================================================================
# Branch Schemas
# =============================================================================


class BranchOutput(BaseModel):
    id: int
    name: str
    location: str | None = None
    organization_id: int
    organization_name: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class BranchCreate(BaseModel):
    name: str = Field(max_length=100)
    location: str | None = Field(default=None, max_length=200)
    organization_id: int
    is_active: bool = True


class BranchUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=200)
    organization_id: int | None = None
    is_active: bool | None = None


# =============================================================================
# Division Schemas
# =============================================================================


class DivisionOutput(BaseModel):
    id: int
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class DivisionCreate(BaseModel):
    name: str = Field(max_length=100)
    is_active: bool = True


class DivisionUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    is_active: bool | None = None


class DivisionBranchOutput(BaseModel):
    id: int
    division_id: int
    division_name: str | None = None
    branch_id: int
    branch_name: str | None = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class DivisionBranchCreate(BaseModel):
    division_id: int
    branch_id: int
    is_active: bool = True


class DivisionBranchUpdate(BaseModel):
    division_id: int | None = None
    branch_id: int | None = None
    is_active: bool | None = None


class AssignmentOutput(BaseModel):
    id: int
    name: str
    division_id: int
    division_name: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class AssignmentCreate(BaseModel):
    name: str = Field(max_length=100)
    division_id: int
    is_active: bool = True


class AssignmentUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    division_id: int | None = None
    is_active: bool | None = None


# =============================================================================
# Event Schemas
# =============================================================================


class EventTypeOutput(BaseModel):
    id: int
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class EventTypeCreate(BaseModel):
    name: str = Field(max_length=100)
    is_active: bool = True


class EventTypeUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    is_active: bool | None = None


class EventOutput(BaseModel):
    id: int
    name: str
    description: str | None = None
    date: dt.date
    event_type_id: int
    event_type_name: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class EventCreate(BaseModel):
    name: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=500)
    date: dt.date
    event_type_id: int
    is_active: bool = True


class EventUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    date: dt.date | None = None
    event_type_id: int | None = None
    is_active: bool | None = None


class EventSessionOutput(BaseModel):
    id: int
    name: str
    start_date: datetime
    end_date: datetime
    event_id: int
    event_name: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class EventSessionCreate(BaseModel):
    name: str = Field(max_length=100)
    start_date: datetime
    end_date: datetime
    event_id: int
    is_active: bool = True


class EventSessionUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    start_date: datetime | None = None
    end_date: datetime | None = None
    event_id: int | None = None
    is_active: bool | None = None


class AccessPointOutput(BaseModel):
    id: int
    name: str
    ubication: str | None = None
    event_id: int
    event_name: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class AccessPointCreate(BaseModel):
    name: str = Field(max_length=100)
    ubication: str | None = Field(default=None, max_length=200)
    event_id: int
    is_active: bool = True


class AccessPointUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    ubication: str | None = Field(default=None, max_length=200)
    event_id: int | None = None
    is_active: bool | None = None


# =============================================================================
# Card / Attendance Schemas
# =============================================================================


class CardOutput(BaseModel):
    id: int
    qr: str
    creation_date: datetime
    expiration_date: datetime
    person_id: int
    person_name: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class CardCreate(BaseModel):
    qr: str = Field(max_length=Limits.MAX_QR_LENGTH)
    creation_date: datetime | None = None  # Defaults to now
    expiration_date: datetime
    person_id: int
    is_active: bool = True


class CardUpdate(BaseModel):
    qr: str | None = Field(default=None, max_length=Limits.MAX_QR_LENGTH)
    creation_date: datetime | None = None
    expiration_date: datetime | None = None
    person_id: int | None = None
    is_active: bool | None = None


class AttendanceOutput(BaseModel):
    id: int
    card_id: int
    card_qr: str | None = None
    event_session_id: int
    event_session_name: str | None = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class AttendanceCreate(BaseModel):
    card_id: int
    event_session_id: int
    is_active: bool = True


class AttendanceUpdate(BaseModel):
    card_id: int | None = None
    event_session_id: int | None = None
    is_active: bool | None = None


class AttendanceRegistrationOutput(BaseModel):
    id: int
    hour: datetime
    is_entrance: bool
    attendance_id: int
    access_point_id: int
    access_point_name: str | None = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class AttendanceRegistrationCreate(BaseModel):
    hour: datetime | None = None  # Defaults to now
    is_entrance: bool = True
    attendance_id: int
    access_point_id: int
    is_active: bool = True


class AttendanceRegistrationUpdate(BaseModel):
    hour: datetime | None = None
    is_entrance: bool | None = None
    attendance_id: int | None = None
    access_point_id: int | None = None
    is_active: bool | None = None
