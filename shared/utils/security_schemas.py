"""
Pydantic schemas for the access control API (persons, users, roles,
permissions, forms, modules and their associations).
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from shared.config.constants import Limits


# =============================================================================
# Person Schemas
# =============================================================================


class PersonOutput(BaseModel):
    id: int
    name: str
    last_name: str
    email: str
    document_type: str | None = None
    document_number: str | None = None
    phone: str | None = None
    address: str | None = None
    blood_type: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class PersonCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_PERSON_NAME_LENGTH)
    last_name: str = Field(max_length=Limits.MAX_PERSON_NAME_LENGTH)
    email: EmailStr
    document_type: str | None = None
    document_number: str | None = Field(default=None, max_length=Limits.MAX_DOCUMENT_NUMBER_LENGTH)
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    address: str | None = Field(default=None, max_length=Limits.MAX_ADDRESS_LENGTH)
    blood_type: str | None = None
    is_active: bool = True


class PersonUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_PERSON_NAME_LENGTH)
    last_name: str | None = Field(default=None, max_length=Limits.MAX_PERSON_NAME_LENGTH)
    email: EmailStr | None = None
    document_type: str | None = None
    document_number: str | None = Field(default=None, max_length=Limits.MAX_DOCUMENT_NUMBER_LENGTH)
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    address: str | None = Field(default=None, max_length=Limits.MAX_ADDRESS_LENGTH)
    blood_type: str | None = None
    is_active: bool | None = None


# =============================================================================
# User Schemas
# =============================================================================


class UserOutput(BaseModel):
    """User account. The password is never part of the output."""

    id: int
    username: str
    person_id: int
    person_name: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    username: str = Field(max_length=Limits.MAX_USERNAME_LENGTH)
    password: str = Field(min_length=1, max_length=Limits.MAX_PASSWORD_LENGTH)
    person_id: int
    is_active: bool = True


class UserUpdate(BaseModel):
    username: str | None = Field(default=None, max_length=Limits.MAX_USERNAME_LENGTH)
    password: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_PASSWORD_LENGTH)
    person_id: int | None = None
    is_active: bool | None = None


# =============================================================================
# Role / Permission / Form / Module Schemas
# =============================================================================


class RoleOutput(BaseModel):
    id: int
    name: str
    description: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class RoleCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool = True


class RoleUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool | None = None


class PermissionOutput(BaseModel):
    id: int
    name: str
    description: str
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class PermissionCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    description: str = Field(max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool = True


class PermissionUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool | None = None


class FormOutput(BaseModel):
    id: int
    name: str
    description: str
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class FormCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    description: str = Field(max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool = True


class FormUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool | None = None


class ModuleOutput(BaseModel):
    id: int
    name: str
    description: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class ModuleCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool = True


class ModuleUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    is_active: bool | None = None


# =============================================================================
# Association Schemas
# =============================================================================


class RoleUserOutput(BaseModel):
    id: int
    role_id: int
    role_name: str | None = None
    user_id: int
    username: str | None = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class RoleUserCreate(BaseModel):
    role_id: int
    user_id: int
    is_active: bool = True


class RoleUserUpdate(BaseModel):
    role_id: int | None = None
    user_id: int | None = None
    is_active: bool | None = None


class RoleFormPermissionOutput(BaseModel):
    id: int
    role_id: int
    role_name: str | None = None
    form_id: int
    form_name: str | None = None
    permission_id: int
    permission_name: str | None = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class RoleFormPermissionCreate(BaseModel):
    role_id: int
    form_id: int
    permission_id: int
    is_active: bool = True


class RoleFormPermissionUpdate(BaseModel):
    role_id: int | None = None
    form_id: int | None = None
    permission_id: int | None = None
    is_active: bool | None = None


class FormModuleOutput(BaseModel):
    id: int
    form_id: int
    form_name: str | None = None
    module_id: int
    module_name: str | None = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class FormModuleCreate(BaseModel):
    form_id: int
    module_id: int
    is_active: bool = True


class FormModuleUpdate(BaseModel):
    form_id: int | None = None
    module_id: int | None = None
    is_active: bool | None = None


class PermissionCheckOutput(BaseModel):
    user_id: int
    form_id: int
    permission_id: int
    allowed: bool
