"""
Access control models: Person, User, Role, Permission, Form, Module
and the association tables that bind them.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.config.constants import BloodTypes, DocumentTypes
from .base import AuditMixin, Base


def _in_list(column: str, values: list[str]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IS NULL OR {column} IN ({quoted})"


# ASCII digits only. Each dialect spells the pattern test differently.
_DIGITS_ONLY = {
    "postgresql": "document_number ~ '^[0-9]+$'",
    "mysql": "document_number REGEXP '^[0-9]+$'",
    "mssql": "document_number <> '' AND document_number NOT LIKE '%[^0-9]%'",
    "sqlite": "document_number <> '' AND document_number NOT GLOB '*[^0-9]*'",
}


def _document_number_checks() -> list[CheckConstraint]:
    return [
        CheckConstraint(
            f"document_number IS NULL OR ({expression})",
            name=f"ck_person_document_number_{dialect}",
        ).ddl_if(dialect=dialect)
        for dialect, expression in _DIGITS_ONLY.items()
    ]


class Person(AuditMixin, Base):
    """
    A natural person. Users and attendance cards hang off a person.
    Inherits: is_active, created_at, updated_at, deleted_at from AuditMixin.
    """

    __tablename__ = "person"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    document_type: Mapped[Optional[str]] = mapped_column(String(5))
    document_number: Mapped[Optional[str]] = mapped_column(String(10))
    phone: Mapped[Optional[str]] = mapped_column(String(15))
    address: Mapped[Optional[str]] = mapped_column(String(100))
    blood_type: Mapped[Optional[str]] = mapped_column(String(3))

    users: Mapped[list["User"]] = relationship(
        back_populates="person", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint(_in_list("document_type", DocumentTypes.ALL), name="ck_person_document_type"),
        CheckConstraint(_in_list("blood_type", BloodTypes.ALL), name="ck_person_blood_type"),
        *_document_number_checks(),
    )

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.last_name}".strip()


class User(AuditMixin, Base):
    """
    Login account bound to a person. The password column holds a bcrypt hash.
    """

    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, index=True
    )

    person: Mapped["Person"] = relationship(back_populates="users")
    role_users: Mapped[list["RoleUser"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def person_name(self) -> Optional[str]:
        return self.person.full_name if self.person else None


class Role(AuditMixin, Base):
    """Named set of form permissions granted to users."""

    __tablename__ = "role"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(200))

    role_users: Mapped[list["RoleUser"]] = relationship(
        back_populates="role", cascade="all, delete-orphan", passive_deletes=True
    )
    role_form_permissions: Mapped[list["RoleFormPermission"]] = relationship(
        back_populates="role", cascade="all, delete-orphan", passive_deletes=True
    )


class Permission(AuditMixin, Base):
    """Action that can be granted on a form (view, create, edit...)."""

    __tablename__ = "permission"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(200), nullable=False)

    role_form_permissions: Mapped[list["RoleFormPermission"]] = relationship(
        back_populates="permission", cascade="all, delete-orphan", passive_deletes=True
    )


class Form(AuditMixin, Base):
    """UI screen protected by permissions."""

    __tablename__ = "form"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(200), nullable=False)

    role_form_permissions: Mapped[list["RoleFormPermission"]] = relationship(
        back_populates="form", cascade="all, delete-orphan", passive_deletes=True
    )
    form_modules: Mapped[list["FormModule"]] = relationship(
        back_populates="form", cascade="all, delete-orphan", passive_deletes=True
    )


class Module(AuditMixin, Base):
    """Group of forms shown together in the UI."""

    __tablename__ = "module"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(200))

    form_modules: Mapped[list["FormModule"]] = relationship(
        back_populates="module", cascade="all, delete-orphan", passive_deletes=True
    )


# =============================================================================
# Associations
# =============================================================================


class RoleUser(AuditMixin, Base):
    """Role granted to a user."""

    __tablename__ = "role_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("role.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )

    role: Mapped["Role"] = relationship(back_populates="role_users")
    user: Mapped["User"] = relationship(back_populates="role_users")

    @property
    def role_name(self) -> Optional[str]:
        return self.role.name if self.role else None

    @property
    def username(self) -> Optional[str]:
        return self.user.username if self.user else None


class RoleFormPermission(AuditMixin, Base):
    """Permission a role holds on a form."""

    __tablename__ = "role_form_permission"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("role.id", ondelete="CASCADE"), nullable=False, index=True
    )
    form_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("form.id", ondelete="CASCADE"), nullable=False, index=True
    )
    permission_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("permission.id", ondelete="CASCADE"), nullable=False, index=True
    )

    role: Mapped["Role"] = relationship(back_populates="role_form_permissions")
    form: Mapped["Form"] = relationship(back_populates="role_form_permissions")
    permission: Mapped["Permission"] = relationship(back_populates="role_form_permissions")

    @property
    def role_name(self) -> Optional[str]:
        return self.role.name if self.role else None

    @property
    def form_name(self) -> Optional[str]:
        return self.form.name if self.form else None

    @property
    def permission_name(self) -> Optional[str]:
        return self.permission.name if self.permission else None


class FormModule(AuditMixin, Base):
    """Form placed inside a module."""

    __tablename__ = "form_module"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    form_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("form.id", ondelete="CASCADE"), nullable=False, index=True
    )
    module_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("module.id", ondelete="CASCADE"), nullable=False, index=True
    )

    form: Mapped["Form"] = relationship(back_populates="form_modules")
    module: Mapped["Module"] = relationship(back_populates="form_modules")

    @property
    def form_name(self) -> Optional[str]:
        return self.form.name if self.form else None

    @property
    def module_name(self) -> Optional[str]:
        return self.module.name if self.module else None
