"""
Organization structure models: Organization, Branch, Division,
DivisionBranch and Assignment.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import AuditMixin, Base


class Organization(AuditMixin, Base):
    """
    Top-level institution that owns branches.
    Inherits: is_active, created_at, updated_at, deleted_at from AuditMixin.
    """

    __tablename__ = "organization"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(15))
    address: Mapped[Optional[str]] = mapped_column(String(100))

    branches: Mapped[list["Branch"]] = relationship(
        back_populates="organization", cascade="all, delete-orphan", passive_deletes=True
    )


class Branch(AuditMixin, Base):
    """Physical site of an organization."""

    __tablename__ = "branch"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(200))
    organization_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("organization.id", ondelete="CASCADE"), nullable=False, index=True
    )

    organization: Mapped["Organization"] = relationship(back_populates="branches")
    division_branches: Mapped[list["DivisionBranch"]] = relationship(
        back_populates="branch", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def organization_name(self) -> Optional[str]:
        return self.organization.name if self.organization else None


class Division(AuditMixin, Base):
    """Department or area that can operate in several branches."""

    __tablename__ = "division"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    division_branches: Mapped[list["DivisionBranch"]] = relationship(
        back_populates="division", cascade="all, delete-orphan", passive_deletes=True
    )
    assignments: Mapped[list["Assignment"]] = relationship(
        back_populates="division", cascade="all, delete-orphan", passive_deletes=True
    )


class DivisionBranch(AuditMixin, Base):
    """Division present in a branch."""

    __tablename__ = "division_branch"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    division_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("division.id", ondelete="CASCADE"), nullable=False, index=True
    )
    branch_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("branch.id", ondelete="CASCADE"), nullable=False, index=True
    )

    division: Mapped["Division"] = relationship(back_populates="division_branches")
    branch: Mapped["Branch"] = relationship(back_populates="division_branches")

    @property
    def division_name(self) -> Optional[str]:
        return self.division.name if self.division else None

    @property
    def branch_name(self) -> Optional[str]:
        return self.branch.name if self.branch else None


class Assignment(AuditMixin, Base):
    """Job assignment inside a division."""

    __tablename__ = "assignment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    division_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("division.id", ondelete="CASCADE"), nullable=False, index=True
    )

    division: Mapped["Division"] = relationship(back_populates="assignments")

    @property
    def division_name(self) -> Optional[str]:
        return self.division.name if self.division else None
