"""
Attendance models: Card, Attendance and AttendanceRegistration.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import AuditMixin, Base

if TYPE_CHECKING:
    from .event import AccessPoint, EventSession
    from .security import Person


class Card(AuditMixin, Base):
    """QR card issued to a person for event access."""

    __tablename__ = "card"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    qr: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    creation_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    expiration_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, index=True
    )

    person: Mapped["Person"] = relationship()
    attendances: Mapped[list["Attendance"]] = relationship(
        back_populates="card", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def person_name(self) -> Optional[str]:
        return self.person.full_name if self.person else None


class Attendance(AuditMixin, Base):
    """A card enrolled in an event session."""

    __tablename__ = "attendance"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    card_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("card.id", ondelete="CASCADE"), nullable=False, index=True
    )
    event_session_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("event_session.id", ondelete="CASCADE"), nullable=False, index=True
    )

    card: Mapped["Card"] = relationship(back_populates="attendances")
    event_session: Mapped["EventSession"] = relationship(back_populates="attendances")
    registrations: Mapped[list["AttendanceRegistration"]] = relationship(
        back_populates="attendance", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def card_qr(self) -> Optional[str]:
        return self.card.qr if self.card else None

    @property
    def event_session_name(self) -> Optional[str]:
        return self.event_session.name if self.event_session else None


class AttendanceRegistration(AuditMixin, Base):
    """Entrance or exit scan of an attendance at an access point."""

    __tablename__ = "attendance_registration"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    hour: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_entrance: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    attendance_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("attendance.id", ondelete="CASCADE"), nullable=False, index=True
    )
    access_point_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("access_point.id", ondelete="CASCADE"), nullable=False, index=True
    )

    attendance: Mapped["Attendance"] = relationship(back_populates="registrations")
    access_point: Mapped["AccessPoint"] = relationship(back_populates="registrations")

    @property
    def access_point_name(self) -> Optional[str]:
        return self.access_point.name if self.access_point else None
