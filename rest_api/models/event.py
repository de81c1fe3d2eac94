"""
Event models: EventType, Event, EventSession and AccessPoint.
"""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import AuditMixin, Base

if TYPE_CHECKING:
    from .attendance import Attendance, AttendanceRegistration


class EventType(AuditMixin, Base):
    """Category of event (conference, workshop...)."""

    __tablename__ = "event_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    events: Mapped[list["Event"]] = relationship(
        back_populates="event_type", cascade="all, delete-orphan", passive_deletes=True
    )


class Event(AuditMixin, Base):
    """Scheduled event made of one or more sessions."""

    __tablename__ = "event"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500))
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    event_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("event_type.id", ondelete="CASCADE"), nullable=False, index=True
    )

    event_type: Mapped["EventType"] = relationship(back_populates="events")
    sessions: Mapped[list["EventSession"]] = relationship(
        back_populates="event", cascade="all, delete-orphan", passive_deletes=True
    )
    access_points: Mapped[list["AccessPoint"]] = relationship(
        back_populates="event", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def event_type_name(self) -> Optional[str]:
        return self.event_type.name if self.event_type else None


class EventSession(AuditMixin, Base):
    """Time slot of an event in which attendance is taken."""

    __tablename__ = "event_session"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True
    )

    event: Mapped["Event"] = relationship(back_populates="sessions")
    attendances: Mapped[list["Attendance"]] = relationship(
        back_populates="event_session", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def event_name(self) -> Optional[str]:
        return self.event.name if self.event else None


class AccessPoint(AuditMixin, Base):
    """Door or checkpoint where cards are scanned during an event."""

    __tablename__ = "access_point"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    ubication: Mapped[Optional[str]] = mapped_column(String(200))
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True
    )

    event: Mapped["Event"] = relationship(back_populates="access_points")
    registrations: Mapped[list["AttendanceRegistration"]] = relationship(
        back_populates="access_point", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def event_name(self) -> Optional[str]:
        return self.event.name if self.event else None
