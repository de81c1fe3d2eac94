"""
Pytest configuration and fixtures for the API tests.
"""

import os

# Must be set before the application settings are first loaded
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rest_api.main import app
from rest_api.models import (
    AccessPoint,
    Attendance,
    Base,
    Branch,
    Card,
    Division,
    Event,
    EventSession,
    EventType,
    Form,
    Module,
    Organization,
    Permission,
    Person,
    Role,
    User,
)
from shared.infrastructure.db import get_db
from shared.security.password import hash_password


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE only applies with foreign keys on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _save(db_session, entity):
    db_session.add(entity)
    db_session.commit()
    db_session.refresh(entity)
    return entity


# =============================================================================
# Security fixtures
# =============================================================================


@pytest.fixture
def seed_person(db_session):
    return _save(
        db_session,
        Person(
            name="Ana",
            last_name="García",
            email="ana.garcia@example.com",
            document_type="CC",
            document_number="1020304050",
            blood_type="O+",
        ),
    )


@pytest.fixture
def seed_user(db_session, seed_person):
    return _save(
        db_session,
        User(
            username="agarcia",
            password=hash_password("secreto123"),
            person_id=seed_person.id,
        ),
    )


@pytest.fixture
def seed_role(db_session):
    return _save(db_session, Role(name="Supervisor", description="Supervisa eventos"))


@pytest.fixture
def seed_form(db_session):
    return _save(db_session, Form(name="Eventos", description="Gestión de eventos"))


@pytest.fixture
def seed_permission(db_session):
    return _save(db_session, Permission(name="Ver", description="Consultar registros"))


@pytest.fixture
def seed_module(db_session):
    return _save(db_session, Module(name="Asistencia", description="Control de asistencia"))


# =============================================================================
# Attendance fixtures
# =============================================================================


@pytest.fixture
def seed_organization(db_session):
    return _save(db_session, Organization(name="Colegio Central", phone="6011234567"))


@pytest.fixture
def seed_branch(db_session, seed_organization):
    return _save(
        db_session,
        Branch(name="Sede Norte", location="Calle 100", organization_id=seed_organization.id),
    )


@pytest.fixture
def seed_division(db_session):
    return _save(db_session, Division(name="Primaria"))


@pytest.fixture
def seed_event_type(db_session):
    return _save(db_session, EventType(name="Clase"))


@pytest.fixture
def seed_event(db_session, seed_event_type):
    return _save(
        db_session,
        Event(name="Matemáticas", date=date(2026, 3, 2), event_type_id=seed_event_type.id),
    )


@pytest.fixture
def seed_event_session(db_session, seed_event):
    start = datetime(2026, 3, 2, 8, 0, tzinfo=timezone.utc)
    return _save(
        db_session,
        EventSession(
            name="Bloque 1",
            start_date=start,
            end_date=start + timedelta(hours=2),
            event_id=seed_event.id,
        ),
    )


@pytest.fixture
def seed_access_point(db_session, seed_event):
    return _save(
        db_session,
        AccessPoint(name="Puerta principal", ubication="Entrada norte", event_id=seed_event.id),
    )


@pytest.fixture
def seed_card(db_session, seed_person):
    created = datetime(2026, 1, 1, tzinfo=timezone.utc)
    return _save(
        db_session,
        Card(
            qr="QR-0001",
            creation_date=created,
            expiration_date=created + timedelta(days=365),
            person_id=seed_person.id,
        ),
    )


@pytest.fixture
def seed_attendance(db_session, seed_card, seed_event_session):
    return _save(
        db_session,
        Attendance(card_id=seed_card.id, event_session_id=seed_event_session.id),
    )
