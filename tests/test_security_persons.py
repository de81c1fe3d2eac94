"""
Tests for person endpoints.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from rest_api.models import Person


BASE_URL = "/api/security/persons"

VALID_PERSON = {
    "name": "Luis",
    "last_name": "Pérez",
    "email": "luis.perez@example.com",
    "document_type": "CC",
    "document_number": "79123456",
    "blood_type": "A+",
}


class TestPersonEndpoints:
    """Person CRUD and validation."""

    def test_create_person(self, client):
        response = client.post(BASE_URL, json=VALID_PERSON)
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Luis"
        assert data["document_type"] == "CC"
        assert data["is_active"] is True

    def test_create_person_minimal(self, client):
        """Only name, last_name and email are required."""
        response = client.post(
            BASE_URL,
            json={"name": "Eva", "last_name": "Ruiz", "email": "eva@example.com"},
        )
        assert response.status_code == 201
        assert response.json()["document_type"] is None

    @pytest.mark.parametrize("field", ["name", "last_name"])
    def test_blank_required_field(self, client, field):
        """Blank required text is rejected by the service."""
        response = client.post(BASE_URL, json={**VALID_PERSON, field: "  "})
        assert response.status_code == 400
        assert field in response.json()["detail"]

    def test_invalid_email(self, client):
        """Malformed emails fail schema validation."""
        response = client.post(BASE_URL, json={**VALID_PERSON, "email": "no-es-correo"})
        assert response.status_code == 422

    def test_invalid_document_type(self, client):
        response = client.post(BASE_URL, json={**VALID_PERSON, "document_type": "DNI"})
        assert response.status_code == 400
        assert "documento" in response.json()["detail"]

    def test_invalid_blood_type(self, client):
        response = client.post(BASE_URL, json={**VALID_PERSON, "blood_type": "C+"})
        assert response.status_code == 400
        assert "sangre" in response.json()["detail"]

    def test_document_number_digits_only(self, client):
        response = client.post(BASE_URL, json={**VALID_PERSON, "document_number": "79-12"})
        assert response.status_code == 400

    @pytest.mark.parametrize("document_number", ["١٢٣", "²³", ""])
    def test_document_number_ascii_digits_only(self, client, document_number):
        """Unicode digits such as Arabic-Indic or superscripts are rejected."""
        response = client.post(BASE_URL, json={**VALID_PERSON, "document_number": document_number})
        assert response.status_code == 400

    def test_document_number_checked_by_database(self, db_session):
        db_session.add(Person(name="Eva", last_name="Ruiz", email="eva@example.com", document_number="١٢"))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_document_number_too_long(self, client):
        """More than ten digits fails schema validation."""
        response = client.post(BASE_URL, json={**VALID_PERSON, "document_number": "12345678901"})
        assert response.status_code == 422

    def test_update_person_catalog_checked(self, client, seed_person):
        response = client.patch(f"{BASE_URL}/{seed_person.id}", json={"blood_type": "Z"})
        assert response.status_code == 400

    def test_update_person(self, client, seed_person):
        response = client.patch(f"{BASE_URL}/{seed_person.id}", json={"phone": "3001234567"})
        assert response.status_code == 200
        data = response.json()
        assert data["phone"] == "3001234567"
        assert data["name"] == "Ana"

    def test_list_persons_excludes_inactive(self, client, seed_person):
        client.delete(f"{BASE_URL}/{seed_person.id}")
        assert client.get(BASE_URL).json() == []
        assert len(client.get(f"{BASE_URL}?include_inactive=true").json()) == 1

    def test_permanent_delete_cascades_to_users(self, client, db_session, seed_user):
        """Removing a person removes its user accounts through the foreign key."""
        from rest_api.models import User

        user_id = seed_user.id
        response = client.delete(f"{BASE_URL}/{seed_user.person_id}?strategy=permanent")
        assert response.status_code == 200

        db_session.expire_all()
        assert db_session.get(User, user_id) is None
