"""
Tests for role endpoints, including both delete strategies.
"""

import pytest

from rest_api.models import Role
from rest_api.services.domain import RoleService


BASE_URL = "/api/security/roles"


class TestRoleEndpoints:
    """Role CRUD operations."""

    def test_list_roles(self, client, seed_role):
        """Active roles are listed."""
        response = client.get(BASE_URL)
        assert response.status_code == 200
        data = response.json()
        assert [r["name"] for r in data] == ["Supervisor"]

    def test_get_role(self, client, seed_role):
        """Can get a single role by ID."""
        response = client.get(f"{BASE_URL}/{seed_role.id}")
        assert response.status_code == 200
        assert response.json()["description"] == "Supervisa eventos"

    def test_get_role_not_found(self, client):
        """Unknown ID returns 404."""
        response = client.get(f"{BASE_URL}/99999")
        assert response.status_code == 404

    def test_get_role_invalid_id(self, client):
        """Zero or negative IDs are rejected with 400."""
        assert client.get(f"{BASE_URL}/0").status_code == 400
        assert client.get(f"{BASE_URL}/-3").status_code == 400

    def test_create_role(self, client):
        """New roles are created active."""
        response = client.post(BASE_URL, json={"name": "Docente"})
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Docente"
        assert data["is_active"] is True
        assert data["id"] > 0

    def test_create_role_blank_name(self, client):
        """Blank names are rejected."""
        response = client.post(BASE_URL, json={"name": "   "})
        assert response.status_code == 400
        assert "name" in response.json()["detail"]

    def test_create_role_missing_name(self, client):
        """Schema validation catches a missing name."""
        response = client.post(BASE_URL, json={"description": "Sin nombre"})
        assert response.status_code == 422

    def test_update_role_partial(self, client, seed_role):
        """PATCH only touches the fields sent."""
        response = client.patch(f"{BASE_URL}/{seed_role.id}", json={"description": "Nueva"})
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Supervisor"
        assert data["description"] == "Nueva"

    def test_update_role_null_name_rejected(self, client, seed_role):
        """An explicit null on a required column is refused."""
        response = client.patch(f"{BASE_URL}/{seed_role.id}", json={"name": None})
        assert response.status_code == 400

    def test_update_role_not_found(self, client):
        response = client.patch(f"{BASE_URL}/99999", json={"name": "X"})
        assert response.status_code == 404


class TestRoleDelete:
    """DELETE with ?strategy=."""

    def test_default_strategy_is_logical(self, client, db_session, seed_role):
        """Without strategy the row is kept and marked inactive."""
        response = client.delete(f"{BASE_URL}/{seed_role.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["strategy"] == "logical"
        assert data["entity_id"] == seed_role.id

        db_session.expire_all()
        role = db_session.get(Role, seed_role.id)
        assert role is not None
        assert role.is_active is False

    def test_logical_delete_hides_from_list(self, client, seed_role):
        """Inactive rows only appear with include_inactive."""
        client.delete(f"{BASE_URL}/{seed_role.id}?strategy=logical")

        assert client.get(BASE_URL).json() == []
        listed = client.get(f"{BASE_URL}?include_inactive=true").json()
        assert len(listed) == 1
        assert listed[0]["is_active"] is False
        assert listed[0]["deleted_at"] is not None

    def test_logically_deleted_role_still_readable_by_id(self, client, seed_role):
        client.delete(f"{BASE_URL}/{seed_role.id}")
        response = client.get(f"{BASE_URL}/{seed_role.id}")
        assert response.status_code == 200
        assert response.json()["is_active"] is False

    def test_permanent_delete_removes_row(self, client, db_session, seed_role):
        """strategy=permanent removes the row."""
        role_id = seed_role.id
        response = client.delete(f"{BASE_URL}/{role_id}?strategy=permanent")
        assert response.status_code == 200
        assert response.json()["strategy"] == "permanent"

        db_session.expire_all()
        assert db_session.get(Role, role_id) is None
        assert client.get(f"{BASE_URL}/{role_id}").status_code == 404

    def test_delete_not_found(self, client):
        """Unknown ID returns 404 for both strategies."""
        assert client.delete(f"{BASE_URL}/99999").status_code == 404
        assert client.delete(f"{BASE_URL}/99999?strategy=permanent").status_code == 404

    def test_delete_invalid_id(self, client):
        assert client.delete(f"{BASE_URL}/0").status_code == 400

    def test_unknown_strategy_rejected(self, client, seed_role):
        """Strategies other than logical and permanent fail validation."""
        response = client.delete(f"{BASE_URL}/{seed_role.id}?strategy=archive")
        assert response.status_code == 422

    def test_update_reactivates(self, client, seed_role):
        """Sending is_active=true brings a logically deleted row back."""
        client.delete(f"{BASE_URL}/{seed_role.id}")
        response = client.patch(f"{BASE_URL}/{seed_role.id}", json={"is_active": True})
        assert response.status_code == 200
        data = response.json()
        assert data["is_active"] is True
        assert data["deleted_at"] is None


class TestRoleService:
    """Service-level behaviour not reachable through the router."""

    def test_unknown_delete_type_raises(self, db_session, seed_role):
        """The service does not fall back to a default strategy."""
        with pytest.raises(NotImplementedError):
            RoleService(db_session).delete(seed_role.id, "archive")

        db_session.expire_all()
        assert db_session.get(Role, seed_role.id).is_active is True

    def test_pagination(self, client):
        """limit and offset page through active rows ordered by id."""
        for name in ("A", "B", "C"):
            client.post(BASE_URL, json={"name": name})

        page = client.get(f"{BASE_URL}?limit=2&offset=1").json()
        assert [r["name"] for r in page] == ["B", "C"]
