"""
Tests for user account endpoints and UserService.
"""

from rest_api.models import User
from rest_api.services.domain import UserService
from shared.security.password import is_password_hash, verify_password


BASE_URL = "/api/security/users"


class TestUserEndpoints:
    """User CRUD operations."""

    def test_create_user_hashes_password(self, client, db_session, seed_person):
        """The stored password is a bcrypt hash and is not returned."""
        response = client.post(
            BASE_URL,
            json={"username": "lperez", "password": "clave-segura", "person_id": seed_person.id},
        )
        assert response.status_code == 201
        data = response.json()
        assert "password" not in data
        assert data["person_name"] == "Ana García"

        stored = db_session.get(User, data["id"])
        assert is_password_hash(stored.password)
        assert verify_password("clave-segura", stored.password)

    def test_create_user_unknown_person(self, client):
        """person_id must reference an existing person."""
        response = client.post(
            BASE_URL,
            json={"username": "nadie", "password": "x", "person_id": 999},
        )
        assert response.status_code == 400
        assert "person_id" in response.json()["detail"]

    def test_create_user_invalid_person_id(self, client):
        response = client.post(
            BASE_URL,
            json={"username": "nadie", "password": "x", "person_id": 0},
        )
        assert response.status_code == 400

    def test_duplicate_username(self, client, seed_user):
        """Usernames are unique."""
        response = client.post(
            BASE_URL,
            json={"username": "agarcia", "password": "otra", "person_id": seed_user.person_id},
        )
        assert response.status_code == 400
        assert "agarcia" in response.json()["detail"]

    def test_duplicate_username_of_inactive_user(self, client, seed_user):
        """A logically deleted account still holds its username."""
        client.delete(f"{BASE_URL}/{seed_user.id}")
        response = client.post(
            BASE_URL,
            json={"username": "agarcia", "password": "otra", "person_id": seed_user.person_id},
        )
        assert response.status_code == 400

    def test_blank_username(self, client, seed_person):
        response = client.post(
            BASE_URL,
            json={"username": " ", "password": "x", "person_id": seed_person.id},
        )
        assert response.status_code == 400

    def test_update_password(self, client, db_session, seed_user):
        """Password changes are hashed too."""
        response = client.patch(f"{BASE_URL}/{seed_user.id}", json={"password": "nueva-clave"})
        assert response.status_code == 200
        assert "password" not in response.json()

        db_session.expire_all()
        stored = db_session.get(User, seed_user.id)
        assert verify_password("nueva-clave", stored.password)
        assert not verify_password("secreto123", stored.password)

    def test_rename_to_own_username(self, client, seed_user):
        """Keeping the same username is not a duplicate."""
        response = client.patch(f"{BASE_URL}/{seed_user.id}", json={"username": "agarcia"})
        assert response.status_code == 200

    def test_get_by_username(self, client, seed_user):
        response = client.get(f"{BASE_URL}/by-username/agarcia")
        assert response.status_code == 200
        assert response.json()["id"] == seed_user.id

    def test_get_by_username_missing(self, client):
        assert client.get(f"{BASE_URL}/by-username/nadie").status_code == 404

    def test_filter_by_person(self, client, seed_user):
        assert len(client.get(f"{BASE_URL}?person_id={seed_user.person_id}").json()) == 1
        assert client.get(f"{BASE_URL}?person_id=999").json() == []


class TestUserService:
    """Service-level checks."""

    def test_username_is_stripped(self, db_session, seed_person):
        output = UserService(db_session).create(
            {"username": "  mlopez  ", "password": "x", "person_id": seed_person.id}
        )
        assert output.username == "mlopez"

