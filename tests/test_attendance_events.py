"""
Tests for event types, events, sessions and access points.
"""

import pytest

from rest_api.services.domain import EventSessionService


class TestEventEndpoints:
    BASE_URL = "/api/attendance/events"

    def test_create_event(self, client, seed_event_type):
        response = client.post(
            self.BASE_URL,
            json={"name": "Ciencias", "date": "2026-04-10", "event_type_id": seed_event_type.id},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["date"] == "2026-04-10"
        assert data["event_type_name"] == "Clase"

    def test_event_requires_existing_type(self, client):
        response = client.post(
            self.BASE_URL,
            json={"name": "Ciencias", "date": "2026-04-10", "event_type_id": 999},
        )
        assert response.status_code == 400

    def test_event_requires_date(self, client, seed_event_type):
        response = client.post(
            self.BASE_URL, json={"name": "Ciencias", "event_type_id": seed_event_type.id}
        )
        assert response.status_code == 422

    def test_filter_by_type(self, client, seed_event):
        listed = client.get(f"{self.BASE_URL}?event_type_id={seed_event.event_type_id}").json()
        assert len(listed) == 1


class TestEventSessionEndpoints:
    BASE_URL = "/api/attendance/event-sessions"

    def test_create_session(self, client, seed_event):
        response = client.post(
            self.BASE_URL,
            json={
                "name": "Bloque 2",
                "start_date": "2026-03-02T10:00:00Z",
                "end_date": "2026-03-02T12:00:00Z",
                "event_id": seed_event.id,
            },
        )
        assert response.status_code == 201
        assert response.json()["event_name"] == "Matemáticas"

    def test_end_before_start_rejected(self, client, seed_event):
        response = client.post(
            self.BASE_URL,
            json={
                "name": "Bloque 2",
                "start_date": "2026-03-02T12:00:00Z",
                "end_date": "2026-03-02T10:00:00Z",
                "event_id": seed_event.id,
            },
        )
        assert response.status_code == 400
        assert "fecha de fin" in response.json()["detail"]

    def test_partial_update_checked_against_stored_dates(self, client, seed_event_session):
        """Moving only the end before the stored start is refused."""
        response = client.patch(
            f"{self.BASE_URL}/{seed_event_session.id}",
            json={"end_date": "2026-03-02T07:00:00Z"},
        )
        assert response.status_code == 400

    def test_partial_update_valid(self, client, seed_event_session):
        response = client.patch(
            f"{self.BASE_URL}/{seed_event_session.id}",
            json={"end_date": "2026-03-02T11:00:00Z"},
        )
        assert response.status_code == 200

    def test_list_by_event(self, db_session, seed_event_session):
        sessions = EventSessionService(db_session).list_by_event(seed_event_session.event_id)
        assert [s.id for s in sessions] == [seed_event_session.id]

    def test_list_by_event_invalid_id(self, db_session):
        from shared.utils.exceptions import ValidationError

        with pytest.raises(ValidationError):
            EventSessionService(db_session).list_by_event(0)

    def test_sessions_of_event(self, client, seed_event_session):
        event_id = seed_event_session.event_id
        response = client.get(f"/api/attendance/events/{event_id}/sessions")
        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [seed_event_session.id]

        client.delete(f"{self.BASE_URL}/{seed_event_session.id}")
        assert client.get(f"/api/attendance/events/{event_id}/sessions").json() == []
        hidden = client.get(f"/api/attendance/events/{event_id}/sessions?include_inactive=true")
        assert [s["is_active"] for s in hidden.json()] == [False]

    def test_sessions_of_unknown_event(self, client):
        assert client.get("/api/attendance/events/999/sessions").status_code == 404


class TestAccessPointEndpoints:
    BASE_URL = "/api/attendance/access-points"

    def test_create_access_point(self, client, seed_event):
        response = client.post(
            self.BASE_URL,
            json={"name": "Puerta sur", "ubication": "Bloque C", "event_id": seed_event.id},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["ubication"] == "Bloque C"
        assert data["event_name"] == "Matemáticas"

    def test_unknown_event(self, client):
        response = client.post(self.BASE_URL, json={"name": "Puerta sur", "event_id": 999})
        assert response.status_code == 400
