"""
Tests for the audit trail written by the services.
"""

from rest_api.models import AuditLog
from rest_api.services.audit import compute_changes, serialize_model
from shared.config.constants import AuditActions


AUDIT_URL = "/api/admin/audit"


def _entries(db_session, entity_type, entity_id):
    return (
        db_session.query(AuditLog)
        .filter(AuditLog.entity_type == entity_type, AuditLog.entity_id == entity_id)
        .order_by(AuditLog.id)
        .all()
    )


class TestAuditTrail:
    """Every change through a service leaves one audit row."""

    def test_full_lifecycle(self, client, db_session):
        role_id = client.post("/api/security/roles", json={"name": "Auditor"}).json()["id"]
        client.patch(f"/api/security/roles/{role_id}", json={"description": "Revisa cambios"})
        client.delete(f"/api/security/roles/{role_id}")
        client.post(f"/api/admin/roles/{role_id}/restore")
        client.delete(f"/api/security/roles/{role_id}?strategy=permanent")

        actions = [e.action for e in _entries(db_session, "role", role_id)]
        assert actions == [
            AuditActions.CREATE,
            AuditActions.UPDATE,
            AuditActions.SOFT_DELETE,
            AuditActions.RESTORE,
            AuditActions.DELETE,
        ]

    def test_update_records_changes(self, client):
        role_id = client.post("/api/security/roles", json={"name": "Auditor"}).json()["id"]
        client.patch(f"/api/security/roles/{role_id}", json={"name": "Revisor"})

        entries = client.get(
            f"{AUDIT_URL}?entity_type=role&entity_id={role_id}&action=UPDATE"
        ).json()
        assert len(entries) == 1
        assert entries[0]["changes"]["name"] == {"old": "Auditor", "new": "Revisor"}

    def test_password_never_audited(self, client, db_session, seed_person):
        user_id = client.post(
            "/api/security/users",
            json={"username": "auditado", "password": "muy-secreta", "person_id": seed_person.id},
        ).json()["id"]
        client.patch(f"/api/security/users/{user_id}", json={"password": "otra-secreta"})

        for entry in _entries(db_session, "app_user", user_id):
            for raw in (entry.old_values, entry.new_values, entry.changes):
                assert raw is None or "password" not in raw

    def test_request_id_recorded(self, client):
        role_id = client.post(
            "/api/security/roles",
            json={"name": "Trazado"},
            headers={"X-Request-ID": "req-123"},
        ).json()["id"]

        entries = client.get(f"{AUDIT_URL}?entity_type=role&entity_id={role_id}").json()
        assert entries[0]["request_id"] == "req-123"

    def test_failed_validation_leaves_no_entry(self, client, db_session):
        client.post("/api/security/roles", json={"name": " "})
        assert db_session.query(AuditLog).count() == 0

    def test_missing_entity_delete_leaves_no_entry(self, client, db_session):
        client.delete("/api/security/roles/4242")
        assert db_session.query(AuditLog).count() == 0


class TestAuditHelpers:
    def test_compute_changes_only_differences(self):
        changes = compute_changes({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4})
        assert changes == {"b": {"old": 2, "new": 3}, "c": {"old": None, "new": 4}}

    def test_serialize_model_skips_password(self, seed_user):
        values = serialize_model(seed_user)
        assert "password" not in values
        assert values["username"] == "agarcia"

    def test_serialize_model_extra_exclusions(self, seed_role):
        values = serialize_model(seed_role, exclude=["description"])
        assert "description" not in values
        assert values["name"] == "Supervisor"
