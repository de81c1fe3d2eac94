"""
Tests for organizations, branches, divisions and assignments.
"""

from rest_api.models import Branch


class TestOrganizationEndpoints:
    BASE_URL = "/api/attendance/organizations"

    def test_create_organization(self, client):
        response = client.post(self.BASE_URL, json={"name": "Universidad del Sur", "address": "Cra 7"})
        assert response.status_code == 201
        assert response.json()["address"] == "Cra 7"

    def test_name_required(self, client):
        assert client.post(self.BASE_URL, json={"name": ""}).status_code == 400

    def test_permanent_delete_cascades_to_branches(self, client, db_session, seed_branch):
        """Branches are removed with their organization."""
        branch_id = seed_branch.id
        response = client.delete(
            f"{self.BASE_URL}/{seed_branch.organization_id}?strategy=permanent"
        )
        assert response.status_code == 200

        db_session.expire_all()
        assert db_session.get(Branch, branch_id) is None


class TestBranchEndpoints:
    BASE_URL = "/api/attendance/branches"

    def test_create_branch(self, client, seed_organization):
        response = client.post(
            self.BASE_URL,
            json={"name": "Sede Sur", "organization_id": seed_organization.id},
        )
        assert response.status_code == 201
        assert response.json()["organization_name"] == "Colegio Central"

    def test_unknown_organization(self, client):
        response = client.post(self.BASE_URL, json={"name": "Sede Sur", "organization_id": 999})
        assert response.status_code == 400

    def test_update_unknown_organization(self, client, seed_branch):
        response = client.patch(f"{self.BASE_URL}/{seed_branch.id}", json={"organization_id": 999})
        assert response.status_code == 400

    def test_filter_by_organization(self, client, seed_branch):
        listed = client.get(f"{self.BASE_URL}?organization_id={seed_branch.organization_id}").json()
        assert [b["name"] for b in listed] == ["Sede Norte"]


class TestDivisionEndpoints:
    def test_division_branch_link(self, client, seed_division, seed_branch):
        """Links carry both names and cannot be duplicated while active."""
        body = {"division_id": seed_division.id, "branch_id": seed_branch.id}
        response = client.post("/api/attendance/division-branches", json=body)
        assert response.status_code == 201
        data = response.json()
        assert data["division_name"] == "Primaria"
        assert data["branch_name"] == "Sede Norte"

        assert client.post("/api/attendance/division-branches", json=body).status_code == 400

    def test_assignment_requires_division(self, client):
        response = client.post(
            "/api/attendance/assignments", json={"name": "Grado 1", "division_id": 999}
        )
        assert response.status_code == 400

    def test_create_assignment(self, client, seed_division):
        response = client.post(
            "/api/attendance/assignments",
            json={"name": "Grado 1", "division_id": seed_division.id},
        )
        assert response.status_code == 201
        assert response.json()["division_name"] == "Primaria"

    def test_delete_division_logically(self, client, seed_division):
        response = client.delete(f"/api/attendance/divisions/{seed_division.id}?strategy=logical")
        assert response.status_code == 200
        assert client.get("/api/attendance/divisions").json() == []
