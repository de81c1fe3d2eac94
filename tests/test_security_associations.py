"""
Tests for role grants, role permissions and form-module links.
"""

from rest_api.models import RoleUser


class TestRoleUserEndpoints:
    """Role grants."""

    BASE_URL = "/api/security/role-users"

    def test_grant_role(self, client, seed_role, seed_user):
        """Output carries the related names."""
        response = client.post(self.BASE_URL, json={"role_id": seed_role.id, "user_id": seed_user.id})
        assert response.status_code == 201
        data = response.json()
        assert data["role_name"] == "Supervisor"
        assert data["username"] == "agarcia"

    def test_grant_unknown_role(self, client, seed_user):
        response = client.post(self.BASE_URL, json={"role_id": 999, "user_id": seed_user.id})
        assert response.status_code == 400
        assert "role_id" in response.json()["detail"]

    def test_grant_non_positive_ids(self, client):
        response = client.post(self.BASE_URL, json={"role_id": 0, "user_id": -1})
        assert response.status_code == 400

    def test_duplicate_active_grant(self, client, seed_role, seed_user):
        """The same role cannot be granted twice while active."""
        body = {"role_id": seed_role.id, "user_id": seed_user.id}
        assert client.post(self.BASE_URL, json=body).status_code == 201
        assert client.post(self.BASE_URL, json=body).status_code == 400

    def test_regrant_after_logical_delete(self, client, seed_role, seed_user):
        """An inactive grant does not block a new one."""
        body = {"role_id": seed_role.id, "user_id": seed_user.id}
        first = client.post(self.BASE_URL, json=body).json()
        client.delete(f"{self.BASE_URL}/{first['id']}")
        assert client.post(self.BASE_URL, json=body).status_code == 201

    def test_filter_by_user(self, client, seed_role, seed_user):
        client.post(self.BASE_URL, json={"role_id": seed_role.id, "user_id": seed_user.id})
        assert len(client.get(f"{self.BASE_URL}?user_id={seed_user.id}").json()) == 1
        assert client.get(f"{self.BASE_URL}?user_id=999").json() == []

    def test_user_roles_lists_active_grants(self, client, seed_role, seed_user):
        grant = client.post(
            self.BASE_URL, json={"role_id": seed_role.id, "user_id": seed_user.id}
        ).json()

        roles = client.get(f"/api/security/users/{seed_user.id}/roles").json()
        assert [r["role_name"] for r in roles] == ["Supervisor"]

        client.delete(f"{self.BASE_URL}/{grant['id']}")
        assert client.get(f"/api/security/users/{seed_user.id}/roles").json() == []

    def test_user_roles_unknown_user(self, client):
        assert client.get("/api/security/users/999/roles").status_code == 404

    def test_permanent_role_delete_removes_grants(self, client, db_session, seed_role, seed_user):
        """Grants go with the role through ON DELETE CASCADE."""
        grant = client.post(
            self.BASE_URL, json={"role_id": seed_role.id, "user_id": seed_user.id}
        ).json()

        response = client.delete(f"/api/security/roles/{seed_role.id}?strategy=permanent")
        assert response.status_code == 200

        db_session.expire_all()
        assert db_session.get(RoleUser, grant["id"]) is None

    def test_logical_role_delete_keeps_grants(self, client, db_session, seed_role, seed_user):
        grant = client.post(
            self.BASE_URL, json={"role_id": seed_role.id, "user_id": seed_user.id}
        ).json()

        client.delete(f"/api/security/roles/{seed_role.id}")

        db_session.expire_all()
        assert db_session.get(RoleUser, grant["id"]).is_active is True


class TestRoleFormPermissionEndpoints:
    """Role permissions on forms."""

    BASE_URL = "/api/security/role-form-permissions"

    def _body(self, role, form, permission):
        return {"role_id": role.id, "form_id": form.id, "permission_id": permission.id}

    def test_create(self, client, seed_role, seed_form, seed_permission):
        response = client.post(self.BASE_URL, json=self._body(seed_role, seed_form, seed_permission))
        assert response.status_code == 201
        data = response.json()
        assert data["role_name"] == "Supervisor"
        assert data["form_name"] == "Eventos"
        assert data["permission_name"] == "Ver"

    def test_duplicate_triple(self, client, seed_role, seed_form, seed_permission):
        body = self._body(seed_role, seed_form, seed_permission)
        client.post(self.BASE_URL, json=body)
        assert client.post(self.BASE_URL, json=body).status_code == 400

    def test_unknown_permission(self, client, seed_role, seed_form):
        response = client.post(
            self.BASE_URL,
            json={"role_id": seed_role.id, "form_id": seed_form.id, "permission_id": 999},
        )
        assert response.status_code == 400

    def test_update_into_duplicate(self, client, db_session, seed_role, seed_form, seed_permission):
        """Changing a row so it matches another active row is refused."""
        from rest_api.models import Permission

        other = Permission(name="Crear", description="Crear registros")
        db_session.add(other)
        db_session.commit()

        client.post(self.BASE_URL, json=self._body(seed_role, seed_form, seed_permission))
        second = client.post(self.BASE_URL, json=self._body(seed_role, seed_form, other)).json()

        response = client.patch(
            f"{self.BASE_URL}/{second['id']}", json={"permission_id": seed_permission.id}
        )
        assert response.status_code == 400

    def test_permission_check(self, client, seed_role, seed_user, seed_form, seed_permission):
        """A user holds a permission through an active role grant."""
        check_url = f"{self.BASE_URL}/check/{seed_user.id}/{seed_form.id}/{seed_permission.id}"
        assert client.get(check_url).json()["allowed"] is False

        client.post(self.BASE_URL, json=self._body(seed_role, seed_form, seed_permission))
        client.post("/api/security/role-users", json={"role_id": seed_role.id, "user_id": seed_user.id})
        assert client.get(check_url).json()["allowed"] is True

        client.delete(f"/api/security/roles/{seed_role.id}")
        assert client.get(check_url).json()["allowed"] is False


class TestFormModuleEndpoints:
    """Forms placed in modules."""

    BASE_URL = "/api/security/form-modules"

    def test_create_and_filter(self, client, seed_form, seed_module):
        response = client.post(self.BASE_URL, json={"form_id": seed_form.id, "module_id": seed_module.id})
        assert response.status_code == 201
        data = response.json()
        assert data["form_name"] == "Eventos"
        assert data["module_name"] == "Asistencia"

        listed = client.get(f"{self.BASE_URL}?module_id={seed_module.id}").json()
        assert [row["id"] for row in listed] == [data["id"]]

    def test_restore_blocked_by_active_duplicate(self, client, seed_form, seed_module):
        """Restoring a link is refused when the same link is active again."""
        body = {"form_id": seed_form.id, "module_id": seed_module.id}
        first = client.post(self.BASE_URL, json=body).json()
        client.delete(f"{self.BASE_URL}/{first['id']}")
        client.post(self.BASE_URL, json=body)

        response = client.post(f"/api/admin/form-modules/{first['id']}/restore")
        assert response.status_code == 400


class TestCatalogEndpoints:
    """Permission, form and module catalogs."""

    def test_permission_requires_description(self, client):
        response = client.post("/api/security/permissions", json={"name": "Ver", "description": " "})
        assert response.status_code == 400

    def test_form_requires_description(self, client):
        response = client.post("/api/security/forms", json={"name": "Roles", "description": ""})
        assert response.status_code == 400

    def test_module_description_optional(self, client):
        response = client.post("/api/security/modules", json={"name": "Reportes"})
        assert response.status_code == 201
        assert response.json()["description"] is None
