"""
Tests for the startup seed.
"""

from sqlalchemy import func, select

from rest_api.models import Form, Permission, Role, RoleFormPermission, RoleUser, User
from rest_api.seed import ADMIN_ROLE_NAME, seed
from shared.config.settings import settings
from shared.security.password import verify_password


class TestSeed:
    def test_creates_admin_with_full_access(self, db_session):
        seed(db_session)

        admin = db_session.scalar(select(User).where(User.username == settings.seed_admin_username))
        assert admin is not None
        assert verify_password(settings.seed_admin_password, admin.password)

        role = db_session.scalar(select(Role).where(Role.name == ADMIN_ROLE_NAME))
        grant = db_session.scalar(
            select(RoleUser).where(RoleUser.role_id == role.id, RoleUser.user_id == admin.id)
        )
        assert grant is not None

        forms = db_session.scalar(select(func.count()).select_from(Form))
        permissions = db_session.scalar(select(func.count()).select_from(Permission))
        granted = db_session.scalar(
            select(func.count()).select_from(RoleFormPermission).where(RoleFormPermission.role_id == role.id)
        )
        assert granted == forms * permissions

    def test_idempotent(self, db_session):
        seed(db_session)
        counts = [
            db_session.scalar(select(func.count()).select_from(model))
            for model in (User, Role, Form, Permission, RoleFormPermission)
        ]

        seed(db_session)
        assert counts == [
            db_session.scalar(select(func.count()).select_from(model))
            for model in (User, Role, Form, Permission, RoleFormPermission)
        ]
