"""
Tests for configuration checks run at startup.
"""

import pytest
from fastapi.testclient import TestClient

from rest_api.main import app
from shared.config.settings import Settings, settings

SAFE_PRODUCTION = {
    "environment": "production",
    "debug": False,
    "allowed_origins": "https://admin.example.com",
    "seed_admin_password": "otra-clave-segura",
}


class TestProductionValidation:
    def test_safe_production_config(self):
        assert Settings(**SAFE_PRODUCTION).validate_production_settings() == []

    def test_debug_refused(self):
        errors = Settings(**{**SAFE_PRODUCTION, "debug": True}).validate_production_settings()
        assert len(errors) == 1
        assert "DEBUG" in errors[0]

    def test_missing_origins_refused(self):
        errors = Settings(**{**SAFE_PRODUCTION, "allowed_origins": ""}).validate_production_settings()
        assert len(errors) == 1
        assert "ALLOWED_ORIGINS" in errors[0]

    def test_default_seed_password_refused(self):
        config = Settings(**{**SAFE_PRODUCTION, "seed_on_startup": True, "seed_admin_password": "admin123"})
        errors = config.validate_production_settings()
        assert len(errors) == 1
        assert "SEED_ADMIN_PASSWORD" in errors[0]

    def test_default_seed_password_allowed_without_seeding(self):
        config = Settings(**{**SAFE_PRODUCTION, "seed_on_startup": False, "seed_admin_password": "admin123"})
        assert config.validate_production_settings() == []

    def test_other_environments_not_checked(self):
        config = Settings(environment="development", debug=True, allowed_origins="")
        assert config.validate_production_settings() == []

    def test_startup_refuses_insecure_production(self, monkeypatch):
        monkeypatch.setattr(settings, "environment", "production")
        monkeypatch.setattr(settings, "debug", True)

        with pytest.raises(RuntimeError, match="DEBUG"):
            with TestClient(app):
                pass
