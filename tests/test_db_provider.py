"""
Tests for per-request database provider selection.
"""

import pytest

from shared.config.settings import settings
from shared.infrastructure.db import get_db, get_engine, get_sessionmaker, resolve_provider
from shared.utils.exceptions import ValidationError


class TestResolveProvider:
    def test_default_provider(self):
        assert resolve_provider(None) == settings.default_db_provider

    @pytest.mark.parametrize("raw, expected", [
        ("postgresql", "postgresql"),
        ("MySQL", "mysql"),
        (" sqlserver ", "sqlserver"),
    ])
    def test_known_providers(self, raw, expected):
        assert resolve_provider(raw) == expected

    def test_unknown_provider(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_provider("oracle")
        assert exc_info.value.status_code == 400


class TestGetDbDependency:
    def test_unknown_header_fails_before_connecting(self):
        """An unsupported X-DB-Provider value never reaches an engine."""
        with pytest.raises(ValidationError):
            next(get_db(x_db_provider="oracle"))

    def test_unknown_header_returns_400(self):
        """Without the test override the header is validated per request."""
        from fastapi.testclient import TestClient

        from rest_api.main import app

        with TestClient(app) as raw_client:
            response = raw_client.get(
                "/api/security/roles", headers={"X-DB-Provider": "oracle"}
            )
        assert response.status_code == 400
        assert "oracle" in response.json()["detail"]


class TestEngineCache:
    def test_one_engine_per_normalized_provider(self):
        """Spelling variants of the same provider share one connection pool."""
        default = settings.default_db_provider
        engine = get_engine(None)
        assert get_engine(default.upper()) is engine
        assert get_engine(f" {default} ") is engine
        assert get_sessionmaker(default.title()) is get_sessionmaker(None)
