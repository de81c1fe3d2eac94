"""
Property-based testing with Hypothesis.
"""

import string
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from rest_api.models import Role
from rest_api.repositories import BaseRepository
from rest_api.routers._common.pagination import Pagination, get_pagination
from rest_api.services.audit import compute_changes
from rest_api.services.base_service import as_utc
from rest_api.services.deletion import DeleteStrategyResolver, DeleteType
from shared.config.constants import Limits
from shared.security.password import hash_password, verify_password


class TestDeleteResolutionProperties:
    @given(name=st.text(max_size=20))
    def test_only_known_names_resolve(self, name):
        """Property: a string resolves only when it is a DeleteType value."""
        resolver = DeleteStrategyResolver(Role)
        if name in {t.value for t in DeleteType}:
            assert resolver.resolve(DeleteType(name)).delete_type.value == name
        else:
            with pytest.raises(NotImplementedError):
                resolver.resolve(name)

    @given(
        entity_id=st.integers(min_value=1, max_value=10_000),
        delete_type=st.sampled_from(list(DeleteType)),
    )
    @settings(max_examples=25, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_missing_ids_never_delete(self, entity_id, delete_type, db_session):
        """Property: on an empty table every strategy reports False."""
        strategy = DeleteStrategyResolver(Role).resolve(delete_type)
        assert strategy.delete(entity_id, BaseRepository(Role, db_session)) is False


class TestPaginationProperties:
    @given(
        limit=st.integers(min_value=1, max_value=Limits.MAX_PAGE_SIZE),
        offset=st.integers(min_value=0, max_value=20),
    )
    @settings(max_examples=25, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_page_size_matches_remaining_rows(self, limit, offset, db_session):
        """Property: a page holds min(limit, total - offset) rows, never fewer."""
        repo = BaseRepository(Role, db_session)
        if repo.count() == 0:
            for index in range(7):
                db_session.add(Role(name=f"Rol {index}", is_active=True))
            db_session.commit()

        total = repo.count()
        page = repo.find_all(limit=limit, offset=offset)
        assert len(page) == max(0, min(limit, total - offset))
        assert [role.id for role in page] == sorted(role.id for role in page)

    def test_dependency_returns_values(self):
        pagination = get_pagination(limit=5, offset=10)
        assert pagination == Pagination(limit=5, offset=10)


class TestAuditProperties:
    @given(values=st.dictionaries(st.text(max_size=5), st.integers(), max_size=8))
    def test_no_changes_against_itself(self, values):
        assert compute_changes(values, dict(values)) == {}

    @given(
        old=st.dictionaries(st.sampled_from("abcdef"), st.integers(), max_size=6),
        new=st.dictionaries(st.sampled_from("abcdef"), st.integers(), max_size=6),
    )
    def test_changes_are_exact_differences(self, old, new):
        changes = compute_changes(old, new)
        for key in set(old) | set(new):
            if old.get(key) != new.get(key):
                assert changes[key] == {"old": old.get(key), "new": new.get(key)}
            else:
                assert key not in changes


class TestDateProperties:
    @given(
        start=st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2100, 1, 1)),
        minutes=st.integers(min_value=0, max_value=60 * 24 * 30),
    )
    def test_naive_and_aware_compare_as_utc(self, start, minutes):
        """Property: a naive value compares like the same wall time in UTC."""
        end = start + timedelta(minutes=minutes)
        assert as_utc(start) <= as_utc(end.replace(tzinfo=timezone.utc))
        assert as_utc(start).tzinfo is not None


class TestPasswordProperties:
    @given(password=st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=30))
    @settings(max_examples=10, deadline=None)
    def test_hash_verifies_only_original(self, password):
        hashed = hash_password(password)
        assert hashed != password
        assert verify_password(password, hashed)
        assert not verify_password(password + "x", hashed)
