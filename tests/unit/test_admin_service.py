"""Unit tests for AdminService."""

import pytest

from src.core.store import InMemoryStore
from src.services.admin_service import AdminService


@pytest.fixture
def admin_service(store: InMemoryStore) -> AdminService:
    """Create AdminService on an empty in-memory store."""
    return AdminService(store=store)


class TestLogin:
    """Tests for login and logout."""

    def test_correct_password_unlocks(self, admin_service: AdminService, store: InMemoryStore) -> None:
        """Test that the shared passphrase sets the persisted flag."""
        assert admin_service.login("admin123") is True
        assert admin_service.is_admin() is True
        assert store.get("is_admin") is True

    def test_wrong_password_has_no_side_effects(
        self, admin_service: AdminService, store: InMemoryStore
    ) -> None:
        """Test that a failed login returns False and writes nothing."""
        assert admin_service.login("Admin123") is False
        assert admin_service.is_admin() is False
        assert store.get("is_admin") is None

    def test_match_is_exact(self, admin_service: AdminService) -> None:
        """Test that surrounding whitespace is not trimmed."""
        assert admin_service.login(" admin123") is False

    def test_logout_clears_flag(self, admin_service: AdminService) -> None:
        """Test that logout locks the views again."""
        admin_service.login("admin123")

        admin_service.logout()

        assert admin_service.is_admin() is False

    def test_non_boolean_flag_is_not_admin(self) -> None:
        """Test that a malformed flag does not unlock the views."""
        assert AdminService(store=InMemoryStore({"is_admin": "yes"})).is_admin() is False
