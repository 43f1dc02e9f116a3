"""Organizer access gate."""

import logging

from src.core.config import get_settings
from src.core.store import KeyValueStore, get_store

logger = logging.getLogger(__name__)

ADMIN_FLAG_KEY = "is_admin"


class AdminService:
    """Shared-passphrase gate for the fulfillment and dashboard views.

    This is a convenience gate for a trusted volunteer tool, not a
    security boundary: one static passphrase, no sessions, no expiry.
    """

    def __init__(self, store: KeyValueStore | None = None) -> None:
        """Initialize admin service.

        Args:
            store: Optional key-value store for testing.
        """
        self.store = store if store is not None else get_store()
        self.settings = get_settings()

    def login(self, password: str) -> bool:
        """Unlock the organizer views if the passphrase matches exactly.

        Returns:
            bool: True on success. A failed attempt changes nothing.
        """
        if password != self.settings.admin_password:
            logger.warning("Rejected organizer login attempt")
            return False
        self.store.set(ADMIN_FLAG_KEY, True)
        logger.info("Organizer logged in")
        return True

    def logout(self) -> None:
        """Lock the organizer views."""
        self.store.set(ADMIN_FLAG_KEY, False)
        logger.info("Organizer logged out")

    def is_admin(self) -> bool:
        """Check whether the organizer views are unlocked."""
        return self.store.get(ADMIN_FLAG_KEY, False) is True
