"""Dummy ActiveCampaign backend."""

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy ActiveCampaign backend doing nothing."""

    def get_client(self):
        """Return no client."""
        return None

    def account_view(self) -> dict:
        """Return the account information."""
        return {}

    def create_contact(self, email: str, data: dict | None = None) -> bool:
        """Create a contact."""
        return False

    def add_tags_to_contact(self, contact_id, tags=()) -> bool:
        """Add tags to a contact."""
        return False

    def remove_tags_from_contact(self, contact_id, tags=()) -> bool:
        """Remove tags from a contact."""
        return False

    def contact_list(self, ids="ALL") -> dict:
        """List contacts."""
        return {}

    def contact_view(self, contact_id) -> dict | None:
        """Return a contact by id."""
        return None

    def contact_view_by_email(self, email: str) -> dict | None:
        """Return a contact by email."""
        return None

    def contact_view_by_hash(self, contact_hash: str) -> dict | None:
        """Return a contact by hash."""
        return None

    def contact_sync(self, data: dict) -> bool:
        """Create or update a contact."""
        return False

    def track_event_list(self) -> dict:
        """List the tracked events."""
        return {}

    def log_event(self, data: dict) -> dict:
        """Log a tracking event."""
        return {}
