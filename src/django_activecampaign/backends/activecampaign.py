"""ActiveCampaign marketing automation integration."""

import logging
from collections.abc import Iterable

from django_activecampaign.clients import ActiveCampaignClient
from django_activecampaign.exceptions import ActiveCampaignAPIError, InvalidContactError

from .base import BaseBackend

logger = logging.getLogger(__name__)


def is_success(response) -> bool:
    """Tell whether an API v1 response reports a success."""
    try:
        return bool(int(response.get("result_code") or 0))
    except (TypeError, ValueError):
        return False


def encode_tags(tags) -> dict[str, str]:
    """Encode tags as the indexed `tags[<n>]` form fields of the API."""
    return {f"tags[{index}]": tag for index, tag in enumerate(tags)}


class ActiveCampaignBackend(BaseBackend):
    """
    ActiveCampaign marketing automation integration.

    Handles:
    - Contact management and tagging
    - List subscriptions
    - Event tracking
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        account_id: str | None = None,
        event_key: str | None = None,
        timeout: int = 10,
    ):
        """Configure the ActiveCampaign backend."""
        self.client = ActiveCampaignClient(
            api_url, api_key, account_id=account_id, event_key=event_key, timeout=timeout
        )

    def get_client(self) -> ActiveCampaignClient:
        """Return the underlying API client."""
        return self.client

    def account_view(self) -> dict:
        """Return the account information."""
        return self.client.api("account_view")

    def create_contact(self, email: str, data: dict | None = None) -> bool:
        """Create a contact, `email` takes precedence over the one in `data`."""
        response = self.client.api("contact_add", data={**(data or {}), "email": email})
        return is_success(response)

    def add_tags_to_contact(self, contact_id, tags=()) -> bool:
        """Add one or many tags to a contact."""
        response = self.client.api("contact_tag_add", data={"id": contact_id, **encode_tags(tags)})
        return is_success(response)

    def remove_tags_from_contact(self, contact_id, tags=()) -> bool:
        """Remove one or many tags from a contact."""
        response = self.client.api("contact_tag_remove", data={"id": contact_id, **encode_tags(tags)})
        return is_success(response)

    def contact_list(self, ids="ALL") -> dict:
        """List contacts by ids, all of them by default."""
        if isinstance(ids, str) or not isinstance(ids, Iterable):
            ids = str(ids)
        else:
            ids = ",".join(str(contact_id) for contact_id in ids)
        return self.client.api("contact_list", params={"ids": ids})

    def _view(self, action, params):
        response = self.client.api(action, params=params)
        if not is_success(response):
            return None
        return response

    def contact_view(self, contact_id) -> dict | None:
        """Return a contact by id, None if it cannot be found."""
        return self._view("contact_view", {"id": contact_id})

    def contact_view_by_email(self, email: str) -> dict | None:
        """Return a contact by email, None if it cannot be found."""
        return self._view("contact_view_email", {"email": email})

    def contact_view_by_hash(self, contact_hash: str) -> dict | None:
        """Return a contact by hash, None if it cannot be found."""
        return self._view("contact_view_hash", {"hash": contact_hash})

    def contact_sync(self, data: dict) -> bool:
        """
        Create or update a contact.

        Transport errors are logged and reported as a failure, so callers
        only have to check the returned flag.
        """
        try:
            response = self.client.api("contact_sync", data=data)
        except ActiveCampaignAPIError as err:
            logger.error("Failed to sync contact %s: %s", data.get("email"), err)
            return False
        return is_success(response)

    def track_event_list(self) -> dict:
        """List the tracked events of the account."""
        return self.client.api_v2("track/event")

    def log_event(self, data: dict) -> dict:
        """Log a tracking event."""
        if not data.get("email") or not data.get("event"):
            raise InvalidContactError("Both email and event are required to log an event")
        return self.client.track_event(data["email"], data["event"], eventdata=data.get("eventdata"))
