"""ActiveCampaign backend base module."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from django_activecampaign.backends import ContactSnapshot
from django_activecampaign.reconciliation import apply_list_changes


class BaseBackend(ABC):
    """Base class for all ActiveCampaign backends."""

    @abstractmethod
    def get_client(self):
        """Return the underlying API client."""

    @abstractmethod
    def account_view(self) -> dict:
        """Return the account information."""

    @abstractmethod
    def create_contact(self, email: str, data: dict | None = None) -> bool:
        """
        Create a contact.

        Args:
            email: Email of the new contact
            data: Additional contact fields, see the contact_add API call

        Returns:
            bool: Whether the API reported a success

        """

    @abstractmethod
    def add_tags_to_contact(self, contact_id, tags: Iterable[str] = ()) -> bool:
        """Add one or many tags to a contact."""

    @abstractmethod
    def remove_tags_from_contact(self, contact_id, tags: Iterable[str] = ()) -> bool:
        """Remove one or many tags from a contact."""

    @abstractmethod
    def contact_list(self, ids="ALL") -> dict:
        """List contacts by ids, all of them by default."""

    @abstractmethod
    def contact_view(self, contact_id) -> dict | None:
        """Return a contact by id, None if it cannot be found."""

    @abstractmethod
    def contact_view_by_email(self, email: str) -> dict | None:
        """Return a contact by email, None if it cannot be found."""

    @abstractmethod
    def contact_view_by_hash(self, contact_hash: str) -> dict | None:
        """Return a contact by hash, None if it cannot be found."""

    @abstractmethod
    def contact_sync(self, data: dict) -> bool:
        """
        Create or update a contact.

        Args:
            data: Contact fields, must contain `email`

        Returns:
            bool: Whether the API reported a success, False on transport errors

        """

    @abstractmethod
    def track_event_list(self) -> dict:
        """List the tracked events of the account."""

    @abstractmethod
    def log_event(self, data: dict) -> dict:
        """
        Log a tracking event.

        Args:
            data: Must contain `email` and `event`, may contain `eventdata`

        Returns:
            dict: Tracking endpoint response

        Raises:
            InvalidContactError: If `email` or `event` is missing

        """

    def contact_change_lists(self, contact: ContactSnapshot | Mapping, list_ids: Iterable[int]) -> bool:
        """
        Subscribe a contact to exactly the given lists.

        Lists the contact is on but not in `list_ids` are unsubscribed.

        Args:
            contact: Contact snapshot or contact_view response
            list_ids: Ids of the lists the contact must end up subscribed to

        Returns:
            bool: Whether the contact_sync call succeeded

        """
        if not isinstance(contact, ContactSnapshot):
            contact = ContactSnapshot.from_api_response(contact)
        return apply_list_changes(contact, list_ids, self)
