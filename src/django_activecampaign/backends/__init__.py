"""ActiveCampaign backends module."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum

from django_activecampaign.exceptions import InvalidContactError


class SubscriptionStatus(IntEnum):
    """Status of a contact on a list, valued with the API status codes."""

    ACTIVE = 1
    UNSUBSCRIBED = 2


@dataclass(frozen=True)
class ListMembership:
    """One list a contact is currently subscribed to."""

    list_id: int

    @classmethod
    def from_api_response(cls, data: Mapping) -> "ListMembership":
        """Build a membership from a list record of a contact_view response."""
        return cls(list_id=int(data["listid"]))


@dataclass(frozen=True)
class ContactSnapshot:
    """Read-only view of a contact and its current lists."""

    email: str
    lists: tuple[ListMembership, ...] = field(default_factory=tuple)
    id: int | None = None

    @classmethod
    def from_api_response(cls, data: Mapping) -> "ContactSnapshot":
        """
        Build a snapshot from a contact_view response.

        The API returns `lists` either as an object keyed by list id or as an
        array of list records, both are accepted and their order is kept.
        """
        email = data.get("email")
        if not email:
            raise InvalidContactError("Contact has no email")

        raw_lists = data.get("lists") or []
        if isinstance(raw_lists, Mapping):
            raw_lists = raw_lists.values()

        contact_id = data.get("id")
        return cls(
            email=email,
            lists=tuple(ListMembership.from_api_response(item) for item in raw_lists),
            id=int(contact_id) if contact_id not in (None, "") else None,
        )


@dataclass(frozen=True)
class SubscriptionInstruction:
    """Subscription state to send to the API for one list."""

    list_id: int
    status: SubscriptionStatus
