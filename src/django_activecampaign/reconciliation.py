"""Contact list membership reconciliation."""

import logging
from collections.abc import Iterable

from django_activecampaign.backends import (
    ContactSnapshot,
    ListMembership,
    SubscriptionInstruction,
    SubscriptionStatus,
)
from django_activecampaign.exceptions import InvalidContactError

logger = logging.getLogger(__name__)


def reconcile(current: Iterable[ListMembership], target: Iterable[int]) -> dict[int, SubscriptionInstruction]:
    """
    Compute the instructions moving a contact from its current lists to the target lists.

    Every current list is unsubscribed, then every target list is subscribed,
    so a list found in both ends up active.

    Args:
        current: Lists the contact is subscribed to, in API order
        target: Ids of the lists the contact must end up subscribed to

    Returns:
        dict: One instruction per list id

    """
    instructions = {}

    for membership in current:
        instructions[membership.list_id] = SubscriptionInstruction(membership.list_id, SubscriptionStatus.UNSUBSCRIBED)

    for list_id in target:
        instructions[list_id] = SubscriptionInstruction(list_id, SubscriptionStatus.ACTIVE)

    return instructions


def encode_list_instructions(instructions: dict[int, SubscriptionInstruction]) -> dict[str, int]:
    """Encode instructions with the `p[<id>]` / `status[<id>]` keys of the contact_sync call."""
    payload = {}
    for list_id, instruction in instructions.items():
        payload[f"p[{list_id}]"] = list_id
        payload[f"status[{list_id}]"] = int(instruction.status)
    return payload


def apply_list_changes(contact: ContactSnapshot, target: Iterable[int], client) -> bool:
    """
    Send the list changes of a contact in a single contact_sync call.

    Args:
        contact: Contact with its current lists
        target: Ids of the lists the contact must end up subscribed to
        client: Object exposing `contact_sync(data) -> bool`

    Returns:
        bool: The success flag reported by the client

    Raises:
        InvalidContactError: If the contact has no email

    """
    if not contact.email:
        raise InvalidContactError("Cannot change the lists of a contact without email")

    instructions = reconcile(contact.lists, target)
    subscribed = sum(1 for i in instructions.values() if i.status is SubscriptionStatus.ACTIVE)
    logger.debug(
        "Changing lists of %s: %d subscribed, %d unsubscribed",
        contact.email,
        subscribed,
        len(instructions) - subscribed,
    )

    payload = encode_list_instructions(instructions)
    payload["email"] = contact.email
    return client.contact_sync(payload)
