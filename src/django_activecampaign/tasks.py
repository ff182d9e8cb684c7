"""ActiveCampaign tasks module."""

import logging

from celery import shared_task

from django_activecampaign import activecampaign

logger = logging.getLogger(__name__)


@shared_task
def contact_change_lists(email: str, list_ids: list[int]):
    """Subscribe the contact with this email to exactly the given lists."""
    contact = activecampaign.contact_view_by_email(email)
    if contact is None:
        logger.warning("Contact %s not found, lists left unchanged", email)
        return False
    return activecampaign.contact_change_lists(contact, list_ids)


@shared_task
def log_event(email: str, event: str, eventdata: str | None = None):
    """Log a tracking event for a contact."""
    data = {"email": email, "event": event}
    if eventdata is not None:
        data["eventdata"] = eventdata
    return activecampaign.log_event(data)
