"""Fixtures for the test suite."""

import pytest

from django_activecampaign.backends.activecampaign import ActiveCampaignBackend

API_URL = "https://example.api-us1.com"


@pytest.fixture(name="activecampaign_backend")
def fixture_activecampaign_backend():
    """Generate an ActiveCampaign backend pointing to a fake account."""
    return ActiveCampaignBackend(
        api_url=API_URL,
        api_key="test-api-key",
        account_id="123456",
        event_key="test-event-key",
        timeout=5,
    )


@pytest.fixture(name="contact_view_response")
def fixture_contact_view_response():
    """Return a contact_view response of a contact subscribed to lists 3 and 4."""
    return {
        "id": "42",
        "email": "test@example.com",
        "first_name": "Test",
        "lists": {
            "3": {"listid": "3", "status": "1"},
            "4": {"listid": "4", "status": "1"},
        },
        "result_code": 1,
        "result_message": "Success: Something is returned",
    }
