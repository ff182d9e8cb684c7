"""ActiveCampaign HTTP clients classes."""

import json
import logging

import requests
from django.core.exceptions import ImproperlyConfigured

from django_activecampaign.exceptions import ActiveCampaignAPIError

logger = logging.getLogger(__name__)


class ActiveCampaignClient:
    """
    Client for the ActiveCampaign HTTP APIs.

    ActiveCampaign exposes several endpoints that do not share the same conventions:
    - API v1 (`/admin/api.php`), where the operation is given by the `api_action`
      parameter and the outcome by the `result_code` field of the response.
    - API v2 (`/2/...`), REST like, used for the event list.
    - The event tracking endpoint, hosted on another domain and authenticated
      with the account id and the event key instead of the API key.
    """

    tracking_url = "https://trackcmp.net/event"

    def __init__(self, api_url, api_key, account_id=None, event_key=None, timeout=10):
        """Require at a minimum api_url and api_key."""
        if not api_url or not api_key:
            raise ImproperlyConfigured(f"Could not instantiate {self.__class__.__name__}, some parameters are missing.")

        self.url = api_url.rstrip("/")
        self._api_key = api_key
        self._account_id = account_id
        self._event_key = event_key
        self._timeout = timeout

    @property
    def _auth_params(self):
        """Get the query parameters authenticating a v1 or v2 request."""
        return {"api_key": self._api_key, "api_output": "json"}

    def _request(self, method, url, **kwargs):
        """
        Send a request and decode its JSON body.

        The sent URL carries the API key, so errors only mention `url`, the
        status code or the exception class, and the requests error is not chained.
        """
        try:
            response = requests.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as err:
            raise ActiveCampaignAPIError(f"ActiveCampaign request to {url} failed: {err.__class__.__name__}") from None

        if not response.ok:
            raise ActiveCampaignAPIError(
                f"ActiveCampaign request to {url} failed with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            raise ActiveCampaignAPIError(f"ActiveCampaign request to {url} returned an invalid body") from None

    def api(self, action, params=None, data=None):
        """
        Call an API v1 action.

        The request is a GET unless form `data` is given, in which case it is a POST.
        """
        logger.debug("Calling ActiveCampaign API v1 action %s", action)
        return self._request(
            "POST" if data is not None else "GET",
            f"{self.url}/admin/api.php",
            params={**self._auth_params, "api_action": action, **(params or {})},
            data=data,
        )

    def api_v2(self, path, params=None):
        """Call an API v2 resource."""
        logger.debug("Calling ActiveCampaign API v2 resource %s", path)
        return self._request(
            "GET",
            f"{self.url}/2/{path.lstrip('/')}",
            params={**self._auth_params, **(params or {})},
        )

    def track_event(self, email, event, eventdata=None):
        """Send a tracking event for the visitor identified by `email`."""
        if not self._account_id or not self._event_key:
            raise ImproperlyConfigured("account_id and event_key are required to track events.")

        data = {
            "actid": self._account_id,
            "key": self._event_key,
            "event": event,
            "visit": json.dumps({"email": email}),
        }
        if eventdata is not None:
            data["eventdata"] = eventdata

        logger.debug("Tracking ActiveCampaign event %s", event)
        return self._request("POST", self.tracking_url, data=data)
