"""ActiveCampaign exceptions module."""


class ActiveCampaignError(Exception):
    """Base exception for all ActiveCampaign exceptions."""


class ActiveCampaignInvalidBackendError(ActiveCampaignError):
    """Exception raised when the backend is invalid."""


class ActiveCampaignAPIError(ActiveCampaignError):
    """Exception raised when a call to the ActiveCampaign API fails."""

    def __init__(self, message, status_code=None):
        """Keep the HTTP status code of the failed response, if any."""
        super().__init__(message)
        self.status_code = status_code


class InvalidContactError(ActiveCampaignError, ValueError):
    """Exception raised when the contact data given by the caller is unusable."""
