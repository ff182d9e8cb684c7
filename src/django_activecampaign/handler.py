"""Build the ActiveCampaign backend from the project settings."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from django_activecampaign.backends.base import BaseBackend
from django_activecampaign.exceptions import ActiveCampaignInvalidBackendError


def load_backend_class(path: str) -> type[BaseBackend]:
    """Import a backend class from its dotted path and check it is a backend."""
    try:
        klass = import_string(path)
    except ImportError as e:
        raise ActiveCampaignInvalidBackendError(f"Could not find backend {path!r}: {e}") from e

    if not isinstance(klass, type) or not issubclass(klass, BaseBackend):
        raise ActiveCampaignInvalidBackendError(f"{path!r} is not a subclass of {BaseBackend.__qualname__}")
    return klass


class ActiveCampaignHandler:
    """
    Hold the backend configured by `settings.ACTIVECAMPAIGN`.

    An explicit `config` mapping, shaped like the setting, takes precedence
    over the settings. The backend is built on the first call and kept until
    `reset` is called.
    """

    def __init__(self, config=None):
        """Initialize the handler without building the backend."""
        self._config = config
        self._instance = None

    def get_config(self) -> dict:
        """Return a validated copy of the backend configuration."""
        config = self._config
        if config is None:
            config = getattr(settings, "ACTIVECAMPAIGN", None)
        if not config:
            raise ImproperlyConfigured("settings.ACTIVECAMPAIGN is not configured")
        if not config.get("BACKEND"):
            raise ImproperlyConfigured("settings.ACTIVECAMPAIGN must define a BACKEND dotted path")
        return dict(config)

    def __call__(self) -> BaseBackend:
        """Return the backend, building it on first use."""
        if self._instance is None:
            config = self.get_config()
            klass = load_backend_class(config["BACKEND"])
            self._instance = klass(**config.get("PARAMETERS", {}))
        return self._instance

    def reset(self):
        """Forget the built backend so the next call reads the configuration again."""
        self._instance = None
