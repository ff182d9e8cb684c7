"""ActiveCampaign integration for Django."""

from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.functional import LazyObject, empty

from .handler import ActiveCampaignHandler


class DefaultActiveCampaign(LazyObject):
    """Proxy to the configured ActiveCampaign backend, built on first attribute access."""

    def _setup(self):
        self._wrapped = activecampaign_handler()


activecampaign_handler = ActiveCampaignHandler()
activecampaign = DefaultActiveCampaign()


@receiver(setting_changed)
def reset_activecampaign(*, setting, **kwargs):
    """Rebuild the backend when the ACTIVECAMPAIGN setting is overridden."""
    if setting == "ACTIVECAMPAIGN":
        activecampaign_handler.reset()
        activecampaign._wrapped = empty
