"""Custom value classes for django-configurations."""

import os

from configurations import values


class ActiveCampaignValue(values.Value):
    """
    Class used to build the ActiveCampaign setting from environment variables.

    For a setting named `ACTIVECAMPAIGN` and the default prefix, the backend is
    read from `DJANGO_ACTIVECAMPAIGN_BACKEND` and each backend parameter from
    `DJANGO_ACTIVECAMPAIGN_{PARAMETER}` (`API_URL`, `API_KEY`, `ACCOUNT_ID`,
    `EVENT_KEY`, `TIMEOUT`).

    Secret parameters are set either (in order of priority):
    * The content of the file referenced by `DJANGO_ACTIVECAMPAIGN_{PARAMETER}_{file_suffix}`.
    * The value of `DJANGO_ACTIVECAMPAIGN_{PARAMETER}`.
    * The parameter of the default value.
    """

    file_suffix = "FILE"
    backend = "django_activecampaign.backends.activecampaign.ActiveCampaignBackend"
    parameters = ("api_url", "api_key", "account_id", "event_key", "timeout")
    secret_parameters = ("api_key", "event_key")

    def __init__(self, *args, **kwargs):
        """Initialize the value."""
        super().__init__(*args, **kwargs)
        if "file_suffix" in kwargs:
            self.file_suffix = kwargs["file_suffix"]

    def _read_file(self, filename):
        if not os.path.exists(filename):
            raise ValueError(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().removesuffix("\n")
        except (OSError, PermissionError) as err:
            raise ValueError(f"Path {filename!r} cannot be read: {err!r}") from err

    def _parameter_from_environ(self, full_environ_name, parameter):
        environ_name = f"{full_environ_name}_{parameter.upper()}"
        environ_name_file = f"{environ_name}_{self.file_suffix}"
        if parameter in self.secret_parameters and environ_name_file in os.environ:
            return self._read_file(os.environ[environ_name_file])
        return os.environ.get(environ_name)

    def setup(self, name):
        """Get the setting from environment variables."""
        default = self.default or {}
        value = {
            "BACKEND": default.get("BACKEND", self.backend),
            "PARAMETERS": dict(default.get("PARAMETERS", {})),
        }
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            value["BACKEND"] = os.environ.get(f"{full_environ_name}_BACKEND", value["BACKEND"])
            for parameter in self.parameters:
                raw = self._parameter_from_environ(full_environ_name, parameter)
                if raw is None:
                    continue
                value["PARAMETERS"][parameter] = int(raw) if parameter == "timeout" else raw
            if self.environ_required and not value["PARAMETERS"].get("api_key"):
                raise ValueError(
                    f"Value {name!r} requires an API key to be set as the environment variable "
                    f"{full_environ_name + '_API_KEY_' + self.file_suffix!r} or {full_environ_name + '_API_KEY'!r}"
                )
        self.value = value
        return value
