"""Tests for ActiveCampaignValue."""

import os

import pytest

from django_activecampaign.configuration.values import ActiveCampaignValue

FILE_API_KEY_PATH = os.path.join(os.path.dirname(os.path.realpath(__file__)), "test_api_key")
DEFAULT_BACKEND = "django_activecampaign.backends.activecampaign.ActiveCampaignBackend"


@pytest.fixture(autouse=True)
def _mock_clear_env(monkeypatch):
    """Reset environment variables."""
    for name in ("BACKEND", "API_URL", "API_KEY", "API_KEY_FILE", "API_KEY_PATH", "ACCOUNT_ID", "EVENT_KEY", "TIMEOUT"):
        monkeypatch.delenv(f"DJANGO_ACTIVECAMPAIGN_{name}", raising=False)


@pytest.fixture
def _mock_activecampaign_env(monkeypatch):
    """Set the ActiveCampaign parameters in environment variables."""
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_API_URL", "https://example.api-us1.com")
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_API_KEY", "TestKeyInEnv")
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_ACCOUNT_ID", "123456")
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_TIMEOUT", "30")


@pytest.fixture
def _mock_api_key_file_env(monkeypatch):
    """Set the API key path in environment variable."""
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_API_KEY_FILE", FILE_API_KEY_PATH)


def test_activecampaign_value_default():
    """Test call with no environment variable."""
    value = ActiveCampaignValue()
    assert value.setup("ACTIVECAMPAIGN") == {"BACKEND": DEFAULT_BACKEND, "PARAMETERS": {}}


def test_activecampaign_value_custom_default():
    """Test the default value is used when no environment variable is set."""
    default = {
        "BACKEND": "django_activecampaign.backends.dummy.DummyBackend",
        "PARAMETERS": {"api_key": "DefaultKey"},
    }
    value = ActiveCampaignValue(default)
    assert value.setup("ACTIVECAMPAIGN") == default


@pytest.mark.usefixtures("_mock_activecampaign_env")
def test_activecampaign_value_in_env():
    """Test call with parameters in environment variables."""
    value = ActiveCampaignValue({"PARAMETERS": {"api_key": "DefaultKey", "event_key": "DefaultEventKey"}})
    assert value.setup("ACTIVECAMPAIGN") == {
        "BACKEND": DEFAULT_BACKEND,
        "PARAMETERS": {
            "api_url": "https://example.api-us1.com",
            "api_key": "TestKeyInEnv",
            "account_id": "123456",
            "event_key": "DefaultEventKey",
            "timeout": 30,
        },
    }


@pytest.mark.usefixtures("_mock_activecampaign_env", "_mock_api_key_file_env")
def test_activecampaign_value_api_key_in_file():
    """Test the API key file takes precedence over the API key variable."""
    value = ActiveCampaignValue()
    assert value.setup("ACTIVECAMPAIGN")["PARAMETERS"]["api_key"] == "TestKeyInFile"


def test_activecampaign_value_api_key_in_file_suffix(monkeypatch):
    """Test call with a non default `file_suffix`."""
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_API_KEY_PATH", FILE_API_KEY_PATH)
    value = ActiveCampaignValue(file_suffix="PATH")
    assert value.setup("ACTIVECAMPAIGN")["PARAMETERS"]["api_key"] == "TestKeyInFile"


def test_activecampaign_value_missing_file(monkeypatch):
    """Test an API key file which does not exist."""
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_API_KEY_FILE", "/nonexistent/api_key")
    value = ActiveCampaignValue()
    with pytest.raises(ValueError, match="does not exist"):
        value.setup("ACTIVECAMPAIGN")


def test_activecampaign_value_backend_in_env(monkeypatch):
    """Test the backend can be chosen from the environment."""
    monkeypatch.setenv("DJANGO_ACTIVECAMPAIGN_BACKEND", "django_activecampaign.backends.dummy.DummyBackend")
    value = ActiveCampaignValue()
    assert value.setup("ACTIVECAMPAIGN")["BACKEND"] == "django_activecampaign.backends.dummy.DummyBackend"


def test_activecampaign_value_required():
    """Test a required value without API key raises an error."""
    value = ActiveCampaignValue(environ_required=True)
    with pytest.raises(ValueError, match="requires an API key"):
        value.setup("ACTIVECAMPAIGN")
