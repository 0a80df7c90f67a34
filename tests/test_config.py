"""
Tests for settings and VmwareService.from_settings().
"""

import pytest

from vmware_client.config import Settings, get_settings
from vmware_client.services.auth import (
    BearerTokenAuthenticator,
    IAMAuthenticator,
    NoAuthAuthenticator,
)
from vmware_client.services.vmware_service import DEFAULT_SERVICE_URL, VmwareService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SERVICE_URL", "API_VERSION", "IAM_APIKEY", "BEARER_TOKEN",
                 "REQUEST_TIMEOUT", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.service_url == DEFAULT_SERVICE_URL
    assert settings.api_version == "2024-05-01"
    assert settings.iam_url == "https://iam.cloud.ibm.com"
    assert settings.user_agent == "vmware-client/1.0.0"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_URL", "https://api.eu-de.vmware.cloud.ibm.com/v1")
    monkeypatch.setenv("REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("log_format", "json")

    settings = Settings(_env_file=None)

    assert settings.service_url == "https://api.eu-de.vmware.cloud.ibm.com/v1"
    assert settings.request_timeout == 5.0
    assert settings.log_format == "json"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_from_settings_prefers_iam() -> None:
    settings = Settings(_env_file=None, iam_apikey="key", bearer_token="token",
                        api_version="2023-01-01")

    service = VmwareService.from_settings(settings)

    assert isinstance(service.authenticator, IAMAuthenticator)
    assert service.version == "2023-01-01"
    assert service.service_url == DEFAULT_SERVICE_URL


def test_from_settings_bearer_token() -> None:
    settings = Settings(_env_file=None, bearer_token="token")

    service = VmwareService.from_settings(settings)

    assert isinstance(service.authenticator, BearerTokenAuthenticator)


def test_from_settings_without_credentials() -> None:
    service = VmwareService.from_settings(Settings(_env_file=None))

    assert isinstance(service.authenticator, NoAuthAuthenticator)
