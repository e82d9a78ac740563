import pytest

from zendesk_rest.client import ZendeskClient
from zendesk_rest.config import DEFAULT_TIMEOUT, load_settings
from zendesk_rest.exceptions import ConfigurationError

ENV_VARS = ["ZENDESK_URL", "ZENDESK_SUBDOMAIN", "ZENDESK_EMAIL", "ZENDESK_API_TOKEN", "ZENDESK_TIMEOUT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_EMAIL", "agent@example.com")
    monkeypatch.setenv("ZENDESK_API_TOKEN", "secret")

    settings = load_settings()

    assert settings.base_url == "https://acme.zendesk.com"
    assert settings.email == "agent@example.com"
    assert settings.api_token == "secret"
    assert settings.timeout == DEFAULT_TIMEOUT


def test_url_wins_over_subdomain(monkeypatch):
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_URL", "https://support.acme.test/")
    monkeypatch.setenv("ZENDESK_TIMEOUT", "5")

    settings = load_settings(email="a@example.com", api_token="t")

    assert settings.base_url == "https://support.acme.test"
    assert settings.timeout == 5.0


def test_missing_subdomain():
    with pytest.raises(ConfigurationError):
        load_settings(email="a@example.com", api_token="t")


def test_missing_credentials():
    with pytest.raises(ConfigurationError):
        load_settings(subdomain="acme")


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("ZENDESK_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError):
        load_settings(subdomain="acme", email="a@example.com", api_token="t")


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("ZENDESK_SUBDOMAIN", "acme")
    monkeypatch.setenv("ZENDESK_EMAIL", "agent@example.com")
    monkeypatch.setenv("ZENDESK_API_TOKEN", "secret")

    with ZendeskClient.from_env(timeout=3) as client:
        assert client.http.base_url == "https://acme.zendesk.com"
        assert client.http.timeout == 3
        assert client.users.http is client.http
        assert client.tickets.http is client.http
        assert client.job_statuses.http is client.http
