"""
Configuration for the Zendesk REST client.

Settings come from the environment unless passed explicitly:

    ZENDESK_URL          full base URL (takes precedence over the subdomain)
    ZENDESK_SUBDOMAIN    account subdomain, e.g. ``acme`` for acme.zendesk.com
    ZENDESK_EMAIL        agent email used for API token authentication
    ZENDESK_API_TOKEN    API token
    ZENDESK_TIMEOUT      request timeout in seconds (default 30)
"""

import os
from dataclasses import dataclass
from typing import Optional

from zendesk_rest.exceptions import ConfigurationError

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    base_url: str
    email: str
    api_token: str
    timeout: float = DEFAULT_TIMEOUT


def build_base_url(subdomain: Optional[str] = None, url: Optional[str] = None) -> str:
    """
    Resolve the API base URL from an explicit URL or a subdomain.

    Args:
        subdomain: Zendesk account subdomain
        url: Full base URL, used as-is apart from a trailing slash

    Returns:
        str: Base URL without a trailing slash
    """
    if url:
        return url.rstrip("/")
    if subdomain:
        return f"https://{subdomain}.zendesk.com"
    raise ConfigurationError("Either ZENDESK_URL or ZENDESK_SUBDOMAIN must be set")


def load_settings(
    subdomain: Optional[str] = None,
    email: Optional[str] = None,
    api_token: Optional[str] = None,
    url: Optional[str] = None,
    timeout: Optional[float] = None
) -> Settings:
    """
    Build settings from explicit arguments, falling back to the environment.

    Returns:
        Settings: The resolved settings

    Raises:
        ConfigurationError: If a required value is missing or malformed
    """
    base_url = build_base_url(
        subdomain or os.getenv("ZENDESK_SUBDOMAIN"),
        url or os.getenv("ZENDESK_URL"),
    )

    email = email or os.getenv("ZENDESK_EMAIL")
    api_token = api_token or os.getenv("ZENDESK_API_TOKEN")
    if not email or not api_token:
        raise ConfigurationError("ZENDESK_EMAIL and ZENDESK_API_TOKEN must be set")

    if timeout is None:
        raw_timeout = os.getenv("ZENDESK_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"Invalid ZENDESK_TIMEOUT: {raw_timeout!r}") from None

    return Settings(base_url=base_url, email=email, api_token=api_token, timeout=timeout)
