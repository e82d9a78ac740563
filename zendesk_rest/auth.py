"""
Authentication for the Zendesk REST API.

Zendesk API tokens are sent as HTTP basic auth with the user name
``{email}/token`` and the token as password.
"""

import logging
from typing import Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

from zendesk_rest.monitoring import timed_api_call

logger = logging.getLogger(__name__)

CURRENT_USER_PATH = "/api/v2/users/me.json"


class ZendeskAuth:
    """API token credentials for a Zendesk account."""

    def __init__(self, email: str, api_token: str):
        self.email = email
        self.api_token = api_token

    @property
    def username(self) -> str:
        return f"{self.email}/token"

    def get_auth_object(self) -> HTTPBasicAuth:
        """
        Build the ``requests`` auth object for these credentials.

        Returns:
            HTTPBasicAuth: Basic auth using the API token scheme
        """
        return HTTPBasicAuth(self.username, self.api_token)

    @timed_api_call("authentication")
    def validate_credentials(self, http) -> Tuple[bool, Optional[str]]:
        """
        Check the credentials by fetching the current user.

        Zendesk answers ``/users/me`` for anonymous callers too, so a
        response without a user id counts as a rejection.

        Args:
            http: Transport the credentials are attached to

        Returns:
            Tuple[bool, Optional[str]]: (is_valid, error message)
        """
        try:
            response = http.get(CURRENT_USER_PATH)
        except requests.RequestException as e:
            logger.error("Credential check failed: %s", e)
            return False, str(e)

        if response.status_code != 200:
            return False, f"{response.status_code} - {response.text}"

        try:
            user = response.json().get("user") or {}
        except ValueError:
            return False, "Invalid JSON in authentication response"

        if not user.get("id"):
            return False, "Credentials were not accepted (anonymous user returned)"

        logger.info("Authenticated as %s", user.get("email", self.email))
        return True, None
