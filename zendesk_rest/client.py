"""
Entry point tying the transport, credentials and resource clients together.
"""

from typing import Optional

from zendesk_rest.auth import ZendeskAuth
from zendesk_rest.config import Settings, load_settings
from zendesk_rest.http_client import HTTPClient
from zendesk_rest.resources import JobStatuses, Tickets, Users


class ZendeskClient:
    """
    Client for one Zendesk account.

    Example:
        client = ZendeskClient.from_env()
        for user in client.users.iter_all():
            print(user.name)
    """

    def __init__(self, settings: Settings, http: Optional[HTTPClient] = None):
        self.settings = settings
        self.auth = ZendeskAuth(settings.email, settings.api_token)
        self.http = http or HTTPClient(
            settings.base_url,
            auth=self.auth.get_auth_object(),
            timeout=settings.timeout,
        )

        self.users = Users(self.http)
        self.tickets = Tickets(self.http)
        self.job_statuses = JobStatuses(self.http)

    @classmethod
    def from_env(cls, **overrides) -> "ZendeskClient":
        """Build a client from ``ZENDESK_*`` environment variables and keyword overrides."""
        return cls(load_settings(**overrides))

    def validate_credentials(self):
        return self.auth.validate_credentials(self.http)

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
