"""
HTTP transport for the Zendesk REST API.

A thin wrapper around ``requests.Session``: it joins paths onto the account
base URL, attaches credentials and JSON headers, and logs traffic. Status
codes are returned to the caller untouched and nothing is retried.
"""

import logging
from typing import Any, Dict, Optional

import requests

from zendesk_rest.config import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class HTTPClient:
    """Performs authenticated requests against one Zendesk account."""

    def __init__(self, base_url: str, auth=None, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize the transport.

        Args:
            base_url: Account base URL, e.g. ``https://acme.zendesk.com``
            auth: A ``requests`` auth object attached to every request
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        self.session.auth = auth
        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

    def build_url(self, path: str) -> str:
        # Pagination links arrive as absolute URLs
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self.build_url(path)
        logger.debug("%s %s", method.upper(), url)

        response = self.session.request(method, url, timeout=self.timeout, **kwargs)

        if not 200 <= response.status_code < 300:
            logger.warning("Status %s for %s %s", response.status_code, method.upper(), url)
        else:
            logger.debug("Status %s for %s", response.status_code, url)
        return response

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.request("get", path, params=params)

    def post(self, path: str, payload: Dict[str, Any]) -> requests.Response:
        return self.request("post", path, json=payload)

    def put(self, path: str, payload: Dict[str, Any]) -> requests.Response:
        return self.request("put", path, json=payload)

    def delete(self, path: str) -> requests.Response:
        return self.request("delete", path)

    def close(self) -> None:
        self.session.close()
