"""
Exception hierarchy for the Zendesk REST client.

Transport failures raised by ``requests`` are not wrapped here; they reach
the caller unchanged.
"""

from typing import Optional


class ZendeskError(Exception):
    """Base exception for Zendesk operations."""


class ZendeskAPIError(ZendeskError):
    """An error reported by, or derived from, a Zendesk API response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None
    ):
        """
        Initialize the API error.

        Args:
            message: Error message
            status_code: HTTP status code if available
            response_body: Raw response body if available
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class NotFoundError(ZendeskAPIError):
    """Resource not found (404)."""


class DecodeError(ZendeskAPIError):
    """Response body is not JSON or does not carry the expected envelope."""


class ConfigurationError(ZendeskError):
    """Missing or invalid client configuration."""
