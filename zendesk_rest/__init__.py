"""
Zendesk REST client package.

This package maps the Zendesk Users, Tickets and Job Statuses endpoints to
plain method calls returning typed entities.
"""

from zendesk_rest.client import ZendeskClient
from zendesk_rest.exceptions import (
    ConfigurationError,
    DecodeError,
    NotFoundError,
    ZendeskAPIError,
    ZendeskError,
)
from zendesk_rest.models import (
    Comment,
    Deleted,
    DeleteFailed,
    DeleteResult,
    JobStatus,
    Page,
    Ticket,
    User,
)
from zendesk_rest.resources import desc_to_comment

__version__ = "1.0.0"

__all__ = [
    "Comment",
    "ConfigurationError",
    "DecodeError",
    "Deleted",
    "DeleteFailed",
    "DeleteResult",
    "JobStatus",
    "NotFoundError",
    "Page",
    "Ticket",
    "User",
    "ZendeskAPIError",
    "ZendeskClient",
    "ZendeskError",
    "desc_to_comment",
]
