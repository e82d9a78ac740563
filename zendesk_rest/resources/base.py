"""Shared plumbing for resource clients."""

from typing import Iterable
from urllib.parse import quote


def ids_query(ids: Iterable) -> str:
    """
    Build the comma-joined ``ids`` value used by the *_many endpoints.

    Each id is percent-encoded on its own so the separating commas stay
    literal.
    """
    return ",".join(quote(str(i), safe="") for i in ids)


class Resource:
    """A client for one Zendesk resource, bound to a transport."""

    def __init__(self, http):
        self.http = http
