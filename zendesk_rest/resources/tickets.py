"""
Tickets resource.

The tickets API does not accept a bare ``description`` on submission; the
ticket body has to arrive as its first comment. Every create and update
therefore goes through :func:`desc_to_comment` first. Deleting a ticket is a
hard delete answered with 204 and no body.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Union, overload

from zendesk_rest.models import (
    Comment,
    Deleted,
    DeleteFailed,
    DeleteResult,
    JobStatus,
    Page,
    Ticket,
    decode_job_status,
    decode_many,
    decode_one,
    decode_page,
)
from zendesk_rest.monitoring import timed_api_call
from zendesk_rest.resources.base import Resource, ids_query

logger = logging.getLogger(__name__)

TICKETS_PATH = "/api/v2/tickets.json"


@overload
def desc_to_comment(tickets: Ticket) -> Ticket: ...


@overload
def desc_to_comment(tickets: Sequence[Ticket]) -> List[Ticket]: ...


def desc_to_comment(tickets: Union[Ticket, Sequence[Ticket]]) -> Union[Ticket, List[Ticket]]:
    """
    Copy each ticket's description into ``comment.body``.

    Other comment fields the caller set (``public``, ``author_id``) are
    kept. A ticket without a description keeps its comment as it is. The
    inputs are left untouched; copies keep their ``description``.

    Args:
        tickets: A ticket or a sequence of tickets

    Returns:
        A transformed copy, or a new list of transformed copies
    """
    if isinstance(tickets, Ticket):
        if tickets.description is None:
            return tickets.model_copy()
        comment = (tickets.comment or Comment()).model_copy(update={"body": tickets.description})
        return tickets.model_copy(update={"comment": comment})
    return [desc_to_comment(ticket) for ticket in tickets]


class Tickets(Resource):
    """Operations on ``/api/v2/tickets``."""

    @timed_api_call("tickets")
    def list(self) -> List[Ticket]:
        return decode_many(self.http.get(TICKETS_PATH), "tickets", Ticket)

    @timed_api_call("tickets")
    def list_page(self, url: Optional[str] = None, per_page: Optional[int] = None) -> Page[Ticket]:
        """
        Fetch one page of tickets.

        Args:
            url: A ``next_page``/``previous_page`` link from an earlier page
            per_page: Page size for the first page
        """
        if url:
            response = self.http.get(url)
        else:
            params = {"per_page": per_page} if per_page else None
            response = self.http.get(TICKETS_PATH, params=params)
        return decode_page(response, "tickets", Ticket)

    def iter_all(self, per_page: int = 100) -> Iterator[Ticket]:
        page = self.list_page(per_page=per_page)
        while True:
            yield from page.items
            if not page.next_page:
                return
            page = self.list_page(url=page.next_page)

    @timed_api_call("tickets")
    def show(self, ticket_id: int) -> Ticket:
        """
        Show the ticket with the given id.

        Raises:
            NotFoundError: If no such ticket exists
        """
        return decode_one(self.http.get(f"/api/v2/tickets/{ticket_id}.json"), "ticket", Ticket)

    @timed_api_call("tickets")
    def show_many(self, ids: Iterable[int]) -> List[Ticket]:
        return decode_many(
            self.http.get(f"/api/v2/tickets/show_many.json?ids={ids_query(ids)}"),
            "tickets",
            Ticket,
        )

    @timed_api_call("tickets")
    def create(self, ticket: Ticket) -> Ticket:
        payload = {"ticket": desc_to_comment(ticket).to_payload()}
        return decode_one(self.http.post(TICKETS_PATH, payload), "ticket", Ticket)

    @timed_api_call("tickets")
    def update(self, ticket: Ticket) -> Ticket:
        payload = {"ticket": desc_to_comment(ticket).to_payload()}
        return decode_one(
            self.http.put(f"/api/v2/tickets/{ticket.id}.json", payload),
            "ticket",
            Ticket,
        )

    @timed_api_call("tickets")
    def destroy(self, ticket_id: int) -> DeleteResult:
        """
        Delete the ticket with the given id.

        Only the status code is inspected: 204 is success, anything else
        is reported as :class:`DeleteFailed` carrying that status.
        """
        response = self.http.delete(f"/api/v2/tickets/{ticket_id}.json")
        if response.status_code == 204:
            return Deleted()

        logger.warning("Deleting ticket %s failed with status %s", ticket_id, response.status_code)
        return DeleteFailed(status_code=response.status_code)

    @timed_api_call("tickets")
    def create_many(self, tickets: Sequence[Ticket]) -> JobStatus:
        payload = {"tickets": [t.to_payload() for t in desc_to_comment(tickets)]}
        return decode_job_status(self.http.post("/api/v2/tickets/create_many.json", payload))

    @timed_api_call("tickets")
    def update_many(self, tickets: Sequence[Ticket]) -> JobStatus:
        payload = {"tickets": [t.to_payload() for t in desc_to_comment(tickets)]}
        return decode_job_status(self.http.put("/api/v2/tickets/update_many.json", payload))

    @timed_api_call("tickets")
    def destroy_many(self, ids: Iterable[int]) -> JobStatus:
        return decode_job_status(
            self.http.delete(f"/api/v2/tickets/destroy_many.json?ids={ids_query(ids)}")
        )
