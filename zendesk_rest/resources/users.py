"""
Users resource.

Deleting a user is a soft delete on the Zendesk side: the account is
deactivated and its representation, with ``active`` set to false, comes back
in the response.
"""

from typing import Iterable, Iterator, List, Optional

from zendesk_rest.models import (
    JobStatus,
    Page,
    User,
    decode_job_status,
    decode_many,
    decode_one,
    decode_page,
)
from zendesk_rest.monitoring import timed_api_call
from zendesk_rest.resources.base import Resource, ids_query

USERS_PATH = "/api/v2/users.json"


class Users(Resource):
    """Operations on ``/api/v2/users``."""

    @timed_api_call("users")
    def list(self) -> List[User]:
        """
        List users, in server order.

        Only the first page the server returns is decoded; use
        :meth:`iter_all` to walk every page.
        """
        return decode_many(self.http.get(USERS_PATH), "users", User)

    @timed_api_call("users")
    def list_page(self, url: Optional[str] = None, per_page: Optional[int] = None) -> Page[User]:
        """
        Fetch one page of users.

        Args:
            url: A ``next_page``/``previous_page`` link from an earlier page
            per_page: Page size for the first page

        Returns:
            Page: Users plus the links to neighbouring pages
        """
        if url:
            response = self.http.get(url)
        else:
            params = {"per_page": per_page} if per_page else None
            response = self.http.get(USERS_PATH, params=params)
        return decode_page(response, "users", User)

    def iter_all(self, per_page: int = 100) -> Iterator[User]:
        """Yield every user, requesting the next page only when needed."""
        page = self.list_page(per_page=per_page)
        while True:
            yield from page.items
            if not page.next_page:
                return
            page = self.list_page(url=page.next_page)

    @timed_api_call("users")
    def show(self, user_id: int) -> User:
        """
        Show the user with the given id.

        Raises:
            NotFoundError: If no such user exists
        """
        return decode_one(self.http.get(f"/api/v2/users/{user_id}.json"), "user", User)

    @timed_api_call("users")
    def show_many(self, ids: Iterable[int]) -> List[User]:
        return decode_many(
            self.http.get(f"/api/v2/users/show_many.json?ids={ids_query(ids)}"),
            "users",
            User,
        )

    @timed_api_call("users")
    def create(self, user: User) -> User:
        return decode_one(self.http.post(USERS_PATH, {"user": user.to_payload()}), "user", User)

    @timed_api_call("users")
    def update(self, user: User) -> User:
        """Update the user identified by ``user.id``."""
        return decode_one(
            self.http.put(f"/api/v2/users/{user.id}.json", {"user": user.to_payload()}),
            "user",
            User,
        )

    @timed_api_call("users")
    def create_or_update(self, user: User) -> User:
        """Create the user, or update it if the email or external id already exists."""
        return decode_one(
            self.http.post("/api/v2/users/create_or_update.json", {"user": user.to_payload()}),
            "user",
            User,
        )

    @timed_api_call("users")
    def destroy(self, user_id: int) -> User:
        """Deactivate the user and return its updated representation."""
        return decode_one(self.http.delete(f"/api/v2/users/{user_id}.json"), "user", User)

    @timed_api_call("users")
    def create_many(self, users: Iterable[User]) -> JobStatus:
        return decode_job_status(
            self.http.post("/api/v2/users/create_many.json", {"users": _payloads(users)})
        )

    @timed_api_call("users")
    def update_many(self, users: Iterable[User]) -> JobStatus:
        return decode_job_status(
            self.http.put("/api/v2/users/update_many.json", {"users": _payloads(users)})
        )

    @timed_api_call("users")
    def create_or_update_many(self, users: Iterable[User]) -> JobStatus:
        return decode_job_status(
            self.http.post("/api/v2/users/create_or_update_many.json", {"users": _payloads(users)})
        )

    @timed_api_call("users")
    def destroy_many(self, ids: Iterable[int]) -> JobStatus:
        """Deactivate several users at once."""
        return decode_job_status(
            self.http.delete(f"/api/v2/users/destroy_many.json?ids={ids_query(ids)}")
        )


def _payloads(users: Iterable[User]) -> List[dict]:
    return [user.to_payload() for user in users]
