"""
Entity models and envelope decoding for Zendesk API payloads.

Every Zendesk response wraps its data in an object keyed by the resource
name (``{"user": {...}}``, ``{"tickets": [...]}``, ``{"job_status": {...}}``).
The ``decode_*`` helpers unwrap that envelope and validate the contents
into pydantic models. Fields the models do not declare are ignored, so new
remote attributes never break decoding; a missing envelope key always does.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict, Generic, List, Optional, Set, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from zendesk_rest.exceptions import DecodeError, NotFoundError


class Entity(BaseModel):
    """Base for all Zendesk resources."""

    model_config = ConfigDict(extra="ignore")

    # Fields that stay local and are never sent in request bodies
    local_fields: ClassVar[Set[str]] = set()

    def to_payload(self) -> Dict[str, Any]:
        """
        Serialize the entity for a request body.

        Unset fields are omitted so partial updates only touch what the
        caller filled in.

        Returns:
            Dict[str, Any]: JSON-compatible representation
        """
        return self.model_dump(mode="json", exclude_none=True, exclude=self.local_fields)


class User(Entity):
    id: Optional[int] = None
    url: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    active: Optional[bool] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    organization_id: Optional[int] = None
    time_zone: Optional[str] = None
    locale: Optional[str] = None
    verified: Optional[bool] = None
    suspended: Optional[bool] = None
    tags: Optional[List[str]] = None
    external_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user_fields: Optional[Dict[str, Any]] = None


class Comment(Entity):
    body: Optional[str] = None
    public: Optional[bool] = None
    author_id: Optional[int] = None


class Ticket(Entity):
    """
    A support ticket.

    ``description`` mirrors the first comment on the server. On submission
    the API only accepts that text as ``comment.body``, so ``description``
    is kept for the caller but left out of request bodies.
    """

    local_fields: ClassVar[Set[str]] = {"description"}

    id: Optional[int] = None
    url: Optional[str] = None
    requester_id: Optional[int] = None
    submitter_id: Optional[int] = None
    assignee_id: Optional[int] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    comment: Optional[Comment] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    type: Optional[str] = None
    tags: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobStatus(Entity):
    """Handle to an asynchronous bulk job running on the Zendesk side."""

    id: str
    url: Optional[str] = None
    status: Optional[str] = None
    total: Optional[int] = None
    progress: Optional[int] = None
    message: Optional[str] = None
    results: Optional[List[Dict[str, Any]]] = None


E = TypeVar("E", bound=Entity)


@dataclass
class Page(Generic[E]):
    """One page of a list endpoint."""

    items: List[E] = field(default_factory=list)
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None


def _load_body(response: requests.Response) -> Dict[str, Any]:
    if response.status_code == 404:
        raise NotFoundError(
            f"Resource not found: {response.url}",
            status_code=response.status_code,
            response_body=response.text,
        )

    try:
        data = response.json()
    except ValueError:
        raise DecodeError(
            "Response body is not valid JSON",
            status_code=response.status_code,
            response_body=response.text,
        ) from None

    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(data).__name__}",
            status_code=response.status_code,
            response_body=response.text,
        )
    return data


def _unwrap(response: requests.Response, key: str, data: Optional[Dict[str, Any]] = None) -> Any:
    if data is None:
        data = _load_body(response)
    if key not in data:
        raise DecodeError(
            f"Response has no {key!r} envelope",
            status_code=response.status_code,
            response_body=response.text,
        )
    return data[key]


def _validate(response: requests.Response, model: Type[E], value: Any) -> E:
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise DecodeError(
            f"Invalid {model.__name__} payload: {e}",
            status_code=response.status_code,
            response_body=response.text,
        ) from e


def _validate_list(response: requests.Response, key: str, model: Type[E], value: Any) -> List[E]:
    if not isinstance(value, list):
        raise DecodeError(
            f"Expected a list under {key!r}",
            status_code=response.status_code,
            response_body=response.text,
        )
    return [_validate(response, model, item) for item in value]


def decode_one(response: requests.Response, key: str, model: Type[E]) -> E:
    """
    Decode a singular envelope such as ``{"user": {...}}``.

    Raises:
        NotFoundError: If the server answered 404
        DecodeError: If the body is not JSON or lacks ``key``
    """
    return _validate(response, model, _unwrap(response, key))


def decode_many(response: requests.Response, key: str, model: Type[E]) -> List[E]:
    """Decode a list envelope such as ``{"users": [...]}``, keeping server order."""
    return _validate_list(response, key, model, _unwrap(response, key))


def decode_page(response: requests.Response, key: str, model: Type[E]) -> Page[E]:
    """Decode a list envelope together with its pagination links."""
    data = _load_body(response)
    return Page(
        items=_validate_list(response, key, model, _unwrap(response, key, data)),
        next_page=data.get("next_page"),
        previous_page=data.get("previous_page"),
        count=data.get("count"),
    )


def decode_job_status(response: requests.Response) -> JobStatus:
    return decode_one(response, "job_status", JobStatus)


@dataclass(frozen=True)
class Deleted:
    """The server confirmed a hard delete (204 No Content)."""

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class DeleteFailed:
    """The server answered a hard delete with anything but 204."""

    status_code: int
    ok: ClassVar[bool] = False


DeleteResult = Union[Deleted, DeleteFailed]
