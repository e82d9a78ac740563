import pytest

from zendesk_rest.exceptions import DecodeError, NotFoundError
from zendesk_rest.models import JobStatus, User
from zendesk_rest.resources import Users

JOB = {"job_status": {"id": "abc123", "status": "queued"}}


def test_list_decodes_every_user(fake_http, response):
    payload = [
        {"id": 1, "name": "Ana", "email": "ana@example.com", "active": True},
        {"id": 2, "name": "Bo", "email": "bo@example.com", "active": False},
    ]
    http = fake_http(response({"users": payload}))

    users = Users(http).list()

    assert http.last["method"] == "GET"
    assert http.last["path"] == "/api/v2/users.json"
    assert len(users) == 2
    assert [(u.id, u.name, u.email, u.active) for u in users] == [
        (1, "Ana", "ana@example.com", True),
        (2, "Bo", "bo@example.com", False),
    ]


def test_list_empty(fake_http, response):
    assert Users(fake_http(response({"users": []}))).list() == []


@pytest.mark.parametrize("user_id", [1, 42, 90210])
def test_show_path(fake_http, response, user_id):
    http = fake_http(response({"user": {"id": user_id}}))

    user = Users(http).show(user_id)

    assert http.last["method"] == "GET"
    assert http.last["path"] == f"/api/v2/users/{user_id}.json"
    assert user.id == user_id


def test_show_missing_user(fake_http, response):
    http = fake_http(response({"error": "RecordNotFound"}, status_code=404))

    with pytest.raises(NotFoundError):
        Users(http).show(7)


def test_create_posts_user_envelope(fake_http, response):
    http = fake_http(response({"user": {"id": 10, "name": "Ana", "email": "ana@example.com"}}, status_code=201))

    created = Users(http).create(User(name="Ana", email="ana@example.com"))

    assert http.last["method"] == "POST"
    assert http.last["path"] == "/api/v2/users.json"
    assert http.last["payload"] == {"user": {"name": "Ana", "email": "ana@example.com"}}
    assert created.id == 10


def test_update_uses_user_id(fake_http, response):
    http = fake_http(response({"user": {"id": 10, "name": "Ana B"}}))

    updated = Users(http).update(User(id=10, name="Ana B"))

    assert http.last["method"] == "PUT"
    assert http.last["path"] == "/api/v2/users/10.json"
    assert http.last["payload"] == {"user": {"id": 10, "name": "Ana B"}}
    assert updated.name == "Ana B"


def test_create_or_update(fake_http, response):
    http = fake_http(response({"user": {"id": 11, "email": "x@example.com"}}))

    user = Users(http).create_or_update(User(email="x@example.com"))

    assert http.last["method"] == "POST"
    assert http.last["path"] == "/api/v2/users/create_or_update.json"
    assert user.id == 11


def test_destroy_returns_deactivated_user(fake_http, response):
    http = fake_http(response({"user": {"id": 3, "name": "Old", "active": False}}))

    user = Users(http).destroy(3)

    assert http.last["method"] == "DELETE"
    assert http.last["path"] == "/api/v2/users/3.json"
    assert user.active is False


def test_destroy_without_envelope_fails(fake_http, response):
    http = fake_http(response(status_code=204))

    with pytest.raises(DecodeError):
        Users(http).destroy(3)


@pytest.mark.parametrize("method_name,http_method,path", [
    ("create_many", "POST", "/api/v2/users/create_many.json"),
    ("update_many", "PUT", "/api/v2/users/update_many.json"),
    ("create_or_update_many", "POST", "/api/v2/users/create_or_update_many.json"),
])
def test_bulk_writes_return_job_status(fake_http, response, method_name, http_method, path):
    http = fake_http(response(JOB))
    users = [User(id=1, name="a"), User(id=2, name="b")]

    job = getattr(Users(http), method_name)(users)

    assert http.last["method"] == http_method
    assert http.last["path"] == path
    assert http.last["payload"] == {"users": [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]}
    assert job == JobStatus(id="abc123", status="queued")


def test_destroy_many_joins_ids(fake_http, response):
    http = fake_http(response(JOB))

    job = Users(http).destroy_many([3, 7, 9])

    assert http.last["method"] == "DELETE"
    assert http.last["path"] == "/api/v2/users/destroy_many.json?ids=3,7,9"
    assert job.id == "abc123"


def test_destroy_many_encodes_ids(fake_http, response):
    http = fake_http(response(JOB))

    Users(http).destroy_many(["1&x=2", 4])

    assert http.last["path"] == "/api/v2/users/destroy_many.json?ids=1%26x%3D2,4"


def test_show_many(fake_http, response):
    http = fake_http(response({"users": [{"id": 1}, {"id": 2}]}))

    users = Users(http).show_many([1, 2])

    assert http.last["path"] == "/api/v2/users/show_many.json?ids=1,2"
    assert [u.id for u in users] == [1, 2]


def test_iter_all_follows_next_page(fake_http, response):
    next_url = "https://acme.zendesk.com/api/v2/users.json?page=2&per_page=2"
    http = fake_http(
        response({"users": [{"id": 1}, {"id": 2}], "next_page": next_url}),
        response({"users": [{"id": 3}], "next_page": None}),
    )

    ids = [u.id for u in Users(http).iter_all(per_page=2)]

    assert ids == [1, 2, 3]
    assert http.calls[0]["path"] == "/api/v2/users.json"
    assert http.calls[0]["params"] == {"per_page": 2}
    assert http.calls[1]["path"] == next_url


def test_iter_all_is_lazy(fake_http, response):
    http = fake_http(response({"users": [{"id": 1}], "next_page": "https://acme.zendesk.com/next"}))

    first = next(Users(http).iter_all())

    assert first.id == 1
    assert len(http.calls) == 1
