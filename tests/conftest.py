import json

import pytest
import requests

from zendesk_rest.monitoring import reset_api_tracking


def make_response(json_data=None, status_code=200, text=None, url="https://acme.zendesk.com/api/v2"):
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    if json_data is not None:
        resp._content = json.dumps(json_data).encode("utf-8")
    elif text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = b""
    return resp


class FakeHTTP:
    """Records requests and replays canned responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def _respond(self, method, path, payload=None, params=None):
        self.calls.append({"method": method, "path": path, "payload": payload, "params": params})
        return self.responses.pop(0)

    def get(self, path, params=None):
        return self._respond("GET", path, params=params)

    def post(self, path, payload):
        return self._respond("POST", path, payload=payload)

    def put(self, path, payload):
        return self._respond("PUT", path, payload=payload)

    def delete(self, path):
        return self._respond("DELETE", path)

    def close(self):
        pass

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture(autouse=True)
def clean_tracking():
    reset_api_tracking()
    yield
    reset_api_tracking()


@pytest.fixture
def response():
    return make_response


@pytest.fixture
def fake_http():
    return FakeHTTP
