import json
from typing import Any, Dict, List, Optional

import pytest
import requests


def _make_response(body, status_code: int = 200, url: str = "https://api.waqi.info/search/") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.url = url
    resp.encoding = "utf-8"
    if isinstance(body, bytes):
        resp._content = body
    elif isinstance(body, str):
        resp._content = body.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
    return resp


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture()
def make_response():
    return _make_response


@pytest.fixture()
def make_session():
    def _factory(body=None, status_code=200, error=None):
        if error is not None:
            return FakeSession(error=error)
        return FakeSession(_make_response(body, status_code=status_code))

    return _factory


@pytest.fixture()
def ok_session():
    return FakeSession(_make_response({"status": "ok", "data": []}))


@pytest.fixture()
def refused_session():
    return FakeSession(error=requests.ConnectionError("[Errno 111] Connection refused"))


@pytest.fixture()
def env():
    """Build an injected environment lookup from keyword arguments."""
    def _factory(**values):
        return values.get

    return _factory
