"""Pytest configuration and shared fixtures."""

import base64
import json
from typing import Any, Dict, List, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from event_roster.client import EventClient


BASE_URL = "https://events.test/api/Events"


def make_response(
    status: int = 200,
    body: Any = None,
    *,
    raw: Optional[bytes] = None,
    content_length: Optional[str] = "auto",
    reason: str = "",
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason or {200: "OK", 201: "Created", 204: "No Content", 404: "Not Found", 500: "Internal Server Error"}.get(status, "")
    if raw is None:
        raw = b"" if body is None else json.dumps(body).encode("utf-8")
    response._content = raw
    response.headers = CaseInsensitiveDict()
    if content_length == "auto":
        response.headers["Content-Length"] = str(len(raw))
    elif content_length is not None:
        response.headers["Content-Length"] = content_length
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for ``requests.Session``; records calls and replays responses."""

    def __init__(self) -> None:
        self.responses: List[Any] = []
        self.calls: List[Dict[str, Any]] = []

    def queue(self, item: Any) -> None:
        self.responses.append(item)

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        item.url = url
        return item

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> EventClient:
    return EventClient(base_url=BASE_URL, session=session)


def make_token(payload: Any, *, header: Optional[Dict[str, Any]] = None) -> str:
    """Unsigned token in compact form with a base64url payload segment."""

    def seg(obj: Any) -> str:
        text = obj if isinstance(obj, str) else json.dumps(obj)
        return base64.urlsafe_b64encode(text.encode("utf-8")).rstrip(b"=").decode("ascii")

    return f"{seg(header or {'alg': 'HS256', 'typ': 'JWT'})}.{seg(payload)}.c2lnbmF0dXJl"
