from __future__ import annotations

import io
import json
from typing import Any
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from couch import Client

BASE_URL = "http://couch.test:5984"


class StubTransport(BaseAdapter):
    """Records prepared requests and answers them with scripted responses."""

    def __init__(self) -> None:
        super().__init__()
        self.sent: list[requests.PreparedRequest] = []
        self.timeouts: list[Any] = []
        self._replies: list[Any] = []

    def reply(
        self,
        status: int = 200,
        body: Any = None,
        headers: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
    ) -> None:
        self._replies.append((status, body, headers or {}, cookies or {}))

    def fail(self, exc: Exception) -> None:
        self._replies.append(exc)

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.sent.append(request)
        self.timeouts.append(timeout)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply

        status, body, headers, cookies = reply
        if body is None:
            content = b""
        elif isinstance(body, bytes):
            content = body
        elif isinstance(body, str):
            content = body.encode()
        else:
            content = json.dumps(body).encode()

        resp = requests.Response()
        resp.status_code = status
        resp.headers = CaseInsensitiveDict(headers)
        resp.raw = io.BytesIO(content)
        resp.url = request.url
        resp.request = request
        for name, value in cookies.items():
            resp.cookies.set(name, value)
        return resp

    def close(self) -> None:
        pass

    @property
    def last(self) -> requests.PreparedRequest:
        return self.sent[-1]

    def last_path(self) -> str:
        return urlsplit(self.last.url).path

    def last_query(self) -> dict[str, str]:
        return dict(parse_qsl(urlsplit(self.last.url).query))

    def last_json(self) -> Any:
        return json.loads(self.last.body)


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def session(transport: StubTransport) -> requests.Session:
    session = requests.Session()
    session.trust_env = False
    session.mount("http://", transport)
    return session


@pytest.fixture
def client(session: requests.Session) -> Client:
    return Client(f"{BASE_URL}/", session=session)
