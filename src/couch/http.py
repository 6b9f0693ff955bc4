import json
import threading
from http.cookiejar import DefaultCookiePolicy
from typing import TYPE_CHECKING, Any, Iterable
from urllib.parse import quote, urlencode

import requests

from couch.auth import AuthOption
from couch.errors import (
    APIError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    ResponseError,
    TransportError,
    UnexpectedResponseError,
)
from couch.log import logger

if TYPE_CHECKING:
    from .client import Client


def new_session() -> requests.Session:
    session = requests.Session()
    # session cookies are the caller's to keep and replay, never ours
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    return session


def escape(segment: str) -> str:
    return quote(segment, safe="")


def no_auth(r: requests.PreparedRequest) -> requests.PreparedRequest:
    return r


class Query(dict[str, str]):
    """Query string builder that leaves out empty values entirely."""

    def flag(self, name: str, value: bool | None):
        if value:
            self[name] = "true"

    def number(self, name: str, value: int | None):
        if value is not None and value > 0:
            self[name] = str(value)

    def string(self, name: str, value: str | None):
        if value:
            self[name] = value

    def json(self, name: str, value: Any):
        # keys are compared as JSON values, so "abc" must travel as "\"abc\""
        if value is not None:
            self[name] = json.dumps(value)

    def tristate(self, name: str, value: bool | None):
        if value is not None:
            self[name] = "true" if value else "false"

    def apply(self, path: str) -> str:
        if not self:
            return path
        return f"{path}?{urlencode(self)}"


class HTTPMixin:
    timeout: float | None = None
    _session: requests.Session | None = None
    _local: threading.local

    def base_url(self) -> str:
        raise NotImplementedError

    @property
    def session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        if not hasattr(self._local, "session"):
            self._local.session = new_session()
        return self._local.session

    def request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> requests.Response:
        url = f"{self.base_url()}{path}"
        session = self.session
        # an explicit auth keeps requests from filling one in from netrc
        prepared = session.prepare_request(
            requests.Request(method, url, data=body, auth=no_auth)
        )

        if auth:
            # last one wins
            try:
                authenticator = auth[-1]()
                prepared = authenticator(prepared)
            except Exception as e:
                raise AuthenticationError(e) from e

        prepared.headers["Content-Type"] = "application/json"

        settings = session.merge_environment_settings(prepared.url, {}, True, None, None)
        resp = session.send(
            prepared,
            timeout=self.timeout if timeout is None else timeout,
            **settings,
        )
        logger.debug(f"{method} {url} {resp.status_code}")
        return resp


def error_from(operation: str, status: int, content: bytes) -> ResponseError:
    text = content.decode("utf-8", errors="replace")
    try:
        payload = json.loads(content)
    except ValueError:
        return UnexpectedResponseError(operation, status, text)
    if not isinstance(payload, dict) or "error" not in payload:
        return UnexpectedResponseError(operation, status, text)
    return APIError(operation, status, str(payload["error"]), str(payload.get("reason", "")))


def decode(operation: str, content: bytes, expected: type = dict) -> Any:
    text = content.decode("utf-8", errors="replace")
    try:
        value = json.loads(content)
    except ValueError as e:
        raise DecodeError(operation, text, str(e)) from e
    if not isinstance(value, expected):
        raise DecodeError(
            operation,
            text,
            f"expected {expected.__name__}, got {type(value).__name__}",
        )
    return value


class Service:
    client: "Client"

    def __init__(self, client: "Client"):
        self.client = client

    def send(
        self,
        operation: str,
        method: str,
        path: str,
        *auth: AuthOption,
        body: Any = None,
        timeout: float | None = None,
    ) -> requests.Response:
        data = None if body is None else json.dumps(body).encode()
        try:
            return self.client.request(method, path, data, *auth, timeout=timeout)
        except requests.RequestException as e:
            raise TransportError(operation, e) from e

    def read(self, operation: str, resp: requests.Response) -> bytes:
        try:
            return resp.content
        except requests.RequestException as e:
            raise TransportError(operation, e) from e

    def check(
        self,
        operation: str,
        resp: requests.Response,
        content: bytes,
        expect: Iterable[int] = (200,),
        not_found: tuple[str, str] | None = None,
    ):
        status = resp.status_code
        if status in expect:
            return
        if content:
            logger.debug(f"  body: {content.decode('utf-8', errors='replace')}")
        if not_found is not None and status == 404:
            raise NotFoundError(*not_found)
        raise error_from(operation, status, content)

    def call(
        self,
        operation: str,
        method: str,
        path: str,
        *auth: AuthOption,
        body: Any = None,
        expect: Iterable[int] = (200,),
        not_found: tuple[str, str] | None = None,
        result: type | None = dict,
        timeout: float | None = None,
    ) -> Any:
        with self.send(
            operation, method, path, *auth, body=body, timeout=timeout
        ) as resp:
            content = self.read(operation, resp)
            self.check(operation, resp, content, expect, not_found)
        if result is None:
            return None
        return decode(operation, content, result)
