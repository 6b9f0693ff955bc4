from http.cookiejar import Cookie
from typing import Callable, TypeAlias

from requests import PreparedRequest
from requests.auth import AuthBase, HTTPBasicAuth

AuthOption: TypeAlias = Callable[[], AuthBase]


class CookieAuth(AuthBase):
    """Replays a session cookie, normally the AuthSession cookie from a login."""

    cookie: Cookie | None

    def __init__(self, cookie: Cookie | None):
        self.cookie = cookie

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        if self.cookie is None:
            return r
        pair = f"{self.cookie.name}={self.cookie.value}"
        existing = r.headers.get("Cookie")
        r.headers["Cookie"] = f"{existing}; {pair}" if existing else pair
        return r


class ProxyAuth(AuthBase):
    """Trusted proxy authentication through the X-Auth-CouchDB-* headers."""

    username: str
    roles: list[str]
    token: str

    def __init__(self, username: str, roles: list[str] | None = None, token: str = ""):
        self.username = username
        self.roles = roles or []
        self.token = token

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        r.headers["X-Auth-CouchDB-UserName"] = self.username
        if self.roles:
            r.headers["X-Auth-CouchDB-Roles"] = ",".join(self.roles)
        if self.token:
            r.headers["X-Auth-CouchDB-Token"] = self.token
        return r


class JWTAuth(AuthBase):
    token: str

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        if self.token:
            r.headers["Authorization"] = f"Bearer {self.token}"
        return r


def with_basic_auth(username: str, password: str) -> AuthOption:
    return lambda: HTTPBasicAuth(username, password)


def with_cookie_auth(cookie: Cookie | None) -> AuthOption:
    return lambda: CookieAuth(cookie)


def with_proxy_auth(
    username: str, roles: list[str] | None = None, token: str = ""
) -> AuthOption:
    # requires [chttpd] authentication_handlers to include the proxy handler
    return lambda: ProxyAuth(username, roles, token)


def with_jwt_auth(token: str) -> AuthOption:
    return lambda: JWTAuth(token)
