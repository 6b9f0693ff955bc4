from http.cookiejar import Cookie

from couch.auth import AuthOption
from couch.http import Service, decode
from couch.types import LoginResponse, SessionInfo

SESSION_COOKIE = "AuthSession"


class SessionService(Service):
    def login(
        self,
        username: str,
        password: str,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> tuple[LoginResponse, Cookie | None]:
        """Opens a cookie session.

        The AuthSession cookie is handed back rather than kept, pass it to
        ``with_cookie_auth`` on later calls.
        """
        operation = "login"
        with self.send(
            operation,
            "POST",
            "/_session",
            *auth,
            body={"name": username, "password": password},
            timeout=timeout,
        ) as resp:
            content = self.read(operation, resp)
            self.check(operation, resp, content)
            cookie = next(
                (c for c in resp.cookies if c.name == SESSION_COOKIE), None
            )

        return decode(operation, content), cookie

    def logout(self, *auth: AuthOption, timeout: float | None = None) -> None:
        self.call("logout", "DELETE", "/_session", *auth, result=None, timeout=timeout)

    def get_session(
        self, *auth: AuthOption, timeout: float | None = None
    ) -> SessionInfo:
        return self.call("get session", "GET", "/_session", *auth, timeout=timeout)
