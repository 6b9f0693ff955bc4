import requests

from couch.auth import AuthOption
from couch.errors import TransportError
from couch.http import Query, Service
from couch.types import ServerInfo, UUIDsResponse


class ServerService(Service):
    def get_uuids(
        self, *auth: AuthOption, count: int = 0, timeout: float | None = None
    ) -> UUIDsResponse:
        query = Query()
        query.number("count", count)
        return self.call(
            "get UUIDs", "GET", query.apply("/_uuids"), *auth, timeout=timeout
        )

    def info(self, *auth: AuthOption, timeout: float | None = None) -> ServerInfo:
        return self.call("get server info", "GET", "/", *auth, timeout=timeout)

    def up(self, *auth: AuthOption, timeout: float | None = None) -> bool:
        try:
            with self.send("check server", "GET", "/_up", *auth, timeout=timeout) as resp:
                return resp.status_code == 200
        except TransportError as e:
            if isinstance(e.__cause__, requests.exceptions.ConnectionError):
                return False
            raise

    def all_dbs(
        self, *auth: AuthOption, timeout: float | None = None
    ) -> list[str]:
        return self.call(
            "list databases", "GET", "/_all_dbs", *auth, result=list, timeout=timeout
        )
