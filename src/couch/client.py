import threading

import requests

from couch.config import ConfigurationService
from couch.db import DatabaseService
from couch.design import DesignDocumentService
from couch.document import DocumentService
from couch.http import HTTPMixin
from couch.security import SecurityService
from couch.server import ServerService
from couch.session import SessionService
from couch.users import UserService


class Client(HTTPMixin):
    """Entry point to a CouchDB server.

    ``session`` replaces the transport for every request made through this
    client. Without one, each thread gets its own ``requests.Session`` that
    never stores cookies. ``timeout`` is the default for calls that don't
    pass their own.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._local = threading.local()
        self.timeout = timeout

    def __str__(self) -> str:
        return self._base_url

    def base_url(self) -> str:
        return self._base_url

    def configuration(self) -> ConfigurationService:
        return ConfigurationService(self)

    def databases(self) -> DatabaseService:
        return DatabaseService(self)

    def design_documents(self) -> DesignDocumentService:
        return DesignDocumentService(self)

    def documents(self) -> DocumentService:
        return DocumentService(self)

    def security(self) -> SecurityService:
        return SecurityService(self)

    def server(self) -> ServerService:
        return ServerService(self)

    def sessions(self) -> SessionService:
        return SessionService(self)

    def users(self) -> UserService:
        return UserService(self)
