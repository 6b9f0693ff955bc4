from couch.auth import (
    AuthOption,
    CookieAuth,
    JWTAuth,
    ProxyAuth,
    with_basic_auth,
    with_cookie_auth,
    with_jwt_auth,
    with_proxy_auth,
)
from couch.client import Client
from couch.config import ConfigurationService
from couch.db import DatabaseService
from couch.design import DesignDocumentService
from couch.document import DocumentService
from couch.errors import (
    APIError,
    AuthenticationError,
    CouchError,
    DecodeError,
    NotFoundError,
    ResponseError,
    TransportError,
    UnexpectedResponseError,
)
from couch.security import SecurityService
from couch.server import ServerService
from couch.session import SessionService
from couch.users import UserService

__all__ = [
    "APIError",
    "AuthOption",
    "AuthenticationError",
    "Client",
    "ConfigurationService",
    "CookieAuth",
    "CouchError",
    "DatabaseService",
    "DecodeError",
    "DesignDocumentService",
    "DocumentService",
    "JWTAuth",
    "NotFoundError",
    "ProxyAuth",
    "ResponseError",
    "SecurityService",
    "ServerService",
    "SessionService",
    "TransportError",
    "UnexpectedResponseError",
    "UserService",
    "with_basic_auth",
    "with_cookie_auth",
    "with_jwt_auth",
    "with_proxy_auth",
]
