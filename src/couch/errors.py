class CouchError(Exception):
    """Base class for every error raised by this package."""


class TransportError(CouchError):
    """The HTTP exchange itself failed (connection refused, timeout, ...)."""

    operation: str

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        super().__init__(f"failed to {operation}: {cause}")


class AuthenticationError(CouchError):
    """Credentials could not be applied to an outgoing request."""

    def __init__(self, cause: Exception):
        super().__init__(f"authentication failed: {cause}")


class NotFoundError(CouchError):
    kind: str
    name: str

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} not found: {name}")


class ResponseError(CouchError):
    """The server answered with a status the operation does not expect."""

    operation: str
    status: int

    def __init__(self, operation: str, status: int, message: str):
        self.operation = operation
        self.status = status
        super().__init__(message)


class APIError(ResponseError):
    error: str
    reason: str

    def __init__(self, operation: str, status: int, error: str, reason: str):
        self.error = error
        self.reason = reason
        super().__init__(operation, status, f"failed to {operation}: {error} - {reason}")


class UnexpectedResponseError(ResponseError):
    body: str

    def __init__(self, operation: str, status: int, body: str):
        self.body = body
        super().__init__(
            operation, status, f"request failed with status {status}: {body}"
        )


class DecodeError(CouchError):
    """A successful response whose body does not have the expected shape."""

    operation: str
    body: str

    def __init__(self, operation: str, body: str, detail: str):
        self.operation = operation
        self.body = body
        super().__init__(f"failed to decode {operation} response: {detail}")
