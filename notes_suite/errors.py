from typing import Optional


class NotesApiError(Exception):
    """Base class for every failure raised by the client layer."""


class UnexpectedStatus(NotesApiError, AssertionError):
    """Raised when a verified call does not get the status code it expects."""

    def __init__(self, method: str, url: str, expected: int, actual: int, body: str):
        super().__init__(f"{method} {url} returned {actual}, expected {expected}: {body}")
        self.method = method
        self.url = url
        self.expected = expected
        self.actual = actual
        self.body = body


class ResponseDecodeError(NotesApiError, ValueError):
    """Raised when a response body is not the envelope/payload we expected."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message if body is None else f"{message}: {body}")
        self.body = body


class NotAuthenticated(NotesApiError):
    pass


class LifecycleError(NotesApiError):
    pass
