"""
Exception types raised by the events client.

Network and HTTP problems are split into three classes so that callers
of the mutating operations can tell a request that never reached the
server (:class:`NetworkFailure`) from one the server refused
(:class:`StatusFailure`) or answered with an unexpected body
(:class:`ShapeFailure`).  :class:`DecodeFailure` covers malformed
credentials and never leaves :mod:`event_roster.roles`.
"""

from typing import Optional


class EventsApiError(Exception):
    """Base class for failures talking to the events service."""


class NetworkFailure(EventsApiError):
    """The request could not be sent or the response could not be read."""


class StatusFailure(EventsApiError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str = "", message: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.message = message or reason
        super().__init__(f"HTTP {status_code} {reason}".rstrip() + (f": {message}" if message else ""))


class ShapeFailure(EventsApiError):
    """The response body is not valid JSON or not of the expected type."""

    def __init__(self, message: str, body: Optional[str] = None) -> None:
        self.body = body
        super().__init__(message)


class DecodeFailure(ValueError):
    """A stored credential could not be split, base64 decoded or parsed."""
