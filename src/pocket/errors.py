"""Error taxonomy for the Pocket client.

- TransportError: no HTTP response was obtained (connection error, timeout)
- ApiError: the API answered with a non-2xx status
- DecodeError: the API answered 2xx but the body was not valid JSON

These are returned inside :class:`pocket.response.Failure` by default and only
raised by the ``unwrap`` / ``*_or_raise`` helpers.
"""

from __future__ import annotations

from typing import Optional

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class PocketError(Exception):
    """Base class for every error surfaced by the client."""


class TransportError(PocketError):
    """The request never produced an HTTP response."""

    status_code: Optional[int] = None

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url


class ApiError(PocketError):
    """Non-2xx response, with the error detail Pocket echoes in headers."""

    def __init__(
        self,
        status_code: int,
        *,
        code: Optional[int] = None,
        message: str = UNKNOWN_ERROR_MESSAGE,
        body: str = "",
    ) -> None:
        super().__init__(f"HTTP {status_code} (error code {code}): {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.body = body

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code!r}, code={self.code!r}, message={self.message!r})"


class DecodeError(PocketError):
    """2xx response whose body could not be decoded as JSON."""

    def __init__(self, status_code: int, *, body: str = "", reason: str = "") -> None:
        super().__init__(f"Could not decode response (HTTP {status_code}): {reason or 'invalid JSON'}")
        self.status_code = status_code
        self.body = body
        self.reason = reason


__all__ = [
    "ApiError",
    "DecodeError",
    "PocketError",
    "TransportError",
    "UNKNOWN_ERROR_MESSAGE",
]
