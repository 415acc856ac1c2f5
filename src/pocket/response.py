"""Classification of raw HTTP responses into typed results."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from .errors import UNKNOWN_ERROR_MESSAGE, ApiError, DecodeError, PocketError
from .transport import RawResponse

T = TypeVar("T")

# Pocket echoes structured error detail in these headers, even on failures.
ERROR_CODE_HEADER = "X-Error-Code"
ERROR_MESSAGE_HEADER = "X-Error"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful call carrying the decoded payload."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed call carrying the error value."""

    error: PocketError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


ApiResult = Union[Success[T], Failure]


def _parse_error_code(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def classify(response: RawResponse) -> ApiResult[Any]:
    """Turn a raw response into ``Success`` or ``Failure``.

    Parameters
    ----------
    response
        Response as returned by the transport.

    Returns
    -------
    Success | Failure
        ``Success`` with the decoded JSON body for 2xx responses, ``Failure``
        with a :class:`DecodeError` when a 2xx body is not JSON, and
        ``Failure`` with an :class:`ApiError` for every other status.
    """
    status = response.status_code
    if 200 <= status < 300:
        try:
            payload = json.loads(response.body)
        except ValueError as exc:
            return Failure(DecodeError(status, body=response.body, reason=str(exc)))
        return Success(payload)

    headers = response.headers
    error = ApiError(
        status,
        code=_parse_error_code(headers.get(ERROR_CODE_HEADER)),
        message=headers.get(ERROR_MESSAGE_HEADER) or UNKNOWN_ERROR_MESSAGE,
        body=response.body,
    )
    return Failure(error)


__all__ = [
    "ApiResult",
    "ERROR_CODE_HEADER",
    "ERROR_MESSAGE_HEADER",
    "Failure",
    "Success",
    "classify",
]
