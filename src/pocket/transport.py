"""HTTP transport boundary: one POST in, one raw response out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol

import requests
from requests.structures import CaseInsensitiveDict

from .errors import TransportError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and undecoded body of an HTTP response."""

    status_code: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, CaseInsensitiveDict):
            object.__setattr__(self, "headers", CaseInsensitiveDict(self.headers or {}))

    @classmethod
    def from_requests(cls, response: requests.Response) -> "RawResponse":
        return cls(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers or {}),
            body=response.text or "",
        )


class Transport(Protocol):
    def post(
        self,
        url: str,
        body: Mapping[str, Any],
        headers: Mapping[str, str],
        *,
        timeout: Optional[float] = None,
    ) -> RawResponse: ...


class RequestsTransport:
    """Transport backed by ``requests``.

    Parameters
    ----------
    session
        Optional requests session to reuse connections. Module-level
        ``requests.post`` is used when omitted.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session

    def post(
        self,
        url: str,
        body: Mapping[str, Any],
        headers: Mapping[str, str],
        *,
        timeout: Optional[float] = None,
    ) -> RawResponse:
        """POST ``body`` as JSON to ``url``.

        Raises
        ------
        TransportError
            If no HTTP response was obtained.
        """
        requester = self._session or requests
        try:
            response = requester.post(url, json=dict(body), headers=dict(headers), timeout=timeout)
        except requests.RequestException as exc:
            _logger.warning("Request failed for POST %s: %s", url, exc)
            raise TransportError(str(exc), url=url) from exc
        return RawResponse.from_requests(response)


__all__ = ["RawResponse", "RequestsTransport", "Transport"]
