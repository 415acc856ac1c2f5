"""Core Pocket client with a raw-request escape hatch."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from .credentials import Credentials, CredentialsInput, _normalize_credentials
from .errors import TransportError
from .resources.items import Items
from .response import ApiResult, Failure, classify
from .transport import RequestsTransport, Transport

REQUEST_HEADERS: dict[str, str] = {
    "Content-Type": "application/json; charset=UTF-8",
    "X-Accept": "application/json",
}


class Pocket:
    """Resource-grouped client for the Pocket v3 API."""

    items: Items

    def __init__(
        self,
        credentials: Optional[CredentialsInput] = None,
        *,
        consumer_key: Optional[str] = None,
        access_token: Optional[str] = None,
        site: Optional[str] = None,
        default_timeout: float = 20,
        session: Optional[requests.Session] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        """Create a Pocket client bound to one set of credentials.

        Parameters
        ----------
        credentials
            ``Credentials``, a mapping with ``consumer_key`` and
            ``access_token``, or a ``(consumer_key, access_token)`` pair.
        consumer_key, access_token
            Alternative to ``credentials``. When neither is given,
            ``POCKET_CONSUMER_KEY`` / ``POCKET_ACCESS_TOKEN`` are used. Both must be
            given together, and not alongside ``credentials``.
        site
            API base URL; defaults to ``POCKET_SITE`` or
            ``https://getpocket.com``.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        transport
            Object with a ``post(url, body, headers, timeout=...)`` method;
            overrides ``session``.
        """
        if (consumer_key is None) != (access_token is None):
            raise ValueError("consumer_key and access_token must be given together")
        if consumer_key is not None:
            if credentials is not None:
                raise ValueError("Pass either credentials or consumer_key/access_token, not both")
            credentials = (consumer_key, access_token)
        if credentials is None:
            self.credentials = Credentials.from_env(site=site)
        else:
            self.credentials = _normalize_credentials(credentials, site=site)
        self.default_timeout = default_timeout
        self._logger = logging.getLogger(__name__)
        self._transport: Transport = transport or RequestsTransport(session)

        self.items: Items = Items(self)

    @property
    def site(self) -> str:
        return self.credentials.site

    def request(
        self,
        path: str,
        payload: Mapping[str, Any],
        *,
        timeout: Optional[float] = None,
    ) -> ApiResult[Any]:
        """Send a raw POST to the Pocket API.

        Parameters
        ----------
        path
            Endpoint path, e.g. ``/v3/get``.
        payload
            JSON body, sent as-is (credentials are not added here).
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        Success | Failure
            The classified response. Transport errors come back as
            ``Failure`` too; nothing is retried.
        """
        if not path.startswith("/"):
            path = "/" + path
        url = f"{self.site}{path}"

        try:
            response = self._transport.post(
                url,
                payload,
                REQUEST_HEADERS,
                timeout=timeout or self.default_timeout,
            )
        except TransportError as exc:
            return Failure(exc)

        result = classify(response)
        if not result.ok:
            self._logger.warning("Request failed for POST %s: %s", url, result.error)
        return result
