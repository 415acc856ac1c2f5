"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Pocket
    from ..credentials import Credentials
    from ..response import ApiResult


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "Pocket") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    @property
    def _credentials(self) -> "Credentials":
        return self._client.credentials

    def _post(
        self,
        path: str,
        payload: dict[str, Any],
        *,
        timeout: Optional[float] = None,
    ) -> "ApiResult[Any]":
        return self._client.request(path, payload, timeout=timeout)
