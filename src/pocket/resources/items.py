"""Item resource wrapper: retrieve, add and modify."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, cast

from ..actions import ActionBatch
from ..payloads import build_add_payload, build_retrieve_payload, build_send_payload
from ..response import ApiResult
from .base import Resource
from .items_types import AddOptions, AddResponse, RetrieveOptions, RetrieveResponse, SendResponse

GET_PATH = "/v3/get"
ADD_PATH = "/v3/add"
SEND_PATH = "/v3/send"


class Items(Resource):
    """Saved item operations."""

    def get(
        self,
        options: Optional[RetrieveOptions | Mapping[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> ApiResult[RetrieveResponse]:
        """Retrieve saved items.

        Parameters
        ----------
        options
            Retrieve options in API field names, sent verbatim. Use
            :func:`pocket.retrieve_options` to build them from Python values.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Success | Failure
            ``Success`` with the decoded body, or ``Failure`` with the error.
        """
        payload = build_retrieve_payload(self._credentials, options)
        return self._post(GET_PATH, payload, timeout=timeout)

    def get_or_raise(
        self,
        options: Optional[RetrieveOptions | Mapping[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> RetrieveResponse:
        """Like :meth:`get`, but return the body and raise the error on failure.

        Raises
        ------
        pocket.errors.PocketError
            ``TransportError``, ``ApiError`` or ``DecodeError``.
        """
        return cast(RetrieveResponse, self.get(options, timeout=timeout).unwrap())

    def add(
        self,
        options: AddOptions | Mapping[str, Any],
        *,
        timeout: Optional[float] = None,
    ) -> ApiResult[AddResponse]:
        """Save a new item.

        Parameters
        ----------
        options
            Must contain ``url``; may contain ``tags`` (string or list),
            ``title`` and ``tweet_id``. Other keys are dropped.
        timeout
            Request timeout in seconds.
        """
        payload = build_add_payload(self._credentials, options)
        dropped = sorted(set(options) - set(payload))
        if dropped:
            self._logger.debug("Dropping unsupported add options: %s", dropped)
        return self._post(ADD_PATH, payload, timeout=timeout)

    def send(
        self,
        actions: ActionBatch | Mapping[str, Any] | Sequence[Any],
        *,
        timestamp: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> ApiResult[SendResponse]:
        """Send a batch of modify actions in one request.

        Parameters
        ----------
        actions
            An :class:`ActionBatch`, one plain action map, or a list of them.
        timestamp
            Epoch seconds stamped on every action; defaults to now.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Success | Failure
            On success, ``action_results`` holds one entry per action in
            submission order.
        """
        batch = ActionBatch.of(actions)
        if not len(batch):
            self._logger.warning("Sending an empty action batch")
        payload = build_send_payload(self._credentials, batch, timestamp)
        return self._post(SEND_PATH, payload, timeout=timeout)
