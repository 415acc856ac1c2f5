"""Request payload assembly for the get, add and send endpoints."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .actions import ActionBatch
from .credentials import Credentials
from ._common_types import normalize_tags

# Fields the add endpoint accepts; anything else is dropped.
ADD_OPTIONS: tuple[str, ...] = ("url", "tags", "title", "tweet_id")


def build_retrieve_payload(credentials: Credentials, options: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Credentials plus the caller's retrieve options, verbatim."""
    return {**credentials.auth_fields(), **dict(options or {})}


def build_add_payload(credentials: Credentials, options: Mapping[str, Any]) -> dict[str, Any]:
    """Credentials plus the allow-listed add options, with ``tags`` normalized."""
    filtered = {key: value for key, value in options.items() if key in ADD_OPTIONS}
    if "tags" in filtered:
        filtered["tags"] = normalize_tags(filtered["tags"])
    return {**credentials.auth_fields(), **filtered}


def build_send_payload(
    credentials: Credentials,
    batch: ActionBatch,
    timestamp: Optional[int] = None,
) -> dict[str, Any]:
    """Credentials plus the batch's actions, stamped with one shared timestamp."""
    return {**credentials.auth_fields(), "actions": batch.stamp(timestamp)}


__all__ = [
    "ADD_OPTIONS",
    "build_add_payload",
    "build_retrieve_payload",
    "build_send_payload",
]
