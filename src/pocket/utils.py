"""Shared helpers for the Pocket client."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Any, Iterable, Iterator, Optional


def epoch_seconds(value: Optional[datetime | int | float] = None) -> int:
    """Return Unix epoch seconds for ``value``, or for now when omitted."""
    if value is None:
        return int(time.time())
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(value)


def flatten(values: Iterable[Any]) -> Iterator[Any]:
    """Yield items from arbitrarily nested lists/tuples, preserving order."""
    for value in values:
        if isinstance(value, (list, tuple)):
            yield from flatten(value)
        else:
            yield value
