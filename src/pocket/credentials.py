"""Credentials and the environment-backed defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

DEFAULT_SITE = os.environ.get("POCKET_SITE", "https://getpocket.com")


@dataclass(frozen=True)
class Credentials:
    """Consumer key, access token and the API site they apply to."""

    consumer_key: str
    access_token: str
    site: str = DEFAULT_SITE

    def __post_init__(self) -> None:
        object.__setattr__(self, "site", self.site.rstrip("/"))

    @classmethod
    def from_env(cls, *, site: Optional[str] = None) -> "Credentials":
        """Build credentials from ``POCKET_CONSUMER_KEY`` / ``POCKET_ACCESS_TOKEN``.

        Raises
        ------
        ValueError
            If either variable is unset.
        """
        consumer_key = os.environ.get("POCKET_CONSUMER_KEY")
        access_token = os.environ.get("POCKET_ACCESS_TOKEN")
        if not consumer_key or not access_token:
            raise ValueError("POCKET_CONSUMER_KEY and POCKET_ACCESS_TOKEN must be set")
        return cls(consumer_key, access_token, site or DEFAULT_SITE)

    def auth_fields(self) -> dict[str, str]:
        return {"consumer_key": self.consumer_key, "access_token": self.access_token}


CredentialsInput = Union[Credentials, Mapping[str, str], Sequence[str]]


def _normalize_credentials(value: CredentialsInput | object, *, site: Optional[str] = None) -> Credentials:
    """Convert any accepted credentials shape into :class:`Credentials`.

    Parameters
    ----------
    value
        A ``Credentials`` instance, a mapping with ``consumer_key`` and
        ``access_token`` (and optionally ``site``), or a
        ``(consumer_key, access_token)`` pair.
    site
        Site override; wins over a ``site`` carried by ``value``.

    Raises
    ------
    ValueError
        If the input has none of the supported shapes.
    """
    if isinstance(value, Credentials):
        if site is None:
            return value
        return Credentials(value.consumer_key, value.access_token, site)
    if isinstance(value, Mapping):
        try:
            key, token = value["consumer_key"], value["access_token"]
        except KeyError as exc:
            raise ValueError(f"Credentials mapping is missing {exc.args[0]!r}") from exc
        return Credentials(key, token, site or value.get("site") or DEFAULT_SITE)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and len(value) == 2:
        key, token = value
        return Credentials(key, token, site or DEFAULT_SITE)
    raise ValueError(f"Unsupported credentials input {type(value)}")


__all__ = ["Credentials", "CredentialsInput", "DEFAULT_SITE"]
