"""Public package surface for the pocket Python client."""

from .actions import Action, ActionBatch, ActionKind
from .client import Pocket
from .credentials import DEFAULT_SITE, Credentials
from .errors import ApiError, DecodeError, PocketError, TransportError
from ._common_types import TagFilter, normalize_tags
from .resources.items_types import retrieve_options
from .response import ApiResult, Failure, Success

__all__ = [
    "Action",
    "ActionBatch",
    "ActionKind",
    "ApiError",
    "ApiResult",
    "Credentials",
    "DEFAULT_SITE",
    "DecodeError",
    "Failure",
    "Pocket",
    "PocketError",
    "Success",
    "TagFilter",
    "TransportError",
    "normalize_tags",
    "retrieve_options",
]
