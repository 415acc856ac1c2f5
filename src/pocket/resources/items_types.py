"""Types, structures, and option helpers for the items resource."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Literal, Optional, TypedDict, get_args

from typing_extensions import ReadOnly, Required

from ..utils import epoch_seconds
from .._common_types import TagFilter, ValidationMode, normalize_tags

_logger = logging.getLogger(__name__)


# --- Response shapes --- #
class ItemResponse(TypedDict, total=False):
    """Readonly item dict as returned in the retrieve ``list`` map."""
    item_id: ReadOnly[str]
    resolved_id: ReadOnly[str]
    given_url: ReadOnly[str]
    given_title: ReadOnly[str]
    resolved_url: ReadOnly[str]
    resolved_title: ReadOnly[str]
    favorite: ReadOnly[str]
    status: ReadOnly[str]
    excerpt: ReadOnly[str]
    is_article: ReadOnly[str]
    has_image: ReadOnly[str]
    has_video: ReadOnly[str]
    word_count: ReadOnly[str]
    time_added: ReadOnly[str]
    time_updated: ReadOnly[str]
    tags: ReadOnly[dict[str, dict[str, str]]]


class RetrieveResponse(TypedDict, total=False):
    """Readonly body of ``/v3/get``."""
    status: ReadOnly[int]
    complete: ReadOnly[int]
    list: ReadOnly[dict[str, ItemResponse] | list[Any]]
    error: ReadOnly[Optional[str]]
    search_meta: ReadOnly[dict[str, Any]]
    since: ReadOnly[int]


class AddResponse(TypedDict, total=False):
    """Readonly body of ``/v3/add``."""
    item: ReadOnly[ItemResponse]
    status: ReadOnly[int]


class SendResponse(TypedDict, total=False):
    """Readonly body of ``/v3/send``; one result per submitted action, in order."""
    status: ReadOnly[int]
    action_results: ReadOnly[list[Any]]
    action_errors: ReadOnly[list[Any]]


# --- Add options --- #
class AddOptions(TypedDict, total=False):
    url: Required[str]
    tags: str | list[str]
    title: str
    tweet_id: str


# --- Retrieve options --- #
ItemState = Literal["unread", "archive", "all"]
ITEM_STATES: tuple[ItemState, ...] = get_args(ItemState)

ContentType = Literal["article", "video", "image"]
CONTENT_TYPES: tuple[ContentType, ...] = get_args(ContentType)

SortOrder = Literal["newest", "oldest", "title", "site"]
SORT_ORDERS: tuple[SortOrder, ...] = get_args(SortOrder)

DetailType = Literal["simple", "complete"]
DETAIL_TYPES: tuple[DetailType, ...] = get_args(DetailType)


class RetrieveOptions(TypedDict, total=False):
    """Option map for ``/v3/get`` in API-native field names."""
    state: ItemState
    favorite: Literal[0, 1]
    tag: str
    contentType: ContentType
    sort: SortOrder
    detailType: DetailType
    search: str
    domain: str
    since: int
    count: int
    offset: int


def _normalize_retrieve_options(
    *,
    state: Optional[ItemState] = None,
    favorite: Optional[bool] = None,
    tag: Optional[str | TagFilter] = None,
    content_type: Optional[ContentType] = None,
    sort: Optional[SortOrder] = None,
    detail_type: Optional[DetailType] = None,
    search: Optional[str] = None,
    domain: Optional[str] = None,
    since: Optional[int | datetime] = None,
    count: Optional[int] = None,
    offset: Optional[int] = None,
) -> tuple[dict[str, object], dict[str, object], list[str]]:
    """Map Python-side retrieve arguments to API fields.

    Returns
    -------
    tuple
        ``(valid, invalid, errors)``: API-named fields that passed validation,
        API-named fields that did not (raw values), and one error message per
        invalid field.
    """
    valid: dict[str, object] = {}
    invalid: dict[str, object] = {}
    errors: list[str] = []

    def _check(api_name: str, value: object, ok: bool, converted: object = None) -> None:
        if ok:
            valid[api_name] = value if converted is None else converted
        else:
            invalid[api_name] = value
            errors.append(f"Invalid {api_name}: {value!r}")

    if state is not None:
        _check("state", state, state in ITEM_STATES)
    if favorite is not None:
        _check("favorite", favorite, isinstance(favorite, (bool, int)) and favorite in (0, 1), int(bool(favorite)))
    if tag is not None:
        ok = isinstance(tag, TagFilter) or (isinstance(tag, str) and bool(tag))
        _check("tag", tag, ok, normalize_tags(tag) if ok else None)
    if content_type is not None:
        _check("contentType", content_type, content_type in CONTENT_TYPES)
    if sort is not None:
        _check("sort", sort, sort in SORT_ORDERS)
    if detail_type is not None:
        _check("detailType", detail_type, detail_type in DETAIL_TYPES)
    if search is not None:
        _check("search", search, isinstance(search, str))
    if domain is not None:
        _check("domain", domain, isinstance(domain, str))
    if since is not None:
        ok = isinstance(since, datetime) or (isinstance(since, int) and not isinstance(since, bool) and since >= 0)
        _check("since", since, ok, epoch_seconds(since) if ok else None)
    for api_name, number in (("count", count), ("offset", offset)):
        if number is not None:
            _check(api_name, number, isinstance(number, int) and not isinstance(number, bool) and number >= 0)

    return valid, invalid, errors


def retrieve_options(
    *,
    state: Optional[ItemState] = None,
    favorite: Optional[bool] = None,
    tag: Optional[str | TagFilter] = None,
    content_type: Optional[ContentType] = None,
    sort: Optional[SortOrder] = None,
    detail_type: Optional[DetailType] = None,
    search: Optional[str] = None,
    domain: Optional[str] = None,
    since: Optional[int | datetime] = None,
    count: Optional[int] = None,
    offset: Optional[int] = None,
    validation: ValidationMode = "warn",
) -> RetrieveOptions:
    """Build a retrieve option map from Python values.

    Parameters
    ----------
    state
        ``"unread"``, ``"archive"`` or ``"all"``.
    favorite
        Only favorited (``True``) or only un-favorited (``False``) items.
    tag
        Tag name, or ``TagFilter.UNTAGGED`` / ``TagFilter.ANY``.
    content_type
        ``"article"``, ``"video"`` or ``"image"``.
    sort
        ``"newest"``, ``"oldest"``, ``"title"`` or ``"site"``.
    detail_type
        ``"simple"`` or ``"complete"``.
    search
        Only items whose title or url contain this string.
    domain
        Only items from this domain.
    since
        Only items modified since this time (epoch seconds or datetime).
    count, offset
        Paging; non-negative integers.
    validation
        Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
        inputs with warnings, and ``"strict"`` raises on invalid inputs.

    Returns
    -------
    RetrieveOptions
        Options keyed by API field names; unset arguments are omitted.
    """
    valid, invalid, errors = _normalize_retrieve_options(
        state=state,
        favorite=favorite,
        tag=tag,
        content_type=content_type,
        sort=sort,
        detail_type=detail_type,
        search=search,
        domain=domain,
        since=since,
        count=count,
        offset=offset,
    )
    if errors:
        if validation == "strict":
            raise ValueError("; ".join(errors))
        if validation == "warn":
            for error in errors:
                _logger.warning("%s (dropped from retrieve options)", error)
        if validation == "off":
            valid.update(invalid)
    return valid  # type: ignore[return-value]


__all__ = [
    "AddOptions",
    "AddResponse",
    "CONTENT_TYPES",
    "ContentType",
    "DETAIL_TYPES",
    "DetailType",
    "ITEM_STATES",
    "ItemResponse",
    "ItemState",
    "RetrieveOptions",
    "RetrieveResponse",
    "SORT_ORDERS",
    "SendResponse",
    "SortOrder",
    "retrieve_options",
]
