"""Shared types and normalization helpers.

This module contains:
- Validation mode type (shared across option helpers)
- Tag sentinels and the tag normalizer (used by actions, add and retrieve)
- Item ID list normalization (single id or sequence of ids)
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Sequence, Union

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


# --- Tags --- #
class TagFilter(str, Enum):
    """Reserved tag markers, distinct from any literal tag string."""

    UNTAGGED = "_untagged_"
    ANY = "*"


TagsInput = Union[str, Sequence[str], TagFilter]

TAG_SEPARATOR = ", "


def normalize_tags(tags: TagsInput) -> str:
    """Convert a tag value into the string the API expects.

    Parameters
    ----------
    tags
        A single tag string, an ordered sequence of tag strings, or a
        :class:`TagFilter` sentinel.

    Returns
    -------
    str
        The sentinel's protocol token, the sequence joined with ``", "`` in
        input order, or the string unchanged. Tags are neither trimmed nor
        deduplicated.
    """
    if isinstance(tags, TagFilter):
        return tags.value
    if isinstance(tags, str):
        return tags
    return TAG_SEPARATOR.join(tags)


# --- Item ID Normalization --- #
def _normalize_id_list(item_ids: str | Sequence[str]) -> list[str]:
    """Normalize a single item id or a sequence of ids to a list.

    Order and duplicates are kept, and ids are not validated: the API decides
    what a valid item id is.
    """
    if isinstance(item_ids, (str, int)):
        return [str(item_ids)]
    return [str(item_id) for item_id in item_ids]


__all__ = [
    "TAG_SEPARATOR",
    "TagFilter",
    "TagsInput",
    "ValidationMode",
    "normalize_tags",
]
