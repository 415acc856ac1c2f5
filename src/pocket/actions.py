"""Modify-endpoint actions and the chainable :class:`ActionBatch` builder.

Each module-level constructor returns one action for a single item id, or one
action per id (same kind, same extra fields) for a sequence of ids::

    >>> archive("1")
    {'action': 'archive', 'item_id': '1'}
    >>> favorite(["2", "3"])
    [{'action': 'favorite', 'item_id': '2'}, {'action': 'favorite', 'item_id': '3'}]

``ActionBatch`` exposes the same operations; every call returns a new batch
with the action(s) appended and leaves the receiver untouched::

    >>> batch = ActionBatch().favorite(["1234", "2345"]).unfavorite("9876")
    >>> len(batch)
    3

Ids are not validated here. The API is the authority on what a valid item is.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Literal, Mapping, Optional, Sequence, TypedDict, Union, get_args

from typing_extensions import Required

from ._common_types import TagsInput, _normalize_id_list, normalize_tags
from .utils import epoch_seconds, flatten

ActionKind = Literal[
    "add", "archive", "readd", "favorite", "unfavorite", "delete",
    "tags_add", "tags_remove", "tags_replace", "tags_clear", "tag_rename", "tag_delete",
]
ACTION_KINDS: tuple[ActionKind, ...] = get_args(ActionKind)


class Action(TypedDict, total=False):
    """One modify action as sent to ``/v3/send``."""
    action: Required[ActionKind]
    item_id: str
    url: str
    ref_id: str
    title: str
    tags: str
    tag: str
    old_tag: str
    new_tag: str
    time: str
    timestamp: int


ItemIds = Union[str, Sequence[str]]
TimeInput = Optional[Union[int, str]]


def _build(kind: ActionKind, item_ids: ItemIds, **fields: Any) -> Action | list[Action]:
    extra = {key: value for key, value in fields.items() if value is not None}
    if "time" in extra:
        extra["time"] = str(extra["time"])
    if isinstance(item_ids, (str, int)):
        return {"action": kind, "item_id": str(item_ids), **extra}  # type: ignore[return-value]
    return [
        {"action": kind, "item_id": item_id, **extra}  # type: ignore[misc]
        for item_id in _normalize_id_list(item_ids)
    ]


# --- Action constructors --- #
def add(target: Mapping[str, Any]) -> Action:
    """Add an existing item (``item_id``) or a new url (``url``) to the list.

    ``target`` may also carry ``title``, ``tags``, ``time`` and ``ref_id``;
    ``tags`` goes through :func:`normalize_tags`. An ``action`` key in
    ``target`` is ignored; the kind is always ``add``.
    """
    action: dict[str, Any] = {"action": "add"}
    for key, value in target.items():
        if key == "action":
            continue
        if key == "tags":
            value = normalize_tags(value)
        elif key == "time":
            value = str(value)
        action[key] = value
    return action  # type: ignore[return-value]


def archive(item_ids: ItemIds, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("archive", item_ids, time=time)


def readd(item_ids: ItemIds, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("readd", item_ids, time=time)


def favorite(item_ids: ItemIds, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("favorite", item_ids, time=time)


def unfavorite(item_ids: ItemIds, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("unfavorite", item_ids, time=time)


def delete(item_ids: ItemIds, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("delete", item_ids, time=time)


def tags_add(item_ids: ItemIds, tags: TagsInput, *, time: TimeInput = None) -> Action | list[Action]:
    """Add ``tags`` to each item.

    A single tags value is applied to every id; a sequence of tags is joined
    into one value, never paired positionally with the ids.
    """
    return _build("tags_add", item_ids, tags=normalize_tags(tags), time=time)


def tags_remove(item_ids: ItemIds, tags: TagsInput, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("tags_remove", item_ids, tags=normalize_tags(tags), time=time)


def tags_replace(item_ids: ItemIds, tags: TagsInput, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("tags_replace", item_ids, tags=normalize_tags(tags), time=time)


def tags_clear(item_ids: ItemIds, *, time: TimeInput = None) -> Action | list[Action]:
    return _build("tags_clear", item_ids, time=time)


def rename_tag(item_id: str, old_tag: str, new_tag: str, *, time: TimeInput = None) -> Action:
    """Rename ``old_tag`` to ``new_tag``. Single item only."""
    return _build("tag_rename", str(item_id), old_tag=old_tag, new_tag=new_tag, time=time)  # type: ignore[return-value]


def delete_tag(item_id: str, tag: str, *, time: TimeInput = None) -> Action:
    return _build("tag_delete", str(item_id), tag=tag, time=time)  # type: ignore[return-value]


class ActionBatch:
    """Ordered, immutable sequence of actions sent in one request.

    Parameters
    ----------
    actions
        Initial actions, kept in the given order.
    """

    __slots__ = ("_actions",)

    def __init__(self, actions: Iterable[Mapping[str, Any]] = ()) -> None:
        collected: list[Action] = []
        for action in actions:
            if not isinstance(action, Mapping):
                raise TypeError(f"Actions must be mappings, got {type(action).__name__}")
            collected.append(dict(action))  # type: ignore[arg-type]
        self._actions: tuple[Action, ...] = tuple(collected)

    @classmethod
    def of(cls, actions: "ActionBatch | Mapping[str, Any] | Sequence[Any]") -> "ActionBatch":
        """Build a batch from a batch, one action map, or a (nested) list of maps.

        Batches inside the list contribute their actions in order.
        """
        if isinstance(actions, ActionBatch):
            return actions
        if isinstance(actions, Mapping):
            return cls([actions])
        expanded: list[Any] = []
        for action in flatten(actions):
            if isinstance(action, ActionBatch):
                expanded.extend(action._actions)
            else:
                expanded.append(action)
        return cls(expanded)

    @property
    def actions(self) -> tuple[Action, ...]:
        """Copies of the accumulated actions, in insertion order."""
        return tuple(dict(action) for action in self._actions)  # type: ignore[misc]

    def _extend(self, new: Action | list[Action]) -> "ActionBatch":
        appended = new if isinstance(new, list) else [new]
        return ActionBatch([*self._actions, *appended])

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionBatch):
            return NotImplemented
        return self._actions == other._actions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ActionBatch({list(self._actions)!r})"

    # --- Chainable operations --- #
    def add(self, target: Mapping[str, Any]) -> "ActionBatch":
        return self._extend(add(target))

    def archive(self, item_ids: ItemIds, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(archive(item_ids, time=time))

    def readd(self, item_ids: ItemIds, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(readd(item_ids, time=time))

    def favorite(self, item_ids: ItemIds, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(favorite(item_ids, time=time))

    def unfavorite(self, item_ids: ItemIds, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(unfavorite(item_ids, time=time))

    def delete(self, item_ids: ItemIds, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(delete(item_ids, time=time))

    def tags_add(self, item_ids: ItemIds, tags: TagsInput, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(tags_add(item_ids, tags, time=time))

    def tags_remove(self, item_ids: ItemIds, tags: TagsInput, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(tags_remove(item_ids, tags, time=time))

    def tags_replace(self, item_ids: ItemIds, tags: TagsInput, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(tags_replace(item_ids, tags, time=time))

    def tags_clear(self, item_ids: ItemIds, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(tags_clear(item_ids, time=time))

    def rename_tag(self, item_id: str, old_tag: str, new_tag: str, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(rename_tag(item_id, old_tag, new_tag, time=time))

    def delete_tag(self, item_id: str, tag: str, *, time: TimeInput = None) -> "ActionBatch":
        return self._extend(delete_tag(item_id, tag, time=time))

    # --- Dispatch --- #
    def stamp(self, timestamp: Optional[int] = None) -> list[Action]:
        """Return copies of the actions, all stamped with one ``timestamp``.

        Parameters
        ----------
        timestamp
            Unix epoch seconds; defaults to now. Every action gets the same
            value.

        Returns
        -------
        list[Action]
            New action dicts; the batch itself is not modified.
        """
        stamp = epoch_seconds() if timestamp is None else int(timestamp)
        return [{**action, "timestamp": stamp} for action in self._actions]  # type: ignore[misc]


__all__ = [
    "ACTION_KINDS",
    "Action",
    "ActionBatch",
    "ActionKind",
    "add",
    "archive",
    "delete",
    "delete_tag",
    "favorite",
    "readd",
    "rename_tag",
    "tags_add",
    "tags_clear",
    "tags_remove",
    "tags_replace",
    "unfavorite",
]
