"""Item records held by the forest and the snapshots handed to callers."""

from dataclasses import dataclass
from typing import Any

from disjoint_forest.forest.members import Aggregate


@dataclass(frozen=True)
class SetInfo:
    """Copy of a representative's aggregate."""

    size: int
    members: tuple[int, ...]


@dataclass(frozen=True)
class Item:
    """Snapshot of one item at the time it was looked up.

    Attributes:
        id: Identifier of the item
        payload: Caller-owned value given to make_set
        parent_id: Identifier of the parent, None for a representative
        info: Set aggregate, present only for a representative
    """

    id: int
    payload: Any = None
    parent_id: int | None = None
    info: SetInfo | None = None

    @property
    def is_representative(self) -> bool:
        """True if the item is the root of its set."""
        return self.parent_id is None

    @property
    def size(self) -> int:
        """Set size, 0 for a non-representative."""
        return self.info.size if self.info is not None else 0

    @property
    def members(self) -> tuple[int, ...]:
        """Member ids in join order, empty for a non-representative."""
        return self.info.members if self.info is not None else ()


class _Node:
    """Mutable record stored in the forest's slots."""

    __slots__ = ("id", "payload", "parent", "aggregate")

    def __init__(self, item_id: int, payload: Any = None) -> None:
        self.id = item_id
        self.payload = payload
        self.parent: _Node | None = None
        self.aggregate: Aggregate | None = Aggregate(item_id)

    def snapshot(self) -> Item:
        info = None
        if self.aggregate is not None:
            info = SetInfo(size=self.aggregate.size, members=self.aggregate.member_ids())
        return Item(
            id=self.id,
            payload=self.payload,
            parent_id=self.parent.id if self.parent is not None else None,
            info=info,
        )
