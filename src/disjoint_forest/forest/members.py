"""Per-representative aggregate: set size and ordered member list.

The member list is a singly linked list with a tail reference so that
merging two sets splices one list onto the other in O(1). Nodes are moved
between lists, never copied.
"""

from collections.abc import Iterator


class _MemberNode:
    __slots__ = ("value", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _MemberNode | None = None


class MemberList:
    """Insertion-ordered list of member ids supporting O(1) splice."""

    __slots__ = ("_head", "_tail")

    def __init__(self, first: int | None = None) -> None:
        self._head: _MemberNode | None = None
        self._tail: _MemberNode | None = None
        if first is not None:
            self.append(first)

    def append(self, value: int) -> None:
        node = _MemberNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def splice(self, other: "MemberList") -> None:
        """Move every node of other onto the end of this list.

        Args:
            other: List to drain. It is empty afterwards.
        """
        if other is self or other._head is None:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
        self._tail = other._tail
        other._head = None
        other._tail = None

    def is_empty(self) -> bool:
        return self._head is None

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"MemberList({list(self)!r})"


class Aggregate:
    """Size and member list owned by exactly one representative.

    Attributes:
        size: Number of items in the set
        members: Member ids in the order they joined the set
    """

    __slots__ = ("size", "members")

    def __init__(self, item_id: int) -> None:
        self.size = 1
        self.members = MemberList(item_id)

    def merge(self, other: "Aggregate") -> None:
        """Absorb other into this aggregate.

        Sizes add up and other's members are appended after ours. other is
        left empty with size 0 and must be discarded by the caller.
        """
        self.size += other.size
        self.members.splice(other.members)
        other.size = 0

    def member_ids(self) -> tuple[int, ...]:
        return tuple(self.members)
