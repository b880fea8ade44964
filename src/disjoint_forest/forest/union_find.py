"""UnionFind (disjoint-set forest) with weighted union and identifier recycling.

Items are allocated with positive integer ids and stored in slot lists
indexed by ``id - 1``. Each representative owns an aggregate holding the set
size and its members in join order, so a whole set can be enumerated and
removed in O(set size). Removed ids go to a LIFO pool and are handed out
again by the next make_set calls.
"""

from collections.abc import Iterator
import logging
from typing import Any, Generic, TypeVar

from disjoint_forest.forest.errors import ItemNotFoundError, SetNotFoundError
from disjoint_forest.forest.items import Item, _Node
from disjoint_forest.forest.policy import Policy

logger = logging.getLogger(__name__)

Payload = TypeVar("Payload")


class UnionFind(Generic[Payload]):
    """Disjoint-set forest over integer item ids.

    Complexity:
        make_set, join, set_exists, item_exists, counters: O(1)
        find_set: O(path length), amortized O(log n) or better with
            path compression
        remove_set: O(set size)

    Example:
        >>> uf = UnionFind(Policy.BOTH)
        >>> a, b = uf.make_set("a"), uf.make_set("b")
        >>> uf.join(a, b)
        >>> uf.find_set(b).id
        1
    """

    def __init__(self, policy: Policy = Policy.NONE) -> None:
        """Initialize an empty forest.

        Args:
            policy: Compression and join-order behavior
        """
        self._policy = policy
        self._nodes: list[_Node | None] = []
        self._sets: list[_Node | None] = []
        self._free_ids: list[int] = []
        self._sets_amount = 0
        self._items_amount = 0

    @property
    def policy(self) -> Policy:
        return self._policy

    def make_set(self, payload: Payload | None = None) -> int:
        """Create a singleton set and return the id of its only item.

        The most recently freed id is reused first; otherwise the next
        unused id after the current range is issued.

        Args:
            payload: Value stored with the item, opaque to the forest.

        Returns:
            The new item id.
        """
        if self._free_ids:
            item_id = self._free_ids.pop()
            logger.debug(f"Recycling id {item_id}")
        else:
            item_id = len(self._nodes) + 1

        node = _Node(item_id, payload)

        # Recycled ids can lie past the trimmed range.
        while len(self._nodes) < item_id:
            self._nodes.append(None)
            self._sets.append(None)
        self._nodes[item_id - 1] = node
        self._sets[item_id - 1] = node

        self._sets_amount += 1
        self._items_amount += 1
        return item_id

    def find_set(self, item_id: int) -> Item:
        """Find the representative of the set containing an item.

        With a compressing policy every item visited on the way up is
        re-parented directly to the root.

        Args:
            item_id: Id of any live item.

        Returns:
            Snapshot of the representative, including its aggregate.

        Raises:
            ItemNotFoundError: If item_id is not a live item.
        """
        return self._find_root(self._get_node(item_id)).snapshot()

    def get_item(self, item_id: int) -> Item:
        """Return a snapshot of an item.

        Raises:
            ItemNotFoundError: If item_id is not a live item.
        """
        return self._get_node(item_id).snapshot()

    def get_set(self, set_id: int) -> Item:
        """Return a snapshot of a representative.

        Raises:
            SetNotFoundError: If set_id is not a live representative.
        """
        return self._get_set_node(set_id).snapshot()

    def join(self, p: int, q: int) -> None:
        """Merge the sets represented by p and q.

        The smaller set is attached under the larger one; on equal sizes q
        goes under p. With an order-sensitive policy the two records then
        swap identity so that p names the new representative and q names
        the attached child, whichever set was physically larger.

        Args:
            p: Id of a live representative.
            q: Id of a live representative.

        Raises:
            SetNotFoundError: If p or q is not a live representative.
        """
        if p == q:
            return

        p_node = self._get_set_node(p)
        q_node = self._get_set_node(q)

        q_is_bigger = q_node.aggregate.size > p_node.aggregate.size
        root, child = (q_node, p_node) if q_is_bigger else (p_node, q_node)

        child.parent = root
        root.aggregate.merge(child.aggregate)
        child.aggregate = None

        if self._policy.preserves_order and root is q_node:
            root.id, child.id = p, q
            root.payload, child.payload = child.payload, root.payload
            self._nodes[p - 1] = root
            self._nodes[q - 1] = child
            self._sets[p - 1] = root

        self._sets[child.id - 1] = None
        self._sets_amount -= 1
        logger.debug(f"Joined set {child.id} into {root.id} (size {root.aggregate.size})")

    def remove_set(self, set_id: int) -> list[int]:
        """Remove a set and every item in it.

        The freed ids are pushed to the free pool in member order, so the
        last member is the first id handed out again.

        Args:
            set_id: Id of a live representative.

        Returns:
            The freed ids in member order.

        Raises:
            SetNotFoundError: If set_id is not a live representative.
        """
        root = self._get_set_node(set_id)
        members = list(root.aggregate.members)

        for member_id in members:
            self._nodes[member_id - 1] = None
            self._sets[member_id - 1] = None
            self._free_ids.append(member_id)
            self._items_amount -= 1

        while self._nodes and self._nodes[-1] is None:
            self._nodes.pop()
            self._sets.pop()

        self._sets_amount -= 1
        logger.debug(f"Removed set {set_id} with {len(members)} items")
        return members

    def set_exists(self, set_id: int) -> bool:
        """True if set_id is a live representative."""
        if not 1 <= set_id <= len(self._sets):
            return False
        return self._sets[set_id - 1] is not None

    def item_exists(self, item_id: int) -> bool:
        """True if item_id is a live item."""
        if not 1 <= item_id <= len(self._nodes):
            return False
        return self._nodes[item_id - 1] is not None

    def get_sets_amount(self) -> int:
        """Number of live sets."""
        return self._sets_amount

    def get_items_amount(self) -> int:
        """Number of live items."""
        return self._items_amount

    def is_connected(self, x: int, y: int) -> bool:
        """Check if two items belong to the same set.

        Raises:
            ItemNotFoundError: If either id is not a live item.
        """
        return self._find_root(self._get_node(x)) is self._find_root(self._get_node(y))

    def iter_sets(self) -> Iterator[Item]:
        """Yield a snapshot of every representative in id order."""
        for node in self._sets:
            if node is not None:
                yield node.snapshot()

    def groups(self) -> dict[int, list[int]]:
        """Get all sets as {representative id: [member ids]}."""
        return {
            node.id: list(node.aggregate.members) for node in self._sets if node is not None
        }

    def __len__(self) -> int:
        return self._items_amount

    def __contains__(self, item_id: Any) -> bool:
        return isinstance(item_id, int) and self.item_exists(item_id)

    def __repr__(self) -> str:
        return (
            f"UnionFind(policy={self._policy.value}, sets={self._sets_amount}, "
            f"items={self._items_amount})"
        )

    def _get_node(self, item_id: int) -> _Node:
        if not 1 <= item_id <= len(self._nodes):
            raise ItemNotFoundError(item_id)
        node = self._nodes[item_id - 1]
        if node is None:
            raise ItemNotFoundError(item_id)
        return node

    def _get_set_node(self, set_id: int) -> _Node:
        if not 1 <= set_id <= len(self._sets):
            raise SetNotFoundError(set_id)
        node = self._sets[set_id - 1]
        if node is None:
            raise SetNotFoundError(set_id)
        return node

    def _find_root(self, node: _Node) -> _Node:
        path: list[_Node] = []
        compress = self._policy.compresses
        while node.parent is not None:
            if compress:
                path.append(node)
            node = node.parent

        for visited in path:
            visited.parent = node
        return node
