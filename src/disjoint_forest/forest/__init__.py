"""Disjoint-set forest.

This package provides:
- UnionFind: the forest controller
- Policy: compression / join-order configuration
- Item, SetInfo: snapshots returned by lookups
- ItemNotFoundError, SetNotFoundError: lookup failures
"""

from disjoint_forest.forest.errors import ForestError, ItemNotFoundError, SetNotFoundError
from disjoint_forest.forest.items import Item, SetInfo
from disjoint_forest.forest.members import Aggregate, MemberList
from disjoint_forest.forest.policy import Policy
from disjoint_forest.forest.union_find import UnionFind

__all__ = [
    "UnionFind",
    "Policy",
    "Item",
    "SetInfo",
    "Aggregate",
    "MemberList",
    "ForestError",
    "ItemNotFoundError",
    "SetNotFoundError",
]
