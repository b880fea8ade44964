"""Behavioral policies for the disjoint-set forest."""

from enum import Enum


class Policy(Enum):
    """Policy selected when a forest is constructed.

    - none: no path compression, no order preservation
    - optimize: path compression during find
    - sensitive_order: first join argument stays the visible representative
    - both: compression and order preservation
    """

    NONE = "none"
    OPTIMIZE = "optimize"
    SENSITIVE_ORDER = "sensitive_order"
    BOTH = "both"

    @property
    def compresses(self) -> bool:
        """True if find re-parents visited items to the root."""
        return self in (Policy.OPTIMIZE, Policy.BOTH)

    @property
    def preserves_order(self) -> bool:
        """True if join keeps its first argument as the set id."""
        return self in (Policy.SENSITIVE_ORDER, Policy.BOTH)
