"""Lookup errors raised by the forest."""


class ForestError(LookupError):
    """Base class for invalid identifier lookups."""

    pass


class ItemNotFoundError(ForestError):
    """Identifier was never allocated, was removed, or is out of range."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Item {item_id} does not exist")


class SetNotFoundError(ForestError):
    """Identifier is not a live set representative."""

    def __init__(self, set_id: int) -> None:
        self.set_id = set_id
        super().__init__(f"Set {set_id} does not exist")
