"""Session-lifetime log of every ResultItem the gateway has returned."""

from collections.abc import Iterable

from models.result_item import ResultItem


class AccumulatedRecordSet:
    """
    Ordered, append-only, deduplicated by item id.

    Bookkeeping only: the resolver never reads from it.
    """

    def __init__(self):
        self._items: dict[str, ResultItem] = {}

    def merge(self, items: Iterable[ResultItem]) -> int:
        """
        Append items whose id has not been seen yet.

        Returns:
            Number of items actually added
        """
        added = 0
        for item in items:
            if item.id in self._items:
                continue
            self._items[item.id] = item
            added += 1
        return added

    def items(self) -> list[ResultItem]:
        return list(self._items.values())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)
