"""Extrinsic minimum priority queue backed by an array binary heap.

Items are keyed by identity (hash/equality) and carry a priority supplied by
the caller, which can later be changed with `ArrayHeapMinPQ.change_priority`.

Layout:
    ``items`` is a 1-indexed list: slot 0 holds a sentinel node so that the
    parent of slot ``i`` is ``i // 2`` and its children are ``2 * i`` and
    ``2 * i + 1``. ``positions`` maps each tracked item to its slot and is
    updated together with ``items`` on every swap, insert and removal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T", bound=Hashable)

START_INDEX = 1


@dataclass
class PriorityNode(Generic[T]):
    """Heap slot: an item and its current priority."""

    item: Optional[T]
    priority: float

    def __str__(self) -> str:
        return f"PriorityNode(item={self.item!r}, priority={self.priority})"


class ArrayHeapMinPQ(Generic[T]):
    """Min-priority queue with O(log n) updates of arbitrary items.

    Operations:
        add, remove_min, change_priority: O(log n)
        peek_min, contains, size: O(1)

    Equal priorities are not extracted in any guaranteed order.
    """

    def __init__(self) -> None:
        self.items: List[PriorityNode[T]] = [PriorityNode(None, 0.0)]
        self.positions: Dict[T, int] = {}

    def _swap(self, a: int, b: int) -> None:
        items = self.items
        items[a], items[b] = items[b], items[a]
        self.positions[items[a].item] = a  # type: ignore[index]
        self.positions[items[b].item] = b  # type: ignore[index]

    def _percolate_up(self, curr_index: int) -> None:
        items = self.items
        parent = curr_index // 2
        while parent >= START_INDEX and items[curr_index].priority < items[parent].priority:
            self._swap(curr_index, parent)
            curr_index = parent
            parent = curr_index // 2

    def _percolate_down(self, curr_index: int) -> None:
        items = self.items
        end_index = len(items) - 1
        left = curr_index * 2
        while left <= end_index:
            smaller_child = left
            right = left + 1
            if right <= end_index and items[right].priority < items[left].priority:
                smaller_child = right

            if items[curr_index].priority <= items[smaller_child].priority:
                break

            self._swap(curr_index, smaller_child)
            curr_index = smaller_child
            left = curr_index * 2

    def add(self, item: T, priority: float) -> None:
        """Insert ``item`` with ``priority``.

        Raises:
            ValueError: If ``item`` is already in the queue.
        """
        if item in self.positions:
            raise ValueError(f"Item {item!r} is already present in the priority queue.")
        self.items.append(PriorityNode(item, priority))
        end_index = len(self.items) - 1
        self.positions[item] = end_index
        self._percolate_up(end_index)

    def contains(self, item: T) -> bool:
        """Return True if ``item`` is in the queue."""
        return item in self.positions

    def peek_min(self) -> T:
        """Return the item with the smallest priority without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if self.is_empty():
            raise IndexError("peek_min() called on an empty priority queue.")
        return self.items[START_INDEX].item  # type: ignore[return-value]

    def remove_min(self) -> T:
        """Remove and return the item with the smallest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if self.is_empty():
            raise IndexError("remove_min() called on an empty priority queue.")

        items = self.items
        last = items.pop()
        if len(items) == START_INDEX:
            # ``last`` was the only element
            del self.positions[last.item]  # type: ignore[arg-type]
            return last.item  # type: ignore[return-value]

        root = items[START_INDEX]
        items[START_INDEX] = last
        self.positions[last.item] = START_INDEX  # type: ignore[index]
        del self.positions[root.item]  # type: ignore[arg-type]
        self._percolate_down(START_INDEX)
        return root.item  # type: ignore[return-value]

    def change_priority(self, item: T, priority: float) -> None:
        """Replace the priority of an existing item and restore heap order.

        Raises:
            KeyError: If ``item`` is not in the queue.
        """
        curr_index = self._find(item)
        if curr_index < START_INDEX:
            raise KeyError(f"Item {item!r} not found in the priority queue.")
        self.items[curr_index].priority = priority
        # At most one of these moves the node
        self._percolate_up(curr_index)
        self._percolate_down(curr_index)

    def priority_of(self, item: T) -> float:
        """Return the current priority of ``item``.

        Raises:
            KeyError: If ``item`` is not in the queue.
        """
        curr_index = self._find(item)
        if curr_index < START_INDEX:
            raise KeyError(f"Item {item!r} not found in the priority queue.")
        return self.items[curr_index].priority

    def _find(self, item: T) -> int:
        return self.positions.get(item, -1)

    def size(self) -> int:
        """Return the number of items in the queue."""
        return len(self.items) - START_INDEX

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item: object) -> bool:
        return item in self.positions

    def __repr__(self) -> str:
        return f"ArrayHeapMinPQ(size={self.size()})"

    def __str__(self) -> str:
        # Internal array order, sentinel included; for debugging
        return "\n".join(str(node) for node in self.items)
