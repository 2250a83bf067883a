"""Disjoint-set forest (union-find) with union by size and path compression.

Items are mapped to small integer ids on `make_set`. ``pointers[i]`` is the
parent id of ``i``, or, when negative, marks ``i`` as a root whose set has
``-pointers[i]`` members. Ids are never reused.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class UnionBySizeCompressingDisjointSets(Generic[T]):
    """Quick-union by size with path compression.

    Amortized cost of `find_set` and `union` is near-constant (inverse
    Ackermann).
    """

    def __init__(self) -> None:
        self.pointers: List[int] = []
        self.ids: Dict[T, int] = {}

    def make_set(self, item: T) -> None:
        """Create a singleton set containing ``item``.

        Raises:
            ValueError: If ``item`` already belongs to a set.
        """
        if item in self.ids:
            raise ValueError(f"Item {item!r} is already present in the disjoint sets.")
        self.pointers.append(-1)
        self.ids[item] = len(self.pointers) - 1

    def find_set(self, item: T) -> int:
        """Return the root id of the set containing ``item``.

        Every id visited on the way to the root is re-pointed directly at it.

        Raises:
            KeyError: If ``item`` has not been added with `make_set`.
        """
        try:
            index = self.ids[item]
        except KeyError:
            raise KeyError(f"Item {item!r} not found in the disjoint sets.") from None

        pointers = self.pointers
        visited = []
        while pointers[index] >= 0:
            visited.append(index)
            index = pointers[index]

        for visited_index in visited:
            pointers[visited_index] = index
        return index

    def union(self, item1: T, item2: T) -> bool:
        """Merge the sets containing ``item1`` and ``item2``.

        The larger set's root becomes the parent; on equal sizes ``item1``'s
        root wins.

        Returns:
            True if two sets were merged, False if the items were already
            in the same set.

        Raises:
            KeyError: If either item is unknown.
        """
        root1 = self.find_set(item1)
        root2 = self.find_set(item2)
        if root1 == root2:
            return False

        pointers = self.pointers
        # Sizes are stored negated: smaller pointer means larger set
        if pointers[root1] <= pointers[root2]:
            pointers[root1] += pointers[root2]
            pointers[root2] = root1
        else:
            pointers[root2] += pointers[root1]
            pointers[root1] = root2
        return True

    def set_size(self, item: T) -> int:
        """Return the number of items in the set containing ``item``."""
        return -self.pointers[self.find_set(item)]

    def __contains__(self, item: object) -> bool:
        return item in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def __repr__(self) -> str:
        roots = sum(1 for pointer in self.pointers if pointer < 0)
        return f"{type(self).__name__}(items={len(self.ids)}, sets={roots})"
