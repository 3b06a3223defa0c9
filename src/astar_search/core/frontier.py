"""
Cost-ordered frontier used for the open and closed lists.

Entries are keyed by a node's total cost at insertion time. Duplicate keys
are allowed and pop in insertion order.
"""

import heapq
import itertools
from collections import Counter
from typing import Iterator, List

from .exceptions import EmptyFrontierError
from .node import Node


class CostOrderedFrontier:
    """
    Min-heap of nodes keyed by total cost with a stable tie-break.

    Each heap entry is ``(total_cost, sequence, node)``. The sequence number
    grows with every insertion, so two entries never compare equal and nodes
    themselves are never compared.

    Attributes:
        name (str): Label used in reprs and log messages ('open', 'closed')
    """

    def __init__(self, name: str = "frontier"):
        self.name = name
        self._heap: List[tuple] = []
        self._sequence = itertools.count()
        # Hashed membership index over Node.state_key()
        self._index: Counter = Counter()

    def add(self, node: Node) -> None:
        """
        Insert a node keyed by its current total cost.

        Args:
            node: Node whose costs are final
        """
        heapq.heappush(self._heap, (node.total_cost, next(self._sequence), node))
        key = node.state_key()
        if key is not None:
            self._index[key] += 1

    def pop_min(self) -> Node:
        """
        Remove and return the cheapest node.

        Among equal costs the earliest inserted entry wins.

        Raises:
            EmptyFrontierError: If the frontier holds no entries
        """
        if not self._heap:
            raise EmptyFrontierError(f"Cannot pop from empty {self.name} frontier")

        _, _, node = heapq.heappop(self._heap)
        key = node.state_key()
        if key is not None:
            self._index[key] -= 1
            if self._index[key] <= 0:
                del self._index[key]
        return node

    def is_empty(self) -> bool:
        return not self._heap

    def values(self) -> List[Node]:
        """Return all nodes in ascending cost order (FIFO among ties)."""
        return [node for _, _, node in sorted(self._heap)]

    def contains(self, node: Node) -> bool:
        """
        Check whether a node with the same logical state is on this frontier.

        Uses the hashed index when the node provides a state key, otherwise
        scans every entry with ``Node.same_state``.
        """
        key = node.state_key()
        if key is not None:
            return self._index[key] > 0
        return any(node.same_state(other) for _, _, other in self._heap)

    def clear(self) -> None:
        self._heap.clear()
        self._index.clear()
        self._sequence = itertools.count()

    def __contains__(self, node: Node) -> bool:
        return self.contains(node)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"CostOrderedFrontier(name={self.name!r}, size={len(self._heap)})"
