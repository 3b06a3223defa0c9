"""
Node capability contract for the A* search engine.

Every searchable state (grid cell, puzzle board, ...) derives from ``Node``
and supplies the step cost, the heuristic, the child generator and the goal
test. The engine owns everything else: cost bookkeeping, parent links and
open/closed membership.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Optional


class Node(ABC):
    """
    Abstract base class for all search states.

    Costs are written once, by the engine, when the node is first discovered.
    Membership flags and the parent link are likewise written by the engine
    only.

    Attributes:
        parent (Optional[Node]): Predecessor on the discovered path (None for root)
    """

    def __init__(self):
        """Initialize an undiscovered node with zero costs and no parent."""
        self.parent: Optional["Node"] = None
        self._movement_cost = 0
        self._estimated_cost = 0
        self._in_open = False
        self._in_closed = False

    @property
    def movement_cost(self):
        """Accumulated cost from the start node, or g."""
        return self._movement_cost

    @property
    def estimated_cost(self):
        """Heuristic cost from this node to the goal, or h."""
        return self._estimated_cost

    @property
    def total_cost(self):
        """
        Priority key used by the frontier.

        f = g + h, recomputed on every read.
        """
        return self._movement_cost + self._estimated_cost

    @abstractmethod
    def set_movement_cost(self, parent: "Node") -> None:
        """
        Set g from the parent's movement cost plus the step cost.

        Args:
            parent: Node this one was discovered from
        """
        pass

    @abstractmethod
    def set_estimated_cost(self, goal: "Node") -> None:
        """
        Set h, the heuristic distance to the goal.

        Args:
            goal: The fixed goal node of the search
        """
        pass

    @abstractmethod
    def children(self) -> Iterable["Node"]:
        """
        Generate successor states.

        The children can be wired up before the search starts (explicit
        graph) or created on every call (implicit graph). Each call must
        return a finite iterable.
        """
        pass

    @abstractmethod
    def is_goal(self, goal: "Node") -> bool:
        """Return True if this node matches the goal node."""
        pass

    def state_key(self) -> Optional[Hashable]:
        """
        Hashable identity of the logical state, or None.

        Frontiers use the key to answer membership queries through a hashed
        index. Nodes returning None are compared with ``same_state`` by a
        linear scan instead.
        """
        return None

    def same_state(self, other: "Node") -> bool:
        """
        Domain equality between two nodes.

        Compares ``state_key`` values when this node has one, otherwise
        falls back to object identity.
        """
        if other is self:
            return True
        key = self.state_key()
        if key is None:
            return False
        return key == other.state_key()

    def is_in_open(self, open_frontier) -> bool:
        """
        Return True if this state currently sits on the open frontier.

        The default answers from the flag set by the engine. Domains whose
        children are fresh copies override this to scan ``open_frontier``.
        """
        return self._in_open

    def set_in_open(self, value: bool) -> None:
        self._in_open = value

    def is_in_closed(self, closed_frontier) -> bool:
        """
        Return True if this state has already been expanded.

        See ``is_in_open`` for the flag versus scan choice.
        """
        return self._in_closed

    def set_in_closed(self, value: bool) -> None:
        self._in_closed = value

    def clear_search_state(self) -> None:
        """Forget everything a previous search wrote into this node."""
        self.parent = None
        self._movement_cost = 0
        self._estimated_cost = 0
        self._in_open = False
        self._in_closed = False

    def __repr__(self) -> str:
        """String representation of the node."""
        return (f"{self.__class__.__name__}(key={self.state_key()!r}, "
                f"g={self._movement_cost}, h={self._estimated_cost})")
