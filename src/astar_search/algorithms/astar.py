"""
A* search engine implementation.

A* is an informed best-first search that expands nodes in order of
f = g + h. This engine works over any domain implementing the ``Node``
contract, explicit or lazily generated, and can be driven one step at a
time so the caller decides how much work to spend.
"""

import logging
import time
from enum import Enum
from itertools import chain
from typing import Any, Dict, List, Optional

from ..core.exceptions import SearchConfigurationError
from ..core.frontier import CostOrderedFrontier
from ..core.node import Node

logger = logging.getLogger(__name__)


class State(Enum):
    """A* engine states while searching for the goal."""

    SEARCHING = "searching"
    GOAL_FOUND = "goal_found"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not State.SEARCHING


class AStar:
    """
    Resumable A* search over a node graph.

    Nodes are popped from the open frontier cheapest first and moved to the
    closed frontier when expanded. A child already present on either frontier
    keeps the costs from its first discovery, so no node is expanded twice.

    Attributes:
        search_time (float): Seconds spent inside ``step`` since the last reset

    Example:
        >>> grid = Grid2D.from_strings(["s..", ".W.", "..g"])
        >>> search = AStar(grid.start, grid.goal)
        >>> search.run()
        <State.GOAL_FOUND: 'goal_found'>
        >>> len(search.get_path())
        5
    """

    def __init__(self, start: Node, goal: Node):
        """
        Create an engine and seed the open frontier with the start node.

        Args:
            start: Node the search begins from
            goal: Node the search is looking for

        Raises:
            SearchConfigurationError: If start and goal are not nodes of the
                same concrete type
        """
        self._open = CostOrderedFrontier("open")
        self._closed = CostOrderedFrontier("closed")
        self._current: Optional[Node] = None
        self._goal: Optional[Node] = None
        self._state = State.SEARCHING
        self._steps = 0
        self.search_time = 0.0
        self.reset(start, goal)

    @property
    def steps(self) -> int:
        """Number of ``step`` calls that did work since the last reset."""
        return self._steps

    @property
    def state(self) -> State:
        return self._state

    @property
    def open_list(self) -> List[Node]:
        """Nodes discovered but not yet expanded, cheapest first."""
        return self._open.values()

    @property
    def closed_list(self) -> List[Node]:
        """Nodes already expanded, cheapest first."""
        return self._closed.values()

    @property
    def current_node(self) -> Optional[Node]:
        """The most recently expanded node (the start node before any step)."""
        return self._current

    @property
    def goal_node(self) -> Optional[Node]:
        return self._goal

    def reset(self, start: Node, goal: Node) -> None:
        """
        Restart the search with a new start and goal.

        Nodes left on either frontier by a previous run, as well as start and
        goal, have their flags, parent and costs cleared so reused instances
        start from scratch. Nodes the caller holds elsewhere are untouched.

        Args:
            start: Node the search begins from
            goal: Node the search is looking for

        Raises:
            SearchConfigurationError: If start and goal are not nodes of the
                same concrete type
        """
        _check_compatible(start, goal)

        for node in chain(self._open.values(), self._closed.values(), (start, goal)):
            node.clear_search_state()

        self._open.clear()
        self._closed.clear()
        self._current = start
        self._goal = goal
        self._state = State.SEARCHING
        self._steps = 0
        self.search_time = 0.0

        self._open.add(start)
        start.set_in_open(True)
        logger.debug("Search reset: start=%r goal=%r", start, goal)

    def run(self) -> State:
        """
        Step the search until it either finds the goal or fails.

        There is no iteration limit. Callers that need bounded work should
        call ``step`` themselves.

        Returns:
            State.GOAL_FOUND or State.FAILED
        """
        while True:
            state = self.step()
            if state.is_terminal:
                return state

    def step(self) -> State:
        """
        Move the search forward by one expansion.

        Stale open entries (states expanded since they were queued) are
        discarded within the same step.

        Returns:
            The state after the step. Once terminal, further calls return the
            same terminal state without doing any work.
        """
        if self._state.is_terminal:
            return self._state

        start_time = time.time()
        self._steps += 1
        try:
            self._state = self._expand_next()
        finally:
            self.search_time += time.time() - start_time

        if self._state is State.GOAL_FOUND:
            logger.debug("Goal found after %d steps: %r", self._steps, self._current)
        elif self._state is State.FAILED:
            logger.debug("Open frontier exhausted after %d steps", self._steps)
        return self._state

    def _expand_next(self) -> State:
        # Find the cheapest candidate that has not been expanded yet
        while True:
            if self._open.is_empty():
                return State.FAILED

            candidate = self._open.pop_min()
            if candidate.is_in_closed(self._closed):
                logger.debug("Discarding stale open entry %r", candidate)
                continue
            break

        current = candidate
        self._current = current
        current.set_in_open(False)
        self._closed.add(current)
        current.set_in_closed(True)

        if current.is_goal(self._goal):
            return State.GOAL_FOUND

        for child in current.children():
            # Costs of a known state are final from its first discovery
            if child.is_in_open(self._open) or child.is_in_closed(self._closed):
                continue

            child.parent = current
            child.set_movement_cost(current)
            child.set_estimated_cost(self._goal)
            self._open.add(child)
            child.set_in_open(True)

        return State.SEARCHING

    def get_path(self) -> Optional[List[Node]]:
        """
        Reconstruct the path from the start node to the current node.

        Before a terminal state this is a partial path ending at the most
        recently expanded node.

        Returns:
            List of nodes from start to current, or None if no current node
        """
        if self._current is None:
            return None

        path = []
        node = self._current
        while node is not None:
            path.append(node)
            node = node.parent
        return path[::-1]

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get search metrics for the current run.

        Returns:
            Dictionary with:
            - state: Current engine state name
            - steps: Number of steps performed
            - nodes_expanded: Size of the closed frontier
            - open_size: Size of the open frontier
            - path_length: Moves on the current path
            - search_time: Seconds spent stepping
            - path_exists: Whether the goal has been found
        """
        path = self.get_path() or []
        return {
            'algorithm': 'A*',
            'state': self._state.value,
            'steps': self._steps,
            'nodes_expanded': len(self._closed),
            'open_size': len(self._open),
            'path_length': max(len(path) - 1, 0),
            'search_time': self.search_time,
            'path_exists': self._state is State.GOAL_FOUND
        }

    def __repr__(self) -> str:
        return (f"AStar(state={self._state.value}, steps={self._steps}, "
                f"open={len(self._open)}, closed={len(self._closed)})")


def _check_compatible(start: Node, goal: Node) -> None:
    """Fail fast when start and goal cannot belong to the same search space."""
    for role, node in (("start", start), ("goal", goal)):
        if not isinstance(node, Node):
            raise SearchConfigurationError(
                f"{role} must implement Node, got {type(node).__name__}")

    if type(start) is not type(goal):
        raise SearchConfigurationError(
            f"start and goal must be the same node type, got "
            f"{type(start).__name__} and {type(goal).__name__}")
