# tests/core/test_node.py
import pytest
from astar_search.core.node import Node


class CountdownNode(Node):
    """Minimal node counting down to zero."""

    def __init__(self, value):
        super().__init__()
        self.value = value

    def set_movement_cost(self, parent):
        self._movement_cost = parent.movement_cost + 2

    def set_estimated_cost(self, goal):
        self._estimated_cost = abs(self.value - goal.value)

    def children(self):
        return [CountdownNode(self.value - 1)] if self.value > 0 else []

    def is_goal(self, goal):
        return self.same_state(goal)

    def state_key(self):
        return self.value


def test_node_contract_is_abstract():
    """Test that Node cannot be instantiated without the domain methods."""
    with pytest.raises(TypeError):
        Node()


def test_new_node_defaults():
    """Test that an undiscovered node has zero costs, no parent and no flags."""
    node = CountdownNode(3)

    assert node.movement_cost == 0
    assert node.estimated_cost == 0
    assert node.total_cost == 0
    assert node.parent is None
    assert not node.is_in_open(None)
    assert not node.is_in_closed(None)


def test_total_cost_is_derived():
    """Test that f = g + h and follows later cost updates."""
    parent = CountdownNode(5)
    goal = CountdownNode(0)
    child = CountdownNode(4)

    child.set_movement_cost(parent)
    child.set_estimated_cost(goal)

    assert child.movement_cost == 2
    assert child.estimated_cost == 4
    assert child.total_cost == 6


def test_membership_flags():
    """Test the default flag based membership answers."""
    node = CountdownNode(1)

    node.set_in_open(True)
    assert node.is_in_open(None)

    node.set_in_open(False)
    node.set_in_closed(True)
    assert not node.is_in_open(None)
    assert node.is_in_closed(None)


def test_same_state_compares_keys():
    """Test domain equality through state keys."""
    assert CountdownNode(2).same_state(CountdownNode(2))
    assert not CountdownNode(2).same_state(CountdownNode(3))


def test_clear_search_state():
    """Test that clearing forgets parent, costs and flags."""
    node = CountdownNode(4)
    node.parent = CountdownNode(5)
    node.set_movement_cost(node.parent)
    node.set_estimated_cost(CountdownNode(0))
    node.set_in_open(True)
    node.set_in_closed(True)

    node.clear_search_state()

    assert node.parent is None
    assert node.total_cost == 0
    assert not node.is_in_open(None)
    assert not node.is_in_closed(None)
