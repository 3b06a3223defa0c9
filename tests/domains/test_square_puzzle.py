# tests/domains/test_square_puzzle.py
import pytest
import numpy as np
from astar_search.core.exceptions import NoSpaceError
from astar_search.core.frontier import CostOrderedFrontier
from astar_search.domains.square_puzzle import SquarePuzzle


def test_linear_puzzle_layout():
    """Test the solved board numbering with the space in the last cell."""
    puzzle = SquarePuzzle.linear(3)

    assert puzzle.tiles.tolist() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert puzzle.size == 3
    assert puzzle.space_number == 9
    assert puzzle.space_position() == (2, 2)


def test_linear_rejects_tiny_sizes():
    """Test that boards smaller than 2x2 are refused."""
    with pytest.raises(ValueError, match=">= 2"):
        SquarePuzzle.linear(1)


def test_tiles_are_read_only_copies():
    """Test that boards cannot be mutated and do not alias the input."""
    source = np.array([[1, 2], [3, 4]])
    puzzle = SquarePuzzle(source)

    source[0, 0] = 99
    assert puzzle.tiles[0, 0] == 1

    with pytest.raises(ValueError):
        puzzle.tiles[0, 0] = 5


def test_from_rows_validation():
    """Test user supplied boards must be square and contain 1..n*n once."""
    puzzle = SquarePuzzle.from_rows([[2, 1], [4, 3]])
    assert puzzle.tiles.tolist() == [[2, 1], [4, 3]]

    with pytest.raises(ValueError, match="square"):
        SquarePuzzle.from_rows([[1, 2, 3], [4, 5, 6]])

    with pytest.raises(ValueError, match="exactly once"):
        SquarePuzzle.from_rows([[1, 1], [3, 4]])

    with pytest.raises(ValueError, match="exactly once"):
        SquarePuzzle.from_rows([[1, 2], [3, 5]])


def test_children_move_the_space():
    """Test one child per legal space move, in neighbour order."""
    goal = SquarePuzzle.linear(3)

    children = goal.children()

    # Space in the corner can move up or left
    assert len(children) == 2
    assert children[0].tiles.tolist() == [[1, 2, 3], [4, 5, 9], [7, 8, 6]]
    assert children[1].tiles.tolist() == [[1, 2, 3], [4, 5, 6], [7, 9, 8]]


def test_children_from_center_and_fresh_copies():
    """Test four children from the center and that the parent is unchanged."""
    puzzle = SquarePuzzle.from_rows([[1, 2, 3], [4, 9, 6], [7, 8, 5]])

    children = puzzle.children()

    assert len(children) == 4
    assert [child.space_position() for child in children] == [(2, 1), (0, 1), (1, 2), (1, 0)]
    assert puzzle.space_position() == (1, 1)
    assert all(child is not puzzle for child in children)
    assert all(child.parent is None for child in children)


def test_heuristic_is_zero_only_at_goal():
    """Test that the estimated cost vanishes at the goal and grows away from it."""
    goal = SquarePuzzle.linear(3)

    solved = SquarePuzzle.linear(3)
    solved.set_estimated_cost(goal)
    assert solved.estimated_cost == 0

    near = goal.children()[0]
    near.set_estimated_cost(goal)
    assert near.estimated_cost > 0

    far = SquarePuzzle.from_rows([[9, 8, 7], [6, 5, 4], [3, 2, 1]])
    far.set_estimated_cost(goal)
    assert far.estimated_cost > near.estimated_cost


def test_heuristic_one_move_value():
    """Test the exact score of a board one move from the goal."""
    goal = SquarePuzzle.linear(2)
    # 1 2      1 2
    # 3 _  ->  _ 3
    near = SquarePuzzle.from_rows([[1, 2], [4, 3]])

    near.set_estimated_cost(goal)

    # Mismatched neighbour pairs: 1-4, 2-3, 4-1, 4-3, 3-2, 3-4 each score 2,
    # plus 1 for the misplaced space: (12 + 1) * 3, plus tile 3 one cell away
    assert near.estimated_cost == 40


def test_movement_cost_is_unit():
    """Test each move costs 1."""
    start = SquarePuzzle.linear(3)
    child = start.children()[0]
    grandchild = child.children()[0]

    child.set_movement_cost(start)
    grandchild.set_movement_cost(child)

    assert grandchild.movement_cost == 2


def test_goal_test_and_state_key():
    """Test equality of boards by their tiles."""
    goal = SquarePuzzle.linear(3)

    assert SquarePuzzle.linear(3).is_goal(goal)
    assert not goal.children()[0].is_goal(goal)
    assert goal.state_key() == (1, 2, 3, 4, 5, 6, 7, 8, 9)


def test_membership_scans_frontier():
    """Test that open/closed membership looks equal boards up in the frontier."""
    frontier = CostOrderedFrontier()
    frontier.add(SquarePuzzle.linear(3))

    assert SquarePuzzle.linear(3).is_in_open(frontier)
    assert SquarePuzzle.linear(3).is_in_closed(frontier)
    assert not SquarePuzzle.linear(3).children()[0].is_in_open(frontier)

    flagged = SquarePuzzle.linear(2)
    flagged.set_in_closed(True)
    assert flagged.is_in_closed(CostOrderedFrontier())


def test_missing_space_raises():
    """Test that a board without the space tile cannot generate children."""
    broken = SquarePuzzle([[1, 2], [3, 3]])

    with pytest.raises(NoSpaceError) as excinfo:
        broken.children()

    assert excinfo.value.puzzle is broken
    assert isinstance(excinfo.value, ValueError)


def test_shuffled_is_reproducible_and_reachable():
    """Test seeded shuffles repeat and always stay solvable."""
    goal = SquarePuzzle.linear(3)

    first = goal.shuffled(20, rng=np.random.default_rng(7))
    second = goal.shuffled(20, rng=np.random.default_rng(7))

    assert first.state_key() == second.state_key()
    assert first.can_reach(goal)
    assert goal.state_key() == (1, 2, 3, 4, 5, 6, 7, 8, 9)


def test_shuffled_zero_moves_is_a_copy():
    """Test that no moves returns an equal but distinct board."""
    goal = SquarePuzzle.linear(2)

    copy = goal.shuffled(0)

    assert copy is not goal
    assert copy.same_state(goal)


def test_can_reach_detects_parity():
    """Test that swapping two tiles gives an unreachable board."""
    goal = SquarePuzzle.linear(3)
    swapped = SquarePuzzle.from_rows([[2, 1, 3], [4, 5, 6], [7, 8, 9]])

    assert not swapped.can_reach(goal)
    assert goal.children()[0].can_reach(goal)
    assert not SquarePuzzle.linear(2).can_reach(goal)


def test_can_reach_even_sized_board():
    """Test the parity check on a 4x4 board after vertical moves."""
    goal = SquarePuzzle.linear(4)
    up = goal.children()[0]
    up_again = up.children()[1]

    assert up.space_position() == (2, 3)
    assert up_again.space_position() == (1, 3)
    assert up.can_reach(goal)
    assert up_again.can_reach(goal)

    swapped = SquarePuzzle.from_rows([
        [2, 1, 3, 4],
        [5, 6, 7, 8],
        [9, 10, 11, 12],
        [13, 14, 15, 16],
    ])
    assert not swapped.can_reach(goal)


def test_random_board_contains_every_tile():
    """Test random boards are permutations of 1..n*n."""
    puzzle = SquarePuzzle.random(4, rng=np.random.default_rng(3))

    assert sorted(puzzle.state_key()) == list(range(1, 17))


def test_render():
    """Test text rendering with the space left blank."""
    assert SquarePuzzle.linear(2).render() == "1 2\n3  \n"
    assert SquarePuzzle.linear(4).render().splitlines()[0] == " 1  2  3  4"
