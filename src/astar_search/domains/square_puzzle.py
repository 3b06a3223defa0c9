"""
Sliding-tile puzzle domain.

The puzzle is a size x size board numbered 1..size*size where the highest
number is the blank, or "space". Children are generated on demand by sliding
the space into each neighbouring cell, so the search graph is never built up
front and every child is a fresh board.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.exceptions import NoSpaceError
from ..core.node import Node

Point = Tuple[int, int]

# (dx, dy) offsets of the four neighbours, in child generation order
NEIGHBOR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class SquarePuzzle(Node):
    """
    One state of the sliding-tile puzzle.

    Boards are immutable: the tile array is read-only and children are built
    from copies. Because equal boards are distinct objects, membership is
    answered by looking the board up in the live frontier.

    Attributes:
        tiles (np.ndarray): Read-only integer array of shape (size, size)
    """

    def __init__(self, tiles):
        """
        Initialize a puzzle state from a square array of tile numbers.

        Args:
            tiles: Square array-like of integers
        """
        super().__init__()
        tiles = np.array(tiles, dtype=int)
        tiles.flags.writeable = False
        self.tiles = tiles
        self._key = tuple(int(number) for number in tiles.ravel())
        self._positions: Optional[Dict[int, Point]] = None

    @classmethod
    def linear(cls, size: int) -> "SquarePuzzle":
        """
        Create the solved puzzle numbered row by row.

        For size 3:
            1 2 3
            4 5 6
            7 8 _
        The highest number is the space, so this is the usual goal state.

        Raises:
            ValueError: If size < 2
        """
        if size < 2:
            raise ValueError(f"Puzzle size must be >= 2, got {size}")
        return cls(np.arange(1, size * size + 1).reshape(size, size))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "SquarePuzzle":
        """
        Create a puzzle from user supplied rows.

        Raises:
            ValueError: If the rows are not square or do not contain every
                number from 1 to size*size exactly once
        """
        size = len(rows)
        if size < 2 or any(len(row) != size for row in rows):
            raise ValueError("Puzzle rows must form a square of size >= 2")

        tiles = np.array(rows, dtype=int)
        if not np.array_equal(np.sort(tiles.ravel()), np.arange(1, size * size + 1)):
            raise ValueError(f"Puzzle must contain each number 1..{size * size} exactly once")
        return cls(tiles)

    @classmethod
    def random(cls, size: int, rng: Optional[np.random.Generator] = None) -> "SquarePuzzle":
        """
        Create a random board. Not every random board is solvable.

        Args:
            size: Board side length (>= 2)
            rng: Random generator, a fresh unseeded one if omitted
        """
        if size < 2:
            raise ValueError(f"Puzzle size must be >= 2, got {size}")
        rng = rng if rng is not None else np.random.default_rng()
        return cls((rng.permutation(size * size) + 1).reshape(size, size))

    @property
    def size(self) -> int:
        return self.tiles.shape[0]

    @property
    def space_number(self) -> int:
        return self.size * self.size

    def space_position(self) -> Point:
        """
        Locate the space tile.

        Raises:
            NoSpaceError: If the board has no space tile
        """
        found = np.argwhere(self.tiles == self.space_number)
        if len(found) == 0:
            raise NoSpaceError(self)
        x, y = found[0]
        return int(x), int(y)

    def positions(self) -> Dict[int, Point]:
        """Map every tile number to its (x, y) position."""
        if self._positions is None:
            self._positions = {
                int(number): (x, y) for (x, y), number in np.ndenumerate(self.tiles)
            }
        return self._positions

    def neighbors(self, position: Point) -> List[Point]:
        """Return the up to four in-bounds positions next to ``position``."""
        x, y = position
        result = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.size and 0 <= ny < self.size:
                result.append((nx, ny))
        return result

    def children(self) -> Iterable["SquarePuzzle"]:
        """Return one fresh board per legal move of the space."""
        space = self.space_position()
        children = []
        for neighbor in self.neighbors(space):
            tiles = self.tiles.copy()
            tiles[space], tiles[neighbor] = tiles[neighbor], tiles[space]
            children.append(type(self)(tiles))
        return children

    def set_movement_cost(self, parent: Node) -> None:
        self._movement_cost = parent.movement_cost + 1

    def set_estimated_cost(self, goal: Node) -> None:
        """
        Nilsson's sequence score plus Manhattan distance.

        Every neighbour that differs from the tile's neighbour in the same
        direction on the goal board scores 2, a misplaced space scores 1,
        and the sum is tripled. The Manhattan distance of every tile except
        the space to its goal position is then added. The score is 0 only at
        the goal. It is not admissible, so paths are short but not
        guaranteed optimal.
        """
        goal_positions = goal.positions()

        sequence_score = 0
        for (x, y), number in np.ndenumerate(self.tiles):
            gx, gy = goal_positions[int(number)]
            for dx, dy in NEIGHBOR_OFFSETS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < self.size and 0 <= ny < self.size):
                    continue
                ex, ey = gx + dx, gy + dy
                in_goal_bounds = 0 <= ex < goal.size and 0 <= ey < goal.size
                if not in_goal_bounds or self.tiles[nx, ny] != goal.tiles[ex, ey]:
                    sequence_score += 2

        if self.space_position() != goal.space_position():
            sequence_score += 1

        manhattan = 0
        for number, (x, y) in self.positions().items():
            if number == self.space_number:
                continue
            gx, gy = goal_positions[number]
            manhattan += abs(x - gx) + abs(y - gy)

        self._estimated_cost = 3 * sequence_score + manhattan

    def is_goal(self, goal: Node) -> bool:
        return self.same_state(goal)

    def state_key(self) -> Hashable:
        return self._key

    def is_in_open(self, open_frontier) -> bool:
        return open_frontier.contains(self)

    def is_in_closed(self, closed_frontier) -> bool:
        return self._in_closed or closed_frontier.contains(self)

    def shuffled(self, moves: int, rng: Optional[np.random.Generator] = None) -> "SquarePuzzle":
        """
        Return a new board reached by ``moves`` random legal moves.

        Even a small shuffle can result in long search times.

        Args:
            moves: Number of random space moves to make
            rng: Random generator, a fresh unseeded one if omitted
        """
        rng = rng if rng is not None else np.random.default_rng()
        puzzle = type(self)(self.tiles)
        for _ in range(moves):
            children = puzzle.children()
            puzzle = children[int(rng.integers(len(children)))]
        return puzzle

    def _parity(self) -> int:
        # Invariant under legal moves: tile inversions, plus the space's row
        # counted from the bottom on even sized boards
        sequence = [number for number in self._key if number != self.space_number]
        inversions = sum(
            1
            for i, number in enumerate(sequence)
            for later in sequence[i + 1:]
            if number > later
        )
        if self.size % 2 == 0:
            inversions += self.size - self.space_position()[0]
        return inversions % 2

    def can_reach(self, goal: "SquarePuzzle") -> bool:
        """Return True if ``goal`` is reachable from this board by legal moves."""
        if self.size != goal.size or sorted(self._key) != sorted(goal.state_key()):
            return False
        return self._parity() == goal._parity()

    def render(self) -> str:
        """Render the board as text with the space shown blank."""
        width = len(str(self.space_number - 1))
        lines = []
        for row in self.tiles:
            cells = [
                " " * width if number == self.space_number else f"{number:>{width}}"
                for number in row
            ]
            lines.append(" ".join(cells))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"SquarePuzzle({self.tiles.tolist()}, g={self._movement_cost}, h={self._estimated_cost})"
