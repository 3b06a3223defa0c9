"""
Two-dimensional grid domain with walls.

This module defines the Grid2D environment and its GridNode cells. Cells are
created once with the grid and reused by the search, so open/closed
membership is tracked with flags on the cells themselves.
"""

from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.node import Node

Point = Tuple[int, int]

# (dx, dy) offsets of the four orthogonal neighbours, in expansion order
CHILD_OFFSETS = ((0, -1), (-1, 0), (1, 0), (0, 1))

WALL_CHARS = "W#"


class GridNode(Node):
    """
    A single cell of a Grid2D.

    Moving to a neighbouring cell costs 1 and the heuristic is the Manhattan
    distance, which is admissible for 4-directional movement.

    Attributes:
        grid (Grid2D): Grid this cell belongs to
        x (int): Row index
        y (int): Column index
        is_wall (bool): Walls are never expanded
    """

    def __init__(self, grid: "Grid2D", x: int, y: int, is_wall: bool = False):
        super().__init__()
        self.grid = grid
        self.x = x
        self.y = y
        self.is_wall = is_wall

    def set_movement_cost(self, parent: Node) -> None:
        self._movement_cost = parent.movement_cost + 1

    def set_estimated_cost(self, goal: Node) -> None:
        self._estimated_cost = abs(self.x - goal.x) + abs(self.y - goal.y)

    def children(self) -> Iterable["GridNode"]:
        """Return the in-bounds orthogonal neighbours, walls included."""
        children = []
        for dx, dy in CHILD_OFFSETS:
            x, y = self.x + dx, self.y + dy
            if not self.grid.is_point_in_bounds((x, y)):
                continue
            children.append(self.grid.node(x, y))
        return children

    def is_in_closed(self, closed_frontier) -> bool:
        # Walls report as searched so the engine never queues them
        return self.is_wall or super().is_in_closed(closed_frontier)

    def is_goal(self, goal: Node) -> bool:
        return self.same_state(goal)

    def state_key(self) -> Hashable:
        return (self.x, self.y)

    def symbol(self, path_points: Iterable[Point] = ()) -> str:
        """
        Character used for this cell when rendering the grid.

        Args:
            path_points: Coordinates of the cells on the path
        """
        if self.is_wall:
            return "W"
        if self.same_state(self.grid.start):
            return "s"
        if self.same_state(self.grid.goal):
            return "g"
        if (self.x, self.y) in path_points:
            return "."
        return " "


class Grid2D:
    """
    Rectangular grid of cells, some of which are walls.

    The start and goal cells are never walls.

    Attributes:
        walls (np.ndarray): Boolean array of shape (width, height)
        start (GridNode): Start cell
        goal (GridNode): Goal cell
    """

    def __init__(self, walls: np.ndarray, start: Point, goal: Point):
        """
        Initialize the grid.

        Args:
            walls: Boolean array of shape (width, height), True marks a wall
            start: (x, y) of the start cell
            goal: (x, y) of the goal cell

        Raises:
            ValueError: If walls is not 2-D or start/goal are out of bounds

        Example:
            >>> walls = np.zeros((5, 5), dtype=bool)
            >>> grid = Grid2D(walls, start=(0, 0), goal=(4, 4))
        """
        walls = np.array(walls, dtype=bool)
        if walls.ndim != 2 or 0 in walls.shape:
            raise ValueError(f"walls must be a non-empty 2-D array, got shape {walls.shape}")

        self.walls = walls
        start, goal = tuple(start), tuple(goal)
        for name, point in (("start", start), ("goal", goal)):
            if not self.is_point_in_bounds(point):
                raise ValueError(f"{name} {point} is outside the {self.width}x{self.height} grid")

        # Don't let a wall overwrite start/goal
        self.walls[start] = False
        self.walls[goal] = False

        self._nodes: List[List[GridNode]] = [
            [GridNode(self, x, y, bool(self.walls[x, y])) for y in range(self.height)]
            for x in range(self.width)
        ]
        self.start = self._nodes[start[0]][start[1]]
        self.goal = self._nodes[goal[0]][goal[1]]

    @classmethod
    def random(cls,
               width: int,
               height: int,
               wall_percentage: float,
               start: Point,
               goal: Point,
               rng: Optional[np.random.Generator] = None) -> "Grid2D":
        """
        Create a grid with randomly placed walls.

        Args:
            width: Number of rows
            height: Number of columns
            wall_percentage: Chance in percent (0-100) that a cell is a wall
            start: (x, y) of the start cell
            goal: (x, y) of the goal cell
            rng: Random generator, a fresh unseeded one if omitted
        """
        rng = rng if rng is not None else np.random.default_rng()
        walls = rng.integers(0, 100, size=(width, height)) < wall_percentage
        return cls(walls, start, goal)

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> "Grid2D":
        """
        Create a grid from an ASCII map.

        Each string is one row. 'W' or '#' is a wall, 's' the start, 'g' the
        goal and any other character a free cell.

        Raises:
            ValueError: If rows are ragged or start/goal are missing or repeated

        Example:
            >>> grid = Grid2D.from_strings(["s.W", "..W", "..g"])
        """
        if not rows or len({len(row) for row in rows}) != 1:
            raise ValueError("Grid rows must be non-empty and of equal length")

        walls = np.array([[char in WALL_CHARS for char in row] for row in rows], dtype=bool)
        markers = {}
        for marker in "sg":
            found = [(x, y) for x, row in enumerate(rows) for y, char in enumerate(row) if char == marker]
            if len(found) != 1:
                raise ValueError(f"Grid map needs exactly one '{marker}', found {len(found)}")
            markers[marker] = found[0]

        return cls(walls, markers["s"], markers["g"])

    @property
    def width(self) -> int:
        return self.walls.shape[0]

    @property
    def height(self) -> int:
        return self.walls.shape[1]

    def node(self, x: int, y: int) -> GridNode:
        return self._nodes[x][y]

    def nodes(self) -> List[GridNode]:
        """All cells in row-major order."""
        return [node for row in self._nodes for node in row]

    def is_point_in_bounds(self, point: Point) -> bool:
        """
        Check if a point is within grid boundaries.

        Args:
            point: (x, y) coordinates

        Returns:
            True if point is within bounds, False otherwise
        """
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def render(self, path: Optional[Iterable[GridNode]] = None) -> str:
        """
        Render the grid as text, one row per line.

        'W' marks walls, 's' the start, 'g' the goal, '.' path cells and a
        space everything else.
        """
        path_points = {(node.x, node.y) for node in path or ()}
        lines = []
        for row in self._nodes:
            lines.append("".join(node.symbol(path_points) for node in row))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        """String representation of the grid."""
        return (f"Grid2D(size={self.width}x{self.height}, "
                f"walls={int(self.walls.sum())}, "
                f"start={(self.start.x, self.start.y)}, goal={(self.goal.x, self.goal.y)})")
