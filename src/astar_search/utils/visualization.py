"""
Visualization utilities for search results.

This module provides matplotlib drawing functions for grid searches (walls,
expanded cells and the found path) and for sliding-tile boards.
"""

import matplotlib.patches as patches
from typing import Iterable, Optional

from ..domains.grid import Grid2D, GridNode
from ..domains.square_puzzle import SquarePuzzle


def draw_grid(ax,
              grid: Grid2D,
              path: Optional[Iterable[GridNode]] = None,
              closed_nodes: Optional[Iterable[GridNode]] = None,
              path_color: str = 'blue',
              path_label: str = "A* Path"):
    """
    Draw a grid with walls, start, goal and an optional search result.

    Rows (x) run down the vertical axis and columns (y) along the horizontal
    axis, matching ``Grid2D.render``.

    Args:
        ax: Matplotlib axis to draw on
        grid: Grid to draw
        path: Optional list of cells from start to goal
        closed_nodes: Optional expanded cells, drawn as small markers
        path_color: Color for the path line
        path_label: Label for the path in legend

    Example:
        >>> fig, ax = plt.subplots()
        >>> search = AStar(grid.start, grid.goal)
        >>> search.run()
        >>> draw_grid(ax, grid, path=search.get_path(), closed_nodes=search.closed_list)
        >>> plt.show()
    """
    ax.clear()

    # Draw walls as dark cells
    ax.imshow(grid.walls, cmap='Greys', origin='upper', vmin=0, vmax=1,
              extent=(-0.5, grid.height - 0.5, grid.width - 0.5, -0.5), zorder=1)

    # Draw expanded cells
    closed = list(closed_nodes or [])
    if closed:
        ax.scatter([node.y for node in closed], [node.x for node in closed],
                   color='orange', s=12, marker='s', alpha=0.5,
                   label="Expanded", zorder=2)

    # Draw path if provided
    path = list(path or [])
    if path:
        ax.plot([node.y for node in path], [node.x for node in path],
                color=path_color, linewidth=2, label=path_label,
                zorder=3, marker='o', markersize=4)

    # Draw start point (green)
    ax.scatter(grid.start.y, grid.start.x, color='green', s=100, marker='o',
               label="Start", zorder=10, edgecolors='black', linewidths=1.5)

    # Draw goal point (red)
    ax.scatter(grid.goal.y, grid.goal.x, color='red', s=100, marker='*',
               label="Goal", zorder=10, edgecolors='black', linewidths=1.5)

    ax.set_xlabel("Y (column)")
    ax.set_ylabel("X (row)")
    ax.set_xlim(-0.5, grid.height - 0.5)
    ax.set_ylim(grid.width - 0.5, -0.5)
    ax.set_aspect('equal', adjustable='box')
    ax.legend(loc='best')


def draw_puzzle(ax, puzzle: SquarePuzzle, title: Optional[str] = None):
    """
    Draw a sliding-tile board with one numbered square per tile.

    Args:
        ax: Matplotlib axis to draw on
        puzzle: Board to draw
        title: Optional axis title
    """
    ax.clear()

    space = puzzle.space_position()
    for number, (x, y) in puzzle.positions().items():
        is_space = (x, y) == space
        rectangle = patches.Rectangle(
            (y, x), 1, 1,
            facecolor='white' if is_space else 'lightsteelblue',
            edgecolor='black',
            linewidth=1.5
        )
        ax.add_patch(rectangle)
        if not is_space:
            ax.text(y + 0.5, x + 0.5, str(number), ha='center', va='center', fontsize=14)

    ax.set_xlim(0, puzzle.size)
    ax.set_ylim(puzzle.size, 0)
    ax.set_aspect('equal', adjustable='box')
    ax.axis('off')
    if title:
        ax.set_title(title)
