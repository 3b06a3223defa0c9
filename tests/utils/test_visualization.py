# tests/utils/test_visualization.py
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from astar_search.algorithms.astar import AStar, State
from astar_search.domains.grid import Grid2D
from astar_search.domains.square_puzzle import SquarePuzzle
from astar_search.utils.visualization import draw_grid, draw_puzzle


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def test_draw_grid_with_search_result(ax):
    """Test that the path, expanded cells and markers are drawn."""
    grid = Grid2D.from_strings([
        "s..W",
        ".W..",
        "...g",
    ])
    search = AStar(grid.start, grid.goal)
    assert search.run() is State.GOAL_FOUND
    path = search.get_path()

    draw_grid(ax, grid, path=path, closed_nodes=search.closed_list)

    path_line = ax.get_lines()[0]
    assert list(path_line.get_xdata()) == [node.y for node in path]
    assert list(path_line.get_ydata()) == [node.x for node in path]

    labels = ax.get_legend_handles_labels()[1]
    assert set(labels) == {"Expanded", "A* Path", "Start", "Goal"}
    assert ax.get_xlim() == (-0.5, 3.5)
    assert ax.get_ylim() == (2.5, -0.5)


def test_draw_grid_without_result(ax):
    """Test drawing a bare grid only shows the start and goal markers."""
    grid = Grid2D.from_strings(["s.", ".g"])

    draw_grid(ax, grid)

    assert len(ax.get_lines()) == 0
    assert set(ax.get_legend_handles_labels()[1]) == {"Start", "Goal"}


def test_draw_puzzle(ax):
    """Test one text label per numbered tile and a blank space cell."""
    puzzle = SquarePuzzle.linear(3)

    draw_puzzle(ax, puzzle, title="Goal")

    assert sorted(text.get_text() for text in ax.texts) == [str(n) for n in range(1, 9)]
    assert len(ax.patches) == 9
    assert ax.get_title() == "Goal"
