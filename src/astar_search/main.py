"""
Main entry point for the A* search examples.

This CLI runs the A* engine on the grid or sliding-tile scenario described
by YAML configuration files.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .algorithms.astar import AStar, State
from .domains.grid import Grid2D
from .domains.square_puzzle import SquarePuzzle
from .utils.config_loader import DEFAULT_CONFIGS, load_domain_config
from .utils.visualization import draw_grid, draw_puzzle


def create_grid_from_config(grid_config: Dict[str, Any], rng: np.random.Generator) -> Grid2D:
    """
    Create a random Grid2D from configuration.

    Args:
        grid_config: The 'grid' section of the configuration
        rng: Random generator for wall placement

    Returns:
        Grid2D object
    """
    start = (grid_config['start']['x'], grid_config['start']['y'])
    goal = (grid_config['goal']['x'], grid_config['goal']['y'])

    return Grid2D.random(
        grid_config['width'],
        grid_config['height'],
        grid_config['wall_percentage'],
        start,
        goal,
        rng=rng
    )


def create_puzzle_from_config(puzzle_config: Dict[str, Any], rng: np.random.Generator):
    """
    Create a shuffled start board and the linear goal board.

    Returns:
        (start, goal) tuple of SquarePuzzle
    """
    goal = SquarePuzzle.linear(puzzle_config['size'])
    start = goal.shuffled(puzzle_config['shuffle_moves'], rng=rng)
    return start, goal


def drive_search(search: AStar, max_steps: Optional[int] = None, progress_interval: Optional[int] = None) -> State:
    """
    Step the search until it finishes or the step limit is reached.

    Args:
        search: Engine to drive
        max_steps: Stop after this many steps (None for no limit)
        progress_interval: Print a progress line every this many steps

    Returns:
        The last state, State.SEARCHING if the limit was hit
    """
    while True:
        state = search.step()
        if state.is_terminal:
            return state
        if max_steps is not None and search.steps >= max_steps:
            return state
        if progress_interval and search.steps % progress_interval == 0:
            print(f"{search.steps} steps have been performed.")


def print_report(search: AStar, state: State) -> None:
    """Print the result state and metrics in a banner."""
    print("\n" + "="*60)
    print("Results:")
    print("="*60)
    print(f"  result: {state.value}")
    for key, value in search.get_metrics().items():
        print(f"  {key}: {value}")
    print("="*60 + "\n")


def run_search(domain: str,
               config_dir: Optional[str] = None,
               seed: Optional[int] = None,
               max_steps: Optional[int] = None,
               visualize: bool = True,
               save: bool = False) -> int:
    """
    Run A* on one of the example scenarios.

    Args:
        domain: Scenario name ('grid' or 'puzzle')
        config_dir: Directory containing YAML configuration files
        seed: Random seed, overrides the configured one
        max_steps: Step limit, overrides the configured one
        visualize: Whether to show a matplotlib figure
        save: Whether to save the figure and the rendered path

    Returns:
        Process exit code, 0 if the goal was found
    """
    print(f"\n{'='*60}")
    print(f"Running A* Search on the {domain.upper()} Scenario")
    print(f"{'='*60}\n")

    print("Loading configuration...")
    config = load_domain_config(domain, config_dir)
    scenario = config[domain]
    search_config = config['search']

    if seed is None:
        seed = scenario.get('seed')
    if max_steps is None:
        max_steps = search_config.get('max_steps')
    rng = np.random.default_rng(seed)

    if domain == 'grid':
        grid = create_grid_from_config(scenario, rng)
        start, goal = grid.start, grid.goal
        print(f"Environment: {grid}")
    else:
        start, goal = create_puzzle_from_config(scenario, rng)
        print("Starting position:")
        print(start.render())
        print("Goal position:")
        print(goal.render())
        if not start.can_reach(goal):
            print("❌ Goal is not reachable from the start board!")
            return 1

    search = AStar(start, goal)
    print(f"Search: {search}")

    print("\nSearching...")
    state = drive_search(search, max_steps, search_config.get('progress_interval'))
    print_report(search, state)

    if state is State.SEARCHING:
        print(f"⏹ Step limit of {max_steps} reached, partial path shown")
    elif state is State.FAILED:
        print("❌ No path found!")
        return 1

    path = search.get_path()
    if domain == 'grid':
        rendered = grid.render(path)
    else:
        rendered = "\n".join(f"Step: {i}\n{node.render()}" for i, node in enumerate(path, start=1))
    print(rendered)

    if state is State.GOAL_FOUND:
        print(f"✅ Path found with {len(path)} nodes in {search.steps} steps")

    if visualize or save:
        if domain == 'grid':
            fig, ax = plt.subplots(figsize=(8, 8))
            draw_grid(ax, grid, path=path, closed_nodes=search.closed_list)
            ax.set_title(f"A* Grid Search\nMoves: {len(path) - 1}, Steps: {search.steps}")
        else:
            fig, axes = plt.subplots(1, 2, figsize=(8, 4))
            draw_puzzle(axes[0], path[0], title="Start")
            draw_puzzle(axes[1], path[-1], title=f"After {len(path) - 1} moves")
        plt.tight_layout()

        if save:
            output_config = config.get('output', {})
            save_path = Path(output_config.get('save_path', f'outputs/{domain}/'))
            save_path.mkdir(parents=True, exist_ok=True)

            plot_file = save_path / output_config.get('plot_filename', f'{domain}_path.png')
            plt.savefig(plot_file, dpi=150, bbox_inches='tight')
            print(f"📊 Plot saved to: {plot_file}")

            path_file = save_path / 'path.txt'
            path_file.write_text(rendered)
            print(f"💾 Path saved to: {path_file}")

        if visualize:
            plt.show()
        plt.close(fig)

    return 0 if state is State.GOAL_FOUND else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description='A* Search Examples',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search a random 20x20 grid
  astar-search --domain grid

  # Solve a shuffled 3x3 puzzle with a fixed seed
  astar-search --domain puzzle --seed 7

  # Bound the work and skip the plot
  astar-search --domain puzzle --max-steps 50000 --no-viz

  # Use custom config directory and save results
  astar-search --domain grid --config-dir configs --save
        """
    )

    parser.add_argument(
        '--domain', '-d',
        type=str,
        choices=list(DEFAULT_CONFIGS.keys()),
        required=True,
        help='Example scenario to search'
    )

    parser.add_argument(
        '--config-dir', '-c',
        type=str,
        default=None,
        help='Directory containing YAML configuration files (default: built-in settings)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for the generated scenario'
    )

    parser.add_argument(
        '--max-steps',
        type=int,
        default=None,
        help='Stop after this many search steps'
    )

    parser.add_argument(
        '--save', '-s',
        action='store_true',
        help='Save output files (plot, rendered path)'
    )

    parser.add_argument(
        '--no-viz',
        action='store_true',
        help='Disable visualization'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging of the search engine'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(name)s %(levelname)s %(message)s')

    return run_search(
        domain=args.domain,
        config_dir=args.config_dir,
        seed=args.seed,
        max_steps=args.max_steps,
        visualize=not args.no_viz,
        save=args.save
    )


if __name__ == '__main__':
    sys.exit(main())
