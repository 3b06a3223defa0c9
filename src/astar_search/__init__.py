"""
A* Search - Resumable Best-First Graph Search

A generic A* engine over explicit or lazily generated graphs. Domains
implement the Node contract and the engine handles frontier management,
stepping and path reconstruction.

Modules:
    core.node: Node capability contract
    core.frontier: Cost-ordered open/closed frontier
    algorithms.astar: Step-wise A* engine and path reconstruction
    domains.grid: 2-D grid with walls example domain
    domains.square_puzzle: Sliding-tile puzzle example domain
    utils.config_loader: YAML configuration management
    utils.visualization: Matplotlib drawing of search results
"""

from .algorithms.astar import AStar, State
from .core.exceptions import (
    EmptyFrontierError,
    NoSpaceError,
    SearchConfigurationError,
    SearchError,
)
from .core.frontier import CostOrderedFrontier
from .core.node import Node

__version__ = "1.0.0"

__all__ = [
    "AStar",
    "State",
    "Node",
    "CostOrderedFrontier",
    "SearchError",
    "EmptyFrontierError",
    "SearchConfigurationError",
    "NoSpaceError",
]
