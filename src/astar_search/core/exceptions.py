"""
Error types raised by the search engine and its bundled domains.

Running out of candidates is not an error: the engine reports it as
``State.FAILED``. The exceptions below signal misuse or broken domain data.
"""


class SearchError(Exception):
    """Base class for all search related errors."""


class EmptyFrontierError(SearchError, IndexError):
    """Raised when popping from a frontier that holds no entries."""


class SearchConfigurationError(SearchError, ValueError):
    """Raised when start and goal nodes cannot be searched together."""


class NoSpaceError(SearchError, ValueError):
    """
    Raised by the sliding-tile domain when a puzzle has no blank tile.

    Attributes:
        puzzle: The offending puzzle state
    """

    def __init__(self, puzzle):
        super().__init__(f"Puzzle has no space tile:\n{puzzle.render()}")
        self.puzzle = puzzle
