"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging

from ..core.board import SudokuBoard
from ..core.validator import is_solved
from .options import SolverOptions

logger = logging.getLogger(__name__)


class SolverInvariantError(RuntimeError):
    """Raised when the search engine reaches a state that indicates a bug."""


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    solved: bool = False

    # Search metrics
    iterations: int = 0
    guesses: int = 0
    backtracks: int = 0
    propagations: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "iterations": self.iterations,
            "guesses": self.guesses,
            "backtracks": self.backtracks,
            "propagations": self.propagations,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for board solvers."""

    name: str = "BaseSolver"

    def __init__(self, options: Optional[SolverOptions] = None):
        self.options = options or SolverOptions()
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> tuple[Optional[SudokuBoard], SolverStats]:
        """
        Solve a puzzle.

        The board is copied first; the caller's board is never modified.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (solution or None, stats). None means the puzzle has
            no solution.
        """
        self.stats = SolverStats(algorithm=self.name)
        logger.debug("Solving %r with %s (%s)", board, self.name, self.options)

        solution = self._solve(board.copy())
        self.stats.solved = solution is not None and is_solved(solution)

        if self.stats.solved:
            logger.debug("Solved %r: %s", board, self.stats.to_dict())
        else:
            logger.debug("No solution for %r: %s", board, self.stats.to_dict())
            solution = None
        return solution, self.stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved board, or None if no solution found.
        """
        pass
