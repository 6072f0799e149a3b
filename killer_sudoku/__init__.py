"""Killer Sudoku solver: constraint propagation plus backtracking search."""

from .core import Cage, KillerBoard, SudokuBoard
from .solvers import BacktrackingSolver, SolverInvariantError, SolverOptions, SolverStats, solve

__all__ = [
    "SudokuBoard",
    "KillerBoard",
    "Cage",
    "BacktrackingSolver",
    "SolverOptions",
    "SolverStats",
    "SolverInvariantError",
    "solve",
]
