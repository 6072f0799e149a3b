"""Solvers module for plain and killer boards."""

from .base_solver import BaseSolver, SolverStats, SolverInvariantError
from .options import SolverOptions
from .backtracking_solver import BacktrackingSolver, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolverInvariantError",
    "SolverOptions",
    "BacktrackingSolver",
    "solve",
]
