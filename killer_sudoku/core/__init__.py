"""Core module for board representation, propagation and validation."""

from .board import SudokuBoard
from .killer_board import Cage, KillerBoard
from .constraints import constrain_cell, forward_check, propagate
from .cages import minimize_cage_domain, recalculate_cage_domains
from .validator import is_consistent, is_solved, validate_solution

__all__ = [
    "SudokuBoard",
    "KillerBoard",
    "Cage",
    "constrain_cell",
    "forward_check",
    "propagate",
    "minimize_cage_domain",
    "recalculate_cage_domains",
    "is_consistent",
    "is_solved",
    "validate_solution",
]
