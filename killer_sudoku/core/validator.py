"""Validation utilities for boards and solutions."""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from .utils import is_singleton, mask_value

if TYPE_CHECKING:
    from .board import SudokuBoard


def _has_duplicate_symbols(masks: np.ndarray) -> bool:
    resolved = masks[(masks != 0) & ((masks & (masks - 1)) == 0)]
    return len(resolved) != len(np.unique(resolved))


def units_valid(board: SudokuBoard) -> bool:
    """
    Check that no symbol is resolved twice in a row, column, block or cage.
    """
    cells = board.cells
    for i in range(board.size):
        if _has_duplicate_symbols(cells[i, :]) or _has_duplicate_symbols(cells[:, i]):
            return False

    b = board.box_size
    for box_row in range(0, board.size, b):
        for box_col in range(0, board.size, b):
            if _has_duplicate_symbols(cells[box_row:box_row + b, box_col:box_col + b].ravel()):
                return False

    for cage in board.cages:
        masks = np.array([board.mask(pos) for pos in cage.cells], dtype=np.int32)
        if _has_duplicate_symbols(masks):
            return False
    return True


def cage_sums_valid(board: SudokuBoard) -> bool:
    """
    Check every cage sum against the resolved cells of the cage.

    While a cage still has unresolved cells its resolved cells must sum to
    less than the target; once all are resolved they must hit it exactly.
    """
    for cage in board.cages:
        masks = [board.mask(pos) for pos in cage.cells]
        resolved = [mask_value(m) for m in masks if is_singleton(m)]
        total = sum(resolved)
        if len(resolved) == len(masks):
            if total != cage.target:
                return False
        elif total >= cage.target:
            return False
    return True


def is_consistent(board: SudokuBoard) -> bool:
    """
    Check that the board can still lead to a solution as far as cheap
    checks can tell: no empty domain, no repeated symbol in a unit and no
    broken cage sum.
    """
    if np.any(board.cells == 0):
        return False
    return units_valid(board) and cage_sums_valid(board)


def is_solved(board: SudokuBoard) -> bool:
    """Check if the puzzle is completely and correctly solved."""
    return board.is_complete() and is_consistent(board)


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if the solution is solved and keeps every resolved puzzle cell.
    """
    if puzzle.size != solution.size:
        return False

    given = puzzle.resolved_mask()
    if not np.array_equal(puzzle.cells[given], solution.cells[given]):
        return False

    return is_solved(solution)
