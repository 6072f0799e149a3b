"""Backtracking search with constraint propagation for plain and killer boards."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging

import numpy as np

from .base_solver import BaseSolver, SolverInvariantError
from .options import SolverOptions
from ..core.board import SudokuBoard
from ..core.cages import recalculate_cage_domains
from ..core.constraints import propagate
from ..core.utils import Position, index_to_pos, mask_bits
from ..core.validator import is_consistent

logger = logging.getLogger(__name__)


@dataclass
class Guess:
    """A tentative assignment and the cell domains from just before it."""
    pos: Position
    snapshot: np.ndarray


@dataclass
class Frame:
    """One level of the search: the cell being guessed and what is left to try."""
    pos: Position
    candidates: List[int]


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search over cell domains.

    Features:
    - Guesses are propagated to peers through a smallest-domain-first worklist
    - Optional Minimum Remaining Values (MRV) heuristic for cell selection
    - Optional cage domain recalculation after every guess (killer boards)
    - Explicit frame and guess stacks instead of recursion, so deep searches
      on large boards are not limited by the interpreter's recursion limit

    Every guess pushes a snapshot of the board taken before the assignment;
    undoing a guess restores that snapshot.
    """

    name = "Backtracking+Propagation"

    def __init__(self, options: Optional[SolverOptions] = None):
        """
        Initialize the solver.

        Args:
            options: Optimizations to use. Defaults to none.
        """
        super().__init__(options)
        self._guesses: List[Guess] = []

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve using depth-first search with undo snapshots."""
        self._guesses = []

        if not is_consistent(board):
            return None
        if board.is_complete():
            return board

        frames = [self._open_frame(board)]
        while frames:
            frame = frames[-1]
            if not frame.candidates:
                # Every candidate failed: give up on this cell and undo the
                # guess that led here.
                frames.pop()
                if frames:
                    self._undo(board)
                continue

            bit = frame.candidates.pop(0)
            if self._try(board, frame.pos, bit):
                if board.is_complete():
                    return board
                frames.append(self._open_frame(board))
                continue

            self._undo(board)

        if self._guesses:
            raise SolverInvariantError(f"{len(self._guesses)} guesses left after search finished")
        return None

    def _open_frame(self, board: SudokuBoard) -> Frame:
        self.stats.iterations += 1
        pos = self._select_unassigned_variable(board)
        return Frame(pos, mask_bits(board.mask(pos)))

    def _try(self, board: SudokuBoard, pos: Position, bit: int) -> bool:
        """
        Assign bit to pos and propagate it.

        Returns:
            True if the board is still consistent afterwards.
        """
        self.stats.guesses += 1
        self._guesses.append(Guess(pos, board.snapshot()))
        board.assign(pos, bit)

        if not propagate(board, board.peers(pos), self._count_propagation):
            logger.debug("Guess %s at %s emptied a domain", bit.bit_length(), pos)
            return False
        if self.options.do_cage_domain_recalculation and board.cages:
            recalculate_cage_domains(board)
        return is_consistent(board)

    def _count_propagation(self, pos: Position) -> None:
        self.stats.propagations += 1

    def _undo(self, board: SudokuBoard) -> None:
        """Restore the board to just before the latest guess."""
        if not self._guesses:
            raise SolverInvariantError("Tried to undo more guesses than were done")
        guess = self._guesses.pop()
        board.restore(guess.snapshot)
        self.stats.backtracks += 1

    def _select_unassigned_variable(self, board: SudokuBoard) -> Position:
        """
        Select the next cell to guess.

        With the MRV heuristic this is the cell with the fewest candidates,
        ties going to the first in row-major order; otherwise it is simply
        the first cell with more than one candidate.
        """
        sizes = board.domain_sizes().ravel()
        open_cells = sizes > 1
        if not open_cells.any():
            raise SolverInvariantError("No cell with more than one candidate to guess")

        if self.options.use_guess_cell_pick_heuristic:
            index = int(np.argmin(np.where(open_cells, sizes, board.size + 1)))
        else:
            index = int(np.argmax(open_cells))
        return index_to_pos(index, board.size)


def solve(board: SudokuBoard, options: Optional[SolverOptions] = None) -> Optional[SudokuBoard]:
    """
    Solve a plain or killer board.

    Args:
        board: The puzzle; it is not modified.
        options: Optimizations to use.

    Returns:
        The solved board, or None if the puzzle has no solution.
    """
    solution, _ = BacktrackingSolver(options).solve(board)
    return solution
