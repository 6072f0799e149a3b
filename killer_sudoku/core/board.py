"""Sudoku board of per-cell candidate domains, for sizes 4 to 25."""

from __future__ import annotations
import copy
import logging
from typing import List, Optional, Tuple

import numpy as np

from .constraints import forward_check
from .utils import (
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    Position,
    block_positions,
    block_size_for,
    domain_for_size,
    full_mask,
    index_to_pos,
    is_perfect_square,
    is_singleton,
    mask_from_symbols,
    mask_size,
    symbols_from_mask,
    unit_peers,
)

logger = logging.getLogger(__name__)

UNKNOWN = '.'


class SudokuBoard:
    """
    A square board where every cell holds the set of symbols still possible.

    Cells are stored as bitmasks in a numpy array indexed [row, col];
    positions passed to the public methods are (col, row) tuples.
    The board is propagated to a fixpoint when it is created.
    """

    cages: Tuple = ()

    def __init__(self, size: int = 9, start: Optional[str] = None):
        """
        Initialize a board from a start string.

        Args:
            size: Board size, a perfect square between 4 and 25.
            start: Row-major string of size*size characters. '.' marks an
                   unknown cell, any other character must be one of the
                   board's symbols. Whitespace is ignored. If None, every
                   cell is unknown.
        """
        self._init_geometry(size)
        self.cells = self._parse_start(start)
        self._settle()

    def _init_geometry(self, size: int) -> None:
        if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE or not is_perfect_square(size):
            raise ValueError(
                f"Size must be a perfect square between {MIN_BOARD_SIZE} and "
                f"{MAX_BOARD_SIZE}, got {size}"
            )
        self.size = size
        self.box_size = block_size_for(size)
        self.domain = domain_for_size(size)
        self.full_mask = full_mask(size)

    def _parse_start(self, start: Optional[str]) -> np.ndarray:
        cells = np.full((self.size, self.size), self.full_mask, dtype=np.int32)
        if start is None:
            return cells

        chars = "".join(start.split())
        if len(chars) != self.size * self.size:
            raise ValueError(
                f"String length must be {self.size * self.size}, got {len(chars)}"
            )
        for i, c in enumerate(chars):
            if c == UNKNOWN:
                continue
            if c not in self.domain:
                raise ValueError(f"Symbol {c!r} is not valid for a {self.size}x{self.size} board")
            col, row = index_to_pos(i, self.size)
            cells[row, col] = mask_from_symbols(c)
        return cells

    def _settle(self) -> None:
        consistent = forward_check(self)
        logger.debug("Built %r (consistent=%s)", self, consistent)

    @classmethod
    def from_string(cls, s: str, size: int = 9) -> SudokuBoard:
        """Create a board from a (possibly multi-line) string representation."""
        return cls(size, s)

    def copy(self) -> SudokuBoard:
        """Create a copy whose cells can be changed independently."""
        new_board = copy.copy(self)
        new_board.cells = self.cells.copy()
        return new_board

    def snapshot(self) -> np.ndarray:
        """Get an independent copy of the cell domains."""
        return self.cells.copy()

    def restore(self, snapshot: np.ndarray) -> None:
        """Make a snapshot the current state. The snapshot must not be reused."""
        self.cells = snapshot

    # Cell access

    def mask(self, pos: Position) -> int:
        col, row = pos
        return int(self.cells[row, col])

    def set_mask(self, pos: Position, mask: int) -> None:
        col, row = pos
        self.cells[row, col] = mask

    def assign(self, pos: Position, bit: int) -> None:
        """Resolve the cell at pos to a single-symbol mask."""
        self.set_mask(pos, bit)

    def get_domain(self, pos: Position) -> str:
        """Get the candidate symbols of a cell, in alphabet order."""
        return symbols_from_mask(self.mask(pos))

    def set_domain(self, pos: Position, symbols: str) -> None:
        """Replace the candidate symbols of a cell."""
        invalid = set(symbols) - set(self.domain)
        if invalid:
            raise ValueError(f"Symbols {''.join(sorted(invalid))!r} are not valid for this board")
        self.set_mask(pos, mask_from_symbols(symbols))

    def domain_size(self, pos: Position) -> int:
        return mask_size(self.mask(pos))

    def domain_sizes(self) -> np.ndarray:
        """Get the number of candidates of every cell, indexed [row, col]."""
        sizes = np.zeros(self.cells.shape, dtype=np.int32)
        for bit in range(self.size):
            sizes += (self.cells >> bit) & 1
        return sizes

    def is_resolved(self, pos: Position) -> bool:
        return is_singleton(self.mask(pos))

    def is_complete(self) -> bool:
        """Check if every cell has exactly one candidate."""
        return bool(np.all(self.domain_sizes() == 1))

    def resolved_mask(self) -> np.ndarray:
        """Boolean array marking cells with exactly one candidate."""
        return (self.cells != 0) & ((self.cells & (self.cells - 1)) == 0)

    # Projections

    def get_row(self, row: int) -> List[str]:
        """Get the domains of all cells in a row."""
        return [symbols_from_mask(int(m)) for m in self.cells[row, :]]

    def get_col(self, col: int) -> List[str]:
        """Get the domains of all cells in a column."""
        return [symbols_from_mask(int(m)) for m in self.cells[:, col]]

    def get_block(self, pos: Position) -> List[str]:
        """Get the domains of all cells in the block containing pos."""
        return [self.get_domain(p) for p in block_positions(pos, self.size)]

    def get_cage(self, pos: Position) -> List[str]:
        """Plain boards have no cages."""
        return []

    def cage_positions(self, pos: Position) -> Tuple[Position, ...]:
        """Get the other cells caged together with pos."""
        return ()

    def peers(self, pos: Position) -> Tuple[Position, ...]:
        """Get every cell that must not share a symbol with pos."""
        return unit_peers(pos, self.size)

    def unit_masks(self, pos: Position) -> np.ndarray:
        """Get the masks of the row, column and block containing pos."""
        col, row = pos
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return np.concatenate((
            self.cells[row, :],
            self.cells[:, col],
            self.cells[box_row:box_row + self.box_size,
                       box_col:box_col + self.box_size].ravel(),
        ))

    # Rendering

    def to_string(self) -> str:
        """
        Render the board as size lines of size characters.

        Resolved cells show their symbol, all others show '.'.
        """
        lines = []
        for row in range(self.size):
            lines.append("".join(
                symbols_from_mask(int(m)) if is_singleton(int(m)) else UNKNOWN
                for m in self.cells[row, :]
            ))
        return "\n".join(lines)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size
        rendered = self.to_string().split("\n")

        for i, line in enumerate(rendered):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j, c in enumerate(line):
                row_str += f' {c}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        resolved = int(np.sum(self.resolved_mask()))
        return f"{type(self).__name__}(size={self.size}, resolved={resolved})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash(self.to_string())
