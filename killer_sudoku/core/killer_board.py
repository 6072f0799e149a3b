"""Killer sudoku board: a board whose cells are grouped into sum cages."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from .board import SudokuBoard
from .cages import minimize_cage_domain
from .utils import Position, mask_from_symbols, unit_peers, pos_to_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cage:
    """A group of unique cells whose symbol values must sum to target."""
    cells: Tuple[Position, ...]
    target: int

    def __post_init__(self):
        object.__setattr__(self, "cells", tuple(tuple(pos) for pos in self.cells))
        if len(set(self.cells)) != len(self.cells):
            raise ValueError(f"Cage cells must be unique, got {self.cells}")

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self.cells


CageSpec = Union[Cage, Tuple[Iterable[Position], int]]


class KillerBoard(SudokuBoard):
    """
    Sudoku board with cage-sum constraints and no given symbols.

    Every caged cell starts from the symbol range its cage sum allows,
    then the board is propagated to a fixpoint like a plain board. Cages
    are expected to partition the board; cells outside every cage start
    with the full alphabet.
    """

    def __init__(self, size: int, cages: Iterable[CageSpec]):
        """
        Initialize a killer board.

        Args:
            size: Board size, a perfect square between 4 and 25.
            cages: Cage objects or (cells, target) pairs, where cells are
                   (col, row) positions.
        """
        self._init_geometry(size)
        self.cages: Tuple[Cage, ...] = tuple(
            cage if isinstance(cage, Cage) else Cage(tuple(cage[0]), cage[1])
            for cage in cages
        )
        self._cage_of: Dict[Position, Cage] = {}
        for cage in self.cages:
            for col, row in cage.cells:
                if not (0 <= col < size and 0 <= row < size):
                    raise ValueError(f"Cage cell {(col, row)} is outside a {size}x{size} board")
                self._cage_of[(col, row)] = cage
        self._peer_cache: Dict[Position, Tuple[Position, ...]] = {}

        self.cells = np.full((size, size), self.full_mask, dtype=np.int32)
        for cage in self.cages:
            domain = minimize_cage_domain(len(cage), cage.target, size)
            logger.debug("Cage %s sum %d starts as %r", cage.cells, cage.target, domain)
            mask = mask_from_symbols(domain)
            for pos in cage.cells:
                self.set_mask(pos, mask)
        self._settle()

    def cage_for(self, pos: Position) -> Optional[Cage]:
        """Get the cage containing pos, if any."""
        return self._cage_of.get(pos)

    def cage_positions(self, pos: Position) -> Tuple[Position, ...]:
        cage = self._cage_of.get(pos)
        if cage is None:
            return ()
        return tuple(p for p in cage.cells if p != pos)

    def get_cage(self, pos: Position) -> List[str]:
        """Get the domains of every cell in the cage containing pos."""
        cage = self._cage_of.get(pos)
        if cage is None:
            return []
        return [self.get_domain(p) for p in cage.cells]

    def peers(self, pos: Position) -> Tuple[Position, ...]:
        """Get row, column, block and cage peers of pos."""
        peers = self._peer_cache.get(pos)
        if peers is None:
            merged = set(unit_peers(pos, self.size))
            merged.update(self.cage_positions(pos))
            peers = tuple(sorted(merged, key=lambda p: pos_to_index(p, self.size)))
            self._peer_cache[pos] = peers
        return peers
