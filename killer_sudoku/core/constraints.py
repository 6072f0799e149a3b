"""Constraint engine: single-cell pruning, fixpoint and worklist propagation."""

from __future__ import annotations
import heapq
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Set, Tuple

import numpy as np

from .utils import Position, index_to_pos, is_singleton, mask_size, pos_to_index

if TYPE_CHECKING:
    from .board import SudokuBoard


def restricted_mask(board: SudokuBoard, pos: Position) -> int:
    """
    Get the union of all symbols resolved in the row, column, block and
    cage of pos.
    """
    masks = board.unit_masks(pos)
    cage = board.cage_positions(pos)
    if cage:
        cols, rows = zip(*cage)
        masks = np.concatenate((masks, board.cells[list(rows), list(cols)]))
    resolved = masks[(masks != 0) & ((masks & (masks - 1)) == 0)]
    return int(np.bitwise_or.reduce(resolved)) if resolved.size else 0


def constrain_cell(board: SudokuBoard, pos: Position) -> bool:
    """
    Remove from the domain of pos every symbol already fixed by a peer.

    Returns:
        True if the domain changed.
    """
    current = board.mask(pos)
    if current == 0 or is_singleton(current):
        return False

    new_mask = current & ~restricted_mask(board, pos)
    if new_mask == current:
        return False

    board.set_mask(pos, new_mask)
    return True


def forward_check(board: SudokuBoard) -> bool:
    """
    Constrain every cell, row by row, until a pass changes nothing.

    Stops early once the board is complete or a domain becomes empty.

    Returns:
        False if a contradiction (empty domain) was found.
    """
    changed = True
    while changed and not board.is_complete():
        changed = False
        for index in range(board.size * board.size):
            pos = index_to_pos(index, board.size)
            if constrain_cell(board, pos):
                changed = True
                if board.mask(pos) == 0:
                    return False
    return True


def propagate(
    board: SudokuBoard,
    seeds: Iterable[Position],
    on_change: Optional[Callable[[Position], None]] = None,
) -> bool:
    """
    Propagate an assignment through the board with a priority worklist.

    Cells with the smallest domains are constrained first. Whenever a cell
    shrinks, its peers with more than one candidate are queued again unless
    they are already waiting.

    Args:
        board: Board to update in place.
        seeds: Cells to start from, usually the peers of the assigned cell.
        on_change: Called with every position whose domain shrank.

    Returns:
        False as soon as some domain becomes empty.
    """
    queue: List[Tuple[int, int, Position]] = []
    queued: Set[Position] = set()

    def enqueue(pos: Position) -> None:
        size = mask_size(board.mask(pos))
        if size > 1 and pos not in queued:
            heapq.heappush(queue, (size, pos_to_index(pos, board.size), pos))
            queued.add(pos)

    for pos in seeds:
        enqueue(pos)

    while queue:
        _, _, pos = heapq.heappop(queue)
        queued.discard(pos)
        if not constrain_cell(board, pos):
            continue
        if on_change is not None:
            on_change(pos)
        if board.mask(pos) == 0:
            return False
        for peer in board.peers(pos):
            enqueue(peer)
    return True
