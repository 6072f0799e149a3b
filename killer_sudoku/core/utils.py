"""Indexing utilities and domain bitmask helpers shared by boards and solvers."""

from __future__ import annotations
from functools import lru_cache
from typing import Iterable, List, Tuple
import math

# (col, row), 0-based
Position = Tuple[int, int]

ALPHABET = "123456789ABCDEFGHIJKLMNOP"

MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 25


def domain_for_size(size: int) -> str:
    """Get the symbols used by a board of the given size."""
    return ALPHABET[:size]


def block_size_for(size: int) -> int:
    """Get the side length of a block for a board size."""
    return math.isqrt(size)


def is_perfect_square(size: int) -> bool:
    block_size = block_size_for(size)
    return block_size * block_size == size


def index_to_pos(index: int, size: int) -> Position:
    """
    Convert a row-major index into a (col, row) position.

    Works the same for a board and for the cells inside a block.
    """
    return index % size, index // size


def pos_to_index(pos: Position, size: int) -> int:
    col, row = pos
    return col + row * size


def pos_to_block_pos(pos: Position, block_size: int) -> Position:
    """Get the (col, row) of the block containing pos."""
    col, row = pos
    return col // block_size, row // block_size


def pos_to_index_in_block(pos: Position, block_size: int) -> int:
    col, row = pos
    return pos_to_index((col % block_size, row % block_size), block_size)


def pos_in_block_to_pos(pos_in_block: Position, block_pos: Position,
                        block_size: int) -> Position:
    """Translate a position inside a block back to a board position."""
    return (pos_in_block[0] + block_pos[0] * block_size,
            pos_in_block[1] + block_pos[1] * block_size)


def block_positions(pos: Position, size: int) -> List[Position]:
    """Get all positions of the block containing pos, in row-major order."""
    block_size = block_size_for(size)
    block_pos = pos_to_block_pos(pos, block_size)
    return [pos_in_block_to_pos(index_to_pos(i, block_size), block_pos, block_size)
            for i in range(size)]


@lru_cache(maxsize=None)
def unit_peers(pos: Position, size: int) -> Tuple[Position, ...]:
    """
    Get the row, column and block peers of a cell.

    Args:
        pos: Cell position.
        size: Board size.

    Returns:
        Tuple of positions sharing a unit with pos, excluding pos itself,
        ordered row-major.
    """
    col, row = pos
    peers = {(c, row) for c in range(size)}
    peers.update((col, r) for r in range(size))
    peers.update(block_positions(pos, size))
    peers.discard(pos)
    return tuple(sorted(peers, key=lambda p: pos_to_index(p, size)))


def symbol_value(symbol: str) -> int:
    """Get the 1-based numeric value of an alphabet symbol."""
    index = ALPHABET.find(symbol)
    if index < 0 or len(symbol) != 1:
        raise ValueError(f"Unknown symbol {symbol!r}")
    return index + 1


# Domains are stored as bitmasks: bit i is set when ALPHABET[i] is a candidate.

def bit_for_value(value: int) -> int:
    return 1 << (value - 1)


def mask_from_symbols(symbols: Iterable[str]) -> int:
    mask = 0
    for symbol in symbols:
        mask |= bit_for_value(symbol_value(symbol))
    return mask


def full_mask(size: int) -> int:
    return (1 << size) - 1


def symbols_from_mask(mask: int) -> str:
    """Render a domain mask as its symbols in alphabet order."""
    return "".join(ALPHABET[i] for i in range(len(ALPHABET)) if mask >> i & 1)


def mask_size(mask: int) -> int:
    return bin(mask).count("1")


def is_singleton(mask: int) -> bool:
    return mask != 0 and mask & (mask - 1) == 0


def mask_bits(mask: int) -> List[int]:
    """Split a mask into its single-symbol masks, in alphabet order."""
    bits = []
    while mask:
        low = mask & -mask
        bits.append(low)
        mask ^= low
    return bits


def mask_value(mask: int) -> int:
    """Get the value of a singleton mask."""
    return mask.bit_length()


def mask_values(mask: int) -> List[int]:
    return [mask_value(bit) for bit in mask_bits(mask)]
