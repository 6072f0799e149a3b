"""Cage-sum arithmetic for killer boards."""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, List, Sequence, Set, Tuple

from .utils import bit_for_value, domain_for_size, mask_values

if TYPE_CHECKING:
    from .killer_board import KillerBoard


def cage_domain_bounds(cell_count: int, target: int, size: int) -> Tuple[int, int]:
    """
    Get the alphabet slice every cell of a cage can take.

    The top value is the largest v for which v plus the smallest distinct
    values 1..k-1 still fits in the target. The bottom value is the smallest
    v for which v plus the k-1 largest values reaches the target.

    Args:
        cell_count: Number of cells k in the cage.
        target: Cage sum.
        size: Board size.

    Returns:
        (min_index, max_index), 0-based slice bounds into the alphabet.
        An impossible cage yields min_index >= max_index.
    """
    rest = cell_count - 1
    min_rest = rest * (rest + 1) // 2
    max_rest = sum(range(size - rest + 1, size + 1))

    top = size
    while top > 0 and min_rest + top > target:
        top -= 1

    bottom = 1
    while bottom <= size and max_rest + bottom < target:
        bottom += 1

    return bottom - 1, top


def minimize_cage_domain(cell_count: int, target: int, size: int) -> str:
    """Get the contiguous range of symbols feasible for every cell of a cage."""
    min_index, max_index = cage_domain_bounds(cell_count, target, size)
    return domain_for_size(size)[min_index:max_index]


def cage_combinations(value_lists: Sequence[Sequence[int]], target: int) -> Iterator[Tuple[int, ...]]:
    """
    Enumerate assignments of one value per cell that sum to target.

    Equivalent to filtering the cross product of value_lists down to tuples
    with pairwise distinct values and the right sum, but prunes partial
    tuples that already overshoot or cannot reach the target.
    """
    count = len(value_lists)
    lows = [min(values, default=0) for values in value_lists]
    highs = [max(values, default=0) for values in value_lists]
    # Bounds on what the cells after position i can still add.
    min_after = [0] * (count + 1)
    max_after = [0] * (count + 1)
    for i in range(count - 1, -1, -1):
        min_after[i] = min_after[i + 1] + lows[i]
        max_after[i] = max_after[i + 1] + highs[i]

    chosen: List[int] = []

    def extend(i: int, total: int) -> Iterator[Tuple[int, ...]]:
        if i == count:
            if total == target:
                yield tuple(chosen)
            return
        for value in value_lists[i]:
            if value in chosen:
                continue
            new_total = total + value
            if new_total + min_after[i + 1] > target or new_total + max_after[i + 1] < target:
                continue
            chosen.append(value)
            yield from extend(i + 1, new_total)
            chosen.pop()

    if any(not values for values in value_lists):
        return
    yield from extend(0, 0)


def recalculate_cage_domains(board: KillerBoard) -> bool:
    """
    Re-derive every caged cell's domain from the sum combinations that
    remain possible.

    A cell keeps a symbol only if some distinct-valued combination of the
    cage's current domains uses it at that cell and hits the target.
    A cage without any combination empties all of its cells.

    Returns:
        True if any domain changed.
    """
    changed = False
    for cage in board.cages:
        value_lists = [mask_values(board.mask(pos)) for pos in cage.cells]
        seen: List[Set[int]] = [set() for _ in cage.cells]
        for combination in cage_combinations(value_lists, cage.target):
            for i, value in enumerate(combination):
                seen[i].add(value)

        for pos, values in zip(cage.cells, seen):
            new_mask = 0
            for value in values:
                new_mask |= bit_for_value(value)
            if new_mask != board.mask(pos):
                board.set_mask(pos, new_mask)
                changed = True
    return changed
