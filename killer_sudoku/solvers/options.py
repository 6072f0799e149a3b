"""Switches controlling the optional solver optimizations."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SolverOptions:
    """
    Optimizations for a single solve call.

    Neither switch changes which solution is found for a puzzle with a
    unique solution, only how quickly it is found.

    Attributes:
        do_cage_domain_recalculation: After each guess, re-derive caged
            cells' domains from the sum combinations still possible.
        use_guess_cell_pick_heuristic: Guess the cell with the fewest
            candidates (MRV) instead of the first unresolved cell.
    """
    do_cage_domain_recalculation: bool = False
    use_guess_cell_pick_heuristic: bool = False

    @classmethod
    def with_all_optimizations(cls) -> SolverOptions:
        return cls(True, True)

    @classmethod
    def with_no_optimizations(cls) -> SolverOptions:
        return cls(False, False)
