"""Tests for the killer board model."""

import pytest
from killer_sudoku.core.killer_board import Cage, KillerBoard
from killer_sudoku.core.constraints import constrain_cell
from killer_sudoku.core.utils import index_to_pos


# Unique solution:
#   1234
#   3412
#   2143
#   4321
CAGES_4X4 = [
    ([(0, 0)], 1),
    ([(1, 0), (0, 1)], 5),
    ([(1, 1)], 4),
    ([(2, 0), (3, 0)], 7),
    ([(2, 1), (3, 1)], 3),
    ([(0, 2), (1, 2)], 3),
    ([(0, 3), (1, 3)], 7),
    ([(2, 2), (2, 3)], 6),
    ([(3, 2), (3, 3)], 4),
]


class TestCage:
    """Tests for the Cage value type."""

    def test_cells_are_tuples(self):
        cage = Cage([[0, 0], [1, 0]], 3)
        assert cage.cells == ((0, 0), (1, 0))
        assert len(cage) == 2
        assert (1, 0) in cage

    def test_duplicate_cells_rejected(self):
        with pytest.raises(ValueError):
            Cage(((0, 0), (0, 0)), 2)


class TestKillerBoard:
    """Tests for KillerBoard construction and projections."""

    def test_cage_minimization_before_propagation(self):
        """A 2-cell cage summing to 3 starts as {1, 2} for both cells."""
        board = KillerBoard(9, [([(0, 0), (1, 0)], 3)])
        assert board.get_domain((0, 0)) == "12"
        assert board.get_domain((1, 0)) == "12"

    def test_cages_accept_cage_objects(self):
        cages = [Cage(tuple(cells), target) for cells, target in CAGES_4X4]
        board = KillerBoard(4, cages)
        assert board.cages == tuple(cages)

    def test_single_cell_cage_is_resolved(self):
        board = KillerBoard(4, CAGES_4X4)
        assert board.get_domain((0, 0)) == "1"

    def test_uncaged_cells_get_full_domain(self):
        board = KillerBoard(4, [([(0, 0), (1, 0)], 3)])
        assert board.get_domain((3, 3)) == "1234"
        assert board.cage_for((3, 3)) is None

    def test_cage_projection(self):
        board = KillerBoard(4, CAGES_4X4)
        assert len(board.get_cage((0, 1))) == 2
        assert board.cage_for((0, 1)).target == 5
        assert board.cage_positions((0, 1)) == ((1, 0),)

    def test_peers_include_cage(self):
        """Opposite corners share no unit but are peers through their cage."""
        board = KillerBoard(9, [([(0, 0), (8, 8)], 10)])
        assert (8, 8) in board.peers((0, 0))
        assert (0, 0) not in board.peers((0, 0))

    def test_cage_members_exclude_each_other(self):
        """Resolving one cage cell removes its symbol from the rest of the cage."""
        board = KillerBoard(9, [([(0, 0), (8, 8)], 10)])
        board.set_domain((0, 0), "4")
        assert constrain_cell(board, (8, 8))
        assert "4" not in board.get_domain((8, 8))

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            KillerBoard(5, [])

    def test_cage_outside_board(self):
        with pytest.raises(ValueError):
            KillerBoard(4, [([(4, 0)], 1)])

    def test_propagation_reaches_fixpoint(self):
        board = KillerBoard(4, CAGES_4X4)
        for index in range(16):
            assert not constrain_cell(board, index_to_pos(index, 4))

    def test_copy_keeps_cages(self):
        board = KillerBoard(4, CAGES_4X4)
        copy = board.copy()
        assert copy.cages == board.cages
        before = board.get_domain((3, 3))
        copy.set_domain((3, 3), "")
        assert board.get_domain((3, 3)) == before


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
