"""Unit tests for the board model and validation."""

import pytest
from killer_sudoku.core.board import SudokuBoard
from killer_sudoku.core.validator import is_consistent, is_solved, validate_solution


SOLVED_4X4 = (
    "1234"
    "3412"
    "2143"
    "4321"
)

# The last row is missing one symbol that forward checking must find.
ONE_MISSING_4X4 = (
    "1234"
    "3412"
    "2143"
    "4.21"
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.domain == "123456789"
        assert board.get_domain((0, 0)) == "123456789"
        assert not board.is_complete()

    def test_create_16x16_board(self):
        """Test creating a 16x16 board."""
        board = SudokuBoard(size=16)
        assert board.size == 16
        assert board.box_size == 4
        assert board.get_domain((15, 15)) == "123456789ABCDEFG"

    @pytest.mark.parametrize("size", [4, 25])
    def test_size_bounds_accepted(self, size):
        """Smallest and largest supported sizes construct."""
        board = SudokuBoard(size=size)
        assert board.size == size

    @pytest.mark.parametrize("size", [3, 5, 26, 1, 36])
    def test_invalid_size_rejected(self, size):
        """Sizes outside 4..25 or not perfect squares fail construction."""
        with pytest.raises(ValueError):
            SudokuBoard(size=size)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            SudokuBoard(4, "123")

    def test_symbol_outside_alphabet_rejected(self):
        """'5' is not a symbol of a 4x4 board."""
        with pytest.raises(ValueError):
            SudokuBoard(4, "5" + "." * 15)

    def test_givens_become_singletons(self):
        board = SudokuBoard(9, "5" + "." * 80)
        assert board.get_domain((0, 0)) == "5"
        assert board.is_resolved((0, 0))

    def test_forward_checking_on_construction(self):
        """Givens are removed from the domains of their peers."""
        board = SudokuBoard(9, "53" + "." * 79)
        domain = board.get_domain((2, 0))
        assert "5" not in domain
        assert "3" not in domain
        assert len(domain) == 7
        # Column peer of the 5 only loses the 5
        assert board.get_domain((0, 5)) == "12346789"

    def test_forward_checking_completes_board(self):
        """A single missing cell is filled by propagation alone."""
        board = SudokuBoard(4, ONE_MISSING_4X4)
        assert board.is_complete()
        assert board.get_domain((1, 3)) == "3"

    def test_set_and_get_domain(self):
        """Test setting and getting domains."""
        board = SudokuBoard()
        board.set_domain((3, 2), "147")
        assert board.get_domain((3, 2)) == "147"
        assert board.domain_size((3, 2)) == 3

    def test_set_domain_rejects_unknown_symbol(self):
        board = SudokuBoard(4)
        with pytest.raises(ValueError):
            board.set_domain((0, 0), "15")

    def test_projections(self):
        """Rows, columns and blocks are sequences of domains."""
        board = SudokuBoard(4, SOLVED_4X4)
        assert board.get_row(1) == ["3", "4", "1", "2"]
        assert board.get_col(1) == ["2", "4", "1", "3"]
        assert board.get_block((3, 3)) == ["4", "3", "2", "1"]
        assert board.get_cage((0, 0)) == []

    def test_to_string(self):
        """Unresolved cells render as '.'."""
        board = SudokuBoard(4, "1" + "." * 15)
        lines = board.to_string().split("\n")
        assert len(lines) == 4
        assert lines[0] == "1..."
        assert all(len(line) == 4 for line in lines)

    def test_round_trip(self):
        """Rendering a resolved board and parsing it again gives the same board."""
        board = SudokuBoard(4, SOLVED_4X4)
        rendered = board.to_string()
        assert rendered == "1234\n3412\n2143\n4321"
        assert SudokuBoard.from_string(rendered, 4) == board

    def test_pretty_print(self):
        board = SudokuBoard(4, SOLVED_4X4)
        text = str(board)
        assert text.startswith("+")
        assert "| 1 2 | 3 4 |" in text

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set_domain((4, 4), "7")
        copy = board.copy()

        assert copy.get_domain((4, 4)) == "7"

        # Modify copy, original should be unchanged
        copy.set_domain((4, 4), "8")
        assert board.get_domain((4, 4)) == "7"

    def test_snapshot_is_independent(self):
        board = SudokuBoard(4)
        snapshot = board.snapshot()
        board.set_domain((0, 0), "2")
        assert board.get_domain((0, 0)) == "2"
        board.restore(snapshot)
        assert board.get_domain((0, 0)) == "1234"


class TestValidator:
    """Tests for validation utilities."""

    def test_solved_board(self):
        board = SudokuBoard(4, SOLVED_4X4)
        assert is_consistent(board)
        assert is_solved(board)

    def test_duplicate_in_row_is_inconsistent(self):
        """Two equal givens in a row."""
        board = SudokuBoard(4, "11" + "." * 14)
        assert not is_consistent(board)

    def test_empty_domain_is_inconsistent(self):
        board = SudokuBoard(4)
        board.set_domain((2, 2), "")
        assert not is_consistent(board)

    def test_validate_solution(self):
        puzzle = SudokuBoard(4, "1..." + "." * 12)
        solution = SudokuBoard(4, SOLVED_4X4)
        assert validate_solution(puzzle, solution)

    def test_validate_solution_wrong_clue(self):
        puzzle = SudokuBoard(4, "2..." + "." * 12)
        solution = SudokuBoard(4, SOLVED_4X4)
        assert not validate_solution(puzzle, solution)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
