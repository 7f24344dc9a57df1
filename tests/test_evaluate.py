"""
Test suite for cross_sum.evaluate module.
Tests row/column sums, completion checking, number validation and grid statistics.
"""

import pytest

from cross_sum.core.cells import EMPTY
from cross_sum.core.difficulty import Difficulty
from cross_sum.core.results import CompletionReason
from cross_sum.evaluate.checker import (
    calculate_row_sum,
    calculate_col_sum,
    check_puzzle_completion,
    is_valid_number,
)
from cross_sum.evaluate.metrics import get_grid_statistics


@pytest.fixture
def targets():
    """Row and column targets of the first catalog puzzle."""
    return [6, 5, 6], [6, 5, 6]


@pytest.fixture
def solved_grid():
    return [[1, 2, 3], [2, 1, 2], [3, 2, 1]]


class TestSumCalculators:
    """Test calculate_row_sum and calculate_col_sum."""

    def test_sums_of_full_grid(self, solved_grid):
        assert [calculate_row_sum(solved_grid, i) for i in range(3)] == [6, 5, 6]
        assert [calculate_col_sum(solved_grid, j) for j in range(3)] == [6, 5, 6]

    def test_empty_cells_count_as_zero(self):
        grid = [[EMPTY, 2, ""], [None, EMPTY, 4], [1, 1, 1]]
        assert calculate_row_sum(grid, 0) == 2
        assert calculate_row_sum(grid, 1) == 4
        assert calculate_col_sum(grid, 0) == 1
        assert calculate_col_sum(grid, 2) == 5

    def test_string_cells_use_leading_integer(self):
        grid = [["3", "2abc", "abc"], [" 4", "1.9", "-2"], ["0x1F", "", "x3"]]
        assert calculate_row_sum(grid, 0) == 5
        assert calculate_row_sum(grid, 1) == 3
        assert calculate_row_sum(grid, 2) == 31
        assert calculate_col_sum(grid, 2) == -2

    def test_float_cells_truncate(self):
        grid = [[2.9, 1.0], [float("nan"), 3]]
        assert calculate_row_sum(grid, 0) == 3
        assert calculate_row_sum(grid, 1) == 3

    def test_row_index_out_of_range_raises(self, solved_grid):
        with pytest.raises(IndexError):
            calculate_row_sum(solved_grid, 3)

    def test_negative_index_does_not_wrap(self, solved_grid):
        with pytest.raises(IndexError):
            calculate_row_sum(solved_grid, -1)
        with pytest.raises(IndexError):
            calculate_col_sum(solved_grid, -1)

    def test_col_index_out_of_range_raises(self, solved_grid):
        with pytest.raises(IndexError):
            calculate_col_sum(solved_grid, 3)


class TestCompletionChecker:
    """Test check_puzzle_completion ordering and reasons."""

    def test_solved_example(self, solved_grid, targets):
        result = check_puzzle_completion(solved_grid, *targets)

        assert result.reason is CompletionReason.SOLVED
        assert result.is_complete
        assert result.to_dict() == {"is_complete": True, "reason": "solved"}

    def test_incorrect_row_example(self, targets):
        grid = [[1, 2, 3], [2, 1, 2], [3, 2, 2]]
        result = check_puzzle_completion(grid, *targets)

        assert result.reason is CompletionReason.INCORRECT_ROW_SUM
        assert not result.is_complete
        assert (result.row, result.expected, result.actual) == (2, 6, 7)
        assert result.col is None
        assert result.to_dict() == {
            "is_complete": False,
            "reason": "incorrect_row_sum",
            "row": 2,
            "expected": 6,
            "actual": 7,
        }

    def test_incomplete_takes_precedence_over_wrong_sums(self, targets):
        grid = [[5, 5, 5], [5, EMPTY, 5], [5, 5, 5]]
        result = check_puzzle_completion(grid, *targets)

        assert result.reason is CompletionReason.INCOMPLETE
        assert result.row is None and result.expected is None

    @pytest.mark.parametrize("blank", [EMPTY, None, ""])
    def test_every_blank_form_is_incomplete(self, solved_grid, targets, blank):
        solved_grid[1][1] = blank
        assert check_puzzle_completion(solved_grid, *targets).reason is CompletionReason.INCOMPLETE

    def test_row_reported_before_column(self, targets):
        # Row 1 and column 0 are both wrong
        grid = [[1, 2, 3], [3, 1, 2], [3, 2, 1]]
        result = check_puzzle_completion(grid, *targets)

        assert result.reason is CompletionReason.INCORRECT_ROW_SUM
        assert result.row == 1

    def test_lowest_wrong_row_wins(self, targets):
        grid = [[2, 2, 3], [2, 1, 2], [3, 2, 2]]
        result = check_puzzle_completion(grid, *targets)

        assert result.row == 0
        assert result.actual == 7

    def test_column_mismatch_when_rows_match(self):
        # Rows sum to [3, 3]; columns sum to [4, 2]
        grid = [[2, 1], [2, 1]]
        result = check_puzzle_completion(grid, [3, 3], [3, 3])

        assert result.reason is CompletionReason.INCORRECT_COL_SUM
        assert (result.col, result.expected, result.actual) == (0, 3, 4)
        assert result.row is None

    def test_non_numeric_cell_is_filled_but_sums_zero(self):
        grid = [["abc", 3], [3, 3]]
        result = check_puzzle_completion(grid, [3, 6], [3, 6])
        assert result.reason is CompletionReason.SOLVED

    def test_check_is_idempotent(self, targets):
        grid = [[1, 2, 3], [2, 1, 2], [3, 2, 2]]
        snapshot = [row[:] for row in grid]

        first = check_puzzle_completion(grid, *targets)
        second = check_puzzle_completion(grid, *targets)

        assert first == second
        assert grid == snapshot

    def test_describe(self, targets):
        grid = [[1, 2, 3], [2, 1, 2], [3, 2, 2]]
        assert check_puzzle_completion(grid, *targets).describe() == "Row 2 sums to 7, expected 6"


class TestNumberValidator:
    """Test is_valid_number bounds per difficulty."""

    def test_easy_examples(self):
        assert is_valid_number(6, "Easy") is False
        assert is_valid_number(5, "Easy") is True
        assert is_valid_number(0, "Easy") is False

    @pytest.mark.parametrize(
        "difficulty,max_number",
        [(Difficulty.EASY, 5), (Difficulty.MEDIUM, 7), (Difficulty.HARD, 9), ("Medium", 7), ("Hard", 9)],
    )
    def test_upper_bound_per_difficulty(self, difficulty, max_number):
        assert is_valid_number(max_number, difficulty)
        assert not is_valid_number(max_number + 1, difficulty)

    def test_unknown_difficulty_uses_easy_ceiling(self):
        assert is_valid_number(5, "Impossible")
        assert not is_valid_number(6, "Impossible")
        assert not is_valid_number(6, "hard")

    @pytest.mark.parametrize("value", ["abc", None, "", float("nan"), [], -3, 0.5])
    def test_rejects_non_numeric_and_small(self, value):
        assert is_valid_number(value, "Hard") is False

    def test_numeric_strings_accepted(self):
        assert is_valid_number("4", "Easy")
        assert not is_valid_number("8", "Medium")


class TestGridStatistics:
    """Test get_grid_statistics counts and percentages."""

    def test_empty_grid(self, targets):
        grid = [[EMPTY] * 3 for _ in range(3)]
        stats = get_grid_statistics(grid, *targets)

        assert stats.filled_cells == 0
        assert stats.total_cells == 9
        assert stats.completion_percentage == 0.0
        assert stats.correct_rows == 0 and stats.overflow_rows == 0
        assert stats.total_rows == 3 and stats.total_cols == 3

    def test_solved_grid(self, solved_grid, targets):
        stats = get_grid_statistics(solved_grid, *targets)

        assert stats.filled_cells == 9
        assert stats.completion_percentage == pytest.approx(100.0)
        assert stats.correct_rows == 3
        assert stats.correct_cols == 3
        assert stats.overflow_rows == 0
        assert stats.overflow_cols == 0

    def test_overflow_and_under_buckets(self, targets):
        grid = [[5, 5, EMPTY], [2, 1, 2], [1, EMPTY, EMPTY]]
        stats = get_grid_statistics(grid, *targets)

        # Row sums [10, 5, 1]: over, exact, under
        assert stats.overflow_rows == 1
        assert stats.correct_rows == 1
        # Column sums [8, 6, 2]: over, over, under
        assert stats.overflow_cols == 2
        assert stats.correct_cols == 0
        assert stats.filled_cells == 6
        assert stats.completion_percentage == pytest.approx(600 / 9)

    def test_non_numeric_cell_counts_as_filled(self, targets):
        grid = [["abc", EMPTY, EMPTY], [EMPTY] * 3, [EMPTY] * 3]
        stats = get_grid_statistics(grid, *targets)

        assert stats.filled_cells == 1
        assert calculate_row_sum(grid, 0) == 0

    def test_long_numeric_entry_does_not_overflow(self):
        grid = [["99999999999999999999", 1, 1], [1, 1, 1], [1, 1, 1]]
        stats = get_grid_statistics(grid, [3, 3, 3], [3, 3, 3])

        assert calculate_row_sum(grid, 0) == 100000000000000000001
        assert stats.filled_cells == 9
        assert stats.correct_rows == 2 and stats.overflow_rows == 1
        assert stats.correct_cols == 2 and stats.overflow_cols == 1

    def test_statistics_are_idempotent(self, targets):
        grid = [[1, EMPTY, 3], [2, 1, EMPTY], [EMPTY, 2, 1]]
        assert get_grid_statistics(grid, *targets) == get_grid_statistics(grid, *targets)

    def test_zero_size_grid(self):
        stats = get_grid_statistics([], [], [])
        assert stats.total_cells == 0
        assert stats.completion_percentage == 0.0

    def test_to_dict(self, solved_grid, targets):
        data = get_grid_statistics(solved_grid, *targets).to_dict()
        assert data["filled_cells"] == 9
        assert set(data) == {
            "filled_cells",
            "total_cells",
            "completion_percentage",
            "correct_rows",
            "correct_cols",
            "overflow_rows",
            "overflow_cols",
            "total_rows",
            "total_cols",
        }
