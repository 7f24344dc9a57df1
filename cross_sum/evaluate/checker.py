"""
Row/column sums, completion checking and entry validation for cross-sum grids.

All functions are pure: they read the grid and never modify it, so they are
safe to call after every cell edit.
"""

import logging
import math
from typing import Any, Sequence, Union

from ..core.cells import Cell, coerce_cell, is_empty
from ..core.difficulty import Difficulty, get_max_number
from ..core.results import CompletionResult

logger = logging.getLogger(__name__)

__all__ = [
    "calculate_row_sum",
    "calculate_col_sum",
    "check_puzzle_completion",
    "is_valid_number",
]

Grid = Sequence[Sequence[Cell]]


def _check_index(index: int, length: int, axis: str):
    # Negative indices would silently wrap to the other end of the grid
    if not 0 <= index < length:
        raise IndexError(f"{axis} index {index} out of range for grid of size {length}")


def calculate_row_sum(grid: Grid, row_index: int) -> int:
    """
    Sum of a row, reading every cell through coerce_cell().

    Raises:
        IndexError: If row_index is outside the grid
    """
    _check_index(row_index, len(grid), "Row")
    return sum(coerce_cell(cell) for cell in grid[row_index])


def calculate_col_sum(grid: Grid, col_index: int) -> int:
    """
    Sum of a column, reading every cell through coerce_cell().

    Raises:
        IndexError: If col_index is outside the grid
    """
    _check_index(col_index, len(grid), "Column")
    total = 0
    for row in grid:
        _check_index(col_index, len(row), "Column")
        total += coerce_cell(row[col_index])
    return total


def check_puzzle_completion(
    grid: Grid, row_targets: Sequence[int], col_targets: Sequence[int]
) -> CompletionResult:
    """
    Check whether the grid is filled in correctly.

    Checks run in a fixed order and the first failure is reported:
    any empty cell, then rows in index order, then columns in index order.
    A grid that is both incomplete and wrong reports incomplete; a full grid
    wrong in a row and a column reports the row.

    Args:
        grid: Current grid state
        row_targets: Target sums for rows
        col_targets: Target sums for columns

    Returns:
        CompletionResult describing the outcome
    """
    grid_size = len(grid)

    for i in range(grid_size):
        for j in range(grid_size):
            if is_empty(grid[i][j]):
                return CompletionResult.incomplete()

    for i in range(grid_size):
        row_sum = calculate_row_sum(grid, i)
        if row_sum != row_targets[i]:
            logger.debug(f"Row {i} sum {row_sum} != target {row_targets[i]}")
            return CompletionResult.incorrect_row(i, row_targets[i], row_sum)

    for j in range(grid_size):
        col_sum = calculate_col_sum(grid, j)
        if col_sum != col_targets[j]:
            logger.debug(f"Column {j} sum {col_sum} != target {col_targets[j]}")
            return CompletionResult.incorrect_col(j, col_targets[j], col_sum)

    return CompletionResult.solved()


def is_valid_number(num: Any, difficulty: Union[Difficulty, str]) -> bool:
    """
    Validate if a number is allowed at the given difficulty.

    Numeric strings count as numbers. Non-numeric input, NaN and values
    below 1 are rejected.

    Args:
        num: Candidate entry
        difficulty: Current difficulty level

    Returns:
        True if 1 <= num <= max number for the difficulty
    """
    try:
        value = float(num)
    except (TypeError, ValueError):
        return False

    if math.isnan(value) or value < 1:
        return False
    return value <= get_max_number(difficulty)
