"""
Grid evaluation for cross-sum puzzles.

- checker: row/column sums, completion checking, entry validation
- metrics: progress statistics for live feedback
"""

from .checker import (
    calculate_row_sum,
    calculate_col_sum,
    check_puzzle_completion,
    is_valid_number,
)
from .metrics import get_grid_statistics

__all__ = [
    "calculate_row_sum",
    "calculate_col_sum",
    "check_puzzle_completion",
    "is_valid_number",
    "get_grid_statistics",
]
