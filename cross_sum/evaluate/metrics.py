"""
Progress statistics for a cross-sum grid.

Used for live feedback while a grid is being filled: how much of it is
filled and which rows and columns already hit, or overshoot, their targets.
"""

import logging
from typing import Sequence

import numpy as np

from ..core.cells import is_empty
from ..core.results import GridStatistics
from .checker import Grid, calculate_col_sum, calculate_row_sum

logger = logging.getLogger(__name__)

__all__ = ["get_grid_statistics"]


def get_grid_statistics(
    grid: Grid, row_targets: Sequence[int], col_targets: Sequence[int]
) -> GridStatistics:
    """
    Get statistics about the current grid state.

    A cell counts as filled whenever it is not empty, even if its value
    contributes 0 to the sums (for example a non-numeric string).

    Args:
        grid: Current grid state
        row_targets: Target sums for rows
        col_targets: Target sums for columns

    Returns:
        GridStatistics snapshot
    """
    grid_size = len(grid)
    total_cells = grid_size * grid_size

    filled_cells = sum(
        1
        for i in range(grid_size)
        for j in range(grid_size)
        if not is_empty(grid[i][j])
    )

    # Object arrays keep Python ints, so arbitrarily long numeric entries compare exactly
    row_sums = np.array([calculate_row_sum(grid, i) for i in range(grid_size)], dtype=object)
    col_sums = np.array([calculate_col_sum(grid, j) for j in range(grid_size)], dtype=object)
    row_goal = np.array([int(t) for t in row_targets[:grid_size]], dtype=object)
    col_goal = np.array([int(t) for t in col_targets[:grid_size]], dtype=object)

    if row_goal.shape != row_sums.shape or col_goal.shape != col_sums.shape:
        raise IndexError(
            f"Targets ({len(row_targets)} rows, {len(col_targets)} cols) "
            f"do not cover a grid of size {grid_size}"
        )

    completion_percentage = (
        filled_cells / total_cells * 100 if total_cells > 0 else 0.0
    )

    stats = GridStatistics(
        filled_cells=filled_cells,
        total_cells=total_cells,
        completion_percentage=completion_percentage,
        correct_rows=int(np.count_nonzero(row_sums == row_goal)),
        correct_cols=int(np.count_nonzero(col_sums == col_goal)),
        overflow_rows=int(np.count_nonzero(row_sums > row_goal)),
        overflow_cols=int(np.count_nonzero(col_sums > col_goal)),
        total_rows=grid_size,
        total_cols=grid_size,
    )
    logger.debug(
        f"Grid statistics: {filled_cells}/{total_cells} filled, "
        f"{stats.correct_rows} rows and {stats.correct_cols} cols correct"
    )
    return stats
