"""
Cross-Sum: number puzzle generation and checking

A small toolkit for cross-sum puzzles: square grids where every row and
column must add up to a given target.

Main Components:
- core: Cell values, difficulty levels, puzzle and result types
- generate: Random puzzle generation and the stored PuzzleEntry format
- evaluate: Row/column sums, completion checking, progress statistics
- data: Built-in catalog of hand-authored puzzles
- session: GameSession holding one player's progress

Quick Start:
    from cross_sum import generate_puzzle, check_puzzle_completion

    puzzle = generate_puzzle(4, "Medium", rng=42)
    puzzle.fill_with_solution()
    result = check_puzzle_completion(puzzle.grid, puzzle.row_targets, puzzle.col_targets)
"""

from .core import (
    EMPTY,
    CompletionReason,
    CompletionResult,
    CrossSumPuzzle,
    Difficulty,
    GridStatistics,
)
from .evaluate import (
    calculate_row_sum,
    calculate_col_sum,
    check_puzzle_completion,
    is_valid_number,
    get_grid_statistics,
)
from .generate import PuzzleEntry, PuzzleGenerator, generate_puzzle
from .data import EASY_PUZZLES, validate_catalog
from .session import GameSession

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "CompletionReason",
    "CompletionResult",
    "CrossSumPuzzle",
    "Difficulty",
    "GridStatistics",
    "calculate_row_sum",
    "calculate_col_sum",
    "check_puzzle_completion",
    "is_valid_number",
    "get_grid_statistics",
    "PuzzleEntry",
    "PuzzleGenerator",
    "generate_puzzle",
    "EASY_PUZZLES",
    "validate_catalog",
    "GameSession",
]
