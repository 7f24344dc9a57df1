"""
Core types for the cross-sum puzzle toolkit.

Classes:
    BasePuzzle: Abstract base class for puzzle types
    CrossSumPuzzle: Player grid plus targets and solution
    Difficulty: Difficulty levels and their number ceilings
    CompletionResult: Outcome of a completion check
    GridStatistics: Progress snapshot of a grid
"""

from .base_puzzle import BasePuzzle, CrossSumPuzzle
from .cells import EMPTY, Cell, is_empty, coerce_cell, create_empty_grid
from .difficulty import Difficulty, get_max_number
from .results import CompletionReason, CompletionResult, GridStatistics

__all__ = [
    'BasePuzzle',
    'CrossSumPuzzle',
    'EMPTY',
    'Cell',
    'is_empty',
    'coerce_cell',
    'create_empty_grid',
    'Difficulty',
    'get_max_number',
    'CompletionReason',
    'CompletionResult',
    'GridStatistics',
]
