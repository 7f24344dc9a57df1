"""
Minimal base puzzle interface and the cross-sum puzzle bundle.

This module provides the essential interface that puzzle types implement
and the concrete puzzle handed out by the generator and the catalog.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Sequence, Tuple
from dataclasses import dataclass, field

from .cells import Cell, EMPTY, is_empty
from .difficulty import Difficulty


@dataclass
class BasePuzzle(ABC):
    """
    Base class for all puzzle types.

    Provides the minimal interface needed for checking and serialization.
    """

    @abstractmethod
    def get_size(self) -> Tuple[int, int]:
        """Return puzzle dimensions."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert puzzle to dictionary for serialization."""
        pass


@dataclass
class CrossSumPuzzle(BasePuzzle):
    """
    A cross-sum puzzle: the player grid plus its fixed targets and solution.

    The grid belongs to the caller and is edited cell by cell. Targets and
    solution are stored as tuples and never change after creation.

    Attributes:
        grid: Player-facing grid, all EMPTY when the puzzle is created
        row_targets: Required sum of each row
        col_targets: Required sum of each column
        solution: One grid of numbers that meets every target
        difficulty: Difficulty the solution was drawn for
        puzzle_id: Optional identifier (catalog id or generated id)
    """

    grid: List[List[Cell]]
    row_targets: Tuple[int, ...]
    col_targets: Tuple[int, ...]
    solution: Tuple[Tuple[int, ...], ...]
    difficulty: Difficulty = Difficulty.EASY
    puzzle_id: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.row_targets = tuple(int(t) for t in self.row_targets)
        self.col_targets = tuple(int(t) for t in self.col_targets)
        self.solution = tuple(tuple(int(v) for v in row) for row in self.solution)

    @property
    def grid_size(self) -> int:
        return len(self.solution)

    def get_size(self) -> Tuple[int, int]:
        """
        Get puzzle dimensions.

        Returns:
            Tuple of (rows, cols) representing the grid size
        """
        return (self.grid_size, self.grid_size)

    def get_grid(self) -> List[List[Cell]]:
        return self.grid

    def get_solution_grid(self) -> List[List[int]]:
        """Return a mutable copy of the solution, ready to drop into the grid."""
        return [list(row) for row in self.solution]

    def fill_with_solution(self):
        """Overwrite the player grid with the solution."""
        self.grid = self.get_solution_grid()

    def clear(self):
        """Reset every cell of the player grid to EMPTY."""
        self.grid = [[EMPTY for _ in row] for row in self.solution]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "puzzle_id": self.puzzle_id,
            "grid_size": self.grid_size,
            "difficulty": self.difficulty.value,
            "grid": [
                ["" if is_empty(cell) else cell for cell in row] for row in self.grid
            ],
            "row_targets": list(self.row_targets),
            "col_targets": list(self.col_targets),
            "solution": self.get_solution_grid(),
            "metadata": self.metadata,
        }

    @staticmethod
    def grid_from_rows(rows: Sequence[Sequence[Any]]) -> List[List[Cell]]:
        """Build a player grid from serialized rows, mapping blanks to EMPTY."""
        return [[EMPTY if is_empty(cell) else cell for cell in row] for row in rows]
