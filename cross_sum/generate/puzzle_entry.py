"""
PuzzleEntry format for storing cross-sum puzzles.

This module defines the static form of a puzzle (solution plus targets, no
player state) used by the built-in catalog and by JSON export. It differs
from CrossSumPuzzle, which also carries the mutable player grid.
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Union
import json
import logging

from ..core.base_puzzle import CrossSumPuzzle
from ..core.cells import create_empty_grid
from ..core.difficulty import Difficulty

logger = logging.getLogger(__name__)


def derive_entry_id(puzzle: CrossSumPuzzle) -> str:
    """Build an id from difficulty, size and targets."""
    size = puzzle.grid_size
    rows = "-".join(str(t) for t in puzzle.row_targets)
    cols = "-".join(str(t) for t in puzzle.col_targets)
    return f"{puzzle.difficulty.value.lower()}_{size}x{size}_{rows}_{cols}"


@dataclass
class PuzzleEntry:
    """
    Stored cross-sum puzzle.

    Attributes:
        id: Unique puzzle identifier (e.g. "1" or "easy_4x4_001")
        grid_size: Side length of the square grid
        solution: Complete solution grid
        row_targets: Target sum of each row
        col_targets: Target sum of each column
        difficulty: Difficulty level the puzzle is played at
    """

    id: str
    grid_size: int
    solution: List[List[int]]
    row_targets: List[int]
    col_targets: List[int]
    difficulty: Difficulty = Difficulty.EASY
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate puzzle entry shape after initialization."""
        self.id = str(self.id)
        self.difficulty = Difficulty.parse(self.difficulty)

        if not self.id:
            raise ValueError("Puzzle ID cannot be empty")

        if self.grid_size < 1:
            raise ValueError(f"Grid size must be positive, got {self.grid_size}")

        actual_rows = len(self.solution)
        if actual_rows != self.grid_size or any(
            len(row) != self.grid_size for row in self.solution
        ):
            raise ValueError(
                f"Solution must be {self.grid_size}x{self.grid_size} for puzzle {self.id}"
            )

        if len(self.row_targets) != self.grid_size:
            raise ValueError(
                f"Expected {self.grid_size} row targets, got {len(self.row_targets)}"
            )

        if len(self.col_targets) != self.grid_size:
            raise ValueError(
                f"Expected {self.grid_size} column targets, got {len(self.col_targets)}"
            )

    @classmethod
    def from_puzzle(cls, puzzle: CrossSumPuzzle, entry_id: Union[str, int, None] = None):
        """
        Create a PuzzleEntry from a generated CrossSumPuzzle.

        When neither entry_id nor the puzzle carries an id, one is derived
        from the difficulty, size and targets, e.g. "easy_3x3_7-9-6_8-6-8".

        Args:
            puzzle: Puzzle to store; its player grid is not kept
            entry_id: Identifier to use instead of the puzzle's own id

        Returns:
            PuzzleEntry instance
        """
        if entry_id is None:
            entry_id = puzzle.puzzle_id
        if entry_id is None or entry_id == "":
            entry_id = derive_entry_id(puzzle)
            logger.debug(f"Puzzle has no id, using derived id {entry_id}")
        return cls(
            id=str(entry_id),
            grid_size=puzzle.grid_size,
            solution=puzzle.get_solution_grid(),
            row_targets=list(puzzle.row_targets),
            col_targets=list(puzzle.col_targets),
            difficulty=puzzle.difficulty,
            metadata=dict(puzzle.metadata),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleEntry":
        return cls(
            id=data["id"],
            grid_size=int(data["grid_size"]),
            solution=[[int(v) for v in row] for row in data["solution"]],
            row_targets=[int(t) for t in data["row_targets"]],
            col_targets=[int(t) for t in data["col_targets"]],
            difficulty=data.get("difficulty", Difficulty.EASY.value),
            metadata=data.get("metadata", {}),
        )

    def to_puzzle(self) -> CrossSumPuzzle:
        """Start a fresh puzzle from this entry, with an all-empty grid."""
        return CrossSumPuzzle(
            grid=create_empty_grid(self.grid_size),
            row_targets=tuple(self.row_targets),
            col_targets=tuple(self.col_targets),
            solution=tuple(tuple(row) for row in self.solution),
            difficulty=self.difficulty,
            puzzle_id=self.id,
            metadata=dict(self.metadata),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["difficulty"] = self.difficulty.value
        return data

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def validate_targets(self) -> bool:
        """Check that the stored targets equal the sums of the solution."""
        expected_rows = [sum(row) for row in self.solution]
        expected_cols = [
            sum(self.solution[i][j] for i in range(self.grid_size))
            for j in range(self.grid_size)
        ]

        if list(self.row_targets) != expected_rows:
            logger.warning(
                f"Puzzle {self.id}: row targets {self.row_targets} != solution sums {expected_rows}"
            )
            return False

        if list(self.col_targets) != expected_cols:
            logger.warning(
                f"Puzzle {self.id}: column targets {self.col_targets} != solution sums {expected_cols}"
            )
            return False

        return True

    def get_statistics(self) -> Dict[str, Any]:
        """Get summary statistics about this puzzle."""
        cells = [value for row in self.solution for value in row]
        return {
            "puzzle_id": self.id,
            "grid_size": f"{self.grid_size}x{self.grid_size}",
            "difficulty": self.difficulty.value,
            "total": sum(cells),
            "min_value": min(cells),
            "max_value": max(cells),
            "targets_valid": self.validate_targets(),
        }
