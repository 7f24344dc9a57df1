"""
Random cross-sum puzzle generation.

A solution grid is drawn cell by cell, uniformly and independently, and the
row/column targets are computed from it afterwards. Nothing constrains the
targets to a unique solution: any grid with the same row and column sums
solves the puzzle just as well as the drawn one.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import numpy as np

from ..core.base_puzzle import CrossSumPuzzle
from ..core.cells import create_empty_grid
from ..core.difficulty import Difficulty, get_max_number
from ..utils.config_loader import ConfigLoader, get_config

logger = logging.getLogger(__name__)

__all__ = ["RandomSource", "generate_puzzle", "PuzzleGenerator"]

# Generator instance, integer seed, or None for fresh OS entropy
RandomSource = Union[np.random.Generator, int, None]


def _resolve_difficulty(difficulty: Union[Difficulty, str]) -> Difficulty:
    resolved = Difficulty.parse(difficulty)
    if not isinstance(difficulty, Difficulty) and resolved.value != difficulty:
        logger.debug(f"Unrecognized difficulty {difficulty!r}, using {resolved.value}")
    return resolved


def generate_puzzle(
    grid_size: int,
    difficulty: Union[Difficulty, str],
    rng: RandomSource = None,
    puzzle_id: Optional[str] = None,
) -> CrossSumPuzzle:
    """
    Generate a new cross-sum puzzle.

    Args:
        grid_size: Size of the grid (3-6 by convention, not enforced)
        difficulty: Difficulty level; unrecognized values behave like Easy
        rng: Random source, see RandomSource
        puzzle_id: Optional identifier stored on the puzzle

    Returns:
        CrossSumPuzzle with an empty grid, targets and the drawn solution
    """
    generator = np.random.default_rng(rng)
    level = _resolve_difficulty(difficulty)
    max_number = get_max_number(difficulty)

    # A non-positive size yields an empty puzzle
    side = max(grid_size, 0)
    solution = generator.integers(1, max_number, size=(side, side), endpoint=True)
    row_targets = solution.sum(axis=1)
    col_targets = solution.sum(axis=0)

    return CrossSumPuzzle(
        grid=create_empty_grid(grid_size),
        row_targets=tuple(row_targets.tolist()),
        col_targets=tuple(col_targets.tolist()),
        solution=tuple(tuple(row) for row in solution.tolist()),
        difficulty=level,
        puzzle_id=puzzle_id,
        metadata={"max_number": max_number},
    )


class PuzzleGenerator:
    """
    Batch puzzle generation driven by configuration.

    Owns one random stream so that a seeded generator yields the same batch
    on every run, and keeps simple statistics about what it produced.
    """

    def __init__(self, seed: RandomSource = None, config: Optional[ConfigLoader] = None):
        """
        Initialize generator.

        Args:
            seed: Random source; falls back to RANDOM_SEED from the config
            config: Configuration to use instead of the global one
        """
        self.config = config or get_config()
        self.generation_config = self.config.get_generation_config()

        if seed is None:
            seed = self.generation_config["random_seed"]
        self.rng = np.random.default_rng(seed)

        self.min_grid_size = self.generation_config["min_grid_size"]
        self.max_grid_size = self.generation_config["max_grid_size"]
        self.generated: List[CrossSumPuzzle] = []

        logger.info(
            f"Initialized PuzzleGenerator (sizes {self.min_grid_size}-{self.max_grid_size}, "
            f"seed={seed!r})"
        )

    def generate(
        self,
        grid_size: Optional[int] = None,
        difficulty: Union[Difficulty, str, None] = None,
        puzzle_id: Optional[str] = None,
    ) -> CrossSumPuzzle:
        """Generate one puzzle, using config defaults for missing arguments."""
        if grid_size is None:
            grid_size = self.generation_config["default_grid_size"]
        if difficulty is None:
            difficulty = self.generation_config["default_difficulty"]

        if not (self.min_grid_size <= grid_size <= self.max_grid_size):
            logger.warning(
                f"Grid size {grid_size} outside supported range "
                f"{self.min_grid_size}-{self.max_grid_size}, generating anyway"
            )

        puzzle = generate_puzzle(grid_size, difficulty, rng=self.rng, puzzle_id=puzzle_id)
        self.generated.append(puzzle)
        logger.debug(f"Generated {puzzle.puzzle_id or 'puzzle'}: rows={puzzle.row_targets}")
        return puzzle

    def generate_batch(
        self,
        count: int,
        grid_size: Optional[int] = None,
        difficulty: Union[Difficulty, str, None] = None,
    ) -> List[CrossSumPuzzle]:
        """
        Generate several puzzles with sequential ids.

        Ids look like "easy_4x4_001".
        """
        if grid_size is None:
            grid_size = self.generation_config["default_grid_size"]
        if difficulty is None:
            difficulty = self.generation_config["default_difficulty"]
        level = Difficulty.parse(difficulty)

        start = len(self.generated)
        puzzles = []
        for offset in range(count):
            puzzle_id = f"{level.value.lower()}_{grid_size}x{grid_size}_{start + offset + 1:03d}"
            puzzles.append(self.generate(grid_size, difficulty, puzzle_id=puzzle_id))

        logger.info(f"Generated {len(puzzles)} puzzles of size {grid_size}x{grid_size}")
        return puzzles

    def get_generation_statistics(self) -> Dict[str, Any]:
        """Summary of everything generated so far."""
        if not self.generated:
            return {"total_generated": 0, "by_size": {}, "by_difficulty": {}, "average_cell_value": 0.0}

        by_size: Dict[str, int] = {}
        by_difficulty: Dict[str, int] = {}
        for puzzle in self.generated:
            size_key = f"{puzzle.grid_size}x{puzzle.grid_size}"
            by_size[size_key] = by_size.get(size_key, 0) + 1
            by_difficulty[puzzle.difficulty.value] = by_difficulty.get(puzzle.difficulty.value, 0) + 1

        total_value = sum(sum(puzzle.row_targets) for puzzle in self.generated)
        total_cells = sum(puzzle.grid_size ** 2 for puzzle in self.generated)

        return {
            "total_generated": len(self.generated),
            "by_size": by_size,
            "by_difficulty": by_difficulty,
            "average_cell_value": total_value / total_cells if total_cells else 0.0,
        }
