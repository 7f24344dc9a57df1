"""
Game session state for playing through a list of cross-sum puzzles.

The session owns everything that changes while a player works: the current
grid, score, move count and position in the puzzle list. All rules are
delegated to the stateless functions in cross_sum.evaluate.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.base_puzzle import CrossSumPuzzle
from ..core.cells import EMPTY, Cell, coerce_cell, is_empty
from ..core.difficulty import Difficulty
from ..core.results import CompletionResult, GridStatistics
from ..data.catalog import EASY_PUZZLES
from ..evaluate.checker import (
    calculate_col_sum,
    calculate_row_sum,
    check_puzzle_completion,
    is_valid_number,
)
from ..evaluate.metrics import get_grid_statistics
from ..generate.puzzle_entry import PuzzleEntry
from ..generate.puzzle_generator import PuzzleGenerator
from ..utils.config_loader import ConfigLoader, get_config

logger = logging.getLogger(__name__)

__all__ = ["GameSession", "target_status"]


def target_status(current: int, target: int) -> str:
    """
    Classify a line's current sum against its target for display.

    Returns:
        "correct" when the sum is positive and equals the target,
        "over" when it exceeds the target, otherwise "default"
    """
    if current == target and current > 0:
        return "correct"
    if current > target:
        return "over"
    return "default"


class GameSession:
    """
    One player's progress through a sequence of puzzles.

    Attributes:
        entries: Puzzles in play order
        current_index: Position of the current puzzle in entries
        puzzle: The current puzzle, including its player grid
        score: Points earned across all solved puzzles
        moves: Accepted edits on the current puzzle
        is_complete: Whether the current puzzle has been solved
        show_solution: Whether the solution is currently displayed
        all_completed: Set when the player advances past the last puzzle
    """

    def __init__(
        self,
        entries: Sequence[PuzzleEntry] = EASY_PUZZLES,
        config: Optional[ConfigLoader] = None,
    ):
        if not entries:
            raise ValueError("A game session needs at least one puzzle")

        self.entries = list(entries)
        self.config = config or get_config()
        self.points_per_cell = self.config.get_session_config()["points_per_cell"]

        self.current_index = 0
        self.score = 0
        self.all_completed = False
        self.last_result: Optional[CompletionResult] = None
        self._load_current()

        logger.info(f"Started game session with {len(self.entries)} puzzles")

    @classmethod
    def from_generated(
        cls,
        count: int,
        grid_size: int,
        difficulty: Union[Difficulty, str] = Difficulty.EASY,
        seed: Optional[int] = None,
        config: Optional[ConfigLoader] = None,
    ) -> "GameSession":
        """Build a session over freshly generated puzzles."""
        generator = PuzzleGenerator(seed=seed, config=config)
        puzzles = generator.generate_batch(count, grid_size=grid_size, difficulty=difficulty)
        return cls([PuzzleEntry.from_puzzle(p) for p in puzzles], config=config)

    def _load_current(self):
        self.puzzle: CrossSumPuzzle = self.current_entry.to_puzzle()
        self.moves = 0
        self.is_complete = False
        self.show_solution = False
        self.last_result = None

    @property
    def current_entry(self) -> PuzzleEntry:
        return self.entries[self.current_index]

    @property
    def grid(self) -> List[List[Cell]]:
        return self.puzzle.grid

    @property
    def grid_size(self) -> int:
        return self.puzzle.grid_size

    def set_cell(self, row: int, col: int, value: Any) -> bool:
        """
        Apply a player's edit to one cell.

        None or "" clears the cell. Any other value is read through its
        leading integer, so 3.0, "3.0" and "3 " all enter 3, and the result
        must be valid for the puzzle's difficulty. Entries without a leading
        integer read as 0 and are rejected rather than clearing the cell.

        Returns:
            True if the edit was accepted
        """
        if self.is_complete or self.show_solution:
            logger.debug("Edit ignored: grid is locked")
            return False

        if not (0 <= row < self.grid_size and 0 <= col < self.grid_size):
            raise IndexError(f"Cell ({row}, {col}) outside {self.grid_size}x{self.grid_size} grid")

        if is_empty(value):
            new_value: Cell = EMPTY
        else:
            new_value = coerce_cell(value)
            if not is_valid_number(new_value, self.puzzle.difficulty):
                logger.debug(
                    f"Rejected {new_value} for {self.puzzle.difficulty.value} difficulty"
                )
                return False

        self.puzzle.grid[row][col] = new_value
        self.moves += 1
        self._check_completion()
        return True

    def _check_completion(self):
        result = self.completion()
        self.last_result = result
        if result.is_complete and not self.is_complete:
            self.is_complete = True
            earned = self.grid_size * self.grid_size * self.points_per_cell
            self.score += earned
            logger.info(
                f"Puzzle {self.current_entry.id} solved in {self.moves} moves (+{earned} points)"
            )

    def completion(self) -> CompletionResult:
        return check_puzzle_completion(
            self.puzzle.grid, self.puzzle.row_targets, self.puzzle.col_targets
        )

    def statistics(self) -> GridStatistics:
        return get_grid_statistics(
            self.puzzle.grid, self.puzzle.row_targets, self.puzzle.col_targets
        )

    def row_sum(self, row_index: int) -> int:
        return calculate_row_sum(self.puzzle.grid, row_index)

    def col_sum(self, col_index: int) -> int:
        return calculate_col_sum(self.puzzle.grid, col_index)

    def row_status(self, row_index: int) -> str:
        return target_status(self.row_sum(row_index), self.puzzle.row_targets[row_index])

    def col_status(self, col_index: int) -> str:
        return target_status(self.col_sum(col_index), self.puzzle.col_targets[col_index])

    def reset(self):
        """Clear the current puzzle; the score is kept."""
        self._load_current()

    def toggle_solution(self) -> bool:
        """
        Show the solution, or hide it again by resetting the puzzle.

        Returns:
            Whether the solution is now shown
        """
        if self.show_solution:
            self.reset()
        else:
            self.puzzle.fill_with_solution()
            self.show_solution = True
        return self.show_solution

    def next_puzzle(self) -> bool:
        """Advance to the next puzzle; False (and all_completed) at the end."""
        if self.current_index < len(self.entries) - 1:
            self.current_index += 1
            self._load_current()
            return True
        self.all_completed = True
        logger.info("All puzzles in the session have been visited")
        return False

    def prev_puzzle(self) -> bool:
        """Go back one puzzle; False when already at the first."""
        if self.current_index > 0:
            self.current_index -= 1
            self._load_current()
            return True
        return False

    def get_state(self) -> Dict[str, Any]:
        """Snapshot of the session for display or logging."""
        return {
            "puzzle_id": self.current_entry.id,
            "position": f"{self.current_index + 1}/{len(self.entries)}",
            "score": self.score,
            "moves": self.moves,
            "is_complete": self.is_complete,
            "show_solution": self.show_solution,
            "statistics": self.statistics().to_dict(),
        }
