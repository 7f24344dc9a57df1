"""
Built-in catalog of hand-authored puzzles.

Ten small Easy puzzles used for walkthroughs and deterministic testing,
plus helpers that confirm every entry's targets match its solution.
"""

import logging
from typing import Iterable, List, Optional

import pandas as pd

from ..generate.puzzle_entry import PuzzleEntry

logger = logging.getLogger(__name__)

__all__ = ["EASY_PUZZLES", "get_entry", "validate_catalog", "catalog_frame"]

CATALOG_COLUMNS = [
    "id",
    "grid_size",
    "difficulty",
    "total",
    "row_targets_ok",
    "col_targets_ok",
    "valid",
]


EASY_PUZZLES = (
    PuzzleEntry(
        id="1",
        grid_size=3,
        solution=[[1, 2, 3], [2, 1, 2], [3, 2, 1]],
        row_targets=[6, 5, 6],
        col_targets=[6, 5, 6],
    ),
    PuzzleEntry(
        id="2",
        grid_size=3,
        solution=[[2, 3, 1], [1, 1, 3], [3, 2, 2]],
        row_targets=[6, 5, 7],
        col_targets=[6, 6, 6],
    ),
    PuzzleEntry(
        id="3",
        grid_size=4,
        solution=[[1, 2, 1, 2], [2, 1, 2, 1], [1, 3, 1, 1], [2, 2, 2, 2]],
        row_targets=[6, 6, 6, 8],
        col_targets=[6, 8, 6, 6],
    ),
    PuzzleEntry(
        id="4",
        grid_size=3,
        solution=[[3, 1, 2], [2, 2, 1], [1, 3, 3]],
        row_targets=[6, 5, 7],
        col_targets=[6, 6, 6],
    ),
    PuzzleEntry(
        id="5",
        grid_size=4,
        solution=[[2, 1, 3, 2], [1, 3, 1, 3], [3, 2, 2, 1], [1, 1, 2, 2]],
        row_targets=[8, 8, 8, 6],
        col_targets=[7, 7, 8, 8],
    ),
    PuzzleEntry(
        id="6",
        grid_size=3,
        solution=[[1, 1, 4], [2, 3, 1], [4, 2, 1]],
        row_targets=[6, 6, 7],
        col_targets=[7, 6, 6],
    ),
    PuzzleEntry(
        id="7",
        grid_size=4,
        solution=[[1, 1, 2, 3], [2, 2, 1, 2], [3, 1, 3, 1], [2, 3, 2, 1]],
        row_targets=[7, 7, 8, 8],
        col_targets=[8, 7, 8, 7],
    ),
    PuzzleEntry(
        id="8",
        grid_size=3,
        solution=[[2, 2, 2], [3, 1, 2], [1, 3, 2]],
        row_targets=[6, 6, 6],
        col_targets=[6, 6, 6],
    ),
    PuzzleEntry(
        id="9",
        grid_size=4,
        solution=[[3, 1, 1, 3], [1, 2, 3, 2], [2, 3, 2, 1], [1, 1, 1, 1]],
        row_targets=[8, 8, 8, 4],
        col_targets=[7, 7, 7, 7],
    ),
    PuzzleEntry(
        id="10",
        grid_size=3,
        solution=[[4, 1, 1], [1, 2, 3], [1, 3, 2]],
        row_targets=[6, 6, 6],
        col_targets=[6, 6, 6],
    ),
)


def get_entry(entry_id: str, entries: Iterable[PuzzleEntry] = EASY_PUZZLES) -> Optional[PuzzleEntry]:
    """Look up a catalog entry by id."""
    for entry in entries:
        if entry.id == str(entry_id):
            return entry
    return None


def validate_catalog(entries: Iterable[PuzzleEntry] = EASY_PUZZLES) -> List[str]:
    """
    Check every entry's targets against its solution.

    Returns:
        Ids of the entries whose targets do not match (empty when all are valid)
    """
    invalid = [entry.id for entry in entries if not entry.validate_targets()]
    if invalid:
        logger.warning(f"Catalog has {len(invalid)} invalid entries: {', '.join(invalid)}")
    else:
        logger.info("All catalog entries have consistent targets")
    return invalid


def catalog_frame(entries: Iterable[PuzzleEntry] = EASY_PUZZLES) -> pd.DataFrame:
    """
    Summarize catalog entries as a DataFrame, one row per entry.

    Columns: id, grid_size, difficulty, total, row_targets_ok,
    col_targets_ok, valid.
    """
    rows = []
    for entry in entries:
        solution = pd.DataFrame(entry.solution)
        row_ok = solution.sum(axis=1).tolist() == list(entry.row_targets)
        col_ok = solution.sum(axis=0).tolist() == list(entry.col_targets)
        rows.append(
            {
                "id": entry.id,
                "grid_size": entry.grid_size,
                "difficulty": entry.difficulty.value,
                "total": int(solution.to_numpy().sum()),
                "row_targets_ok": row_ok,
                "col_targets_ok": col_ok,
                "valid": row_ok and col_ok,
            }
        )

    if not rows:
        return pd.DataFrame(columns=CATALOG_COLUMNS)
    return pd.DataFrame(rows, columns=CATALOG_COLUMNS)
