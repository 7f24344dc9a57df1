"""
Result types produced by the completion checker and the statistics reporter.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

__all__ = ["CompletionReason", "CompletionResult", "GridStatistics"]


class CompletionReason(Enum):
    """Why a grid is, or is not, solved."""

    INCOMPLETE = "incomplete"
    INCORRECT_ROW_SUM = "incorrect_row_sum"
    INCORRECT_COL_SUM = "incorrect_col_sum"
    SOLVED = "solved"


@dataclass(frozen=True)
class CompletionResult:
    """
    Outcome of a completion check.

    Only one reason is reported per check. For sum mismatches, exactly one of
    row/col is set together with the expected and actual sums.

    Attributes:
        reason: Outcome category
        row: Offending row index (incorrect_row_sum only)
        col: Offending column index (incorrect_col_sum only)
        expected: Target sum of the offending line
        actual: Computed sum of the offending line
    """

    reason: CompletionReason
    row: Optional[int] = None
    col: Optional[int] = None
    expected: Optional[int] = None
    actual: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.reason is CompletionReason.SOLVED

    @classmethod
    def incomplete(cls) -> "CompletionResult":
        return cls(CompletionReason.INCOMPLETE)

    @classmethod
    def solved(cls) -> "CompletionResult":
        return cls(CompletionReason.SOLVED)

    @classmethod
    def incorrect_row(cls, row: int, expected: int, actual: int) -> "CompletionResult":
        return cls(CompletionReason.INCORRECT_ROW_SUM, row=row, expected=expected, actual=actual)

    @classmethod
    def incorrect_col(cls, col: int, expected: int, actual: int) -> "CompletionResult":
        return cls(CompletionReason.INCORRECT_COL_SUM, col=col, expected=expected, actual=actual)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, leaving out fields that do not apply to the reason."""
        data: Dict[str, Any] = {
            "is_complete": self.is_complete,
            "reason": self.reason.value,
        }
        if self.reason is CompletionReason.INCORRECT_ROW_SUM:
            data.update(row=self.row, expected=self.expected, actual=self.actual)
        elif self.reason is CompletionReason.INCORRECT_COL_SUM:
            data.update(col=self.col, expected=self.expected, actual=self.actual)
        return data

    def describe(self) -> str:
        """One-line human readable summary."""
        if self.reason is CompletionReason.INCORRECT_ROW_SUM:
            return f"Row {self.row} sums to {self.actual}, expected {self.expected}"
        if self.reason is CompletionReason.INCORRECT_COL_SUM:
            return f"Column {self.col} sums to {self.actual}, expected {self.expected}"
        if self.reason is CompletionReason.SOLVED:
            return "Solved"
        return "Incomplete"


@dataclass(frozen=True)
class GridStatistics:
    """
    Read-only progress snapshot of a grid against its targets.

    Rows and columns below their target are counted in neither the correct
    nor the overflow bucket.
    """

    filled_cells: int
    total_cells: int
    completion_percentage: float
    correct_rows: int
    correct_cols: int
    overflow_rows: int
    overflow_cols: int
    total_rows: int
    total_cols: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
