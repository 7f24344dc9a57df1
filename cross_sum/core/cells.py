"""
Cell values and the coercion rule shared by every grid operation.

A cell is either the EMPTY sentinel, an integer, or whatever raw value the
caller stored (typically a string typed by a player). Sums read cells through
coerce_cell(), while completeness checks read them through is_empty(). The two
views intentionally disagree on non-numeric strings: such a cell is filled,
yet adds nothing to a sum.
"""

import re
from typing import Any, List

__all__ = ["EMPTY", "Cell", "is_empty", "coerce_cell", "create_empty_grid"]

# Optional sign, then a hex literal or ASCII decimal digits, as a leading prefix
_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|[0-9]+)")


class _EmptyCell:
    """Singleton marker for a cell with no value entered."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_EmptyCell, ())


EMPTY = _EmptyCell()

# Any of: EMPTY, int, or a raw entry such as "3" or "abc"
Cell = Any


def is_empty(cell: Cell) -> bool:
    """Return True when no value has been entered in the cell."""
    return cell is EMPTY or cell is None or (isinstance(cell, str) and cell == "")


def coerce_cell(cell: Cell) -> int:
    """
    Read a cell as an integer for summing.

    Empty cells read as 0. Numbers are truncated toward zero. Any other value
    is read through its string form: the leading integer is used when there is
    one (so "3abc" reads as 3 and "0x1F" as 31), otherwise the cell reads as 0.

    Args:
        cell: Cell value in any supported form

    Returns:
        Integer contribution of the cell to a row or column sum
    """
    if is_empty(cell):
        return 0
    if isinstance(cell, bool):
        return 0
    if isinstance(cell, int):
        return cell
    if isinstance(cell, float):
        if cell != cell or cell in (float("inf"), float("-inf")):
            return 0
        return int(cell)

    match = _LEADING_INT.match(str(cell))
    if match is None:
        return 0

    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def create_empty_grid(grid_size: int) -> List[List[Cell]]:
    """Create a grid_size x grid_size grid of EMPTY cells."""
    return [[EMPTY for _ in range(grid_size)] for _ in range(grid_size)]
