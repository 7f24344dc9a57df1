"""
Difficulty levels and their number ceilings.
"""

from enum import Enum
from typing import Union

__all__ = ["Difficulty", "get_max_number", "DEFAULT_MAX_NUMBER"]

DEFAULT_MAX_NUMBER = 5


class Difficulty(Enum):
    """Puzzle difficulty levels."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @property
    def max_number(self) -> int:
        """Largest number a cell may hold at this difficulty."""
        return _MAX_NUMBERS[self]

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Resolve a Difficulty from an enum member or its exact string value.

        Unknown values resolve to EASY.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.EASY


_MAX_NUMBERS = {
    Difficulty.EASY: 5,
    Difficulty.MEDIUM: 7,
    Difficulty.HARD: 9,
}


def get_max_number(difficulty: Union[Difficulty, str]) -> int:
    """
    Get the maximum number allowed for a difficulty level.

    Args:
        difficulty: Difficulty member or its string value ("Easy", "Medium", "Hard")

    Returns:
        5, 7 or 9; unrecognized values fall back to Easy's ceiling
    """
    if isinstance(difficulty, Difficulty):
        return difficulty.max_number
    for member in Difficulty:
        if member.value == difficulty:
            return member.max_number
    return DEFAULT_MAX_NUMBER
