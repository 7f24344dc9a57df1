"""
Cross-Sum Puzzle Generation Module

Architecture:
- puzzle_generator: generate_puzzle() and the config-driven PuzzleGenerator
- puzzle_entry: PuzzleEntry, the stored form of a puzzle (catalog, JSON)
"""

from .puzzle_entry import PuzzleEntry
from .puzzle_generator import PuzzleGenerator, generate_puzzle


__all__ = [
    "PuzzleEntry",
    "PuzzleGenerator",
    "generate_puzzle",
]
