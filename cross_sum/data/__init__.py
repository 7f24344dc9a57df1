"""
Static puzzle data for the cross-sum toolkit.
"""

from .catalog import EASY_PUZZLES, get_entry, validate_catalog, catalog_frame

__all__ = ["EASY_PUZZLES", "get_entry", "validate_catalog", "catalog_frame"]
