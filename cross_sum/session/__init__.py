"""
Game session state for the cross-sum toolkit.
"""

from .game_session import GameSession, target_status

__all__ = ["GameSession", "target_status"]
