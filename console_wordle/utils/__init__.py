"""
Utilities Package

Contains utility modules shared by the services.
"""

from .game_logger import GameLogger, game_logger

__all__ = ['GameLogger', 'game_logger']
