"""
Data Models Package

Contains all data models and exceptions used throughout the application.
"""

from .game import Attempt, Feedback, GameOutcome, GamePhase, GameState, Verdict
from .errors import EmptyListError, LoadError, WordleError

__all__ = [
    'Attempt', 'Feedback', 'GameOutcome', 'GamePhase', 'GameState', 'Verdict',
    'EmptyListError', 'LoadError', 'WordleError'
]
