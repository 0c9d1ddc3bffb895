"""
Console Wordle Package

A console word-guessing game: guess the secret word within a limited number
of attempts, with per-letter feedback after every guess.
"""

__version__ = "1.0.0"

from .models import GameOutcome, Verdict
from .services import GameLoop, GuessBoard, WordList, compute_feedback

__all__ = ['GameLoop', 'GuessBoard', 'WordList', 'compute_feedback', 'GameOutcome', 'Verdict']
