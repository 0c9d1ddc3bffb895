"""
Services Package

Contains all game logic and service classes.
"""

from .board_service import GuessBoard, is_all_correct
from .feedback_service import compute_feedback, contains_char, feedback_to_string
from .game_service import GameLoop, get_game_loop, initialize_game_loop
from .word_list_service import WordList, get_word_statistics, normalize_words

__all__ = [
    'GuessBoard', 'is_all_correct',
    'compute_feedback', 'contains_char', 'feedback_to_string',
    'GameLoop', 'get_game_loop', 'initialize_game_loop',
    'WordList', 'get_word_statistics', 'normalize_words'
]
