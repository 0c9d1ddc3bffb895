"""
Game Configuration Constants Module

This module defines the fixed rules of the console game: word length,
attempt limit, the markers used on the board and the messages shown to
the player. Environment-dependent settings live in app_config.py.
"""

from typing import Final, Iterable

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and every valid guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

MIN_WORD_COUNT: Final[int] = 10
"""
Sanity floor for a loaded dictionary. Smaller word sources are rejected.
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Board markers
CORRECT_MARKER: Final[str] = "G"
PRESENT_MARKER: Final[str] = "Y"
ABSENT_MARKER: Final[str] = "_"
UNUSED_MARKER: Final[str] = "."

# Player-facing messages
PROMPT_MESSAGE: Final[str] = "Enter your guess ({attempt}/{max_attempts}): "
INVALID_WORD_MESSAGE: Final[str] = "Invalid word: guesses must be exactly {length} letters."
WIN_MESSAGE: Final[str] = "Congratulations! You guessed the word in {attempts} {noun}."
LOSS_MESSAGE: Final[str] = "Out of attempts. The secret word was {secret}."
INPUT_EXHAUSTED_MESSAGE: Final[str] = "No more input."


def validate_word_list_integrity(words: Iterable[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word collection.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent uppercase formatting
    4. Uniqueness validation: No duplicate entries
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    word_list = list(words)
    if not word_list:
        raise ValueError("Word list cannot be empty")
    
    for index, word in enumerate(word_list):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")
        
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
        
        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")
    
    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True
