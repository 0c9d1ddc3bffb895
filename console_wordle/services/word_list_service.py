"""
Word List Service

Loads the dictionary of playable words and picks the secret word.
"""

import os
import random
from typing import Collection, Dict, Iterable, Optional, Set

from ..config.game_settings import MIN_WORD_COUNT, WORD_LENGTH, validate_word_list_integrity
from ..models.errors import EmptyListError, LoadError
from ..utils.game_logger import game_logger


def normalize_words(tokens: Iterable[str], word_length: int = WORD_LENGTH) -> Set[str]:
    """Uppercase the tokens, keeping alphabetic words of the required length."""
    words = set()
    for token in tokens:
        word = token.strip().upper()
        if len(word) != word_length or not word.isalpha():
            if word:
                game_logger.logger.debug(f"Skipping word source token '{token}'")
            continue
        words.add(word)
    return words


class WordList:
    """
    Word source for a game.

    This class handles:
    - Reading a plain text word file (one word per line or whitespace separated)
    - Normalising words to uppercase and the configured length
    - Rejecting sources below the minimum word count
    - Uniform secret selection through an injectable random source
    """

    def __init__(self,
                 word_length: int = WORD_LENGTH,
                 min_word_count: int = MIN_WORD_COUNT,
                 rng: Optional[random.Random] = None):
        self.word_length = word_length
        self.min_word_count = min_word_count
        self.rng = rng or random.Random()

    def load(self, source) -> Set[str]:
        """
        Reads the set of valid words from a text file.

        Args:
            source: Path to the word file

        Returns:
            Set of uppercase words of the configured length

        Raises:
            LoadError: If the file cannot be read or holds too few words
        """
        path = os.fspath(source)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                words = normalize_words(f.read().split(), self.word_length)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read word source '{path}': {e}") from e

        if len(words) < self.min_word_count:
            raise LoadError(
                f"Word source '{path}' has {len(words)} usable words, "
                f"at least {self.min_word_count} required"
            )

        try:
            validate_word_list_integrity(sorted(words), self.word_length)
        except ValueError as e:
            raise LoadError(f"Word source '{path}' failed validation: {e}") from e

        game_logger.log_game_event(None, 'words_loaded', source=path, word_count=len(words))
        return words

    def choose_secret(self, words: Collection[str]) -> str:
        """
        Picks the secret word uniformly at random.

        Raises:
            EmptyListError: If there are no words to choose from
        """
        if not words:
            raise EmptyListError("Cannot choose a secret word from an empty word list")
        # Sorted so that a seeded random source gives the same pick for the same set
        return self.rng.choice(sorted(words))


def get_word_statistics(words: Collection[str]) -> Dict:
    """
    Analyzes a word collection and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: (-x[1], x[0]))[:5]
    }
