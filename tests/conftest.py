"""
Pytest configuration for console_wordle tests.

Provides word files, deterministic random sources and a ready game loop.
"""

import io

import pytest

from console_wordle.services.game_service import GameLoop
from console_wordle.services.word_list_service import WordList

SAMPLE_WORDS = [
    "APPLE", "HELPS", "CRANE", "SLATE", "BRAIN", "CHAIR",
    "DANCE", "EARLY", "FIELD", "HEART", "LIGHT", "ABCDE",
]


class FixedChoice:
    """Random source stub that always picks the configured word."""

    def __init__(self, word):
        self.word = word
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        assert self.word in seq
        return self.word


@pytest.fixture
def sample_words():
    """Twelve valid five-letter words, uppercase."""
    return list(SAMPLE_WORDS)


@pytest.fixture
def fixed_choice():
    """Factory for a random source stub that always picks the given word."""
    return FixedChoice


@pytest.fixture
def word_file(tmp_path):
    """A valid word file, one word per line, mixed case."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(word.lower() for word in SAMPLE_WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def make_game():
    """Factory for a GameLoop whose secret is fixed."""
    def _make(secret="APPLE", **kwargs):
        word_list = WordList(min_word_count=1, rng=FixedChoice(secret))
        return GameLoop(word_list=word_list, **kwargs)
    return _make


@pytest.fixture
def play(make_game):
    """Play a game on the given input lines and return (outcome, output)."""
    def _play(secret, lines, words=None):
        game = make_game(secret)
        input_stream = io.StringIO("".join(line + "\n" for line in lines))
        output_stream = io.StringIO()
        outcome = game.run(words or [secret], input_stream, output_stream)
        return outcome, output_stream.getvalue()
    return _play
