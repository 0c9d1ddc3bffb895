"""
Game Service

Contains the turn loop of the console game: secret selection, guess
validation, evaluation, board updates and win/loss detection.
"""

import logging
import os
import random
import uuid
from typing import Iterable, Optional, TextIO, Tuple, Union

from ..config.game_settings import (
    INPUT_EXHAUSTED_MESSAGE,
    INVALID_WORD_MESSAGE,
    LOSS_MESSAGE,
    MAX_ATTEMPTS,
    PROMPT_MESSAGE,
    WIN_MESSAGE,
    WORD_LENGTH,
)
from ..models.game import Attempt, GameOutcome, GamePhase, GameState
from ..utils.game_logger import game_logger
from .board_service import GuessBoard
from .feedback_service import compute_feedback, feedback_to_string
from .word_list_service import WordList, normalize_words

WordSource = Union[str, os.PathLike, Iterable[str]]


class GameLoop:
    """
    Runs one game at a time.

    This class handles:
    - Word loading and secret selection through WordList
    - Guess validation (only the length is checked)
    - Guess evaluation and recording on the GuessBoard
    - Win/loss detection and the player-facing messages

    Input and output streams are passed to run() so the loop can be driven
    by any harness without touching sys.stdin/sys.stdout.
    """

    def __init__(self,
                 word_list: Optional[WordList] = None,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS):
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.word_list = word_list or WordList(word_length=word_length)
        self.state: Optional[GameState] = None
        self.board: Optional[GuessBoard] = None

    def new_game(self, words: Iterable[str]) -> GameState:
        """
        Starts a game with a secret drawn from the given words.

        Raises:
            EmptyListError: If there are no words to choose from
        """
        secret = self.word_list.choose_secret(list(words)).upper()
        self.state = GameState(
            game_id=str(uuid.uuid4()),
            secret=secret,
            max_attempts=self.max_attempts
        )
        self.board = GuessBoard(
            word_length=self.word_length,
            max_attempts=self.max_attempts,
            attempts=self.state.attempts
        )
        game_logger.log_game_event(
            self.state.game_id, 'game_started',
            word_length=self.word_length, max_attempts=self.max_attempts
        )
        return self.state

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for the current game.

        Dictionary membership is not required; only the length is checked.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.state is None:
            return False, "No game in progress"

        if self.state.game_over:
            return False, "Game is already over"

        if guess is None or len(guess.strip()) != self.word_length:
            return False, INVALID_WORD_MESSAGE.format(length=self.word_length)

        return True, ""

    def make_guess(self, guess: str) -> Attempt:
        """
        Evaluates a valid guess, records it and updates the game outcome.

        Raises:
            RuntimeError: If no game is running or it is already over
            ValueError: If the guess has the wrong length
        """
        if self.state is None or self.board is None:
            raise RuntimeError("No game in progress")
        if self.state.game_over:
            raise RuntimeError("Game is already over")

        is_valid, error = self.is_valid_guess(guess)
        if not is_valid:
            raise ValueError(error)

        state = self.state
        normalized_guess = guess.strip().upper()
        state.phase = GamePhase.EVALUATING

        feedback = compute_feedback(state.secret, normalized_guess)
        attempt = self.board.record(state.attempt_count, normalized_guess, feedback)

        game_logger.log_user_action(
            'submit_guess', state.game_id,
            attempt=attempt.number, guess=normalized_guess,
            feedback=feedback_to_string(feedback)
        )

        if self.board.is_all_correct(feedback):
            state.outcome = GameOutcome.WON
            state.phase = GamePhase.WON
            game_logger.log_game_event(state.game_id, 'game_won', attempts=attempt.number)
        elif state.attempt_count >= state.max_attempts:
            state.outcome = GameOutcome.LOST
            state.phase = GamePhase.LOST
            game_logger.log_game_event(state.game_id, 'game_lost', secret=state.secret)
        else:
            state.phase = GamePhase.AWAITING_GUESS

        return attempt

    def run(self, word_source: WordSource, input_stream: TextIO, output_stream: TextIO) -> GameOutcome:
        """
        Plays one complete game.

        Args:
            word_source: Path to a word file, or an iterable of words
            input_stream: Stream providing one guess per line
            output_stream: Stream receiving the board and messages

        Returns:
            GameOutcome.WON or GameOutcome.LOST. Running out of input before
            the game ends counts as a loss.

        Raises:
            LoadError: If the word file cannot be used
            EmptyListError: If there are no words to choose a secret from
        """
        words = self._resolve_words(word_source)
        state = self.new_game(words)

        self._write_line(
            output_stream,
            f"Guess the {self.word_length}-letter word. You have {self.max_attempts} attempts."
        )

        while not state.game_over:
            output_stream.write(PROMPT_MESSAGE.format(
                attempt=state.attempt_count + 1, max_attempts=state.max_attempts
            ))
            output_stream.flush()

            line = input_stream.readline()
            if not line:
                return self._end_on_exhausted_input(output_stream)

            guess = line.strip().upper()
            is_valid, error = self.is_valid_guess(guess)
            if not is_valid:
                game_logger.log_user_action('invalid_guess', state.game_id, guess=guess)
                self._write_line(output_stream, error)
                continue

            self.make_guess(guess)
            self._write_board(output_stream)

        if state.outcome is GameOutcome.WON:
            noun = "guess" if state.attempt_count == 1 else "guesses"
            self._write_line(output_stream, WIN_MESSAGE.format(attempts=state.attempt_count, noun=noun))
        else:
            self._write_line(output_stream, LOSS_MESSAGE.format(secret=state.secret))

        return state.outcome

    def _resolve_words(self, word_source: WordSource):
        if isinstance(word_source, (str, os.PathLike)):
            return self.word_list.load(word_source)
        return normalize_words(word_source, self.word_length)

    def _write_board(self, output_stream: TextIO) -> None:
        for row in self.board.render():
            self._write_line(output_stream, row)
        self._write_line(output_stream, self.board.render_keyboard())

    def _end_on_exhausted_input(self, output_stream: TextIO) -> GameOutcome:
        state = self.state
        state.outcome = GameOutcome.LOST
        state.phase = GamePhase.LOST
        game_logger.log_game_event(
            state.game_id, 'input_exhausted', level=logging.WARNING,
            attempts=state.attempt_count
        )
        self._write_line(output_stream, "")
        self._write_line(output_stream, INPUT_EXHAUSTED_MESSAGE)
        self._write_line(output_stream, LOSS_MESSAGE.format(secret=state.secret))
        return state.outcome

    @staticmethod
    def _write_line(output_stream: TextIO, text: str) -> None:
        output_stream.write(text + "\n")


# Global service instance
_game_loop = None


def get_game_loop() -> Optional[GameLoop]:
    """Get the global game loop instance."""
    return _game_loop


def initialize_game_loop(app_config) -> GameLoop:
    """Initialize the global game loop from a configuration class."""
    global _game_loop
    rng = random.Random(app_config.RANDOM_SEED) if app_config.RANDOM_SEED is not None else random.Random()
    word_list = WordList(
        word_length=app_config.WORD_LENGTH,
        min_word_count=app_config.MIN_WORD_COUNT,
        rng=rng
    )
    _game_loop = GameLoop(
        word_list=word_list,
        word_length=app_config.WORD_LENGTH,
        max_attempts=app_config.MAX_ATTEMPTS
    )
    return _game_loop
