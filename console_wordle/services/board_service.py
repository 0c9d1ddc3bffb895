"""
Guess Board Service

Stores the attempts of a game in order and renders them for the console.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..config.game_settings import ALPHABET, MAX_ATTEMPTS, UNUSED_MARKER, WORD_LENGTH
from ..models.game import Attempt, Verdict
from .feedback_service import feedback_to_string

# Higher rank wins when a letter receives several verdicts over a game
_STATUS_RANK = {Verdict.ABSENT: 1, Verdict.PRESENT: 2, Verdict.CORRECT: 3}


class GuessBoard:
    """
    Append-only record of attempts.

    Attempts must be recorded strictly in order: the index of a new attempt
    always equals the number already stored.
    """

    def __init__(self,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS,
                 attempts: Optional[List[Attempt]] = None):
        self.word_length = word_length
        self.max_attempts = max_attempts
        # Recorded attempts go straight into the caller's list (GameState.attempts)
        self._attempts: List[Attempt] = attempts if attempts is not None else []
        if self._attempts:
            raise ValueError("Board storage must start empty")
        self.letter_status: Dict[str, Optional[Verdict]] = {letter: None for letter in ALPHABET}

    def __len__(self) -> int:
        return len(self._attempts)

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        return tuple(self._attempts)

    def record(self, attempt_index: int, guess: str, feedback: Sequence[Verdict]) -> Attempt:
        """
        Stores a guess and its feedback as the next attempt.

        Raises:
            ValueError: If the index is out of sequence or beyond the attempt
                limit, or if guess/feedback do not match the word length
        """
        if attempt_index != len(self._attempts):
            raise ValueError(
                f"Attempt {attempt_index} out of sequence, expected {len(self._attempts)}"
            )
        if attempt_index >= self.max_attempts:
            raise ValueError(f"Board is full ({self.max_attempts} attempts)")
        if len(guess) != self.word_length or len(feedback) != self.word_length:
            raise ValueError(f"Guess and feedback must have {self.word_length} entries")

        attempt = Attempt(index=attempt_index, guess=guess, feedback=tuple(feedback))
        self._attempts.append(attempt)
        self._update_letter_status(attempt)
        return attempt

    def _update_letter_status(self, attempt: Attempt) -> None:
        """
        Updates keyboard letter status based on an attempt.
        
        Status can only progress in priority order.
        """
        for letter, verdict in zip(attempt.guess, attempt.feedback):
            if letter not in self.letter_status:
                continue
            current = self.letter_status[letter]
            if current is None or _STATUS_RANK[verdict] > _STATUS_RANK[current]:
                self.letter_status[letter] = verdict

    def render(self) -> Iterator[str]:
        """Yields one display line per stored attempt."""
        for attempt in self._attempts:
            yield f"Guess {attempt.number}: {attempt.guess}  {feedback_to_string(attempt.feedback)}"

    def render_keyboard(self) -> str:
        """One line listing every letter followed by its best known marker."""
        cells = []
        for letter in ALPHABET:
            status = self.letter_status[letter]
            cells.append(letter + (status.value if status else UNUSED_MARKER))
        return ' '.join(cells)

    def is_all_correct(self, feedback) -> bool:
        """True iff feedback holds exactly word_length entries, all CORRECT."""
        return is_all_correct(feedback, self.word_length)


def is_all_correct(feedback, word_length: int = WORD_LENGTH) -> bool:
    """
    Checks whether a feedback sequence is a win.

    Entries may be Verdict members or their board markers ('G').
    Malformed input (None, wrong length, unknown entries) is never a win and
    never raises.
    """
    try:
        entries = list(feedback)
    except TypeError:
        return False
    if len(entries) != word_length:
        return False
    return all(entry is Verdict.CORRECT or entry == Verdict.CORRECT.value for entry in entries)
