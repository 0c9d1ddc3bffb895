"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Verdict(Enum):
    """Per-letter evaluation; the value is the marker shown on the board."""
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "_"


Feedback = Tuple[Verdict, ...]


class GameOutcome(Enum):
    """Terminal flag of a game."""
    WON = "WON"
    LOST = "LOST"
    IN_PROGRESS = "IN_PROGRESS"


class GamePhase(Enum):
    """States of the turn loop."""
    AWAITING_GUESS = "AWAITING_GUESS"
    EVALUATING = "EVALUATING"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class Attempt:
    """A recorded guess with its feedback at a 0-based turn index."""
    index: int
    guess: str
    feedback: Feedback

    @property
    def number(self) -> int:
        """1-based attempt number as displayed to the player."""
        return self.index + 1


@dataclass
class GameState:
    """In-process state of a single game."""
    game_id: str
    secret: str
    max_attempts: int
    attempts: List[Attempt] = field(default_factory=list)
    outcome: GameOutcome = GameOutcome.IN_PROGRESS
    phase: GamePhase = GamePhase.AWAITING_GUESS

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)

    @property
    def game_over(self) -> bool:
        return self.outcome is not GameOutcome.IN_PROGRESS

    @property
    def answer(self) -> Optional[str]:
        """The secret, only once the game is over."""
        return self.secret if self.game_over else None
