"""
Feedback Service

Scores a guess against the secret word, letter by letter.
"""

from typing import List, Optional, Sequence

from ..models.game import Feedback, Verdict


def compute_feedback(secret: str, guess: str) -> Feedback:
    """
    Implements the Wordle letter evaluation algorithm.
    
    Exact matches are marked first and consume their secret position. Every
    other guess letter is PRESENT when it occurs at a secret position left
    unconsumed by an exact match, otherwise ABSENT. Present matches do not
    consume, so a letter repeated in the guess can be reported as PRESENT
    more often than it occurs in the secret (APPLE/PAPAL gives YYGYY).
    
    Args:
        secret: The word being guessed
        guess: The player's word, same length as the secret
        
    Returns:
        Tuple of verdicts, one per letter position
        
    Raises:
        ValueError: If the two words differ in length
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"Guess '{guess}' has {len(guess)} letters, secret has {len(secret)}"
        )
    
    length = len(secret)
    verdicts: List[Optional[Verdict]] = [None] * length
    consumed = [False] * length
    
    # First pass: exact position matches
    for i in range(length):
        if guess[i] == secret[i]:
            verdicts[i] = Verdict.CORRECT
            consumed[i] = True
    
    # Second pass: present letters and misses
    for i in range(length):
        if verdicts[i] is not None:
            continue
        verdicts[i] = Verdict.ABSENT
        for j in range(length):
            if not consumed[j] and secret[j] == guess[i]:
                verdicts[i] = Verdict.PRESENT
                break
    
    return tuple(verdicts)


def contains_char(word: str, ch: str) -> bool:
    """Return True if the letter occurs anywhere in the word."""
    return ch in word


def feedback_to_string(feedback: Sequence[Verdict]) -> str:
    """Join the board markers of a feedback sequence, e.g. '_YYY_'."""
    return ''.join(verdict.value for verdict in feedback)
