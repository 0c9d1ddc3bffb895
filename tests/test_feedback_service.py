"""Tests for the feedback algorithm."""

from collections import Counter

import pytest

from console_wordle.models.game import Verdict
from console_wordle.services.feedback_service import (
    compute_feedback,
    contains_char,
    feedback_to_string,
)

WORD_PAIRS = [
    ("APPLE", "HELPS"),
    ("APPLE", "PAPAL"),
    ("APPLE", "PPPPP"),
    ("ABCDE", "EDCBA"),
    ("SPEED", "ABIDE"),
    ("ABIDE", "SPEED"),
    ("ALLOY", "LLAMA"),
    ("EERIE", "EEEEE"),
    ("CRANE", "NACRE"),
    ("ZZZAB", "BAZZZ"),
]


def score(secret, guess):
    return feedback_to_string(compute_feedback(secret, guess))


class TestScenarios:
    """Known secret/guess pairs."""

    def test_helps_against_apple(self):
        assert score("APPLE", "HELPS") == "_YYY_"

    def test_exact_match_is_all_correct(self):
        assert score("ABCDE", "ABCDE") == "GGGGG"

    def test_no_shared_letters_is_all_absent(self):
        assert score("ABCDE", "VWXYZ") == "_____"

    def test_repeated_letters_in_guess(self):
        assert score("APPLE", "PAPAL") == "YYGYY"

    def test_exact_match_is_not_reused_as_present(self):
        assert score("ABCDE", "AAAAA") == "G____"

    def test_misplaced_letters_do_not_consume(self):
        assert score("ABIDE", "SPEED") == "__YYY"

    def test_repeated_letters_in_secret(self):
        assert score("EERIE", "EEEEE") == "GG__G"

    def test_anagram_is_all_present(self):
        assert score("CRANE", "NACRE") == "YYYYG"


class TestProperties:
    """Properties that hold for every pair of equal-length words."""

    @pytest.mark.parametrize("secret,guess", WORD_PAIRS)
    def test_one_verdict_per_letter(self, secret, guess):
        assert len(compute_feedback(secret, guess)) == len(secret)

    @pytest.mark.parametrize("secret,guess", WORD_PAIRS)
    def test_correct_iff_same_letter(self, secret, guess):
        feedback = compute_feedback(secret, guess)
        for i, verdict in enumerate(feedback):
            assert (verdict is Verdict.CORRECT) == (guess[i] == secret[i])

    @pytest.mark.parametrize("secret,guess", WORD_PAIRS)
    def test_guessing_secret_is_all_correct(self, secret, guess):
        assert set(compute_feedback(secret, secret)) == {Verdict.CORRECT}

    @pytest.mark.parametrize("secret,guess", WORD_PAIRS)
    def test_correct_hits_bounded_by_secret_count(self, secret, guess):
        feedback = compute_feedback(secret, guess)
        hits = Counter(
            letter for letter, verdict in zip(guess, feedback)
            if verdict is Verdict.CORRECT
        )
        secret_counts = Counter(secret)
        for letter, count in hits.items():
            assert count <= secret_counts[letter]

    @pytest.mark.parametrize("secret,guess", WORD_PAIRS)
    def test_present_iff_letter_left_unmatched_in_secret(self, secret, guess):
        feedback = compute_feedback(secret, guess)
        unmatched = {s for s, g in zip(secret, guess) if s != g}
        for letter, verdict in zip(guess, feedback):
            if verdict is Verdict.CORRECT:
                continue
            assert (verdict is Verdict.PRESENT) == (letter in unmatched)

    def test_result_is_immutable_tuple(self):
        assert isinstance(compute_feedback("APPLE", "HELPS"), tuple)

    def test_length_mismatch_rejected(self):
        with pytest.raises(ValueError):
            compute_feedback("APPLE", "ABC")


class TestHelpers:

    def test_contains_char(self):
        assert contains_char("HELLO", "H")
        assert contains_char("HELLO", "O")
        assert not contains_char("HELLO", "A")
        assert not contains_char("WORLD", "X")

    def test_feedback_to_string_uses_markers(self):
        feedback = (Verdict.CORRECT, Verdict.PRESENT, Verdict.ABSENT)
        assert feedback_to_string(feedback) == "GY_"
