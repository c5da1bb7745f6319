import itertools
from collections import Counter

import pytest

from daily_wordle.models.errors import HardModeKind
from daily_wordle.models.game import LetterFeedback
from daily_wordle.services.evaluation import check_hard_mode, evaluate_guess

C = LetterFeedback.CORRECT
M = LetterFeedback.MISPLACED
I = LetterFeedback.INCORRECT


@pytest.mark.parametrize("guess, target, expected", [
    ("apple", "apple", [C, C, C, C, C]),
    ("delta", "apple", [I, M, M, I, M]),
    ("loyal", "allow", [M, M, I, M, M]),
    ("oomph", "spoon", [M, M, I, M, I]),
    ("papal", "apple", [M, M, C, I, M]),
    ("eagle", "apple", [I, M, I, C, C]),
    ("crane", "cabin", [C, I, M, M, I]),
])
def test_evaluate_guess(guess, target, expected):
    assert evaluate_guess(guess, target) == expected


def test_repeated_letter_marked_once_when_target_has_one():
    # Only one 'l' in "plant" and it is matched exactly, so the first 'l' gets nothing
    assert evaluate_guess("llama", "plant") == [I, C, C, I, I]


def test_correct_position_wins_over_earlier_misplaced():
    # The 'e' at index 4 is exact, so the earlier 'e' gets nothing
    assert evaluate_guess("eerie", "crane") == [I, I, M, I, C]


def test_marks_never_exceed_target_letter_count():
    words = ["apple", "allow", "loyal", "spoon", "oomph", "eerie", "crane", "llama", "level"]
    for guess, target in itertools.product(words, repeat=2):
        feedback = evaluate_guess(guess, target)
        earned = Counter(
            letter for letter, tag in zip(guess, feedback) if tag is not I
        )
        available = Counter(target)
        for letter, count in earned.items():
            assert count <= available[letter], (guess, target)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        evaluate_guess("app", "apple")


class TestHardMode:
    previous_feedback = [C, I, M, I, I]

    def test_allows_guess_keeping_hints(self):
        assert check_hard_mode("cabin", "crane", self.previous_feedback) is None

    def test_correct_letter_must_stay_in_place(self):
        violation = check_hard_mode("acorn", "crane", self.previous_feedback)
        assert violation.position == 0
        assert violation.letter == "c"
        assert violation.kind is HardModeKind.MUST_KEEP_POSITION
        assert "position 1" in violation.message

    def test_misplaced_letter_must_be_reused(self):
        violation = check_hard_mode("clods", "crane", self.previous_feedback)
        assert violation.position == 2
        assert violation.letter == "a"
        assert violation.kind is HardModeKind.MUST_REUSE_LETTER
        assert "'A'" in violation.message

    def test_misplaced_letter_may_stay_in_same_spot(self):
        assert check_hard_mode("chaos", "crane", self.previous_feedback) is None

    def test_no_hints_no_constraint(self):
        assert check_hard_mode("spoon", "crane", [I, I, I, I, I]) is None

    def test_reports_first_violation(self):
        violation = check_hard_mode("spoon", "crane", self.previous_feedback)
        assert violation.position == 0
        assert violation.kind is HardModeKind.MUST_KEEP_POSITION
