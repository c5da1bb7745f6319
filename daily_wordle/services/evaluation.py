"""
Guess Evaluation

Implements the Wordle letter scoring algorithm and the hard-mode constraint
check.
"""

from collections import Counter
from typing import List, Optional, Sequence

from ..models.errors import HardModeKind, HardModeViolation
from ..models.game import LetterFeedback


def evaluate_guess(guess: str, target: str) -> List[LetterFeedback]:
    """
    Score a guess against the target word.

    Exact matches are resolved first so that a repeated letter never earns
    more Correct/Misplaced marks than the target holds; the remaining copies
    are handed out left to right.

    Args:
        guess: Normalized guess
        target: Target word of the same length

    Returns:
        List[LetterFeedback]: One tag per position

    Raises:
        ValueError: If the words differ in length
    """
    if len(guess) != len(target):
        raise ValueError(f"Guess length {len(guess)} does not match target length {len(target)}")

    remaining = Counter(target)
    result: List[Optional[LetterFeedback]] = [None] * len(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result[i] = LetterFeedback.CORRECT
            remaining[letter] -= 1

    # Second pass: misplaced letters from what is left
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = LetterFeedback.MISPLACED
            remaining[letter] -= 1
        else:
            result[i] = LetterFeedback.INCORRECT

    return [status for status in result if status is not None]


def check_hard_mode(new_guess: str,
                    previous_guess: str,
                    previous_feedback: Sequence[LetterFeedback]) -> Optional[HardModeViolation]:
    """
    Check a guess against the feedback of the guess right before it.

    Correct letters must stay in place, Misplaced letters must appear
    somewhere. Only the most recent guess constrains the next one.

    Returns:
        The first violation by position, or None when the guess is allowed
    """
    for i, status in enumerate(previous_feedback):
        letter = previous_guess[i]

        if status is LetterFeedback.CORRECT and (i >= len(new_guess) or new_guess[i] != letter):
            return HardModeViolation(i, letter, HardModeKind.MUST_KEEP_POSITION)

        if status is LetterFeedback.MISPLACED and letter not in new_guess:
            return HardModeViolation(i, letter, HardModeKind.MUST_REUSE_LETTER)

    return None
