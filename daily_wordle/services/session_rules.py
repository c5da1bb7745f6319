"""
Session Rules

The guess validation chain and state transitions of a daily game session.
Both functions work on in-memory ``GameSession`` values; persisting the
result is the puzzle service's job.
"""

from typing import Any, Optional

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import Rejection, RejectionReason
from ..models.game import GameSession, GuessRecord, SessionStatus
from .evaluation import check_hard_mode, evaluate_guess
from .word_service import WordList


def normalize_guess(raw_guess: Any) -> str:
    if not isinstance(raw_guess, str):
        return ""
    return raw_guess.strip().lower()


def validate_guess(session: Optional[GameSession],
                   guess: str,
                   target: str,
                   word_list: WordList,
                   hard_mode: bool = False,
                   max_attempts: int = MAX_ATTEMPTS) -> Optional[Rejection]:
    """
    Run the validation chain for a normalized guess.

    Returns:
        The first Rejection that applies, or None if the guess is accepted
    """
    if len(guess) != len(target):
        return Rejection(
            RejectionReason.INVALID_GUESS_LENGTH,
            f"Guess must be exactly {len(target)} letters",
            {"expectedLength": len(target), "actualLength": len(guess)},
        )

    if guess not in word_list:
        return Rejection(RejectionReason.INVALID_GUESS_WORD, "Word not in word list", {"guess": guess})

    if session is None:
        return Rejection(RejectionReason.SESSION_NOT_STARTED, "Start the puzzle first")

    if session.is_solved:
        return Rejection(RejectionReason.ALREADY_SOLVED, "Puzzle already solved")

    if session.is_failed or session.attempts >= max_attempts:
        return Rejection(
            RejectionReason.ATTEMPTS_EXHAUSTED,
            "No more attempts left",
            {"maxAttempts": max_attempts},
        )

    if session.has_guessed(guess):
        return Rejection(RejectionReason.DUPLICATE_GUESS, "You already guessed this word", {"guess": guess})

    previous = session.last_guess
    if hard_mode and previous is not None:
        violation = check_hard_mode(guess, previous.word, previous.feedback)
        if violation is not None:
            return Rejection.hard_mode(violation)

    return None


def apply_guess(session: GameSession,
                guess: str,
                target: str,
                max_attempts: int = MAX_ATTEMPTS) -> GuessRecord:
    """
    Record an already validated guess and move the session forward.

    Returns:
        GuessRecord: The appended guess with its feedback
    """
    record = GuessRecord(word=guess, feedback=evaluate_guess(guess, target))
    session.guess_history.append(record)

    if guess == target.lower():
        session.is_solved = True
    elif session.attempts >= max_attempts:
        session.is_failed = True

    if session.is_terminal:
        # The streak update still has to be written for this transition
        session.outcome_recorded = False

    return record


def session_status(session: Optional[GameSession]) -> SessionStatus:
    if session is None:
        return SessionStatus.NOT_STARTED
    return session.status
