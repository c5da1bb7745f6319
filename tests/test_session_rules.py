from daily_wordle.models.errors import RejectionReason
from daily_wordle.models.game import GameSession, GuessRecord, LetterFeedback, SessionStatus
from daily_wordle.services.evaluation import evaluate_guess
from daily_wordle.services.session_rules import (
    apply_guess, normalize_guess, session_status, validate_guess
)

TARGET = "flame"


def session_with(*words):
    session = GameSession(user_id="u1", date="2024-01-10")
    for word in words:
        session.guess_history.append(GuessRecord(word, evaluate_guess(word, TARGET)))
    return session


def reason(session, guess, word_list, hard_mode=False):
    rejection = validate_guess(session, guess, TARGET, word_list, hard_mode=hard_mode)
    return rejection.reason if rejection else None


def test_normalize_guess():
    assert normalize_guess("  BrAiN ") == "brain"
    assert normalize_guess(None) == ""
    assert normalize_guess(12345) == ""


def test_accepts_valid_guess(large_word_list):
    assert reason(session_with(), "apple", large_word_list) is None


def test_length_checked_before_dictionary(large_word_list):
    assert reason(session_with(), "app", large_word_list) is RejectionReason.INVALID_GUESS_LENGTH
    assert reason(session_with(), "", large_word_list) is RejectionReason.INVALID_GUESS_LENGTH


def test_unknown_word(large_word_list):
    rejection = validate_guess(session_with(), "zzzzz", TARGET, large_word_list)
    assert rejection.reason is RejectionReason.INVALID_GUESS_WORD
    assert rejection.details == {"guess": "zzzzz"}


def test_missing_session(large_word_list):
    assert reason(None, "apple", large_word_list) is RejectionReason.SESSION_NOT_STARTED


def test_solved_session(large_word_list):
    session = session_with("flame")
    session.is_solved = True
    assert reason(session, "apple", large_word_list) is RejectionReason.ALREADY_SOLVED


def test_failed_session(large_word_list):
    session = session_with("apple", "brain", "crane", "delta", "eagle", "grape")
    session.is_failed = True
    assert reason(session, "heart", large_word_list) is RejectionReason.ATTEMPTS_EXHAUSTED


def test_duplicate_guess(large_word_list):
    assert reason(session_with("apple"), "apple", large_word_list) is RejectionReason.DUPLICATE_GUESS


def test_hard_mode_only_when_enabled(large_word_list):
    # "eagle" against "flame": a, l misplaced and e correct
    session = session_with("eagle")
    assert reason(session, "brain", large_word_list) is None
    rejection = validate_guess(session, "brain", TARGET, large_word_list, hard_mode=True)
    assert rejection.reason is RejectionReason.HARD_MODE_VIOLATION
    assert rejection.details["kind"] in ("MustKeepPosition", "MustReuseLetter")


def test_apply_guess_in_progress():
    session = session_with()
    record = apply_guess(session, "apple", TARGET)
    assert record.word == "apple"
    assert session.attempts == 1
    assert session_status(session) is SessionStatus.IN_PROGRESS


def test_apply_guess_solves():
    session = session_with("apple")
    record = apply_guess(session, "flame", TARGET)
    assert record.feedback == [LetterFeedback.CORRECT] * 5
    assert session.is_solved
    assert not session.is_failed
    assert not session.outcome_recorded


def test_sixth_miss_fails():
    session = session_with("apple", "brain", "crane", "delta", "eagle")
    apply_guess(session, "grape", TARGET)
    assert session.is_failed
    assert not session.is_solved
    assert session_status(session) is SessionStatus.FAILED


def test_win_on_last_attempt_is_solved_not_failed():
    session = session_with("apple", "brain", "crane", "delta", "eagle")
    apply_guess(session, "flame", TARGET)
    assert session.is_solved
    assert not session.is_failed


def test_status_before_start():
    assert session_status(None) is SessionStatus.NOT_STARTED
