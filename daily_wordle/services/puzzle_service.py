"""
Puzzle Service

Contains the daily puzzle flow: fetching today's session, submitting
guesses and keeping each player's streak statistics in step with their
finished sessions.
"""

from typing import Any, List, Optional, Union

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import Rejection, StorageError
from ..models.game import GameSession, GuessResult, SessionView
from ..models.user import PlayerStats
from ..utils.dates import DateLike, SystemClock, to_iso
from ..utils.game_logger import game_logger
from ..utils.locks import KeyedLock
from .session_rules import apply_guess, normalize_guess, validate_guess
from .store import GameStore, user_key
from .streak_service import GameOutcome, apply_outcome
from .word_service import DailyWordSelector, WordList

MAX_SAVE_RETRIES = 3


class PuzzleEngine:
    """
    Orchestrates daily puzzle sessions.

    This class handles:
    - Lazy creation of one session per user per calendar date
    - Guess validation, scoring and session transitions
    - Exactly-once streak updates on finished sessions
    - Never revealing the target word before a session is over

    Submissions for the same (user, date) are serialized with an in-process
    lock, and session writes are version-checked so a second server process
    cannot overwrite a guess either.
    """

    def __init__(self, store: GameStore, word_list: WordList, clock=None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.store = store
        self.word_list = word_list
        self.selector = DailyWordSelector(word_list)
        self.clock = clock or SystemClock()
        self.max_attempts = max_attempts
        self._locks = KeyedLock()

    def _resolve_day(self, today: Optional[DateLike]) -> str:
        return to_iso(today if today is not None else self.clock.today())

    def _lock_key(self, user_id: Any, day: str):
        return (str(user_key(user_id)), day)

    def word_for(self, today: Optional[DateLike] = None) -> str:
        """Returns the target word for a date (today by default)."""
        return self.selector.word_for(self._resolve_day(today))

    def get_or_create_today_session(self, user_id: Any,
                                    today: Optional[DateLike] = None) -> SessionView:
        """
        Returns the user's session for the day, creating an empty one if needed.

        Args:
            user_id: Id of the authenticated user
            today: Date to use instead of the clock

        Returns:
            SessionView: Guesses so far and the session flags
        """
        day = self._resolve_day(today)
        self._settle_pending_outcomes(user_id)

        with self._locks.hold(self._lock_key(user_id, day)):
            session = self.store.find_session(user_id, day)
            if session is None:
                session = self.store.create_session(user_id, day)
                game_logger.log_game_event(
                    f"{user_id}:{day}", 'session_created', user_id, date=day
                )

        return self._session_view(session)

    def submit_guess(self, user_id: Any, raw_guess: Any,
                     today: Optional[DateLike] = None) -> Union[GuessResult, Rejection]:
        """
        Validates and records a guess for the user's session of the day.

        Args:
            user_id: Id of the authenticated user
            raw_guess: Guess as typed by the player
            today: Date to use instead of the clock

        Returns:
            GuessResult for an accepted guess, Rejection otherwise

        Raises:
            UserNotFoundError: If the user does not exist
            StorageError: If the store fails or keeps losing write races
        """
        day = self._resolve_day(today)
        guess = normalize_guess(raw_guess)
        target = self.selector.word_for(day)
        self._settle_pending_outcomes(user_id)

        with self._locks.hold(self._lock_key(user_id, day)):
            for _ in range(MAX_SAVE_RETRIES):
                user = self.store.get_user(user_id)
                session = self.store.find_session(user_id, day)

                rejection = validate_guess(
                    session, guess, target, self.word_list,
                    hard_mode=user.hard_mode, max_attempts=self.max_attempts
                )
                if rejection is not None:
                    game_logger.log_game_event(
                        f"{user_id}:{day}", 'guess_rejected', user_id,
                        guess=guess, reason=rejection.reason.value
                    )
                    return rejection

                record = apply_guess(session, guess, target, self.max_attempts)

                if not self.store.save_session(session):
                    game_logger.logger.warning(
                        f"Concurrent update on session {user_id}:{day}, retrying guess '{guess}'"
                    )
                    continue

                game_logger.log_game_event(
                    f"{user_id}:{day}", 'guess_accepted', user_id,
                    guess=guess, feedback=[tag.value for tag in record.feedback],
                    attempts=session.attempts
                )

                if session.is_terminal:
                    try:
                        user = self._record_outcome(session, user)
                    except StorageError as e:
                        # The guess is committed; the outcome is settled on the next call
                        game_logger.logger.error(
                            f"Outcome for session {user_id}:{day} left pending: {e}"
                        )

                return self._guess_result(session, record.feedback, user, target)

        raise StorageError(
            f"Could not save guess for session {user_id}:{day} after {MAX_SAVE_RETRIES} attempts"
        )

    def get_solved_dates(self, user_id: Any) -> List[str]:
        """Returns the dates of every solved session, oldest first."""
        return self.store.find_solved_dates(user_id)

    def _settle_pending_outcomes(self, user_id: Any) -> None:
        """
        Replay every finished session whose outcome never reached the user.

        Runs oldest first, before the caller touches today's session, so a
        later game is never counted ahead of an earlier one.

        Raises:
            StorageError: If a pending outcome still cannot be saved
        """
        for pending in self.store.find_unrecorded_sessions(user_id):
            with self._locks.hold(self._lock_key(user_id, pending.date)):
                session = self.store.find_session(user_id, pending.date)
                if session is None or not session.is_terminal or session.outcome_recorded:
                    continue
                self._record_outcome(session, self.store.get_user(user_id), replay=True)

    def _record_outcome(self, session: GameSession, user: PlayerStats,
                        replay: bool = False) -> PlayerStats:
        """
        Apply a finished session to the user's statistics and mark it recorded.

        A replay happens when an earlier request committed the session but
        failed before the user was saved. If the user already carries this
        date as ``lastPlayed`` the update landed and is not applied again.
        """
        if not (replay and user.last_played == session.date):
            outcome = GameOutcome.WON if session.is_solved else GameOutcome.LOST
            apply_outcome(user, session.date, outcome)
            self.store.save_player_stats(user)
            game_logger.log_game_event(
                f"{session.user_id}:{session.date}",
                'game_won' if outcome is GameOutcome.WON else 'game_lost',
                user.user_id,
                rounds_used=session.attempts,
                target_word=self.selector.word_for(session.date),
                streak=user.streak,
                replayed=replay
            )

        session.outcome_recorded = True
        if not self.store.save_session(session):
            game_logger.logger.warning(
                f"Session {session.user_id}:{session.date} changed before its outcome was marked recorded"
            )
        return user

    def _session_view(self, session: GameSession) -> SessionView:
        return SessionView(
            date=session.date,
            guesses=list(session.guess_history),
            is_solved=session.is_solved,
            is_failed=session.is_failed,
            max_attempts=self.max_attempts,
            correct_word=self.selector.word_for(session.date) if session.is_terminal else None
        )

    def _guess_result(self, session: GameSession, feedback, user: PlayerStats,
                      target: str) -> GuessResult:
        return GuessResult(
            guess=session.guess_history[-1].word,
            feedback=feedback,
            is_solved=session.is_solved,
            is_failed=session.is_failed,
            attempts=session.attempts,
            games_played=user.games_played,
            games_won=user.games_won,
            best_streak=user.best_streak,
            correct_word=target if session.is_terminal else None,
            streak=user.streak if session.is_terminal else None
        )


# Global service instance
_puzzle_engine = None


def get_puzzle_engine() -> Optional[PuzzleEngine]:
    """Get the global puzzle engine instance."""
    return _puzzle_engine


def initialize_puzzle_engine(store: GameStore, word_list: WordList, clock=None) -> PuzzleEngine:
    """Initialize the global puzzle engine instance."""
    global _puzzle_engine
    _puzzle_engine = PuzzleEngine(store, word_list, clock)
    return _puzzle_engine
