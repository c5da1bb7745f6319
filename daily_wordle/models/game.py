"""
Game Data Models

Contains all puzzle-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config.game_settings import MAX_ATTEMPTS


class LetterFeedback(Enum):
    """Per-letter evaluation of a guess against the target word."""
    CORRECT = "Correct"
    MISPLACED = "Misplaced"
    INCORRECT = "Incorrect"


class SessionStatus(Enum):
    """Lifecycle states of a daily game session."""
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    SOLVED = "Solved"
    FAILED = "Failed"


@dataclass
class GuessRecord:
    """One accepted guess and the feedback it received."""
    word: str
    feedback: List[LetterFeedback]

    def to_document(self) -> Dict[str, Any]:
        return {"word": self.word, "feedback": [tag.value for tag in self.feedback]}

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "GuessRecord":
        return cls(word=doc["word"], feedback=[LetterFeedback(tag) for tag in doc["feedback"]])


@dataclass
class GameSession:
    """
    Server-side record of one user's puzzle for one calendar date.

    ``version`` is bumped on every write and is used for optimistic
    concurrency. ``outcome_recorded`` flips to True once the terminal
    outcome has been applied to the user's streak statistics.
    """
    user_id: Any
    date: str
    guess_history: List[GuessRecord] = field(default_factory=list)
    is_solved: bool = False
    is_failed: bool = False
    version: int = 0
    outcome_recorded: bool = False

    @property
    def status(self) -> SessionStatus:
        if self.is_solved:
            return SessionStatus.SOLVED
        if self.is_failed:
            return SessionStatus.FAILED
        return SessionStatus.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        return self.is_solved or self.is_failed

    @property
    def attempts(self) -> int:
        return len(self.guess_history)

    @property
    def last_guess(self) -> Optional[GuessRecord]:
        return self.guess_history[-1] if self.guess_history else None

    def has_guessed(self, word: str) -> bool:
        normalized = word.strip().lower()
        return any(record.word == normalized for record in self.guess_history)

    def to_document(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "date": self.date,
            "guessHistory": [record.to_document() for record in self.guess_history],
            "isSolved": self.is_solved,
            "isFailed": self.is_failed,
            "version": self.version,
            "outcomeRecorded": self.outcome_recorded,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "GameSession":
        return cls(
            user_id=doc["userId"],
            date=doc["date"],
            guess_history=[GuessRecord.from_document(g) for g in doc.get("guessHistory", [])],
            is_solved=doc.get("isSolved", False),
            is_failed=doc.get("isFailed", False),
            version=doc.get("version", 0),
            # Documents written before the flag existed are treated as settled
            outcome_recorded=doc.get("outcomeRecorded", True),
        )


@dataclass
class SessionView:
    """Client-facing snapshot of today's session."""
    date: str
    guesses: List[GuessRecord]
    is_solved: bool
    is_failed: bool
    max_attempts: int = MAX_ATTEMPTS
    correct_word: Optional[str] = None  # Only included when the session is terminal

    def to_response(self) -> Dict[str, Any]:
        response = {
            "date": self.date,
            "guesses": [
                {"guess": g.word, "feedback": [tag.value for tag in g.feedback]}
                for g in self.guesses
            ],
            "isSolved": self.is_solved,
            "isFailed": self.is_failed,
            "attempts": len(self.guesses),
            "maxAttempts": self.max_attempts,
        }
        if self.correct_word is not None:
            response["correctWord"] = self.correct_word
        return response


@dataclass
class GuessResult:
    """Outcome of an accepted guess."""
    guess: str
    feedback: List[LetterFeedback]
    is_solved: bool
    is_failed: bool
    attempts: int
    games_played: int
    games_won: int
    best_streak: int
    correct_word: Optional[str] = None  # Only once the session is terminal
    streak: Optional[int] = None  # Only once the session is terminal

    def to_response(self) -> Dict[str, Any]:
        response = {
            "guess": self.guess,
            "feedback": [tag.value for tag in self.feedback],
            "isSolved": self.is_solved,
            "isFailed": self.is_failed,
            "attempts": self.attempts,
            "gamesPlayed": self.games_played,
            "gamesWon": self.games_won,
            "bestStreak": self.best_streak,
        }
        if self.correct_word is not None:
            response["correctWord"] = self.correct_word
        if self.streak is not None:
            response["streak"] = self.streak
        return response
