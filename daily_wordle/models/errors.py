"""
Error Models

Validation failures are returned as ``Rejection`` values; only conditions
the caller cannot fix by changing its guess are raised as exceptions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class RejectionReason(Enum):
    """Why a guess was refused."""
    INVALID_GUESS_LENGTH = "InvalidGuessLength"
    INVALID_GUESS_WORD = "InvalidGuessWord"
    SESSION_NOT_STARTED = "SessionNotStarted"
    ALREADY_SOLVED = "AlreadySolved"
    ATTEMPTS_EXHAUSTED = "AttemptsExhausted"
    DUPLICATE_GUESS = "DuplicateGuess"
    HARD_MODE_VIOLATION = "HardModeViolation"


class HardModeKind(Enum):
    """Which hard-mode rule a guess broke."""
    MUST_KEEP_POSITION = "MustKeepPosition"
    MUST_REUSE_LETTER = "MustReuseLetter"


@dataclass(frozen=True)
class HardModeViolation:
    position: int
    letter: str
    kind: HardModeKind

    @property
    def message(self) -> str:
        if self.kind is HardModeKind.MUST_KEEP_POSITION:
            return f"Hard Mode: You must reuse '{self.letter.upper()}' in position {self.position + 1}"
        return f"Hard Mode: You must reuse '{self.letter.upper()}' somewhere in your guess"


@dataclass(frozen=True)
class Rejection:
    """A refused guess. Carries enough structure for a specific client message."""
    reason: RejectionReason
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def hard_mode(cls, violation: HardModeViolation) -> "Rejection":
        return cls(
            RejectionReason.HARD_MODE_VIOLATION,
            violation.message,
            {
                "position": violation.position,
                "requiredLetter": violation.letter,
                "kind": violation.kind.value,
            },
        )

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.message,
            "reason": self.reason.value,
            "details": dict(self.details),
        }


class EmptyWordListError(ValueError):
    """No usable words survived validation; the puzzle cannot be served."""


class StorageError(Exception):
    """The session or user store could not complete an operation."""


class UserNotFoundError(LookupError):
    """The user id does not resolve to a stored user."""
