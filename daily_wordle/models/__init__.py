"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSession, GuessRecord, GuessResult, LetterFeedback, SessionStatus, SessionView
from .user import PlayerStats
from .errors import (
    EmptyWordListError, HardModeKind, HardModeViolation, Rejection, RejectionReason,
    StorageError, UserNotFoundError
)

__all__ = [
    'GameSession', 'GuessRecord', 'GuessResult', 'LetterFeedback', 'SessionStatus', 'SessionView',
    'PlayerStats',
    'EmptyWordListError', 'HardModeKind', 'HardModeViolation', 'Rejection', 'RejectionReason',
    'StorageError', 'UserNotFoundError'
]
