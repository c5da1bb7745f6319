"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_auth
from .game_logger import game_logger
from .dates import FixedClock, SystemClock, is_consecutive_day, is_earlier_day, parse_iso_date
from .locks import KeyedLock

__all__ = [
    'require_auth', 'game_logger',
    'FixedClock', 'SystemClock', 'is_consecutive_day', 'is_earlier_day', 'parse_iso_date',
    'KeyedLock'
]
