"""
Services Package

Contains all business logic and service classes.
"""

from .puzzle_service import PuzzleEngine, get_puzzle_engine, initialize_puzzle_engine
from .stats_service import StatsService, get_stats_service, initialize_stats_service
from .store import GameStore
from .word_service import DailyWordSelector, WordList, word_for_date

__all__ = [
    'PuzzleEngine', 'get_puzzle_engine', 'initialize_puzzle_engine',
    'StatsService', 'get_stats_service', 'initialize_stats_service',
    'GameStore',
    'DailyWordSelector', 'WordList', 'word_for_date'
]
