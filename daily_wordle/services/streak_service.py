"""
Streak Service

Updates a player's streak and win/loss counters when a daily session ends.
"""

from enum import Enum
from typing import Iterable

from ..models.user import PlayerStats
from ..utils.dates import DateLike, is_consecutive_day, is_earlier_day, to_iso


class GameOutcome(Enum):
    WON = "Won"
    LOST = "Lost"


def apply_outcome(stats: PlayerStats, day: DateLike, outcome: GameOutcome) -> PlayerStats:
    """
    Apply the result of a finished session to the player's statistics.

    Must be called once per terminal transition. A win recorded twice for
    the same date leaves the streak untouched. A session older than
    ``last_played`` only adds to the counters; the streak and
    ``last_played`` stay with the later game.

    Args:
        stats: Player statistics, updated in place
        day: Date of the finished session
        outcome: Won or Lost

    Returns:
        PlayerStats: The same object, for chaining
    """
    today = to_iso(day)

    stats.games_played += 1
    if outcome is GameOutcome.WON:
        stats.games_won += 1

    if is_earlier_day(today, stats.last_played):
        return stats

    if outcome is GameOutcome.WON:
        if stats.last_played != today:
            if is_consecutive_day(stats.last_played, today):
                stats.streak += 1
            else:
                stats.streak = 1
        stats.best_streak = max(stats.best_streak, stats.streak)
    else:
        stats.streak = 0

    stats.last_played = today
    return stats


def longest_streak(solved_dates: Iterable[str]) -> int:
    """Longest run of consecutive calendar days among the given solved dates."""
    longest = 0
    current = 0
    previous = None

    for day in sorted(set(solved_dates)):
        if previous is not None and is_consecutive_day(previous, day):
            current += 1
        else:
            current = 1
        longest = max(longest, current)
        previous = day

    return longest
