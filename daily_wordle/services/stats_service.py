"""
Statistics Service

Builds the profile statistics shown on the client's statistics screen.
"""

from typing import Any, Dict, Optional

from .store import GameStore
from .streak_service import longest_streak


class StatsService:
    """Read-only projections over a user's sessions and streak fields."""

    def __init__(self, store: GameStore):
        self.store = store

    def get_profile(self, user_id: Any) -> Dict[str, Any]:
        """
        Summarize a player's history.

        ``totalGames`` only counts finished sessions, so a puzzle still in
        progress does not lower the win rate.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self.store.get_user(user_id)
        sessions = self.store.find_sessions(user_id)

        finished = [s for s in sessions if s.is_terminal]
        solved = [s for s in finished if s.is_solved]

        total_games = len(finished)
        wins = len(solved)
        win_rate = round(wins / total_games * 100, 1) if total_games else 0.0
        avg_guesses = round(sum(s.attempts for s in solved) / wins, 1) if wins else 0.0

        return {
            "username": user.username,
            "streak": user.streak,
            "bestStreak": user.best_streak,
            "gamesPlayed": user.games_played,
            "gamesWon": user.games_won,
            "lastPlayed": user.last_played,
            "hardMode": user.hard_mode,
            "totalGames": total_games,
            "wins": wins,
            "winRate": win_rate,
            "avgGuesses": avg_guesses,
            "maxStreak": longest_streak(s.date for s in solved),
        }

    def get_hard_mode(self, user_id: Any) -> bool:
        return self.store.get_user(user_id).hard_mode

    def set_hard_mode(self, user_id: Any, enabled: bool) -> bool:
        return self.store.set_hard_mode(user_id, enabled)


# Global service instance
_stats_service = None


def get_stats_service() -> Optional[StatsService]:
    """Get the global statistics service instance."""
    return _stats_service


def initialize_stats_service(store: GameStore) -> StatsService:
    """Initialize the global statistics service instance."""
    global _stats_service
    _stats_service = StatsService(store)
    return _stats_service
