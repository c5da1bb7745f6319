"""
User Data Models

Contains the streak-related subset of the user record.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class PlayerStats:
    """Streak and win/loss counters stored on the user document."""
    user_id: Any
    username: Optional[str] = None
    streak: int = 0
    best_streak: int = 0
    games_played: int = 0
    games_won: int = 0
    last_played: Optional[str] = None
    hard_mode: bool = False

    def to_update(self) -> Dict[str, Any]:
        """Fields written back by the streak tracker (hardMode is not ours to change)."""
        return {
            "streak": self.streak,
            "bestStreak": self.best_streak,
            "gamesPlayed": self.games_played,
            "gamesWon": self.games_won,
            "lastPlayed": self.last_played,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "PlayerStats":
        return cls(
            user_id=doc["_id"],
            username=doc.get("username"),
            streak=doc.get("streak", 0),
            best_streak=doc.get("bestStreak", 0),
            games_played=doc.get("gamesPlayed", 0),
            games_won=doc.get("gamesWon", 0),
            last_played=doc.get("lastPlayed"),
            hard_mode=bool(doc.get("hardMode", False)),
        )
