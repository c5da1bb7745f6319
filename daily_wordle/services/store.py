"""
Game Store

MongoDB access for daily game sessions and the streak fields of users.
Every driver failure is re-raised as ``StorageError`` so callers can tell
"your guess was invalid" apart from "we could not save your guess".
"""

from functools import wraps
from typing import Any, List, Optional

from bson.objectid import ObjectId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.errors import StorageError, UserNotFoundError
from ..models.game import GameSession
from ..models.user import PlayerStats
from ..utils.game_logger import game_logger


def _storage_call(f):
    """Translate driver exceptions into StorageError."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except PyMongoError as e:
            game_logger.logger.error(f"Store operation '{f.__name__}' failed: {e}")
            raise StorageError(f"Storage operation failed: {e}") from e

    return decorated_function


def user_key(user_id: Any) -> Any:
    """Stored form of a user id: an ObjectId when the string is one."""
    if isinstance(user_id, str) and ObjectId.is_valid(user_id):
        return ObjectId(user_id)
    return user_id


class GameStore:
    """
    Session and user persistence backed by a pymongo database.

    Sessions live in ``games`` with a unique index on (userId, date).
    Users live in ``users`` and are created by the account subsystem;
    this store only reads them and writes the streak fields and hardMode.
    """

    def __init__(self, database):
        self.db = database
        self.users_collection = self.db.users
        self.games_collection = self.db.games
        self.ensure_indexes()

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str = "wordle_game") -> "GameStore":
        """
        Create a store from a connection string and verify the server is reachable.

        Raises:
            StorageError: If MongoDB cannot be reached
        """
        try:
            client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            client.admin.command('ping')
        except PyMongoError as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            raise StorageError(f"MongoDB connection error: {e}") from e

        game_logger.logger.info("Successfully connected to MongoDB")
        store = cls(client[db_name])
        store.client = client
        return store

    @_storage_call
    def ensure_indexes(self) -> None:
        self.games_collection.create_index(
            [("userId", ASCENDING), ("date", ASCENDING)], unique=True
        )
        self.games_collection.create_index([("userId", ASCENDING), ("isSolved", ASCENDING)])

    # Users

    @_storage_call
    def find_user(self, user_id: Any) -> Optional[PlayerStats]:
        doc = self.users_collection.find_one({"_id": user_key(user_id)})
        if doc is None:
            return None
        return PlayerStats.from_document(doc)

    def get_user(self, user_id: Any) -> PlayerStats:
        """
        Raises:
            UserNotFoundError: If no user has this id
        """
        stats = self.find_user(user_id)
        if stats is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return stats

    @_storage_call
    def save_player_stats(self, stats: PlayerStats) -> None:
        result = self.users_collection.update_one(
            {"_id": user_key(stats.user_id)},
            {"$set": stats.to_update()}
        )
        if result.matched_count == 0:
            raise UserNotFoundError(f"User {stats.user_id} not found")

    @_storage_call
    def set_hard_mode(self, user_id: Any, enabled: bool) -> bool:
        result = self.users_collection.update_one(
            {"_id": user_key(user_id)},
            {"$set": {"hardMode": bool(enabled)}}
        )
        if result.matched_count == 0:
            raise UserNotFoundError(f"User {user_id} not found")
        return bool(enabled)

    # Sessions

    @_storage_call
    def find_session(self, user_id: Any, date: str) -> Optional[GameSession]:
        doc = self.games_collection.find_one({"userId": user_key(user_id), "date": date})
        if doc is None:
            return None
        return GameSession.from_document(doc)

    @_storage_call
    def create_session(self, user_id: Any, date: str) -> GameSession:
        """
        Insert an empty session for (user, date) unless one exists, then return it.

        Concurrent callers all get the same stored session.
        """
        key = {"userId": user_key(user_id), "date": date}
        fresh = GameSession(user_id=user_key(user_id), date=date, outcome_recorded=True).to_document()
        del fresh["userId"], fresh["date"]
        try:
            self.games_collection.update_one(
                key,
                {"$setOnInsert": fresh},
                upsert=True
            )
        except DuplicateKeyError:
            # Another request inserted the same session first
            pass

        doc = self.games_collection.find_one(key)
        return GameSession.from_document(doc)

    @_storage_call
    def save_session(self, session: GameSession) -> bool:
        """
        Write the session if nobody else wrote it since it was read.

        Returns:
            bool: False when the stored version moved on (the caller lost a race)
        """
        doc = session.to_document()
        result = self.games_collection.update_one(
            {
                "userId": user_key(session.user_id),
                "date": session.date,
                "version": session.version
            },
            {
                "$set": {
                    "guessHistory": doc["guessHistory"],
                    "isSolved": doc["isSolved"],
                    "isFailed": doc["isFailed"],
                    "outcomeRecorded": doc["outcomeRecorded"]
                },
                "$inc": {"version": 1}
            }
        )
        if result.matched_count == 0:
            return False
        session.version += 1
        return True

    @_storage_call
    def find_sessions(self, user_id: Any) -> List[GameSession]:
        cursor = self.games_collection.find({"userId": user_key(user_id)}).sort("date", ASCENDING)
        return [GameSession.from_document(doc) for doc in cursor]

    @_storage_call
    def find_unrecorded_sessions(self, user_id: Any) -> List[GameSession]:
        """Finished sessions whose outcome has not reached the user yet, oldest first."""
        cursor = self.games_collection.find({
            "userId": user_key(user_id),
            "outcomeRecorded": False,
            "$or": [{"isSolved": True}, {"isFailed": True}]
        }).sort("date", ASCENDING)
        return [GameSession.from_document(doc) for doc in cursor]

    @_storage_call
    def find_solved_dates(self, user_id: Any) -> List[str]:
        cursor = self.games_collection.find(
            {"userId": user_key(user_id), "isSolved": True},
            {"date": 1}
        ).sort("date", ASCENDING)
        return [doc["date"] for doc in cursor]

    def close_connection(self):
        """Close the MongoDB connection."""
        client = getattr(self, "client", None)
        if client:
            client.close()
