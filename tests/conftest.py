import os
import tempfile

# Keep test log files out of the working tree
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "daily_wordle_test_logs"))

import mongomock
import pytest
from bson.objectid import ObjectId

from daily_wordle.services.puzzle_service import PuzzleEngine
from daily_wordle.services.store import GameStore
from daily_wordle.services.word_service import WordList
from daily_wordle.utils.dates import FixedClock

SMALL_WORDS = ["apple", "brain", "crane", "delta", "eagle"]
LARGE_WORDS = SMALL_WORDS + ["flame", "grape", "heart", "ivory", "jolly"]


@pytest.fixture
def word_list():
    return WordList.load(SMALL_WORDS)


@pytest.fixture
def large_word_list():
    return WordList.load(LARGE_WORDS)


@pytest.fixture
def db():
    return mongomock.MongoClient().wordle_game_test


@pytest.fixture
def store(db):
    return GameStore(db)


@pytest.fixture
def clock():
    # 2024 + 1 + 10 = 2035, index 0 in SMALL_WORDS ("apple"), 5 in LARGE_WORDS ("flame")
    return FixedClock("2024-01-10")


@pytest.fixture
def engine(store, word_list, clock):
    return PuzzleEngine(store, word_list, clock)


@pytest.fixture
def make_user(db):
    def _make_user(username="player", **fields):
        doc = {
            "_id": ObjectId(),
            "username": username,
            "streak": 0,
            "bestStreak": 0,
            "gamesPlayed": 0,
            "gamesWon": 0,
            "hardMode": False,
        }
        doc.update(fields)
        db.users.insert_one(doc)
        return str(doc["_id"])

    return _make_user
