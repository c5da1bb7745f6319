"""
Word Service

Holds the validated vocabulary and picks the puzzle word for a calendar day.
"""

from typing import Any, Dict, Iterable, Iterator, List

from ..config.game_settings import WORD_LENGTH
from ..models.errors import EmptyWordListError
from ..utils.dates import DateLike, parse_iso_date
from ..utils.game_logger import game_logger


class WordList:
    """
    Ordered, read-only vocabulary of fixed-length lowercase words.

    Safe to share between threads once constructed.
    """

    def __init__(self, words: Iterable[str], word_length: int = WORD_LENGTH):
        self.word_length = word_length
        self._words: List[str] = list(words)
        self._lookup = frozenset(self._words)

    @classmethod
    def load(cls, raw_source: Iterable[Any], word_length: int = WORD_LENGTH) -> "WordList":
        """
        Validate and normalize a raw list of candidate words.

        Entries that are not strings, are not purely alphabetic, or whose
        trimmed length differs from ``word_length`` are dropped. Repeats keep
        their first position.

        Args:
            raw_source: Candidate entries, in the order used for daily indexing
            word_length: Required number of letters

        Returns:
            WordList: The normalized vocabulary

        Raises:
            EmptyWordListError: If no entry survives validation
        """
        words: List[str] = []
        seen = set()
        rejected = 0

        for entry in raw_source:
            if not isinstance(entry, str):
                rejected += 1
                continue
            word = entry.strip().lower()
            if len(word) != word_length or not (word.isascii() and word.isalpha()):
                rejected += 1
                continue
            if word in seen:
                continue
            seen.add(word)
            words.append(word)

        if rejected:
            game_logger.logger.warning(f"Word list: dropped {rejected} malformed entries")

        if not words:
            raise EmptyWordListError("Word list is empty after validation")

        return cls(words, word_length)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.strip().lower() in self._lookup


def word_for_date(day: DateLike, word_list: WordList) -> str:
    """
    Returns the puzzle word for a calendar day.

    The index is the sum of the year, month and day numbers modulo the list
    length. Clients see the same word for a date no matter when it is asked.
    """
    parsed = parse_iso_date(day)
    date_hash = parsed.year + parsed.month + parsed.day
    return word_list[date_hash % len(word_list)]


class DailyWordSelector:
    """
    Caches ``word_for_date`` per ISO date.

    The cache is read and written without a lock: concurrent misses just
    compute the same value twice.
    """

    def __init__(self, word_list: WordList):
        self.word_list = word_list
        self._cache: Dict[str, str] = {}

    def word_for(self, day: DateLike) -> str:
        key = parse_iso_date(day).isoformat()
        word = self._cache.get(key)
        if word is None:
            word = word_for_date(key, self.word_list)
            self._cache[key] = word
        return word
