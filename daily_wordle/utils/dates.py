"""
Date Helpers

Calendar-day utilities for daily puzzles and streak tracking. Dates travel
through the system as ISO ``YYYY-MM-DD`` strings.
"""

import datetime
from typing import Optional, Union

DateLike = Union[str, datetime.date]


class SystemClock:
    """Provides today's date in UTC, matching the ISO dates stored on sessions."""

    def today(self) -> datetime.date:
        return datetime.datetime.now(datetime.timezone.utc).date()


class FixedClock:
    """Clock pinned to a given date, for tests and fixed-date runs."""

    def __init__(self, day: DateLike):
        self.day = parse_iso_date(day)

    def today(self) -> datetime.date:
        return self.day

    def advance(self, days: int = 1) -> datetime.date:
        self.day = self.day + datetime.timedelta(days=days)
        return self.day


def parse_iso_date(value: DateLike) -> datetime.date:
    """
    Parse an ISO date string (or pass a date through).

    Raises:
        ValueError: If the string is not a valid ISO calendar date
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(value.strip())


def to_iso(value: DateLike) -> str:
    return parse_iso_date(value).isoformat()


def is_consecutive_day(earlier: Optional[DateLike], later: DateLike) -> bool:
    """
    True when ``later`` is exactly one calendar day after ``earlier``.

    Time of day never matters; invalid or missing dates are never consecutive.
    """
    if not earlier:
        return False
    try:
        return (parse_iso_date(later) - parse_iso_date(earlier)).days == 1
    except (TypeError, ValueError):
        return False


def is_earlier_day(day: DateLike, reference: Optional[DateLike]) -> bool:
    """True when ``day`` falls on a calendar date before ``reference``."""
    if not reference:
        return False
    try:
        return parse_iso_date(day) < parse_iso_date(reference)
    except (TypeError, ValueError):
        return False
