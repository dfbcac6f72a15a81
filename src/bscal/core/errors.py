from __future__ import annotations

from typing import Any


class BsCalError(Exception):
    """Base error."""


class EngineUnavailableError(BsCalError):
    """Raised when a named engine spec cannot be built."""


class TableError(BsCalError, ValueError):
    """Raised when a month-length table is malformed."""


class CalendarRangeError(BsCalError):
    """A date or lookup fell outside what the year table describes."""


class UnsupportedYearError(CalendarRangeError):
    def __init__(self, year: int):
        self.year = year
        super().__init__(f"BS year {year} not supported by table")


class InvalidMonthError(CalendarRangeError):
    def __init__(self, year: int, month: int):
        self.year = year
        self.month = month
        super().__init__(f"Invalid month {month} for BS year {year}")


class InvalidDayError(CalendarRangeError):
    def __init__(self, date: Any, month_length: int):
        self.date = date
        self.month_length = month_length
        super().__init__(f"Invalid day in BS date {date} (month has {month_length} days)")
