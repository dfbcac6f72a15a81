from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

# Proleptic Gregorian ordinal of 1970-01-01; epoch day 0.
_UNIX_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()


def parse_ymd(s: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string into a date."""
    try:
        y, m, d = map(int, s.strip().split("-"))
    except ValueError:
        raise ValueError(f"Expected an AD date as YYYY-MM-DD, got {s!r}") from None
    return date(y, m, d)


def date_to_epoch_day(d: date) -> int:
    """Whole days since 1970-01-01 (negative before it)."""
    return d.toordinal() - _UNIX_EPOCH_ORDINAL


def epoch_day_to_date(day: int) -> date:
    return date.fromordinal(day + _UNIX_EPOCH_ORDINAL)


def iso_to_epoch_day(iso: str) -> int:
    return date_to_epoch_day(parse_ymd(iso))


def epoch_day_to_iso(day: int) -> str:
    return epoch_day_to_date(day).isoformat()


def to_epoch_day(value: Any) -> int:
    """Coerce an epoch day, ``date`` or ISO string into an epoch day."""
    if isinstance(value, bool):
        raise TypeError("bool is not a valid AD date")
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        return date_to_epoch_day(value.astimezone(timezone.utc).date() if value.tzinfo else value.date())
    if isinstance(value, date):
        return date_to_epoch_day(value)
    if isinstance(value, str):
        return iso_to_epoch_day(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as an AD date")


def utc_today_epoch_day() -> int:
    """The current UTC calendar day as an epoch day (time of day truncated)."""
    return date_to_epoch_day(datetime.now(timezone.utc).date())


def clamp(
    value: T,
    lo: Optional[T] = None,
    hi: Optional[T] = None,
    key: Optional[Callable[[T], Any]] = None,
) -> T:
    """
    Clamp value into [lo, hi]. Either bound may be omitted.
    ``key`` maps values to comparables (like ``sorted``).
    """
    k = key if key is not None else (lambda x: x)
    v = value
    if lo is not None and k(v) < k(lo):
        v = lo
    if hi is not None and k(v) > k(hi):
        v = hi
    return v
