"""
bscal.engines.table
-------------------
Immutable, year-indexed month-length table. Leaf data for every engine.

Contiguity of the year keys is a precondition on the data, not something the
table enforces; see ``bscal.diagnostics.table_check`` for a report.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from bscal.core.errors import InvalidDayError, InvalidMonthError, TableError, UnsupportedYearError
from bscal.core.types import BsDate, BsRange, YearRange

MONTHS_PER_YEAR = 12
MONTH_LENGTH_BOUNDS = (28, 32)
YEAR_LENGTH_BOUNDS = (354, 367)


class CalendarTable:
    def __init__(self, years: Mapping[int, Sequence[int]]):
        if not years:
            raise TableError("Year table is empty")
        rows: Dict[int, Tuple[int, ...]] = {}
        for y in sorted(years):
            row = tuple(int(n) for n in years[y])
            _check_row(int(y), row)
            rows[int(y)] = row
        self._rows = MappingProxyType(rows)
        self._min_year = min(rows)
        self._max_year = max(rows)

    def __repr__(self) -> str:
        return f"CalendarTable({self._min_year}..{self._max_year}, {len(self._rows)} years)"

    def __contains__(self, year: object) -> bool:
        return year in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def years(self) -> Iterator[int]:
        return iter(self._rows)

    def has_year(self, year: int) -> bool:
        return year in self._rows

    def months(self, year: int) -> Tuple[int, ...]:
        try:
            return self._rows[year]
        except KeyError:
            raise UnsupportedYearError(year) from None

    def month_length(self, year: int, month: int) -> int:
        row = self.months(year)
        if not (1 <= month <= MONTHS_PER_YEAR):
            raise InvalidMonthError(year, month)
        return row[month - 1]

    def year_length(self, year: int) -> int:
        return sum(self.months(year))

    def supported_year_range(self) -> YearRange:
        return self._min_year, self._max_year

    def range(self) -> BsRange:
        lo, hi = self._min_year, self._max_year
        return BsRange(
            min=BsDate(lo, 1, 1),
            max=BsDate(hi, MONTHS_PER_YEAR, self.month_length(hi, MONTHS_PER_YEAR)),
        )

    def validate_date(self, d: BsDate) -> BsDate:
        """Raise the matching range error if d is not a real date of this table."""
        n = self.month_length(d.year, d.month)
        if not (1 <= d.day <= n):
            raise InvalidDayError(d, n)
        return d

    def as_dict(self) -> Dict[int, Tuple[int, ...]]:
        return dict(self._rows)


def _check_row(year: int, row: Tuple[int, ...]) -> None:
    if len(row) != MONTHS_PER_YEAR:
        raise TableError(f"BS year {year}: expected {MONTHS_PER_YEAR} month lengths, got {len(row)}")
    lo, hi = MONTH_LENGTH_BOUNDS
    for i, n in enumerate(row, start=1):
        if not (lo <= n <= hi):
            raise TableError(f"BS year {year} month {i}: length {n} outside [{lo}, {hi}]")
    total = sum(row)
    lo, hi = YEAR_LENGTH_BOUNDS
    if not (lo <= total <= hi):
        raise TableError(f"BS year {year}: year length {total} outside [{lo}, {hi}]")
