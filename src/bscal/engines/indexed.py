"""
bscal.engines.indexed
---------------------
Prefix-sum engine. Precomputes the day count at the start of every year and
every month, so offsets are a lookup (BS -> AD) or two binary searches
(AD -> BS) instead of a day-by-day walk.

Results and raised errors are identical to ``WalkingEngine``: only the
contiguous block of years around the anchor is indexed, and leaving it raises
``UnsupportedYearError`` for the same missing year the walk would hit.
"""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
from typing import Dict, List, Optional, Tuple

from bscal.core.engine import AdLike
from bscal.core.errors import UnsupportedYearError
from bscal.core.types import BsDate, EngineId
from bscal.engines.calendar import Clock, ConversionEngine
from bscal.engines.table import CalendarTable


class IndexedEngine(ConversionEngine):
    kind = "indexed"

    def __init__(
        self,
        id: EngineId,
        table: CalendarTable,
        anchor_bs: BsDate,
        anchor_ad: AdLike,
        *,
        clock: Optional[Clock] = None,
    ):
        super().__init__(id, table, anchor_bs, anchor_ad, clock=clock)
        t = self.table
        lo, hi = self.lo, self.hi

        # _year_start[i]: days from lo-01-01 to (lo+i)-01-01; last entry is the total
        self._year_start: List[int] = [0, *accumulate(t.year_length(y) for y in range(lo, hi + 1))]
        # _month_start[y][m-1]: days from y-01-01 to y-m-01
        self._month_start: Dict[int, Tuple[int, ...]] = {
            y: (0, *accumulate(t.months(y))) for y in range(lo, hi + 1)
        }
        self._anchor_abs = self._absolute(self.anchor_bs)

    def _absolute(self, d: BsDate) -> int:
        return self._year_start[d.year - self.lo] + self._month_start[d.year][d.month - 1] + d.day - 1

    def to_offset(self, d: BsDate) -> int:
        self.table.validate_date(d)
        if d.year > self.hi:
            raise UnsupportedYearError(self.hi + 1)
        if d.year < self.lo:
            y = d.year + 1
            while self.table.has_year(y):
                y += 1
            raise UnsupportedYearError(y)
        return self._absolute(d) - self._anchor_abs

    def from_offset(self, offset: int) -> BsDate:
        n = self._anchor_abs + offset
        if n < 0:
            raise UnsupportedYearError(self.lo - 1)
        if n >= self._year_start[-1]:
            raise UnsupportedYearError(self.hi + 1)

        i = bisect_right(self._year_start, n) - 1
        year = self.lo + i
        rem = n - self._year_start[i]

        starts = self._month_start[year]
        m = bisect_right(starts, rem) - 1
        return BsDate(year, m + 1, rem - starts[m] + 1)
