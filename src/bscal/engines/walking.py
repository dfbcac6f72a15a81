"""
bscal.engines.walking
---------------------
Reference engine: offsets are found by stepping one day at a time between
the anchor and the queried date. Cost is linear in the distance walked.
"""

from __future__ import annotations

from bscal.core.errors import UnsupportedYearError
from bscal.core.types import BsDate
from bscal.engines.calendar import ConversionEngine


class WalkingEngine(ConversionEngine):
    kind = "walking"

    def advance_one_day(self, d: BsDate, step: int = 1) -> BsDate:
        """The day after (step=1) or before (step=-1) d."""
        t = self.table
        if step == 1:
            if d.day < t.month_length(d.year, d.month):
                return BsDate(d.year, d.month, d.day + 1)
            if d.month == 12:
                if not t.has_year(d.year + 1):
                    raise UnsupportedYearError(d.year + 1)
                return BsDate(d.year + 1, 1, 1)
            return BsDate(d.year, d.month + 1, 1)
        if step == -1:
            if d.day > 1:
                return BsDate(d.year, d.month, d.day - 1)
            if d.month == 1:
                if not t.has_year(d.year - 1):
                    raise UnsupportedYearError(d.year - 1)
                return BsDate(d.year - 1, 12, t.month_length(d.year - 1, 12))
            return BsDate(d.year, d.month - 1, t.month_length(d.year, d.month - 1))
        raise ValueError("step must be 1 or -1")

    def days_between(self, start: BsDate, end: BsDate) -> int:
        """Forward steps from start until end is reached. Requires start <= end."""
        days = 0
        cursor = start
        while cursor != end:
            cursor = self.advance_one_day(cursor, 1)
            days += 1
        return days

    def to_offset(self, d: BsDate) -> int:
        self.table.validate_date(d)
        if d >= self.anchor_bs:
            return self.days_between(self.anchor_bs, d)
        return -self.days_between(d, self.anchor_bs)

    def from_offset(self, offset: int) -> BsDate:
        current = self.anchor_bs
        step = 1 if offset > 0 else -1
        for _ in range(abs(offset)):
            current = self.advance_one_day(current, step)
        return current
